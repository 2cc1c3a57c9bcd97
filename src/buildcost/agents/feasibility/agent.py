"""Feasibility Agent — quick budget and manpower sanity check before estimating."""

from __future__ import annotations

import logging

from buildcost.agents.base import BaseAgent, extract_json
from buildcost.agents.feasibility.prompts import PROMPT_TEMPLATE
from buildcost.schemas.feasibility import FeasibilityResult
from buildcost.schemas.project import ProjectInputs

logger = logging.getLogger(__name__)


class FeasibilityAgent(BaseAgent):
    """Judges whether the budget and crew can deliver the project."""

    @property
    def name(self) -> str:
        return "Feasibility Check"

    def build_prompt(self, inputs: ProjectInputs) -> str:
        return PROMPT_TEMPLATE.format(**inputs.prompt_fields())

    def parse_output(self, raw_text: str) -> FeasibilityResult:
        data = extract_json(raw_text)
        return FeasibilityResult.model_validate(data)

    async def check(self, inputs: ProjectInputs) -> FeasibilityResult:
        """Run the check. Never raises.

        Any failure (transport, exhausted retries, unparseable reply) is
        logged and reported as ``FeasibilityResult.fallback()``.
        """
        try:
            raw = await self._complete(self.build_prompt(inputs))
            return self.parse_output(raw)
        except Exception:
            logger.exception("Feasibility check failed")
            return FeasibilityResult.fallback()
