"""Estimate Agent — full cost breakdown, monthly cashflow and risk register."""

from __future__ import annotations

import logging

from buildcost.agents.base import BaseAgent, extract_json
from buildcost.agents.estimate.prompts import PROMPT_TEMPLATE
from buildcost.schemas.estimate import EstimationResult
from buildcost.schemas.project import ProjectInputs

logger = logging.getLogger(__name__)


class EstimateAgent(BaseAgent):
    """Produces an ``EstimationResult``; failures always reach the caller."""

    @property
    def name(self) -> str:
        return "Cost Estimate"

    def build_prompt(self, inputs: ProjectInputs) -> str:
        return PROMPT_TEMPLATE.format(**inputs.prompt_fields())

    def parse_output(self, raw_text: str, timeline_months: int | None = None) -> EstimationResult:
        """Parse the reply; no fields are defaulted.

        When ``timeline_months`` is given the cashflow must have exactly
        that many entries.
        """
        data = extract_json(raw_text)
        result = EstimationResult.model_validate(data)
        if timeline_months is not None and len(result.cashflow) != timeline_months:
            raise ValueError(
                f"Cashflow has {len(result.cashflow)} entries, "
                f"expected {timeline_months} (one per month)"
            )
        return result

    async def generate(self, inputs: ProjectInputs) -> EstimationResult:
        """Request and parse an estimate for ``inputs``."""
        try:
            raw = await self._complete(self.build_prompt(inputs))
            return self.parse_output(raw, timeline_months=inputs.timeline_months)
        except Exception as exc:
            logger.error("Estimation failed: %s", exc)
            raise
