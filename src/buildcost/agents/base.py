"""Base agent ABC — defines the pattern every agent follows."""

from __future__ import annotations

import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Protocol

from pydantic import BaseModel

logger = logging.getLogger(__name__)

_JSON_FENCE = re.compile(r"```json\n(.*?)\n```", re.DOTALL)
_ANY_FENCE = re.compile(r"```(.*?)```", re.DOTALL)


class CompletionClient(Protocol):
    """What agents need from a client (``LLMClient`` or ``DryRunClient``)."""

    async def json_completion(self, *, prompt: str) -> str: ...

    async def chat_completion(self, *, messages: list[dict[str, str]]) -> str: ...


class BaseAgent(ABC):
    """Abstract base class for the JSON-producing agents.

    Subclasses implement:
    - ``name`` — human-readable agent name
    - ``build_prompt(...)`` — returns the prompt string for one request
    - ``parse_output(raw_text, ...)`` — parses the model's reply into a Pydantic model
    """

    def __init__(self, client: CompletionClient) -> None:
        self.client = client

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for progress display."""

    @abstractmethod
    def build_prompt(self, *args: Any, **kwargs: Any) -> str:
        """Return the prompt for this agent."""

    @abstractmethod
    def parse_output(self, raw_text: str, *args: Any, **kwargs: Any) -> BaseModel:
        """Parse the model's final text response into a Pydantic model."""

    async def _complete(self, prompt: str) -> str:
        raw = await self.client.json_completion(prompt=prompt)
        logger.debug("Agent %s raw output:\n%s", self.name, raw[:500])
        return raw


def clean_json(text: str) -> str:
    """Strip a markdown code fence from around a JSON payload.

    Prefers a ```` ```json ```` block, then any ```` ``` ```` block, and
    otherwise returns ``text`` untouched. Does not validate the result.
    """
    match = _JSON_FENCE.search(text) or _ANY_FENCE.search(text)
    return match.group(1) if match else text


def extract_json(text: str) -> dict[str, Any]:
    """Parse a JSON object from text that may contain markdown fences.

    Raises ``json.JSONDecodeError`` on malformed JSON and ``ValueError``
    when the payload is valid JSON but not an object.
    """
    data = json.loads(clean_json(text))
    if not isinstance(data, dict):
        raise ValueError(
            f"Expected a JSON object from the model, got {type(data).__name__}. "
            f"First 300 chars: {text[:300]!r}"
        )
    return data
