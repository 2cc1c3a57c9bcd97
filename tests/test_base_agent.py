"""Tests for the BaseAgent contract and the JSON extraction helpers."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock

import pytest
from pydantic import BaseModel

from buildcost.agents.base import BaseAgent, clean_json, extract_json


class SampleOutput(BaseModel):
    result: str
    count: int = 0


class SampleAgent(BaseAgent):
    """Concrete test implementation of BaseAgent."""

    @property
    def name(self) -> str:
        return "Sample Agent"

    def build_prompt(self, topic: str) -> str:
        return f"Tell me about {topic}"

    def parse_output(self, raw_text: str) -> SampleOutput:
        return SampleOutput(**extract_json(raw_text))


class TestBaseAgent:
    @pytest.mark.asyncio
    async def test_complete_uses_json_completion(self) -> None:
        client = AsyncMock()
        client.json_completion = AsyncMock(return_value='{"result": "ok", "count": 2}')

        agent = SampleAgent(client)
        raw = await agent._complete(agent.build_prompt("foundations"))

        assert agent.parse_output(raw) == SampleOutput(result="ok", count=2)
        client.json_completion.assert_awaited_once_with(prompt="Tell me about foundations")

    def test_name(self) -> None:
        assert SampleAgent(AsyncMock()).name == "Sample Agent"


class TestCleanJson:
    def test_json_fence(self) -> None:
        assert clean_json('```json\n{"a":1}\n```') == '{"a":1}'

    def test_plain_fence(self) -> None:
        assert clean_json('```{"a":1}```') == '{"a":1}'

    def test_bare_json_unchanged(self) -> None:
        assert clean_json('{"a":1}') == '{"a":1}'

    @pytest.mark.parametrize(
        "text",
        ['{"a":1}', '{"nested": {"b": [1, 2]}}', "[]", '  {"padded": true}  '],
    )
    def test_idempotent_on_bare_json(self, text: str) -> None:
        assert clean_json(clean_json(text)) == clean_json(text)

    def test_fence_with_surrounding_prose(self) -> None:
        text = (
            "Here is the output:\n\n"
            "```json\n"
            '{"result": "found", "count": 3}\n'
            "```\n\n"
            "This represents the analysis."
        )
        assert clean_json(text) == '{"result": "found", "count": 3}'

    def test_json_fence_preferred_over_earlier_plain_fence(self) -> None:
        text = "```\nnot this\n```\nthen\n```json\n{\"x\": 1}\n```"
        assert clean_json(text) == '{"x": 1}'

    def test_no_validation(self) -> None:
        assert clean_json("not json at all") == "not json at all"


class TestExtractJson:
    def test_nested_json(self) -> None:
        text = json.dumps({"a": {"b": [1, 2, 3]}})
        assert extract_json(text)["a"]["b"] == [1, 2, 3]

    def test_json_with_whitespace(self) -> None:
        data = extract_json("  \n  {\"key\": \"value\"}  \n  ")
        assert data["key"] == "value"

    def test_plain_code_fence(self) -> None:
        text = "Output:\n\n```\n{\"result\": \"ok\", \"count\": 0}\n```"
        assert extract_json(text)["result"] == "ok"

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            extract_json("not json at all")

    def test_truncated_json(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            extract_json('{"result": "success", "count": 42, "items": [')

    def test_non_object_raises(self) -> None:
        with pytest.raises(ValueError, match="Expected a JSON object"):
            extract_json("[1, 2, 3]")
