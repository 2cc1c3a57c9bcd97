"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from buildcost.schemas.config import ClientSettings
from buildcost.schemas.project import ProjectInputs
from buildcost.shared.llm_client import LLMClient, is_rate_limit_error


@pytest.fixture
def project_inputs() -> ProjectInputs:
    return ProjectInputs(
        type="Residential",
        location="Austin, TX",
        size_sq_ft=2400,
        budget_limit=480000,
        quality="Standard",
        timeline_months=10,
        manpower=12,
    )


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Write a minimal valid project YAML and return its path."""
    path = tmp_path / "project.yml"
    path.write_text(
        """\
type: Commercial
location: Lagos, Nigeria
sizeSqFt: 5000
budgetLimit: 750000
quality: Premium
timelineMonths: 6
manpower: 20
"""
    )
    return path


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Return an LLMClient with a mocked OpenAI SDK underneath and no backoff delay."""
    client = LLMClient.__new__(LLMClient)
    client.settings = ClientSettings(api_key="test", max_retries=2, base_delay=0.0)
    client._is_rate_limited = is_rate_limit_error
    client._client = AsyncMock()
    return client
