"""YAML config loaders — client settings and project files."""

import os
from pathlib import Path
from typing import Any

import yaml

from buildcost.schemas.config import ClientSettings
from buildcost.schemas.project import ProjectInputs

# Environment variables that override values from the settings file.
ENV_OVERRIDES = {
    "OPENROUTER_API_KEY": "api_key",
    "BUILDCOST_MODEL": "model",
    "BUILDCOST_BASE_URL": "base_url",
}


def _read_yaml_mapping(path: str | Path) -> dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = yaml.safe_load(path.read_text())
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must be a YAML mapping, got {type(raw).__name__}")
    return raw


def load_settings(path: str | Path | None = None) -> ClientSettings:
    """Build client settings from an optional YAML file plus the environment.

    Environment variables in ``ENV_OVERRIDES`` win over the file. Raises
    ``FileNotFoundError`` for a missing file and ``pydantic.ValidationError``
    for invalid values.
    """
    raw = _read_yaml_mapping(path) if path is not None else {}
    for env_var, field in ENV_OVERRIDES.items():
        if value := os.environ.get(env_var):
            raw[field] = value
    return ClientSettings(**raw)


def load_project(path: str | Path) -> ProjectInputs:
    """Load and validate a project description file.

    Keys may be camelCase (``sizeSqFt``) or snake_case (``size_sq_ft``).
    """
    return ProjectInputs.model_validate(_read_yaml_mapping(path))
