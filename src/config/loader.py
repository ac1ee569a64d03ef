import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from src.config.models import AppSettings

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def load_settings(path: Path) -> AppSettings:
    """
    Load and validate the settings file.
    A missing file yields the defaults.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        logger.info(f"Settings file not found at {path}, using defaults")
        return AppSettings()

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in settings file: {e}") from e

    # An empty file parses to None
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Settings file must contain a mapping at the top level")

    try:
        return AppSettings.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Settings validation failed:\n{e}") from e


def apply_env_overrides(
    settings: AppSettings, environ: Mapping[str, str] | None = None
) -> AppSettings:
    """Return a copy of settings with PEOPLE_* environment variables applied."""
    env = os.environ if environ is None else environ

    api: dict[str, Any] = settings.api.model_dump()
    if "PEOPLE_API_BASE_URL" in env:
        api["base_url"] = env["PEOPLE_API_BASE_URL"]
    if "PEOPLE_API_TIMEOUT" in env:
        api["timeout_seconds"] = env["PEOPLE_API_TIMEOUT"]
    if "PEOPLE_OFFLINE" in env:
        api["offline"] = env["PEOPLE_OFFLINE"].strip().lower() in _TRUTHY

    data = settings.model_dump()
    data["api"] = api
    try:
        return AppSettings.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid environment override:\n{e}") from e
