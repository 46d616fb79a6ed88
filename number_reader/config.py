"""
Load reading configurations from JSON.

A config file holds only the fields it overrides; everything else comes from
DEFAULT_CONFIG. For example, to read amounts without a currency unit:

    {"unit": [], "separator": " "}
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from .models import DEFAULT_CONFIG, ReadingConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "NUMBER_READER_CONFIG"


def load_config(path: str | Path | None = None) -> ReadingConfig:
    """Load a ReadingConfig, merging file overrides over the defaults.

    Args:
        path: JSON file of field overrides. None returns DEFAULT_CONFIG.

    Raises:
        ValueError: If the file does not hold a JSON object.
        pydantic.ValidationError: If the merged config is invalid.
    """
    if path is None:
        return DEFAULT_CONFIG

    resolved = Path(path)
    with resolved.open(encoding="utf-8") as f:
        overrides: Any = json.load(f)

    if not isinstance(overrides, dict):
        raise ValueError(
            f"{resolved}: expected a JSON object of field overrides, "
            f"got {type(overrides).__name__}"
        )

    logger.info("Loaded reading config overrides from %s: %s", resolved, sorted(overrides))
    return ReadingConfig.model_validate({**DEFAULT_CONFIG.model_dump(), **overrides})


def load_config_from_env() -> ReadingConfig:
    """Load the config file named by $NUMBER_READER_CONFIG, if set."""
    return load_config(os.environ.get(CONFIG_ENV_VAR) or None)
