"""Runtime domain configuration (logging, process behavior)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from Querier.config.common import expect_bool, expect_choice, expect_str, get_section, get_value

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
LOG_LEVEL_ENV = "QUERIER_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Store validated runtime behavior settings."""

    level: str
    to_file: bool
    dir: str


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    """Load runtime configuration from raw mapping.

    The `QUERIER_LOG_LEVEL` environment variable, when set, takes precedence
    over `log.level`.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed runtime configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing or the level is unknown.
    """
    section = get_section(raw, "log")
    level = os.environ.get(LOG_LEVEL_ENV) or get_value(section, "log.level")
    return RuntimeConfig(
        level=expect_choice(level, "log.level", _ALLOWED_LOG_LEVELS),
        to_file=expect_bool(get_value(section, "log.to_file"), "log.to_file"),
        dir=expect_str(get_value(section, "log.dir"), "log.dir", non_empty=True),
    )


def check_runtime(config: RuntimeConfig) -> None:
    """Validate runtime domain constraints.

    Args:
        config: Parsed runtime configuration.

    Raises:
        ValueError: If values violate runtime constraints.
    """
    if config.level not in _ALLOWED_LOG_LEVELS:
        raise ValueError(f"log.level must be one of {sorted(_ALLOWED_LOG_LEVELS)}")
    if not config.dir.strip():
        raise ValueError("log.dir must not be empty")
