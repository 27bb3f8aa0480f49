"""Output domain configuration for result rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from Querier.config.common import expect_choice_list, expect_str, get_section, get_value

_ALLOWED_FORMATS = {"console", "json"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration."""

    base_dir: str
    formats: tuple[str, ...]
    placeholder: str


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed output configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing or a format is unknown.
    """
    section = get_section(raw, "output")
    return OutputConfig(
        base_dir=expect_str(get_value(section, "output.base_dir"), "output.base_dir"),
        formats=expect_choice_list(get_value(section, "output.formats"), "output.formats", _ALLOWED_FORMATS),
        placeholder=expect_str(get_value(section, "output.placeholder", "(no-url)"), "output.placeholder"),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Args:
        config: Parsed output configuration.

    Raises:
        ValueError: If values violate output constraints.
    """
    if not config.formats:
        raise ValueError("output.formats must include at least one format")

    unknown = set(config.formats) - _ALLOWED_FORMATS
    if unknown:
        raise ValueError(f"output.formats has unknown formats: {sorted(unknown)}")

    if "json" in config.formats and not config.base_dir.strip():
        raise ValueError("output.base_dir must not be empty")
