"""Typed accessors for the layered Querier configuration.

Loaders read every field through these helpers, so validation errors always
name the dotted key (`query.max_results`, `output.formats`) that the user
has to fix in their YAML file.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

_MISSING = object()


def get_section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """Return a top-level section of the merged configuration.

    Every section has a built-in default, so a missing one means the merged
    mapping was built without the defaults.

    Args:
        raw: Root configuration mapping.
        key: Section name (`log`, `query`, `output`).

    Returns:
        Section mapping.

    Raises:
        ValueError: If the section is missing.
        TypeError: If the section is not a mapping.
    """
    section = raw.get(key)
    if section is None:
        raise ValueError(f"Missing required config: {key}")
    if not isinstance(section, Mapping):
        raise TypeError(f"{key} must be a mapping")
    return section


def get_value(section: Mapping[str, Any], config_key: str, default: Any = _MISSING) -> Any:
    """Return the raw value of a dotted key from its section.

    Args:
        section: Section mapping.
        config_key: Full dotted key; the part after the last dot is the field.
        default: Value for a missing field; without one the field is required.

    Raises:
        ValueError: If a required field is missing.
    """
    field = config_key.rsplit(".", 1)[-1]
    if field in section:
        return section[field]
    if default is _MISSING:
        raise ValueError(f"Missing required config: {config_key}")
    return default


def expect_str(value: Any, config_key: str, *, non_empty: bool = False) -> str:
    """Validate and return a string value."""
    if not isinstance(value, str):
        raise TypeError(f"{config_key} must be a string")
    if non_empty and not value.strip():
        raise ValueError(f"{config_key} must not be empty")
    return value


def expect_bool(value: Any, config_key: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{config_key} must be a boolean")
    return value


def expect_limit(value: Any, config_key: str) -> int:
    """Validate a result limit where 0 means unlimited.

    YAML booleans are rejected even though `bool` subclasses `int`.

    Raises:
        TypeError: If value is not an integer.
        ValueError: If value is negative.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{config_key} must be an integer")
    if value < 0:
        raise ValueError(f"{config_key} must be 0 (unlimited) or positive")
    return value


def expect_choice(value: Any, config_key: str, allowed: Iterable[str]) -> str:
    """Validate a single case-insensitive keyword and return it upper-cased."""
    choice = expect_str(value, config_key).strip().upper()
    options = sorted(allowed)
    if choice not in options:
        raise ValueError(f"{config_key} must be one of {options}")
    return choice


def expect_choice_list(value: Any, config_key: str, allowed: Iterable[str]) -> tuple[str, ...]:
    """Validate a non-empty list of case-insensitive keywords.

    Items are stripped and lower-cased; repeats are dropped keeping the first
    occurrence.

    Raises:
        TypeError: If value is not a list of strings.
        ValueError: If the list is empty or names an unknown keyword.
    """
    if not isinstance(value, list):
        raise TypeError(f"{config_key} must be a list")
    choices: dict[str, None] = {}
    for idx, item in enumerate(value):
        if not isinstance(item, str):
            raise TypeError(f"{config_key}[{idx}] must be a string")
        choices[item.strip().lower()] = None
    if not choices:
        raise ValueError(f"{config_key} must include at least one format")
    unknown = set(choices) - set(allowed)
    if unknown:
        raise ValueError(f"{config_key} has unknown formats: {sorted(unknown)}")
    return tuple(choices)
