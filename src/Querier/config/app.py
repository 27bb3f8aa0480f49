from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from copy import deepcopy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from Querier.config.output import OutputConfig, check_output, load_output
from Querier.config.query import QueryConfig, check_query, load_query
from Querier.config.runtime import RuntimeConfig, check_runtime, load_runtime

DEFAULT_CONFIG: Mapping[str, Any] = {
    "log": {"level": "INFO", "to_file": False, "dir": "log"},
    "query": {"prompt": "Query? ", "max_results": 0},
    "output": {"formats": ["console"], "base_dir": "output", "placeholder": "(no-url)"},
}


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    query: QueryConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    query = load_query(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_query(query)
    check_output(output)

    return AppConfig(runtime=runtime, query=query, output=output)


def load_config(path: Path | None = None) -> AppConfig:
    """Load built-in defaults, overridden by an optional YAML file.

    Args:
        path: Optional YAML file with overrides.

    Returns:
        Validated configuration.
    """
    base = deepcopy(dict(DEFAULT_CONFIG))
    if path is None:
        return parse_config_dict(base)
    override = parse_yaml(path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
