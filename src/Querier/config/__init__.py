from __future__ import annotations

"""Public configuration API for Querier."""

from Querier.config.app import (
    DEFAULT_CONFIG,
    AppConfig,
    load_config,
    merge_config_dicts,
    parse_config_dict,
)
from Querier.config.output import OutputConfig
from Querier.config.query import QueryConfig
from Querier.config.runtime import RuntimeConfig

__all__ = [
    "DEFAULT_CONFIG",
    "RuntimeConfig",
    "QueryConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "merge_config_dicts",
    "parse_config_dict",
]
