"""Query loop configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from Querier.config.common import expect_limit, expect_str, get_section, get_value


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """Query loop configuration.

    Attributes:
        prompt: Prompt written before each line when stdin is a terminal.
        max_results: Ranked rows shown per query; 0 shows all.
    """

    prompt: str
    max_results: int


def load_query(raw: Mapping[str, Any]) -> QueryConfig:
    """Load query domain config from raw mapping."""
    section = get_section(raw, "query")
    return QueryConfig(
        prompt=expect_str(get_value(section, "query.prompt"), "query.prompt"),
        max_results=expect_limit(get_value(section, "query.max_results"), "query.max_results"),
    )


def check_query(config: QueryConfig) -> None:
    """Validate query domain constraints.

    Raises:
        ValueError: If max_results is negative.
    """
    if config.max_results < 0:
        raise ValueError("query.max_results must be 0 (unlimited) or positive")
