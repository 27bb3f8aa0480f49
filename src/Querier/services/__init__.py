"""Query service layer for Querier.

Provides evaluation, ranking, and a factory function for the service used
by the CLI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from Querier.services.evaluate import (
    QueryEvaluator,
    TermIndex,
    intersect_scores,
    union_scores,
    zero_scores,
)
from Querier.services.query import QuerySearchService
from Querier.services.ranking import rank_scores

if TYPE_CHECKING:
    from Querier.config import AppConfig


def create_search_service(config: AppConfig, index: TermIndex) -> QuerySearchService:
    """Create a query service over a loaded index.

    Args:
        config: Application configuration containing query settings.
        index: Read-only term index.

    Returns:
        Configured QuerySearchService instance.
    """
    return QuerySearchService(index=index, max_results=config.query.max_results)


__all__ = [
    "QueryEvaluator",
    "QuerySearchService",
    "TermIndex",
    "create_search_service",
    "intersect_scores",
    "rank_scores",
    "union_scores",
    "zero_scores",
]
