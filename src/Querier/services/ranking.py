"""Ranking of query score maps."""

from __future__ import annotations

from typing import Mapping

from Querier.core.models import RankedEntry


def rank_scores(scores: Mapping[int, int]) -> tuple[RankedEntry, ...]:
    """Turn a score map into a ranked result.

    Non-positive scores are not matches and are dropped. The rest are sorted
    by score descending, then by doc id ascending, so equal input always gives
    the same order.

    Args:
        scores: Document score map.

    Returns:
        Ranked entries; empty when nothing matched.
    """
    matches = (RankedEntry(doc_id=doc_id, score=score) for doc_id, score in scores.items() if score > 0)
    return tuple(sorted(matches, key=lambda entry: (-entry.score, entry.doc_id)))
