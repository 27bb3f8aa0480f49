"""View models for output rendering.

Separates display data (resolved URLs, ranks) from the evaluation result
(`RankedEntry`). Used by OutputWriter implementations.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ResultView:
    """One ranked row as shown to the user.

    Attributes:
        rank: 1-based position in the ranked result.
        doc_id: Document identifier.
        score: Query score.
        url: Resolved page URL, or the configured placeholder.
        resolved: False when the document store had no URL for doc_id.
    """

    rank: int
    doc_id: int
    score: int
    url: str
    resolved: bool = True
