from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping

# doc id -> occurrence count of one term, as supplied by the index
Postings = Mapping[int, int]

# doc id -> score, owned by a single evaluation
ScoreMap = Dict[int, int]


@dataclass(frozen=True, slots=True)
class RankedEntry:
    """One matching document and its query score.

    Attributes:
        doc_id: Document identifier from the index.
        score: Strictly positive query score.
    """

    doc_id: int
    score: int


@dataclass(frozen=True, slots=True)
class QueryOutcome:
    """Everything produced for one answered query.

    Attributes:
        query_text: Normalized tokens joined by spaces.
        total: Number of matching documents before any result limit.
        entries: Ranked entries, possibly truncated by the result limit.
    """

    query_text: str
    total: int
    entries: tuple[RankedEntry, ...]

    @property
    def has_matches(self) -> bool:
        return self.total > 0
