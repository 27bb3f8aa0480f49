"""Boolean query evaluation over term postings.

AND-groups intersect by taking the per-document minimum of term counts;
the groups are then combined by per-document sum. Every step builds a new
score map, so neither the index nor an earlier intermediate is mutated.

A document that drops out of an AND-group is kept with score 0 rather than
removed. Only the ranker decides what matched, by discarding non-positive
scores, so zeroing and removing give the same ranked output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol, Sequence

from Querier.core.models import Postings, ScoreMap
from Querier.core.query import ParsedQuery
from Querier.utils.log import log


class TermIndex(Protocol):
    """Read-only index consulted by the evaluator."""

    def lookup(self, term: str) -> Postings | None:
        """Return postings for term, or None if it is not indexed."""
        raise NotImplementedError


def copy_scores(postings: Postings | None) -> ScoreMap:
    """Seed a score map from postings; an unknown term seeds nothing."""
    return dict(postings) if postings else {}


def zero_scores(scores: Mapping[int, int]) -> ScoreMap:
    """Return scores with every tracked document set to 0."""
    return dict.fromkeys(scores, 0)


def intersect_scores(scores: Mapping[int, int], postings: Postings) -> ScoreMap:
    """Intersect tracked documents with one more term.

    Args:
        scores: Current AND-group scores.
        postings: Next term's postings.

    Returns:
        New map over the same documents with score min(current, count),
        where a document missing from postings counts as 0.
    """
    return {doc_id: min(score, postings.get(doc_id, 0)) for doc_id, score in scores.items()}


def union_scores(scores: Mapping[int, int], other: Mapping[int, int]) -> ScoreMap:
    """Combine two score maps by per-document sum.

    Args:
        scores: Running OR result.
        other: Next AND-group result.

    Returns:
        New map where result[doc] = scores.get(doc, 0) + other[doc] for every
        doc in other; documents only in scores are kept as they are.
    """
    merged = dict(scores)
    for doc_id, score in other.items():
        merged[doc_id] = merged.get(doc_id, 0) + score
    return merged


@dataclass(slots=True)
class QueryEvaluator:
    """Evaluate parsed queries against a read-only index."""

    index: TermIndex

    def evaluate(self, query: ParsedQuery) -> ScoreMap:
        """Evaluate a query into a document score map.

        Args:
            query: Validated query.

        Returns:
            Score map; empty for an empty query.
        """
        result: ScoreMap | None = None
        for group in query.and_groups:
            group_scores = self.evaluate_and_group(group)
            result = group_scores if result is None else union_scores(result, group_scores)
        return result if result is not None else {}

    def evaluate_and_group(self, terms: Sequence[str]) -> ScoreMap:
        """Evaluate one AND-group left to right.

        Args:
            terms: Terms of the group, operators already removed.

        Returns:
            Score map of the group.
        """
        if not terms:
            return {}

        scores = copy_scores(self.index.lookup(terms[0]))
        for term in terms[1:]:
            postings = self.index.lookup(term)
            if postings is None:
                log.debug("Term not indexed, zeroing %d candidates: %s", len(scores), term)
                scores = zero_scores(scores)
            else:
                scores = intersect_scores(scores, postings)
        return scores
