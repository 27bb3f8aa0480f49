"""Query service: one raw line in, one ranked outcome out."""

from __future__ import annotations

from dataclasses import dataclass

from Querier.core.models import QueryOutcome
from Querier.core.query import ParsedQuery
from Querier.core.tokens import tokenize_query
from Querier.services.evaluate import QueryEvaluator, TermIndex
from Querier.services.ranking import rank_scores
from Querier.utils.log import log


@dataclass(slots=True)
class QuerySearchService:
    """Application service answering boolean queries against one index.

    Holds no per-query state; every call builds and drops its own score maps.
    """

    index: TermIndex
    max_results: int = 0

    def parse(self, line: str) -> ParsedQuery:
        """Tokenize and validate a raw line.

        Raises:
            QuerySyntaxError: If the line is rejected.
        """
        return tokenize_query(line)

    def search(self, query: ParsedQuery) -> QueryOutcome:
        """Evaluate and rank a validated query.

        Args:
            query: Validated, non-empty query.

        Returns:
            Outcome with the total match count and the (possibly limited)
            ranked entries.
        """
        scores = QueryEvaluator(self.index).evaluate(query)
        ranked = rank_scores(scores)
        log.debug(
            "Evaluated query=%r groups=%d candidates=%d matches=%d",
            query.display(),
            len(query.and_groups),
            len(scores),
            len(ranked),
        )
        entries = ranked[: self.max_results] if self.max_results > 0 else ranked
        return QueryOutcome(query_text=query.display(), total=len(ranked), entries=entries)
