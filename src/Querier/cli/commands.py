"""Command implementations for Querier CLI.

Encapsulates the query loop, separated from CLI parameter handling and
output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import click

from Querier.config import AppConfig
from Querier.core.tokens import QuerySyntaxError
from Querier.renderers import DocumentStore, OutputWriter, map_entries_to_views
from Querier.services.query import QuerySearchService
from Querier.utils.log import log


@dataclass(slots=True)
class QuerySessionStats:
    """Counters for one query session."""

    answered: int = 0
    rejected: int = 0
    blank: int = 0


@dataclass(slots=True)
class QueryCommand:
    """Encapsulates the interactive query loop.

    Reads one line at a time, answers it completely, then reads the next.
    Rejected lines produce one diagnostic and the loop carries on.
    """

    config: AppConfig
    search_service: QuerySearchService
    document_store: DocumentStore
    output_writer: OutputWriter

    def execute(self, lines: Iterable[str], *, interactive: bool = False) -> QuerySessionStats:
        """Answer every line until end of input.

        Args:
            lines: Input lines, typically stdin.
            interactive: Whether to show a prompt before each line.

        Returns:
            Session counters.
        """
        stats = QuerySessionStats()
        self._prompt(interactive)
        for line in lines:
            self.handle_line(line, stats)
            self._prompt(interactive)
        click.echo("")
        log.debug(
            "Query session finished: answered=%d rejected=%d blank=%d",
            stats.answered,
            stats.rejected,
            stats.blank,
        )
        return stats

    def handle_line(self, line: str, stats: QuerySessionStats) -> None:
        """Tokenize, evaluate, rank and write one query line."""
        try:
            query = self.search_service.parse(line)
        except QuerySyntaxError as error:
            log.error("Error: %s", error)
            stats.rejected += 1
            return

        if query.is_empty:
            stats.blank += 1
            return

        outcome = self.search_service.search(query)
        views = map_entries_to_views(outcome.entries, self.document_store, self.config.output.placeholder)
        self.output_writer.write_query_result(views, outcome.query_text, outcome.total)
        stats.answered += 1

    def _prompt(self, interactive: bool) -> None:
        if interactive:
            click.echo(self.config.query.prompt, nl=False)
