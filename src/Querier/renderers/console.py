"""Console text output renderers.

Renders one query result into the line-oriented block format:

    Query: <tokens>
    Matches N documents (ranked):
    score   2  doc   1: http://example.com/
    -----------------------------------------------

or "No documents match." in place of the count line and rows.
"""

from __future__ import annotations

from typing import Iterable

import click

from Querier.renderers.base import OutputWriter
from Querier.renderers.view_models import ResultView

SEPARATOR = "-" * 47
NO_MATCH_LINE = "No documents match."


def render_text(results: Iterable[ResultView], query_text: str, total: int) -> str:
    """Render one query result into a text block.

    Args:
        results: Ranked rows.
        query_text: Normalized query.
        total: Number of matching documents.

    Returns:
        The block, newline terminated.
    """
    lines = [f"Query: {query_text}"]
    if total <= 0:
        lines.append(NO_MATCH_LINE)
    else:
        lines.append(f"Matches {total} documents (ranked):")
        for view in results:
            lines.append(f"score {view.score:3d}  doc {view.doc_id:3d}: {view.url}")
    lines.append(SEPARATOR)
    return "\n".join(lines) + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write result blocks to stdout."""

    def write_query_result(
        self,
        results: list[ResultView],
        query_text: str,
        total: int,
    ) -> None:
        """Write one result block to stdout."""
        click.echo(render_text(results, query_text, total), nl=False)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
