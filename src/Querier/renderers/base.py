"""Base classes for output writers.

Provides abstraction for writing query results to console or files.
Separates control flow from output logic for better testability.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from Querier.renderers.view_models import ResultView


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_query_result(
        self,
        results: list[ResultView],
        query_text: str,
        total: int,
    ) -> None:
        """Write results from a single query.

        Args:
            results: Ranked rows to display.
            query_text: Normalized query as echoed to the user.
            total: Number of matching documents before any result limit.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'query').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_query_result(
        self,
        results: list[ResultView],
        query_text: str,
        total: int,
    ) -> None:
        """Send query results to all writers."""
        for writer in self.writers:
            writer.write_query_result(results, query_text, total)

    def finalize(self, action: str) -> None:
        """Finalize all writers."""
        for writer in self.writers:
            writer.finalize(action)
