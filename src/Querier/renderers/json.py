"""JSON output renderers.

Renders ranked rows into JSON-serializable objects and provides
JsonFileWriter, which collects every answered query of a session and writes
them to one file on finalize.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Iterable

from Querier.renderers.base import OutputWriter
from Querier.renderers.view_models import ResultView
from Querier.utils.log import log


def render_json(results: Iterable[ResultView]) -> list[dict]:
    """Render result views into JSON-serializable Python objects.

    Unresolved rows carry `url: null` rather than the display placeholder.
    """
    return [
        {
            "rank": view.rank,
            "doc_id": view.doc_id,
            "score": view.score,
            "url": view.url if view.resolved else None,
        }
        for view in results
    ]


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict] = []

    def write_query_result(
        self,
        results: list[ResultView],
        query_text: str,
        total: int,
    ) -> None:
        """Accumulate query result for later writing."""
        self.all_results.append(
            {
                "query": query_text,
                "total": total,
                "results": render_json(results),
            }
        )

    def finalize(self, action: str) -> Path | None:
        """Write accumulated results to JSON file.

        Nothing is written when no query was answered.

        Args:
            action: The CLI command name (used in filename).

        Returns:
            Path of the written file, or None.
        """
        if not self.all_results:
            log.debug("No query results to save as JSON")
            return None
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", output_path)
        return output_path
