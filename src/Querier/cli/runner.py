"""Command runner for coordinating CLI execution.

Manages component lifecycle, logging configuration, and error handling
for command execution.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import click

from Querier.cli.commands import QueryCommand, QuerySessionStats
from Querier.config import AppConfig
from Querier.renderers import create_output_writer
from Querier.services import create_search_service
from Querier.storage import IndexFileError, PageDirectoryError, create_storage
from Querier.utils.log import configure_logging, log

EXIT_BAD_ARGUMENT = 1
EXIT_OUT_OF_MEMORY = 2


class CommandRunner:
    """Orchestrates command execution with proper resource management.

    Handles logging configuration, component creation, and error handling
    for CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_query(
        self,
        action: str,
        *,
        page_dir: Path,
        index_path: Path,
        lines: Iterable[str],
        interactive: bool,
    ) -> QuerySessionStats:
        """Execute the query loop with full resource management.

        Args:
            action: The CLI command name (e.g., 'query').
            page_dir: Crawler output directory.
            index_path: Indexer output file.
            lines: Query lines.
            interactive: Whether stdin is a terminal.

        Returns:
            Session counters.

        Raises:
            click.exceptions.Exit: With status 1 for an unusable page
                directory or index file, 2 when memory runs out.
            click.Abort: On any other failure.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        try:
            document_store, index = create_storage(page_dir, index_path)
        except (PageDirectoryError, IndexFileError) as e:
            log.error("%s", e)
            raise click.exceptions.Exit(EXIT_BAD_ARGUMENT) from e
        except MemoryError as e:
            log.error("Out of memory while loading index file '%s'", index_path)
            raise click.exceptions.Exit(EXIT_OUT_OF_MEMORY) from e

        try:
            command = QueryCommand(
                config=self.config,
                search_service=create_search_service(self.config, index),
                document_store=document_store,
                output_writer=create_output_writer(self.config),
            )
            stats = command.execute(lines, interactive=interactive)
            command.output_writer.finalize(action)
            return stats
        except MemoryError as e:
            log.error("Out of memory while answering queries")
            raise click.exceptions.Exit(EXIT_OUT_OF_MEMORY) from e
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Query failed: %s", e)
            raise click.Abort from e
