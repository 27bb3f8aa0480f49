"""CLI package for Querier command orchestration.

This package contains the modular CLI components for the query command,
factored into separate modules for better maintainability and testability.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from Querier.cli.runner import CommandRunner
from Querier.cli.ui import cli


def main() -> None:
    """Run Querier CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
