"""Output renderers for query results.

Provides the OutputWriter abstraction, console and JSON implementations,
and a factory function to instantiate writers based on configuration.
"""

from __future__ import annotations

from Querier.config import AppConfig
from Querier.renderers.base import MultiOutputWriter, OutputWriter
from Querier.renderers.console import ConsoleOutputWriter, render_text
from Querier.renderers.json import JsonFileWriter, render_json
from Querier.renderers.mapper import DocumentStore, map_entries_to_views


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        Writer delegating to every configured format.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "DocumentStore",
    "JsonFileWriter",
    "MultiOutputWriter",
    "create_output_writer",
    "map_entries_to_views",
    "render_json",
    "render_text",
]
