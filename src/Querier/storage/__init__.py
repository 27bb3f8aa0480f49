"""Storage layer for Querier.

Provides the read-only inverted index and the crawler page directory that
the query service consults.
"""

from __future__ import annotations

from pathlib import Path

from Querier.storage.index import (
    IndexFormatError,
    IndexLoadReport,
    InvertedIndex,
    load_index,
    parse_index_line,
)
from Querier.storage.pages import PageDirectory, PageDirectoryError, check_page_directory
from Querier.utils.log import log


class IndexFileError(ValueError):
    """Raised when the index file cannot be opened for reading."""


def check_index_file(path: Path) -> None:
    """Validate that the index file is readable.

    Args:
        path: Index file path.

    Raises:
        IndexFileError: If the file cannot be opened.
    """
    try:
        with path.open("rb"):
            pass
    except OSError as error:
        raise IndexFileError(f"cannot read index file '{path}'") from error


def create_storage(page_dir: Path, index_path: Path) -> tuple[PageDirectory, InvertedIndex]:
    """Open the page directory and load the index.

    Opening the page directory checks it, and the index file is checked
    for readability before it is loaded. Skipped index lines are logged at
    DEBUG level.

    Args:
        page_dir: Crawler output directory.
        index_path: Indexer output file.

    Returns:
        Tuple of (page_directory, index).

    Raises:
        PageDirectoryError: If page_dir is not a crawler directory.
        IndexFileError: If index_path cannot be read.
    """
    pages = PageDirectory(page_dir)
    check_index_file(index_path)
    log.info("Page directory: %s", page_dir)

    index, report = load_index(index_path)
    if report.skipped_lines:
        log.debug("Skipped index lines: %s", report.skipped_lines)
    return pages, index


__all__ = [
    "IndexFileError",
    "IndexFormatError",
    "IndexLoadReport",
    "InvertedIndex",
    "PageDirectory",
    "PageDirectoryError",
    "check_index_file",
    "check_page_directory",
    "create_storage",
    "load_index",
    "parse_index_line",
]
