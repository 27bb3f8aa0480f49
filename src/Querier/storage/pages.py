"""Crawler page directory used to resolve doc ids to URLs.

A crawler directory holds a `.crawler` marker file and one file per page,
named by doc id (`1`, `2`, ...). The first line of a page file is the URL
it was fetched from.
"""

from __future__ import annotations

from pathlib import Path

from Querier.utils.log import log

CRAWLER_MARKER = ".crawler"


class PageDirectoryError(ValueError):
    """Raised when a directory is not a readable crawler output directory."""


class PageDirectory:
    """Document store backed by a crawler page directory."""

    def __init__(self, path: Path) -> None:
        """Initialize the store.

        Args:
            path: Crawler output directory.

        Raises:
            PageDirectoryError: If the `.crawler` marker cannot be read.
        """
        self.path = Path(path)
        check_page_directory(self.path)

    def resolve(self, doc_id: int) -> str | None:
        """Return the URL of a page, or None if it cannot be read.

        Args:
            doc_id: Document identifier.

        Returns:
            First line of the page file without its newline, or None for a
            non-positive id or a missing, unreadable or empty file.
        """
        if doc_id <= 0:
            return None
        page_path = self.path / str(doc_id)
        try:
            with page_path.open("r", encoding="utf-8", errors="replace") as fh:
                first = fh.readline()
        except OSError as error:
            log.debug("Page lookup failed: doc=%d error=%s", doc_id, error)
            return None
        url = first.rstrip("\r\n")
        return url or None


def check_page_directory(path: Path) -> None:
    """Validate that path is a crawler-produced directory.

    Args:
        path: Candidate directory.

    Raises:
        PageDirectoryError: If `<path>/.crawler` is missing or unreadable.
    """
    marker = path / CRAWLER_MARKER
    try:
        with marker.open("rb"):
            pass
    except OSError as error:
        raise PageDirectoryError(f"'{path}' is not a crawler directory") from error
