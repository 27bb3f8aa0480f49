"""Read-only inverted index loaded from an indexer output file.

File format, one term per line:

    word docID count [docID count]...

Fields are whitespace separated. Words are alphabetic and are lowercased on
load; doc ids are positive integers and counts are non-negative integers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from Querier.core.models import Postings
from Querier.utils.log import log

_TERM_RE = re.compile(r"[A-Za-z]+")
_NUMBER_RE = re.compile(r"[0-9]+")


class IndexFormatError(ValueError):
    """Raised for a single index line that cannot be parsed."""


@dataclass(slots=True)
class IndexLoadReport:
    """Summary of one index load.

    Attributes:
        path: Index file that was read.
        terms: Number of distinct terms loaded.
        skipped_lines: 1-based numbers of malformed lines that were skipped.
        read_error: I/O error message if reading stopped early.
    """

    path: Path
    terms: int = 0
    skipped_lines: list[int] = field(default_factory=list)
    read_error: str | None = None

    @property
    def ok(self) -> bool:
        return not self.skipped_lines and self.read_error is None


class InvertedIndex:
    """Immutable term -> postings mapping.

    Postings are exposed as read-only mappings so callers cannot mutate the
    shared index between queries.
    """

    __slots__ = ("_postings",)

    def __init__(self, postings: Mapping[str, Mapping[int, int]] | None = None) -> None:
        self._postings: dict[str, Postings] = {
            term: MappingProxyType(dict(docs)) for term, docs in (postings or {}).items()
        }

    def lookup(self, term: str) -> Postings | None:
        """Return postings for a term, or None when the term is not indexed."""
        return self._postings.get(term)

    def __contains__(self, term: object) -> bool:
        return term in self._postings

    def __len__(self) -> int:
        return len(self._postings)

    def __iter__(self) -> Iterator[str]:
        return iter(self._postings)


def parse_index_line(line: str) -> tuple[str, dict[int, int]] | None:
    """Parse one line of an index file.

    Args:
        line: Raw line.

    Returns:
        (term, postings) tuple, or None for a blank line.

    Raises:
        IndexFormatError: If the line is malformed.
    """
    parts = line.split()
    if not parts:
        return None

    word, numbers = parts[0], parts[1:]
    if not _TERM_RE.fullmatch(word):
        raise IndexFormatError(f"word is not alphabetic: {word!r}")
    if not numbers or len(numbers) % 2:
        raise IndexFormatError(f"incomplete docID/count pairs for {word!r}")
    if not all(_NUMBER_RE.fullmatch(n) for n in numbers):
        raise IndexFormatError(f"non-numeric docID or count for {word!r}")

    postings: dict[int, int] = {}
    for doc_text, count_text in zip(numbers[0::2], numbers[1::2]):
        doc_id = int(doc_text)
        if doc_id <= 0:
            raise IndexFormatError(f"docID must be positive for {word!r}: {doc_id}")
        postings[doc_id] = int(count_text)
    return word.lower(), postings


def build_index(lines: Iterable[str], report: IndexLoadReport) -> InvertedIndex:
    """Build an index from lines, skipping malformed ones into report.

    Args:
        lines: Index file lines.
        report: Load report updated in place.

    Returns:
        Index of every well-formed line read before any I/O error.
        Repeated words are merged.
    """
    merged: dict[str, dict[int, int]] = {}
    try:
        for lineno, line in enumerate(lines, start=1):
            try:
                parsed = parse_index_line(line)
            except IndexFormatError as error:
                report.skipped_lines.append(lineno)
                log.debug("Skipping index line %d: %s", lineno, error)
                continue
            if parsed is None:
                continue
            term, postings = parsed
            merged.setdefault(term, {}).update(postings)
    except OSError as error:
        report.read_error = str(error)

    index = InvertedIndex(merged)
    report.terms = len(index)
    return index


def load_index(path: Path) -> tuple[InvertedIndex, IndexLoadReport]:
    """Load an index file, keeping whatever loads cleanly.

    Problems are reported once as a warning and never abort the load.

    Args:
        path: Path to the index file.

    Returns:
        Tuple of (index, report).
    """
    report = IndexLoadReport(path=path)
    try:
        with path.open("r", encoding="utf-8", errors="replace") as fh:
            index = build_index(fh, report)
    except OSError as error:
        report.read_error = str(error)
        index = InvertedIndex()

    if report.ok:
        log.info("Loaded index %s: %d terms", path, report.terms)
    else:
        log.warning(
            "errors encountered while loading index file '%s': skipped=%d read_error=%s (terms loaded=%d)",
            path,
            len(report.skipped_lines),
            report.read_error,
            report.terms,
        )
    return index, report
