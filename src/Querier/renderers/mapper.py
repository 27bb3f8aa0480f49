"""Map ranked entries to view models, resolving document locations."""

from __future__ import annotations

from typing import Iterable, Protocol

from Querier.core.models import RankedEntry
from Querier.renderers.view_models import ResultView
from Querier.utils.log import log

NO_URL_PLACEHOLDER = "(no-url)"


class DocumentStore(Protocol):
    """Resolves doc ids to display locations."""

    def resolve(self, doc_id: int) -> str | None:
        """Return the location of doc_id, or None if unknown."""
        raise NotImplementedError


def map_entry_to_view(
    rank: int,
    entry: RankedEntry,
    store: DocumentStore,
    placeholder: str = NO_URL_PLACEHOLDER,
) -> ResultView:
    """Convert one ranked entry into a view model.

    Args:
        rank: 1-based position.
        entry: Ranked entry.
        store: Document store used to resolve the URL.
        placeholder: Text shown when resolution fails.

    Returns:
        ResultView for the entry; never raises for a lookup miss.
    """
    url = store.resolve(entry.doc_id)
    if url is None:
        log.debug("No URL for doc %d", entry.doc_id)
        return ResultView(rank=rank, doc_id=entry.doc_id, score=entry.score, url=placeholder, resolved=False)
    return ResultView(rank=rank, doc_id=entry.doc_id, score=entry.score, url=url)


def map_entries_to_views(
    entries: Iterable[RankedEntry],
    store: DocumentStore,
    placeholder: str = NO_URL_PLACEHOLDER,
) -> list[ResultView]:
    """Convert ranked entries into view models, preserving order."""
    return [map_entry_to_view(rank, entry, store, placeholder) for rank, entry in enumerate(entries, start=1)]
