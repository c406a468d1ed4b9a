"""Page merging for paginated collections."""

import math
from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar, runtime_checkable

from reel.domain.value import CompositeKey


@runtime_checkable
class Keyed(Protocol):
    """Anything that can be deduplicated by composite key."""

    @property
    def key(self) -> CompositeKey: ...


K = TypeVar("K", bound=Keyed)


def dedupe(items: Iterable[K]) -> tuple[K, ...]:
    """Collapse entries that share a (type, id) key.

    A key keeps the position of its first occurrence; a later duplicate
    replaces the value at that position, so fresher server data wins
    without reordering the list.
    """
    merged: dict[CompositeKey, K] = {}
    for item in items:
        merged[item.key] = item
    return tuple(merged.values())


def merge_unique(existing: Sequence[K], incoming: Sequence[K]) -> tuple[K, ...]:
    """Append a fetched page to an accumulated collection without duplicates.

    Merging the same page twice leaves the collection unchanged.
    """
    return dedupe((*existing, *incoming))


def compute_has_more(page: int, pages: int) -> bool:
    """Whether pages remain after ``page``.

    Decided only by the server-reported page count. An empty page is not
    the end of the collection unless the count agrees.
    """
    return page < pages


def page_count(total: int, limit: int) -> int:
    """Number of pages needed for ``total`` items at ``limit`` per page."""
    if limit <= 0:
        return 0
    return math.ceil(total / limit)


def merge_sources(*sources: Sequence[K], limit: int | None = None) -> tuple[K, ...]:
    """Combine independent queries (recommended, similar) into one list.

    Earlier sources take display priority; ``limit`` caps the result.
    """
    merged = dedupe(item for source in sources for item in source)
    return merged if limit is None else merged[:limit]
