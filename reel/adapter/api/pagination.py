"""Pagination metadata adapters, one per endpoint family.

The backend reports pagination in three shapes:

- review and community post listings: ``{"pagination": {"page", "pages", "total"}}``
- the single-post endpoint, which pages comments: ``{"data": {"totalComments"}}``
- media discovery: ``{"data": {"totalPages", "totalResults"}}``

Each repository picks the adapter for its endpoint explicitly. The
shapes are kept distinct: whether the backend means them to converge is
unknown, so a response in the wrong shape is reported as malformed
rather than guessed at.
"""

from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from reel.domain.model import Page
from reel.domain.service import page_count

T = TypeVar("T")


class PaginationBlock(BaseModel):
    """``pagination`` object of list endpoints."""

    page: int
    pages: int | None = None
    total: int = 0
    limit: int | None = None


class DiscoveryTotals(BaseModel):
    """TMDB-style totals of discovery endpoints."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_pages: int
    total_results: int = 0


def from_pagination_block(
    body: dict[str, Any], items: Iterable[T], limit: int
) -> Page[T]:
    """Build a page from a body carrying a ``pagination`` block.

    Raises:
        KeyError: If the body has no ``pagination`` block
        pydantic.ValidationError: If the block is malformed
    """
    block = PaginationBlock.model_validate(body["pagination"])
    pages = block.pages
    if pages is None:
        pages = page_count(block.total, block.limit or limit)
    return Page(items=tuple(items), page=block.page, pages=pages, total=block.total)


def from_total_comments(
    data: dict[str, Any], items: Iterable[T], page: int, limit: int
) -> Page[T]:
    """Build a comment page from a post body carrying ``totalComments``.

    The endpoint does not echo the page number; the requested one is used.

    Raises:
        KeyError: If the body has no ``totalComments``
    """
    total = int(data["totalComments"])
    return Page(
        items=tuple(items), page=page, pages=page_count(total, limit), total=total
    )


def from_total_pages(data: dict[str, Any], items: Iterable[T], page: int) -> Page[T]:
    """Build a page from a discovery body carrying ``totalPages``.

    Raises:
        pydantic.ValidationError: If ``totalPages`` is missing
    """
    totals = DiscoveryTotals.model_validate(data)
    return Page(
        items=tuple(items),
        page=page,
        pages=totals.total_pages,
        total=totals.total_results,
    )
