"""In-memory media repository for testing."""

from typing import Any

from reel.adapter.inmemory.backend import FaultInjector, paginate
from reel.domain.model import ApiResult, MediaItem, Page, RelatedMedia
from reel.domain.repository import MediaRepository
from reel.domain.value import MediaType

# TMDB serves discovery in pages of 20
DISCOVER_PAGE_SIZE = 20


class InMemoryMediaRepository(MediaRepository):
    """In-memory implementation of MediaRepository for testing."""

    def __init__(
        self,
        faults: FaultInjector | None = None,
        page_size: int = DISCOVER_PAGE_SIZE,
    ) -> None:
        self.faults = faults or FaultInjector()
        self.page_size = page_size
        self._catalog: dict[MediaType, list[MediaItem]] = {}
        self._related: dict[tuple[MediaType, str], RelatedMedia] = {}

    def add(self, *items: MediaItem) -> None:
        """Seed the discovery catalog, in listing order.

        The same item may be added more than once; discovery pages then
        overlap the way upstream listings do while they shift.
        """
        for item in items:
            self._catalog.setdefault(item.media_type, []).append(item)

    def set_related(
        self, media_type: MediaType, media_id: str, related: RelatedMedia
    ) -> None:
        self._related[(media_type, media_id)] = related

    async def discover(
        self,
        media_type: MediaType,
        page: int = 1,
        filters: dict[str, Any] | None = None,
    ) -> ApiResult[Page[MediaItem]]:
        failure = await self.faults.gate("discover")
        if failure:
            return failure

        items = self._catalog.get(media_type, [])
        if filters and filters.get("query"):
            query = str(filters["query"]).lower()
            items = [item for item in items if query in item.title.lower()]
        return ApiResult.ok(paginate(items, page, self.page_size))

    async def get_related(
        self, media_type: MediaType, media_id: str
    ) -> ApiResult[RelatedMedia]:
        failure = await self.faults.gate("get_related")
        if failure:
            return failure

        return ApiResult.ok(self._related.get((media_type, media_id), RelatedMedia()))
