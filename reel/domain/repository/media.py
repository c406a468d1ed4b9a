"""Media repository interface."""

from abc import ABC, abstractmethod
from typing import Any

from reel.domain.model import ApiResult, MediaItem, Page, RelatedMedia
from reel.domain.value import MediaType


class MediaRepository(ABC):
    """Remote access to movie/TV metadata listings."""

    @abstractmethod
    async def discover(
        self,
        media_type: MediaType,
        page: int = 1,
        filters: dict[str, Any] | None = None,
    ) -> ApiResult[Page[MediaItem]]:
        """Fetch one page of a filtered discovery listing.

        Filtered queries can return empty intermediate pages; only
        the reported page count ends the listing.

        Args:
            media_type: Movie or TV
            page: 1-based page number
            filters: Backend filter parameters (genre, language, rating...)

        Returns:
            Result holding the page
        """
        pass

    @abstractmethod
    async def get_related(
        self, media_type: MediaType, media_id: str
    ) -> ApiResult[RelatedMedia]:
        """Fetch recommendations and similar titles for a media item.

        Args:
            media_type: Movie or TV
            media_id: Media identifier

        Returns:
            Result holding both lists, possibly overlapping
        """
        pass
