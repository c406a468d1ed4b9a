"""HTTP media repository."""

from typing import Any

from pydantic import TypeAdapter

from reel.adapter.api.client import ApiClient, Body
from reel.adapter.api.pagination import from_total_pages
from reel.domain.model import ApiResult, MediaItem, Page, RelatedMedia
from reel.domain.repository import MediaRepository
from reel.domain.value import MediaType

_items = TypeAdapter(list[MediaItem])


class HttpMediaRepository(MediaRepository):
    """Media repository backed by the ``/media`` endpoints."""

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def discover(
        self,
        media_type: MediaType,
        page: int = 1,
        filters: dict[str, Any] | None = None,
    ) -> ApiResult[Page[MediaItem]]:
        def parse(body: Body) -> Page[MediaItem]:
            data = _data_object(body)
            items = _validate_items(data.get("results"), media_type)
            return from_total_pages(data, items, page)

        return await self.client.call(
            "GET",
            f"/media/discover/{media_type.value}",
            parse,
            params={**(filters or {}), "page": page},
        )

    async def get_related(
        self, media_type: MediaType, media_id: str
    ) -> ApiResult[RelatedMedia]:
        def parse(body: Body) -> RelatedMedia:
            data = _data_object(body)
            return RelatedMedia(
                recommendations=tuple(
                    _validate_items(data.get("recommendations"), media_type)
                ),
                similar=tuple(_validate_items(data.get("similar"), media_type)),
            )

        return await self.client.call(
            "GET", f"/media/{media_type.value}/{media_id}", parse
        )


def _validate_items(raw: list[dict[str, Any]] | None, media_type: MediaType) -> list[MediaItem]:
    """Validate listing entries, defaulting the media type to the queried one."""
    entries = [
        entry if entry.get("mediaType") or entry.get("media_type")
        else {**entry, "mediaType": media_type.value}
        for entry in raw or []
    ]
    return _items.validate_python(entries)


def _data_object(body: Body) -> dict[str, Any]:
    """``data`` of a media response, which is always an object."""
    data = body["data"]
    if not isinstance(data, dict):
        raise TypeError(f"Expected an object for data, got {type(data).__name__}")
    return data
