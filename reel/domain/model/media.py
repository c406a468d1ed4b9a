"""Media listing entries (TMDB-style metadata)."""

from typing import Any

from pydantic import ConfigDict, model_validator

from reel.domain.model.common import DomainModel
from reel.domain.value import CompositeKey, MediaType


class MediaItem(DomainModel):
    """Movie or TV show as it appears in discovery and related listings.

    Not votable; only participates in (type, id) de-duplication.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    media_type: MediaType = MediaType.MOVIE
    title: str = ""
    poster_path: str | None = None
    vote_average: float | None = None
    release_date: str | None = None

    @model_validator(mode="before")
    @classmethod
    def use_name_for_tv(cls, data: Any) -> Any:
        """TV entries carry ``name`` and ``firstAirDate`` instead of title/release date."""
        if not isinstance(data, dict):
            return data
        if not data.get("title") and data.get("name"):
            data = {**data, "title": data["name"]}
        if not data.get("releaseDate") and data.get("firstAirDate"):
            data = {**data, "releaseDate": data["firstAirDate"]}
        return data

    @property
    def key(self) -> CompositeKey:
        return CompositeKey(type=self.media_type.value, id=self.id)


class RelatedMedia(DomainModel):
    """Recommendations and similar titles for one media item.

    The two lists come from independent queries and routinely overlap.
    """

    recommendations: tuple[MediaItem, ...] = ()
    similar: tuple[MediaItem, ...] = ()

    def merged(self, limit: int | None = None) -> tuple[MediaItem, ...]:
        """Recommendations then similar titles as one de-duplicated list."""
        # Deferred: the service package imports the models
        from reel.domain.service.pagination import merge_sources

        return merge_sources(self.recommendations, self.similar, limit=limit)
