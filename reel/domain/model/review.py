"""Review entity.

Reviews are rated write-ups of a movie or TV show, with a flat list of
replies underneath.
"""

from typing import Any, ClassVar

from pydantic import Field, model_validator

from reel.domain.model.common import DomainModel
from reel.domain.model.votable import Reply, VotableEntity, default_child_count
from reel.domain.value import MediaType, VotableType


class Review(VotableEntity):
    """Review entity.

    Replies are kept in chronological order; ``reply_count`` is the
    backend's cached count and is adjusted locally with optimistic inserts.
    """

    votable_type: ClassVar[VotableType] = VotableType.REVIEW
    children_field: ClassVar[str | None] = "replies"
    count_field: ClassVar[str | None] = "reply_count"

    media_id: str
    media_type: MediaType
    media_title: str = ""
    rating: float = Field(default=0, ge=0, le=10)
    title: str = ""
    replies: tuple[Reply, ...] = ()
    reply_count: int = Field(default=0, ge=0)

    @model_validator(mode="before")
    @classmethod
    def fill_reply_count(cls, data: Any) -> Any:
        return default_child_count(data, "replies", "reply_count")


class ReviewDraft(DomainModel):
    """Payload for creating or editing a review."""

    media_id: str
    media_type: MediaType
    media_title: str = ""
    rating: float
    title: str
    content: str
    spoiler: bool = False
