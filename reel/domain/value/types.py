"""Domain value objects for Reel.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import model_validator

from reel.domain.value.common import ValueObject


class VotableType(str, Enum):
    """Type of entity that carries like/dislike membership sets."""

    REVIEW = "review"
    REPLY = "reply"
    COMMENT = "comment"
    POST = "post"


class MediaType(str, Enum):
    """Kind of media a review or listing refers to."""

    MOVIE = "movie"
    TV = "tv"


class VoteAction(str, Enum):
    """Vote a user can cast. Casting the same vote twice retracts it."""

    LIKE = "like"
    DISLIKE = "dislike"


class InsertPosition(str, Enum):
    """Where an optimistic placeholder goes in its collection."""

    PREPEND = "prepend"  # newest-first lists (reviews)
    APPEND = "append"  # chronological threads (comments, replies)


class LoaderStatus(str, Enum):
    """State of a paginated collection."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    LOADING_MORE = "loading_more"
    EXHAUSTED = "exhausted"


class SortOrder(str, Enum):
    """Server-side ordering for review and post listings."""

    RECENT = "recent"
    POPULAR = "popular"
    RATING = "rating"


class CompositeKey(ValueObject):
    """(type, id) pair used to deduplicate merged entity lists.

    Ids are only unique within a type: a movie and a TV show can both
    have id "42".
    """

    type: str
    id: str

    def __str__(self) -> str:
        return f"{self.type}-{self.id}"


class EntityRef(ValueObject):
    """Address of a votable entity, including the parents its endpoints need.

    - review: ``id``
    - reply to a review: ``id`` + ``review_id``
    - post: ``id``
    - comment: ``id`` + ``post_id``
    - reply to a comment: ``id`` + ``post_id`` + ``comment_id``
    """

    type: VotableType
    id: str
    review_id: str | None = None
    post_id: str | None = None
    comment_id: str | None = None

    @model_validator(mode="after")
    def check_parents(self) -> "EntityRef":
        """Validate that the parent ids required by the type are present."""
        if self.type == VotableType.COMMENT and not self.post_id:
            raise ValueError("A comment reference needs post_id")
        if self.type == VotableType.REPLY:
            on_review = bool(self.review_id)
            on_comment = bool(self.post_id and self.comment_id)
            if on_review == on_comment:
                raise ValueError(
                    "A reply reference needs either review_id or post_id and comment_id"
                )
        return self

    @property
    def key(self) -> CompositeKey:
        """Composite key of the referenced entity."""
        return CompositeKey(type=self.type.value, id=self.id)

    @property
    def on_review(self) -> bool:
        """Whether the entity lives in a review thread."""
        return self.type == VotableType.REVIEW or self.review_id is not None
