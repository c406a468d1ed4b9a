"""Votable entity base.

Reviews, review replies, posts, comments and comment replies all carry
like/dislike membership sets. Membership is authoritative; counts are
derived from set sizes.
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from reel.domain.model.common import DomainModel
from reel.domain.value import (
    TEMP_ID_PREFIX,
    CompositeKey,
    EntityId,
    UserId,
    VotableType,
    VoteAction,
    is_temp_id,
)


class UserRef(DomainModel):
    """Author of a votable entity, as populated by the backend."""

    id: UserId = Field(alias="_id")
    username: str = ""
    full_name: str | None = None
    avatar: str | None = None


class VotableEntity(DomainModel):
    """Base class for entities users can like or dislike.

    Business rules:
    - A user appears in at most one of likes/dislikes
    - Liking removes a prior dislike by the same user, and vice versa
    - Threaded subclasses declare their child collection through
      ``children_field``/``count_field``
    """

    votable_type: ClassVar[VotableType]
    children_field: ClassVar[str | None] = None
    count_field: ClassVar[str | None] = None

    id: EntityId = Field(alias="_id")
    user: UserRef
    content: str = ""
    likes: frozenset[UserId] = frozenset()
    dislikes: frozenset[UserId] = frozenset()
    spoiler: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("user", mode="before")
    @classmethod
    def expand_unpopulated_user(cls, v: Any) -> Any:
        """Accept a bare user id where the backend did not populate the author."""
        if isinstance(v, str):
            return {"_id": v}
        return v

    @field_validator("likes", "dislikes", mode="before")
    @classmethod
    def normalize_members(cls, v: Any) -> Any:
        """Drop null ids and flatten populated user documents to their ids."""
        if v is None:
            return frozenset()
        if isinstance(v, (list, tuple, set, frozenset)):
            members = []
            for member in v:
                if member is None:
                    continue
                if isinstance(member, dict):
                    member = member.get("_id") or member.get("id")
                members.append(str(member))
            return frozenset(members)
        return v

    @model_validator(mode="after")
    def check_single_vote(self) -> "VotableEntity":
        """Validate that nobody both likes and dislikes the entity."""
        both = self.likes & self.dislikes
        if both:
            raise ValueError(
                f"Users {sorted(both)} appear in both likes and dislikes of {self.id}"
            )
        return self

    @property
    def like_count(self) -> int:
        return len(self.likes)

    @property
    def dislike_count(self) -> int:
        return len(self.dislikes)

    @property
    def score(self) -> int:
        return self.like_count - self.dislike_count

    @property
    def key(self) -> CompositeKey:
        """Composite (type, id) key used for de-duplication and in-flight guards."""
        return CompositeKey(type=self.votable_type.value, id=self.id)

    def is_placeholder(self, prefix: str = TEMP_ID_PREFIX) -> bool:
        """Whether this entity was synthesized locally and not yet confirmed."""
        return is_temp_id(self.id, prefix)

    def vote_of(self, user_id: UserId) -> VoteAction | None:
        """Vote the user currently holds on this entity, if any."""
        if user_id in self.likes:
            return VoteAction.LIKE
        if user_id in self.dislikes:
            return VoteAction.DISLIKE
        return None


def default_child_count(data: Any, children: str, count: str) -> Any:
    """Fill a cached child count from the child list when the backend omits it."""
    if not isinstance(data, dict):
        return data
    if count in data or to_camel(count) in data:
        return data
    return {**data, count: len(data.get(children) or ())}


class Reply(VotableEntity):
    """Reply under a review or a comment. Replies do not nest further."""

    votable_type: ClassVar[VotableType] = VotableType.REPLY
