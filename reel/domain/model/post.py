"""Community post and comment entities."""

from typing import Any, ClassVar

from pydantic import Field, field_validator, model_validator

from reel.domain.model.votable import Reply, VotableEntity, default_child_count
from reel.domain.value import VotableType


class Comment(VotableEntity):
    """Comment on a community post, with one level of replies."""

    votable_type: ClassVar[VotableType] = VotableType.COMMENT
    children_field: ClassVar[str | None] = "replies"
    count_field: ClassVar[str | None] = "reply_count"

    replies: tuple[Reply, ...] = ()
    reply_count: int = Field(default=0, ge=0)

    @model_validator(mode="before")
    @classmethod
    def fill_reply_count(cls, data: Any) -> Any:
        return default_child_count(data, "replies", "reply_count")


class Post(VotableEntity):
    """Community post.

    When fetched on its own the backend returns one page of comments
    together with ``total_comments``; ``comments`` then holds only that page.
    """

    votable_type: ClassVar[VotableType] = VotableType.POST
    children_field: ClassVar[str | None] = "comments"
    count_field: ClassVar[str | None] = "comment_count"

    community: str = ""
    title: str = ""
    comments: tuple[Comment, ...] = ()
    comment_count: int = Field(default=0, ge=0)
    total_comments: int | None = None

    @field_validator("community", mode="before")
    @classmethod
    def flatten_community(cls, v: Any) -> Any:
        """Accept a populated community document and keep its slug."""
        if isinstance(v, dict):
            return v.get("slug") or v.get("_id") or ""
        return v

    @model_validator(mode="before")
    @classmethod
    def fill_comment_count(cls, data: Any) -> Any:
        if isinstance(data, dict):
            total = data.get("totalComments", data.get("total_comments"))
            has_count = "commentCount" in data or "comment_count" in data
            if total is not None and not has_count:
                data = {**data, "comment_count": total}
        return default_child_count(data, "comments", "comment_count")
