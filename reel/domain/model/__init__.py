"""Domain model entities for Reel."""

from reel.domain.model.media import MediaItem, RelatedMedia
from reel.domain.model.post import Comment, Post
from reel.domain.model.result import ApiResult, Page
from reel.domain.model.review import Review, ReviewDraft
from reel.domain.model.votable import Reply, UserRef, VotableEntity
from reel.domain.model.vote import VoteSummary

__all__ = [
    "VotableEntity",
    "UserRef",
    "Reply",
    "Review",
    "ReviewDraft",
    "Comment",
    "Post",
    "MediaItem",
    "RelatedMedia",
    "VoteSummary",
    "ApiResult",
    "Page",
]
