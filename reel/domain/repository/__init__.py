"""Repository interfaces for the Reel backend."""

from reel.domain.repository.media import MediaRepository
from reel.domain.repository.post import PostRepository
from reel.domain.repository.review import ReviewRepository

__all__ = [
    "MediaRepository",
    "PostRepository",
    "ReviewRepository",
]
