"""HTTP adapters for the Reel backend."""

from reel.adapter.api.client import ApiClient
from reel.adapter.api.media import HttpMediaRepository
from reel.adapter.api.post import HttpPostRepository
from reel.adapter.api.review import HttpReviewRepository

__all__ = [
    "ApiClient",
    "HttpMediaRepository",
    "HttpPostRepository",
    "HttpReviewRepository",
]
