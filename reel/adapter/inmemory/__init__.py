"""In-memory backend for tests and offline development."""

from reel.adapter.inmemory.backend import FaultInjector
from reel.adapter.inmemory.media import InMemoryMediaRepository
from reel.adapter.inmemory.post import InMemoryPostRepository
from reel.adapter.inmemory.review import InMemoryReviewRepository

__all__ = [
    "FaultInjector",
    "InMemoryMediaRepository",
    "InMemoryPostRepository",
    "InMemoryReviewRepository",
]
