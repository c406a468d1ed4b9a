"""Shared plumbing for the in-memory backend."""

import asyncio
import secrets
from collections import deque
from collections.abc import Sequence
from typing import TypeVar

from reel.domain.model import ApiResult, Page, VotableEntity, VoteSummary
from reel.domain.service import page_count
from reel.domain.value import UserId

T = TypeVar("T")


class FaultInjector:
    """Failure and latency switchboard shared by the in-memory repositories.

    Every repository call passes through ``gate`` first, so a test can
    take the backend offline, make the next call fail with a message, or
    hold calls until it releases them.
    """

    def __init__(self, latency: float = 0.0) -> None:
        self.latency = latency
        self.offline = False
        self.calls: list[str] = []
        self._failures: deque[str] = deque()
        self._released = asyncio.Event()
        self._released.set()

    def go_offline(self) -> None:
        self.offline = True

    def go_online(self) -> None:
        self.offline = False

    def fail_next(self, message: str = "Request failed") -> None:
        """Make the next call report ``success: false`` with ``message``."""
        self._failures.append(message)

    def pause(self) -> None:
        """Hold every call until ``resume`` is called."""
        self._released.clear()

    def resume(self) -> None:
        self._released.set()

    async def gate(self, operation: str) -> ApiResult | None:
        """Record the call and return the injected failure, if any.

        Args:
            operation: Name of the repository method being called

        Returns:
            Failed result to return instead of serving the call, or None
        """
        self.calls.append(operation)
        await self._released.wait()
        if self.latency:
            await asyncio.sleep(self.latency)
        if self.offline:
            return ApiResult.fail("Network error: backend unreachable")
        if self._failures:
            return ApiResult.fail(self._failures.popleft())
        return None


def new_server_id() -> str:
    """Create a document-style id (24 hex characters)."""
    return secrets.token_hex(12)


def paginate(items: Sequence[T], page: int, limit: int) -> Page[T]:
    """Slice one page out of a full listing."""
    start = (page - 1) * limit
    return Page(
        items=tuple(items[start : start + limit]),
        page=page,
        pages=page_count(len(items), limit),
        total=len(items),
    )


def vote_summary(entity: VotableEntity, viewer_id: UserId) -> VoteSummary:
    """Vote summary of an entity as the backend reports it to ``viewer_id``."""
    return VoteSummary(
        likes=entity.like_count,
        dislikes=entity.dislike_count,
        user_liked=viewer_id in entity.likes,
        user_disliked=viewer_id in entity.dislikes,
    )
