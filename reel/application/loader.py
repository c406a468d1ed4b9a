"""Paginated collection loader."""

from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

import logfire

from reel.application.state import ThreadState
from reel.config import PaginationSettings
from reel.domain.model import ApiResult, Comment, MediaItem, Page, Post, Review
from reel.domain.repository import MediaRepository, PostRepository, ReviewRepository
from reel.domain.service import compute_has_more, dedupe, merge_unique
from reel.domain.service.pagination import Keyed
from reel.domain.value import LoaderStatus, MediaType, SortOrder

K = TypeVar("K", bound=Keyed)

Fetch = Callable[[int], Awaitable[ApiResult[Page[K]]]]


class CollectionLoader(Generic[K]):
    """Accumulates pages of a server collection into a ``ThreadState``.

    Status moves ``idle -> loading -> loaded <-> loading_more``; a page
    whose number reaches the server-reported page count ends in
    ``exhausted``. One load runs at a time; a load requested while
    another is in flight is a no-op.

    Page 1 replaces the collection, later pages are merged into it with
    (type, id) de-duplication, so pages that shift while the user scrolls
    do not produce duplicates.
    """

    def __init__(
        self,
        fetch: Fetch,
        state: ThreadState | None = None,
        name: str = "collection",
    ) -> None:
        """Initialize collection loader.

        Args:
            fetch: Fetches one page by 1-based page number
            state: State to load into (a new one if omitted)
            name: Label used in logs
        """
        self.fetch = fetch
        self.state = state if state is not None else ThreadState(name=name)
        self.name = name
        self.page = 0
        self.total: int | None = None
        self.has_more = True
        self.status = LoaderStatus.IDLE
        self.last_error: str | None = None
        self._generation = 0

    @property
    def items(self) -> tuple[K, ...]:
        return self.state.items

    @property
    def loading(self) -> bool:
        return self.status in (LoaderStatus.LOADING, LoaderStatus.LOADING_MORE)

    async def load_page(self, page: int) -> bool:
        """Fetch ``page`` and fold it into the collection.

        Args:
            page: 1-based page number

        Returns:
            True if the page was applied; False if the call was a no-op
            (already loading, nothing left, state closed) or failed
        """
        if self.loading or not self.has_more or self.state.closed:
            return False

        generation = self._generation
        self.status = LoaderStatus.LOADING if self.page == 0 else LoaderStatus.LOADING_MORE
        self.last_error = None

        fetched_ok = False
        try:
            with logfire.span("loader.load_page", loader=self.name, page=page):
                result = await self.fetch(page)
            fetched_ok = True
        finally:
            # A raising fetch must not leave the loader stuck in a loading status
            if not fetched_ok and generation == self._generation:
                self.last_error = "Failed to load"
                self.status = (
                    LoaderStatus.IDLE if self.page == 0 else LoaderStatus.LOADED
                )

        if generation != self._generation or self.state.closed:
            logfire.info("Dropped stale page", loader=self.name, page=page)
            return False

        if not result.success or result.data is None:
            self.last_error = result.message or "Failed to load"
            self.status = LoaderStatus.IDLE if self.page == 0 else LoaderStatus.LOADED
            logfire.warn(
                "Page load failed",
                loader=self.name,
                page=page,
                error=self.last_error,
            )
            return False

        fetched = result.data
        if page == 1:
            self.state.replace_all(dedupe(fetched.items))
        else:
            self.state.apply(lambda items: merge_unique(items, fetched.items))

        self.page = fetched.page
        self.total = fetched.total
        self.has_more = compute_has_more(fetched.page, fetched.pages)
        self.status = LoaderStatus.LOADED if self.has_more else LoaderStatus.EXHAUSTED
        return True

    async def load_first(self) -> bool:
        """Reload from page 1, replacing whatever is loaded."""
        if self.loading:
            return False
        self.reset()
        return await self.load_page(1)

    async def load_more(self) -> bool:
        return await self.load_page(self.page + 1)

    def reset(self) -> None:
        """Return to ``idle``; an in-flight load is discarded when it lands.

        Loaded items stay until page 1 replaces them.
        """
        self._generation += 1
        self.page = 0
        self.total = None
        self.has_more = True
        self.status = LoaderStatus.IDLE
        self.last_error = None


class LoaderFactory:
    """Builds loaders for the app's collections at the configured page sizes."""

    def __init__(
        self,
        reviews: ReviewRepository,
        posts: PostRepository,
        media: MediaRepository,
        pagination: PaginationSettings,
    ) -> None:
        self.reviews = reviews
        self.posts = posts
        self.media = media
        self.pagination = pagination

    def reviews_for(
        self,
        media_type: MediaType,
        media_id: str,
        sort_by: SortOrder = SortOrder.RECENT,
    ) -> CollectionLoader[Review]:
        """Reviews of one movie or show, ``page_size`` per page."""
        limit = self.pagination.page_size
        return CollectionLoader(
            lambda page: self.reviews.list_reviews(
                media_type, media_id, page=page, limit=limit, sort_by=sort_by
            ),
            name=f"reviews:{media_type.value}-{media_id}",
        )

    def community_posts(
        self, slug: str, sort_by: SortOrder = SortOrder.RECENT
    ) -> CollectionLoader[Post]:
        limit = self.pagination.page_size
        return CollectionLoader(
            lambda page: self.posts.list_community_posts(
                slug, page=page, limit=limit, sort_by=sort_by
            ),
            name=f"community:{slug}",
        )

    def comments(
        self, post_id: str, state: ThreadState[Comment] | None = None
    ) -> CollectionLoader[Comment]:
        """Comments under a post, ``comments_page_size`` per page.

        Pass the post's comment state to keep loading into the thread the
        mutations already act on.
        """
        limit = self.pagination.comments_page_size
        return CollectionLoader(
            lambda page: self.posts.list_comments(post_id, page=page, limit=limit),
            state=state,
            name=f"comments:{post_id}",
        )

    def discover(
        self, media_type: MediaType, filters: dict[str, Any] | None = None
    ) -> CollectionLoader[MediaItem]:
        # Page size is fixed by the media source
        return CollectionLoader(
            lambda page: self.media.discover(media_type, page=page, filters=filters),
            name=f"discover:{media_type.value}",
        )
