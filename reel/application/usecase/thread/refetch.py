"""Refetch use case."""

import logfire
from pydantic import BaseModel, ConfigDict, model_validator

from reel.application.loader import CollectionLoader
from reel.application.state import ThreadState
from reel.application.usecase.base import BaseUseCase, MutationResponse
from reel.config import PaginationSettings
from reel.domain.model import ApiResult, VotableEntity
from reel.domain.repository import PostRepository, ReviewRepository
from reel.domain.service import replace_known
from reel.domain.value import EntityRef


class RefetchRequest(BaseModel):
    """Refetch request.

    Either ``loader`` (reload a paginated list from page 1) or ``target``
    with ``state`` (reload the parent of one entity) must be given.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    target: EntityRef | None = None
    state: ThreadState | None = None
    loader: CollectionLoader | None = None

    @model_validator(mode="after")
    def check_source(self) -> "RefetchRequest":
        if self.loader is None and (self.target is None or self.state is None):
            raise ValueError("Refetch needs a loader, or a target and its state")
        return self


class RefetchUseCase(BaseUseCase):
    """Use case for replacing local data with the server's copy.

    This is the compensating action when a fine-grained rollback is not
    enough to restore a consistent view.
    """

    def __init__(
        self,
        reviews: ReviewRepository,
        posts: PostRepository,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize refetch use case.

        Args:
            reviews: Review repository
            posts: Post repository
            pagination: Page sizes used when reloading a post
        """
        self.reviews = reviews
        self.posts = posts
        self.pagination = pagination

    async def execute(self, request: RefetchRequest) -> MutationResponse:
        """Execute refetch flow.

        Args:
            request: Refetch request

        Returns:
            Whether the reload succeeded
        """
        if request.loader is not None:
            with logfire.span("refetch.list", loader=request.loader.name):
                loaded = await request.loader.load_first()
            return MutationResponse(success=loaded, message=request.loader.last_error)

        target = request.target
        state = request.state
        with logfire.span("refetch.parent", type=target.type.value, id=target.id):
            result = await self.fetch_parent(target)

        if not result.success or result.data is None:
            logfire.warn("Refetch failed", id=target.id, error=result.message)
            return MutationResponse(success=False, message=result.message)

        parent = result.data
        field = parent.children_field
        fresh = (parent, *(getattr(parent, field) if field else ()))
        state.apply(lambda items: replace_known(items, fresh))
        return MutationResponse(success=True)

    async def fetch_parent(self, target: EntityRef) -> ApiResult[VotableEntity]:
        """Fetch the review or post that contains ``target``."""
        if target.on_review:
            return await self.reviews.get_review(target.review_id or target.id)
        return await self.posts.get_post(
            target.post_id or target.id,
            comments_limit=self.pagination.comments_page_size,
        )
