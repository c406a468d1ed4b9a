"""Create review use case."""

import logfire
from pydantic import BaseModel

from reel.application.usecase.base import BaseUseCase, ThreadRequest
from reel.config import OptimisticSettings
from reel.domain.model import Review, ReviewDraft, UserRef
from reel.domain.repository import ReviewRepository
from reel.domain.service import (
    insert_optimistic,
    make_placeholder,
    reconcile,
    remove,
    validate_review_draft,
)
from reel.domain.value import InsertPosition


class CreateReviewRequest(ThreadRequest):
    """Create review request. ``state`` holds the title's reviews."""

    draft: ReviewDraft
    author: UserRef  # Signed-in user


class ReviewResponse(BaseModel):
    """Review mutation response."""

    success: bool
    message: str | None = None
    review: Review | None = None


class CreateReviewUseCase(BaseUseCase):
    """Use case for publishing a review. New reviews show at the top."""

    def __init__(self, reviews: ReviewRepository, settings: OptimisticSettings) -> None:
        """Initialize create review use case.

        Args:
            reviews: Review repository
            settings: Optimistic update settings
        """
        self.reviews = reviews
        self.settings = settings

    async def execute(self, request: CreateReviewRequest) -> ReviewResponse:
        """Execute create review flow.

        Args:
            request: Create review request

        Returns:
            Review response with the confirmed review

        Raises:
            ValidationError: If rating, title or content are invalid
        """
        state = request.state
        draft = validate_review_draft(request.draft)
        placeholder = make_placeholder(
            Review,
            request.author,
            draft.content,
            self.settings.temp_id_prefix,
            media_id=draft.media_id,
            media_type=draft.media_type,
            media_title=draft.media_title,
            rating=draft.rating,
            title=draft.title,
            spoiler=draft.spoiler,
        )

        with logfire.span("create_review.execute", media_id=draft.media_id):
            state.apply(
                lambda items: insert_optimistic(
                    items, placeholder, InsertPosition.PREPEND
                )
            )

            result = await self.reviews.create_review(draft)

            if not result.success or result.data is None:
                state.apply(lambda items: remove(items, placeholder.id))
                logfire.warn(
                    "Review creation rolled back",
                    media_id=draft.media_id,
                    error=result.message,
                )
                return ReviewResponse(success=False, message=result.message)

            review = result.data
            state.apply(lambda items: reconcile(items, placeholder.id, review))
            logfire.info("Review created", review_id=review.id)
            return ReviewResponse(success=True, message=result.message, review=review)
