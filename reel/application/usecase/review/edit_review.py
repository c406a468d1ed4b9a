"""Edit review use case."""

from datetime import datetime

import logfire

from reel.application.usecase.base import BaseUseCase, ThreadRequest
from reel.application.usecase.review.create_review import ReviewResponse
from reel.domain.error import NotFoundError
from reel.domain.model import ReviewDraft
from reel.domain.repository import ReviewRepository
from reel.domain.service import replace, update_where, validate_review_draft


class EditReviewRequest(ThreadRequest):
    """Edit review request."""

    review_id: str
    draft: ReviewDraft


class EditReviewUseCase(BaseUseCase):
    """Use case for editing a review in place."""

    def __init__(self, reviews: ReviewRepository) -> None:
        self.reviews = reviews

    async def execute(self, request: EditReviewRequest) -> ReviewResponse:
        """Execute edit review flow.

        Args:
            request: Edit review request

        Returns:
            Review response with the updated review

        Raises:
            ValidationError: If rating, title or content are invalid
            NotFoundError: If the review is not in the local collection
        """
        state = request.state
        draft = validate_review_draft(request.draft)
        original = state.find(request.review_id)
        if original is None:
            raise NotFoundError("Review", request.review_id)

        edited = original.model_copy(
            update={
                "rating": draft.rating,
                "title": draft.title,
                "content": draft.content,
                "spoiler": draft.spoiler,
                "updated_at": datetime.now(),
            }
        )

        with logfire.span("edit_review.execute", review_id=request.review_id):
            state.apply(lambda items: replace(items, edited))

            result = await self.reviews.update_review(request.review_id, draft)

            if not result.success or result.data is None:
                state.apply(
                    lambda items: update_where(
                        items, request.review_id, lambda _: original
                    )
                )
                logfire.warn(
                    "Review edit rolled back",
                    review_id=request.review_id,
                    error=result.message,
                )
                return ReviewResponse(success=False, message=result.message)

            review = result.data
            state.apply(lambda items: replace(items, review))
            return ReviewResponse(success=True, message=result.message, review=review)
