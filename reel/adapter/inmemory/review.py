"""In-memory review repository for testing."""

from datetime import datetime

from reel.adapter.inmemory.backend import (
    FaultInjector,
    new_server_id,
    paginate,
    vote_summary,
)
from reel.domain.error import ValidationError
from reel.domain.model import (
    ApiResult,
    Page,
    Reply,
    Review,
    ReviewDraft,
    UserRef,
    VoteSummary,
)
from reel.domain.repository import ReviewRepository
from reel.domain.service import (
    REPLY_MAX_LENGTH,
    apply_vote,
    find,
    remove,
    replace,
    require_text,
    validate_review_draft,
)
from reel.domain.value import MediaType, SortOrder, VoteAction


class InMemoryReviewRepository(ReviewRepository):
    """In-memory implementation of ReviewRepository for testing.

    Applies the backend's rules (vote toggling, ownership, validation)
    on behalf of ``viewer``, the signed-in user.
    """

    def __init__(self, viewer: UserRef, faults: FaultInjector | None = None) -> None:
        self.viewer = viewer
        self.faults = faults or FaultInjector()
        self._reviews: dict[str, Review] = {}

    def add(self, *reviews: Review) -> None:
        """Seed reviews."""
        for review in reviews:
            self._reviews[review.id] = review

    def all(self) -> list[Review]:
        return list(self._reviews.values())

    async def list_reviews(
        self,
        media_type: MediaType,
        media_id: str,
        page: int = 1,
        limit: int = 10,
        sort_by: SortOrder = SortOrder.RECENT,
    ) -> ApiResult[Page[Review]]:
        failure = await self.faults.gate("list_reviews")
        if failure:
            return failure

        reviews = [
            r
            for r in self._reviews.values()
            if r.media_type == media_type and r.media_id == media_id
        ]
        if sort_by == SortOrder.POPULAR:
            reviews.sort(key=lambda r: (r.score, r.created_at), reverse=True)
        elif sort_by == SortOrder.RATING:
            reviews.sort(key=lambda r: (r.rating, r.created_at), reverse=True)
        else:
            reviews.sort(key=lambda r: r.created_at, reverse=True)
        return ApiResult.ok(paginate(reviews, page, limit))

    async def get_review(self, review_id: str) -> ApiResult[Review]:
        failure = await self.faults.gate("get_review")
        if failure:
            return failure

        review = self._reviews.get(review_id)
        if review is None:
            return ApiResult.fail("Review not found")
        return ApiResult.ok(review)

    async def create_review(self, draft: ReviewDraft) -> ApiResult[Review]:
        failure = await self.faults.gate("create_review")
        if failure:
            return failure

        try:
            draft = validate_review_draft(draft)
        except ValidationError as e:
            return ApiResult.fail(str(e))

        now = datetime.now()
        review = Review(
            id=new_server_id(),
            user=self.viewer,
            created_at=now,
            updated_at=now,
            **draft.model_dump(),
        )
        self._reviews[review.id] = review
        return ApiResult.ok(review, "Review created")

    async def update_review(
        self, review_id: str, draft: ReviewDraft
    ) -> ApiResult[Review]:
        failure = await self.faults.gate("update_review")
        if failure:
            return failure

        review = self._reviews.get(review_id)
        if review is None:
            return ApiResult.fail("Review not found")
        if review.user.id != self.viewer.id:
            return ApiResult.fail("Not authorized to edit this review")
        try:
            draft = validate_review_draft(draft)
        except ValidationError as e:
            return ApiResult.fail(str(e))

        updated = review.model_copy(
            update={
                "rating": draft.rating,
                "title": draft.title,
                "content": draft.content,
                "spoiler": draft.spoiler,
                "updated_at": datetime.now(),
            }
        )
        self._reviews[review_id] = updated
        return ApiResult.ok(updated, "Review updated")

    async def delete_review(self, review_id: str) -> ApiResult[None]:
        failure = await self.faults.gate("delete_review")
        if failure:
            return failure

        review = self._reviews.get(review_id)
        if review is None:
            return ApiResult.fail("Review not found")
        if review.user.id != self.viewer.id:
            return ApiResult.fail("Not authorized to delete this review")
        del self._reviews[review_id]
        return ApiResult.ok(None, "Review deleted")

    async def vote_review(
        self, review_id: str, action: VoteAction
    ) -> ApiResult[VoteSummary]:
        failure = await self.faults.gate("vote_review")
        if failure:
            return failure

        review = self._reviews.get(review_id)
        if review is None:
            return ApiResult.fail("Review not found")
        review = apply_vote(review, action, self.viewer.id)
        self._reviews[review_id] = review
        return ApiResult.ok(vote_summary(review, self.viewer.id))

    async def add_reply(
        self, review_id: str, content: str, spoiler: bool = False
    ) -> ApiResult[Review]:
        failure = await self.faults.gate("add_reply")
        if failure:
            return failure

        review = self._reviews.get(review_id)
        if review is None:
            return ApiResult.fail("Review not found")
        try:
            content = require_text(content, field="reply", max_length=REPLY_MAX_LENGTH)
        except ValidationError as e:
            return ApiResult.fail(str(e))

        now = datetime.now()
        reply = Reply(
            id=new_server_id(),
            user=self.viewer,
            content=content,
            spoiler=spoiler,
            created_at=now,
            updated_at=now,
        )
        review = review.model_copy(
            update={
                "replies": (*review.replies, reply),
                "reply_count": review.reply_count + 1,
            }
        )
        self._reviews[review_id] = review
        return ApiResult.ok(review, "Reply added")

    async def vote_reply(
        self, review_id: str, reply_id: str, action: VoteAction
    ) -> ApiResult[VoteSummary]:
        failure = await self.faults.gate("vote_reply")
        if failure:
            return failure

        review = self._reviews.get(review_id)
        reply = find(review.replies, reply_id) if review else None
        if review is None or reply is None:
            return ApiResult.fail("Reply not found")
        reply = apply_vote(reply, action, self.viewer.id)
        self._reviews[review_id] = review.model_copy(
            update={"replies": replace(review.replies, reply)}
        )
        return ApiResult.ok(vote_summary(reply, self.viewer.id))

    async def delete_reply(self, review_id: str, reply_id: str) -> ApiResult[None]:
        failure = await self.faults.gate("delete_reply")
        if failure:
            return failure

        review = self._reviews.get(review_id)
        reply = find(review.replies, reply_id) if review else None
        if review is None or reply is None:
            return ApiResult.fail("Reply not found")
        if reply.user.id != self.viewer.id:
            return ApiResult.fail("Not authorized to delete this reply")
        self._reviews[review_id] = review.model_copy(
            update={
                "replies": remove(review.replies, reply_id),
                "reply_count": max(0, review.reply_count - 1),
            }
        )
        return ApiResult.ok(None, "Reply deleted")

