"""HTTP review repository."""

from pydantic import TypeAdapter

from reel.adapter.api.client import ApiClient, Body
from reel.adapter.api.pagination import from_pagination_block
from reel.domain.model import ApiResult, Page, Review, ReviewDraft, VoteSummary
from reel.domain.repository import ReviewRepository
from reel.domain.value import MediaType, SortOrder, VoteAction

_reviews = TypeAdapter(list[Review])


class HttpReviewRepository(ReviewRepository):
    """Review repository backed by the ``/reviews`` endpoints."""

    def __init__(self, client: ApiClient) -> None:
        """Initialize HTTP review repository.

        Args:
            client: API client
        """
        self.client = client

    async def list_reviews(
        self,
        media_type: MediaType,
        media_id: str,
        page: int = 1,
        limit: int = 10,
        sort_by: SortOrder = SortOrder.RECENT,
    ) -> ApiResult[Page[Review]]:
        def parse(body: Body) -> Page[Review]:
            items = _reviews.validate_python(body["data"])
            return from_pagination_block(body, items, limit)

        return await self.client.call(
            "GET",
            "/reviews",
            parse,
            params={
                "mediaType": media_type.value,
                "mediaId": media_id,
                "page": page,
                "limit": limit,
                "sortBy": sort_by.value,
            },
        )

    async def get_review(self, review_id: str) -> ApiResult[Review]:
        return await self.client.call(
            "GET", f"/reviews/review/{review_id}", _parse_review
        )

    async def create_review(self, draft: ReviewDraft) -> ApiResult[Review]:
        return await self.client.call(
            "POST", "/reviews", _parse_review, json=draft.to_wire()
        )

    async def update_review(
        self, review_id: str, draft: ReviewDraft
    ) -> ApiResult[Review]:
        return await self.client.call(
            "PUT", f"/reviews/{review_id}", _parse_review, json=draft.to_wire()
        )

    async def delete_review(self, review_id: str) -> ApiResult[None]:
        return await self.client.call("DELETE", f"/reviews/{review_id}", _no_data)

    async def vote_review(
        self, review_id: str, action: VoteAction
    ) -> ApiResult[VoteSummary]:
        return await self.client.call(
            "POST", f"/reviews/{review_id}/{action.value}", _parse_summary
        )

    async def add_reply(
        self, review_id: str, content: str, spoiler: bool = False
    ) -> ApiResult[Review]:
        return await self.client.call(
            "POST",
            f"/reviews/{review_id}/reply",
            _parse_review,
            json={"content": content, "spoiler": spoiler},
        )

    async def vote_reply(
        self, review_id: str, reply_id: str, action: VoteAction
    ) -> ApiResult[VoteSummary]:
        return await self.client.call(
            "POST",
            f"/reviews/{review_id}/reply/{reply_id}/{action.value}",
            _parse_summary,
        )

    async def delete_reply(self, review_id: str, reply_id: str) -> ApiResult[None]:
        return await self.client.call(
            "DELETE", f"/reviews/{review_id}/reply/{reply_id}", _no_data
        )


def _parse_review(body: Body) -> Review:
    return Review.model_validate(body["data"])


def _parse_summary(body: Body) -> VoteSummary:
    return VoteSummary.model_validate(body["data"])


def _no_data(body: Body) -> None:
    return None
