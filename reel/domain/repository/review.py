"""Review repository interface."""

from abc import ABC, abstractmethod

from reel.domain.model import ApiResult, Page, Review, ReviewDraft, VoteSummary
from reel.domain.value import MediaType, SortOrder, VoteAction


class ReviewRepository(ABC):
    """Remote access to reviews and their replies.

    Every method returns an ``ApiResult``; expected failures are reported
    with ``success=False`` and never raised. Implementations do not touch
    local state.
    """

    @abstractmethod
    async def list_reviews(
        self,
        media_type: MediaType,
        media_id: str,
        page: int = 1,
        limit: int = 10,
        sort_by: SortOrder = SortOrder.RECENT,
    ) -> ApiResult[Page[Review]]:
        """Fetch one page of reviews for a movie or show.

        Args:
            media_type: Movie or TV
            media_id: Media identifier
            page: 1-based page number
            limit: Page size
            sort_by: Server-side ordering

        Returns:
            Result holding the page and its pagination metadata
        """
        pass

    @abstractmethod
    async def get_review(self, review_id: str) -> ApiResult[Review]:
        """Fetch a single review with its replies.

        Args:
            review_id: Review ID

        Returns:
            Result holding the review
        """
        pass

    @abstractmethod
    async def create_review(self, draft: ReviewDraft) -> ApiResult[Review]:
        """Create a review.

        Args:
            draft: Review content

        Returns:
            Result holding the created review
        """
        pass

    @abstractmethod
    async def update_review(
        self, review_id: str, draft: ReviewDraft
    ) -> ApiResult[Review]:
        """Edit a review.

        Args:
            review_id: Review ID
            draft: New review content

        Returns:
            Result holding the updated review
        """
        pass

    @abstractmethod
    async def delete_review(self, review_id: str) -> ApiResult[None]:
        """Delete a review.

        Args:
            review_id: Review ID
        """
        pass

    @abstractmethod
    async def vote_review(
        self, review_id: str, action: VoteAction
    ) -> ApiResult[VoteSummary]:
        """Toggle a like or dislike on a review.

        Args:
            review_id: Review ID
            action: Like or dislike

        Returns:
            Result holding the vote summary after the toggle
        """
        pass

    @abstractmethod
    async def add_reply(
        self, review_id: str, content: str, spoiler: bool = False
    ) -> ApiResult[Review]:
        """Reply to a review.

        Args:
            review_id: Review ID
            content: Reply text
            spoiler: Whether the reply contains spoilers

        Returns:
            Result holding the updated parent review
        """
        pass

    @abstractmethod
    async def vote_reply(
        self, review_id: str, reply_id: str, action: VoteAction
    ) -> ApiResult[VoteSummary]:
        """Toggle a like or dislike on a review reply.

        Args:
            review_id: Parent review ID
            reply_id: Reply ID
            action: Like or dislike

        Returns:
            Result holding the vote summary after the toggle
        """
        pass

    @abstractmethod
    async def delete_reply(self, review_id: str, reply_id: str) -> ApiResult[None]:
        """Delete a review reply.

        Args:
            review_id: Parent review ID
            reply_id: Reply ID
        """
        pass
