"""Delete item use case."""

import logfire

from reel.application.usecase.base import BaseUseCase, MutationResponse, ThreadRequest
from reel.domain.error import NotFoundError, UnsupportedActionError
from reel.domain.model import ApiResult
from reel.domain.repository import PostRepository, ReviewRepository
from reel.domain.service import remove
from reel.domain.value import EntityRef, VotableType


class DeleteRequest(ThreadRequest):
    """Delete request."""

    target: EntityRef


class DeleteUseCase(BaseUseCase):
    """Use case for deleting a review, a review reply or a comment.

    The entity disappears immediately. On failure the collection is put
    back exactly as it was captured before the removal.
    """

    def __init__(self, reviews: ReviewRepository, posts: PostRepository) -> None:
        """Initialize delete use case.

        Args:
            reviews: Review repository
            posts: Post repository
        """
        self.reviews = reviews
        self.posts = posts

    async def execute(self, request: DeleteRequest) -> MutationResponse:
        """Execute delete flow.

        Args:
            request: Delete request

        Returns:
            Delete outcome

        Raises:
            UnsupportedActionError: If the target is a post or a comment reply
            NotFoundError: If the target is not in the local collection
        """
        target = request.target
        state = request.state
        if target.type == VotableType.POST:
            raise UnsupportedActionError("delete", "post")
        if target.type == VotableType.REPLY and not target.on_review:
            raise UnsupportedActionError("delete", "comment reply")
        if state.find(target.id) is None:
            raise NotFoundError(target.type.value.capitalize(), target.id)

        with logfire.span("delete.execute", type=target.type.value, id=target.id):
            snapshot = state.snapshot()
            state.apply(lambda items: remove(items, target.id))

            result = await self._send(target)

            if state.closed:
                logfire.info("Delete finished after state was closed", id=target.id)
                return MutationResponse(success=result.success, message=result.message)

            if not result.success:
                # Edits made to the collection while the request was in
                # flight are lost with the snapshot
                state.restore(snapshot)
                logfire.warn("Delete rolled back", id=target.id, error=result.message)
                return MutationResponse(success=False, message=result.message)

            logfire.info("Deleted", type=target.type.value, id=target.id)
            return MutationResponse(success=True, message=result.message)

    async def _send(self, target: EntityRef) -> ApiResult[None]:
        if target.type == VotableType.REVIEW:
            return await self.reviews.delete_review(target.id)
        if target.type == VotableType.REPLY:
            return await self.reviews.delete_reply(target.review_id, target.id)
        return await self.posts.delete_comment(target.post_id, target.id)
