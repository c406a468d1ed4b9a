"""Cast vote use case."""

import logfire
from pydantic import BaseModel

from reel.application.state import InFlightGuard
from reel.application.usecase.base import BaseUseCase, ThreadRequest
from reel.application.usecase.thread import RefetchRequest, RefetchUseCase
from reel.config import OptimisticSettings
from reel.domain.model import ApiResult, VoteSummary
from reel.domain.repository import PostRepository, ReviewRepository
from reel.domain.service import (
    apply_vote,
    apply_vote_summary,
    restore_vote,
    update_where,
)
from reel.domain.value import EntityRef, UserId, VotableType, VoteAction


class VoteRequest(ThreadRequest):
    """Vote request."""

    target: EntityRef
    action: VoteAction
    user_id: str  # ID of the signed-in user


class VoteResponse(BaseModel):
    """Vote response.

    ``applied`` is False when the vote was dropped without touching
    state: another vote on the same entity was in flight, or the entity
    is not in the local collection.
    """

    applied: bool
    success: bool
    message: str | None = None


class VoteUseCase(BaseUseCase):
    """Use case for liking or disliking a review, reply, post or comment.

    The toggle is shown immediately. The server's vote summary then
    settles the user's membership; on failure the user's previous vote
    is restored and, if configured, the parent is refetched.
    """

    def __init__(
        self,
        reviews: ReviewRepository,
        posts: PostRepository,
        guard: InFlightGuard,
        refetch: RefetchUseCase,
        settings: OptimisticSettings,
    ) -> None:
        """Initialize vote use case.

        Args:
            reviews: Review repository
            posts: Post repository
            guard: In-flight guard shared by every vote
            refetch: Refetch use case, used as the fallback on failure
            settings: Optimistic update settings
        """
        self.reviews = reviews
        self.posts = posts
        self.guard = guard
        self.refetch = refetch
        self.settings = settings

    async def execute(self, request: VoteRequest) -> VoteResponse:
        """Execute vote flow.

        Steps:
        1. Claim the entity's in-flight slot (drop the vote if taken)
        2. Toggle the vote locally
        3. Send the vote and settle local state from the result

        Args:
            request: Vote request

        Returns:
            Vote response
        """
        target = request.target
        state = request.state
        user_id = UserId(request.user_id)

        with self.guard.hold(target.key) as acquired:
            if not acquired:
                logfire.info("Vote dropped, already in flight", key=str(target.key))
                return VoteResponse(applied=False, success=False)

            original = state.find(target.id)
            if original is None:
                logfire.warn("Vote target not loaded", key=str(target.key))
                return VoteResponse(
                    applied=False,
                    success=False,
                    message=f"{target.type.value.capitalize()} not found",
                )

            with logfire.span(
                "vote.execute",
                key=str(target.key),
                action=request.action.value,
            ):
                state.apply(
                    lambda items: update_where(
                        items,
                        target.id,
                        lambda e: apply_vote(e, request.action, user_id),
                    )
                )

                result = await self._send(target, request.action)

                if state.closed:
                    logfire.info("Vote finished after state was closed", key=str(target.key))
                    return VoteResponse(
                        applied=True, success=result.success, message=result.message
                    )

                if result.success and result.data is not None:
                    summary = result.data
                    state.apply(
                        lambda items: update_where(
                            items,
                            target.id,
                            lambda e: apply_vote_summary(e, summary, user_id),
                        )
                    )
                    return VoteResponse(applied=True, success=True)

                state.apply(
                    lambda items: update_where(
                        items,
                        target.id,
                        lambda e: restore_vote(e, original, user_id),
                    )
                )
                logfire.warn(
                    "Vote rolled back", key=str(target.key), error=result.message
                )
                if self.settings.refetch_on_failure:
                    await self.refetch.execute(
                        RefetchRequest(target=target, state=state)
                    )
                return VoteResponse(applied=True, success=False, message=result.message)

    async def _send(self, target: EntityRef, action: VoteAction) -> ApiResult[VoteSummary]:
        if target.type == VotableType.REVIEW:
            return await self.reviews.vote_review(target.id, action)
        if target.type == VotableType.POST:
            return await self.posts.vote_post(target.id, action)
        if target.type == VotableType.COMMENT:
            return await self.posts.vote_comment(target.post_id, target.id, action)
        if target.review_id:
            return await self.reviews.vote_reply(target.review_id, target.id, action)
        return await self.posts.vote_comment_reply(
            target.post_id, target.comment_id, target.id, action
        )
