"""Submit reply use case."""

import logfire
from pydantic import BaseModel

from reel.application.usecase.base import BaseUseCase, ThreadRequest
from reel.config import OptimisticSettings
from reel.domain.error import NotFoundError, UnsupportedActionError
from reel.domain.model import Comment, Reply, UserRef
from reel.domain.service import (
    REPLY_MAX_LENGTH,
    insert_child_optimistic,
    make_reply_placeholder,
    remove,
    replace,
    require_text,
    update_where,
)
from reel.domain.repository import PostRepository, ReviewRepository
from reel.domain.value import EntityRef, VotableType


class SubmitReplyRequest(ThreadRequest):
    """Submit reply request.

    ``parent`` is the review or comment being replied to; ``state``
    is the collection that holds it.
    """

    parent: EntityRef
    content: str
    spoiler: bool = False
    author: UserRef  # Signed-in user


class SubmitReplyResponse(BaseModel):
    """Submit reply response."""

    success: bool
    message: str | None = None
    reply: Reply | None = None


class SubmitReplyUseCase(BaseUseCase):
    """Use case for replying to a review or a comment."""

    def __init__(
        self,
        reviews: ReviewRepository,
        posts: PostRepository,
        settings: OptimisticSettings,
    ) -> None:
        """Initialize submit reply use case.

        Args:
            reviews: Review repository
            posts: Post repository
            settings: Optimistic update settings
        """
        self.reviews = reviews
        self.posts = posts
        self.settings = settings

    async def execute(self, request: SubmitReplyRequest) -> SubmitReplyResponse:
        """Execute submit reply flow.

        Steps:
        1. Validate the content (nothing is sent if it is rejected)
        2. Append a placeholder reply under the parent
        3. Send the reply; on success take the server's parent, on
           failure drop the placeholder

        Args:
            request: Submit reply request

        Returns:
            Submit reply response with the confirmed reply

        Raises:
            ValidationError: If the content is blank or too long
            UnsupportedActionError: If the parent is not a review or comment
            NotFoundError: If the parent is not in the local collection
        """
        parent = request.parent
        state = request.state
        if parent.type not in (VotableType.REVIEW, VotableType.COMMENT):
            raise UnsupportedActionError("reply to", parent.type.value)
        content = require_text(
            request.content, field="reply", max_length=REPLY_MAX_LENGTH
        )
        if state.find(parent.id) is None:
            raise NotFoundError(parent.type.value.capitalize(), parent.id)

        placeholder = make_reply_placeholder(
            request.author,
            content,
            self.settings.temp_id_prefix,
            spoiler=request.spoiler,
        )

        with logfire.span("submit_reply.execute", parent=str(parent.key)):
            state.apply(
                lambda items: update_where(
                    items,
                    parent.id,
                    lambda p: insert_child_optimistic(p, placeholder),
                )
            )

            if parent.type == VotableType.REVIEW:
                result = await self.reviews.add_reply(
                    parent.id, content, request.spoiler
                )
                server_parent = result.data
            else:
                result = await self.posts.add_comment_reply(
                    parent.post_id, parent.id, content, request.spoiler
                )
                server_parent = (
                    _comment_of(result.data.comments, parent.id) if result.data else None
                )

            if not result.success:
                state.apply(lambda items: remove(items, placeholder.id))
                logfire.warn(
                    "Reply rolled back",
                    parent=str(parent.key),
                    error=result.message,
                )
                return SubmitReplyResponse(success=False, message=result.message)

            if server_parent is None:
                # Saved, but the response page does not include the parent
                state.apply(lambda items: remove(items, placeholder.id))
                logfire.warn("Confirmed reply missing from response", parent=str(parent.key))
                return SubmitReplyResponse(success=True, message=result.message)

            state.apply(lambda items: replace(items, server_parent))
            reply = _latest_by(server_parent.replies, request.author.id, content)
            logfire.info("Reply confirmed", parent=str(parent.key))
            return SubmitReplyResponse(success=True, message=result.message, reply=reply)


def _comment_of(comments: tuple[Comment, ...], comment_id: str) -> Comment | None:
    for comment in comments:
        if comment.id == comment_id:
            return comment
    return None


def _latest_by(replies: tuple[Reply, ...], user_id: str, content: str) -> Reply | None:
    for reply in reversed(replies):
        if reply.user.id == user_id and reply.content == content:
            return reply
    return None
