"""Submit comment use case."""

import logfire
from pydantic import BaseModel

from reel.application.usecase.base import BaseUseCase, ThreadRequest
from reel.config import OptimisticSettings
from reel.domain.model import Comment, UserRef
from reel.domain.repository import PostRepository
from reel.domain.service import (
    COMMENT_MAX_LENGTH,
    insert_optimistic,
    make_placeholder,
    reconcile,
    remove,
    require_text,
)
from reel.domain.value import InsertPosition


class SubmitCommentRequest(ThreadRequest):
    """Submit comment request. ``state`` holds the post's comments."""

    post_id: str
    content: str
    spoiler: bool = False
    author: UserRef  # Signed-in user


class SubmitCommentResponse(BaseModel):
    """Submit comment response."""

    success: bool
    message: str | None = None
    comment: Comment | None = None


class SubmitCommentUseCase(BaseUseCase):
    """Use case for commenting on a community post."""

    def __init__(self, posts: PostRepository, settings: OptimisticSettings) -> None:
        """Initialize submit comment use case.

        Args:
            posts: Post repository
            settings: Optimistic update settings
        """
        self.posts = posts
        self.settings = settings

    async def execute(self, request: SubmitCommentRequest) -> SubmitCommentResponse:
        """Execute submit comment flow.

        The backend answers with the whole post, so the confirmed comment
        is picked out as the newest one by the author with the same text.

        Args:
            request: Submit comment request

        Returns:
            Submit comment response with the confirmed comment

        Raises:
            ValidationError: If the content is blank or too long
        """
        state = request.state
        content = require_text(
            request.content, field="comment", max_length=COMMENT_MAX_LENGTH
        )
        placeholder = make_placeholder(
            Comment,
            request.author,
            content,
            self.settings.temp_id_prefix,
            spoiler=request.spoiler,
        )

        with logfire.span("submit_comment.execute", post_id=request.post_id):
            state.apply(
                lambda items: insert_optimistic(
                    items, placeholder, InsertPosition.APPEND
                )
            )

            result = await self.posts.add_comment(
                request.post_id, content, request.spoiler
            )

            if not result.success or result.data is None:
                state.apply(lambda items: remove(items, placeholder.id))
                logfire.warn(
                    "Comment rolled back",
                    post_id=request.post_id,
                    error=result.message,
                )
                return SubmitCommentResponse(success=False, message=result.message)

            comment = None
            for candidate in reversed(result.data.comments):
                if candidate.user.id == request.author.id and candidate.content == content:
                    comment = candidate
                    break

            if comment is None:
                state.apply(lambda items: remove(items, placeholder.id))
                logfire.warn(
                    "Confirmed comment missing from response", post_id=request.post_id
                )
                return SubmitCommentResponse(success=True, message=result.message)

            state.apply(lambda items: reconcile(items, placeholder.id, comment))
            logfire.info("Comment confirmed", post_id=request.post_id)
            return SubmitCommentResponse(
                success=True, message=result.message, comment=comment
            )
