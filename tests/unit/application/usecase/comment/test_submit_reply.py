"""Unit tests for SubmitReplyUseCase."""

import asyncio

import pytest

from reel.adapter.inmemory import FaultInjector
from reel.application.state import ThreadState
from reel.application.usecase.comment import SubmitReplyRequest, SubmitReplyUseCase
from reel.domain.error import NotFoundError, UnsupportedActionError, ValidationError
from reel.domain.repository import PostRepository, ReviewRepository
from reel.domain.value import EntityRef, VotableType
from tests.conftest import VIEWER, make_comment, make_post, make_reply, make_review
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def reply_to_review(review, state, content="Couldn't agree more") -> SubmitReplyRequest:
    return SubmitReplyRequest(
        parent=EntityRef(type=VotableType.REVIEW, id=review.id),
        content=content,
        author=VIEWER,
        state=state,
    )


class TestSubmitReplyUseCase:
    """Tests for SubmitReplyUseCase."""

    @pytest.mark.asyncio
    async def test_placeholder_shown_then_confirmed(self, unit_env):
        """The reply appears at once and is swapped for the server's copy."""
        # Arrange
        reviews = await unit_env.get(ReviewRepository)
        faults = await unit_env.get(FaultInjector)
        submit = await unit_env.get(SubmitReplyUseCase)
        review = make_review(replies=[make_reply()])
        reviews.add(review)
        state = ThreadState([review])
        faults.pause()

        # Act
        task = asyncio.create_task(submit.execute(reply_to_review(review, state)))
        await asyncio.sleep(0)

        # Assert - optimistic
        pending = state.items[0]
        assert pending.reply_count == 2
        assert pending.replies[-1].is_placeholder()
        assert pending.replies[-1].content == "Couldn't agree more"

        # Assert - confirmed
        faults.resume()
        response = await task
        confirmed = state.items[0]
        assert response.success
        assert response.reply is not None
        assert not response.reply.is_placeholder()
        assert confirmed.reply_count == 2
        assert confirmed.replies[-1].id == response.reply.id

    @pytest.mark.asyncio
    async def test_offline_reply_removed(self, unit_env):
        """With the network down the placeholder is gone and the count restored."""
        reviews = await unit_env.get(ReviewRepository)
        faults = await unit_env.get(FaultInjector)
        submit = await unit_env.get(SubmitReplyUseCase)
        review = make_review()
        reviews.add(review)
        state = ThreadState([review])
        faults.go_offline()

        response = await submit.execute(reply_to_review(review, state))

        assert not response.success
        assert state.items[0].replies == ()
        assert state.items[0].reply_count == 0

    @pytest.mark.asyncio
    async def test_blank_reply_never_sent(self, unit_env):
        """Validation fails before any state change or request."""
        faults = await unit_env.get(FaultInjector)
        submit = await unit_env.get(SubmitReplyUseCase)
        review = make_review()
        state = ThreadState([review])

        with pytest.raises(ValidationError):
            await submit.execute(reply_to_review(review, state, content="   "))

        assert faults.calls == []
        assert state.items == (review,)

    @pytest.mark.asyncio
    async def test_reply_to_comment(self, unit_env):
        posts = await unit_env.get(PostRepository)
        submit = await unit_env.get(SubmitReplyUseCase)
        comment = make_comment()
        post = make_post(comments=[comment])
        posts.add(post)
        state = ThreadState(post.comments)

        response = await submit.execute(
            SubmitReplyRequest(
                parent=EntityRef(type=VotableType.COMMENT, id=comment.id, post_id=post.id),
                content="Same here",
                author=VIEWER,
                state=state,
            )
        )

        assert response.success
        assert state.items[0].reply_count == 1
        assert state.items[0].replies[0].content == "Same here"
        assert not state.items[0].replies[0].is_placeholder()

    @pytest.mark.asyncio
    async def test_comment_reply_keeps_spoiler_flag(self, unit_env):
        # Arrange
        posts = await unit_env.get(PostRepository)
        submit = await unit_env.get(SubmitReplyUseCase)
        comment = make_comment()
        post = make_post(comments=[comment])
        posts.add(post)
        state = ThreadState(post.comments)

        # Act
        response = await submit.execute(
            SubmitReplyRequest(
                parent=EntityRef(type=VotableType.COMMENT, id=comment.id, post_id=post.id),
                content="The twist is fake",
                spoiler=True,
                author=VIEWER,
                state=state,
            )
        )

        # Assert
        assert response.success
        assert response.reply.spoiler
        assert state.items[0].replies[0].spoiler
        assert posts.stored(post.id).comments[0].replies[0].spoiler

    @pytest.mark.asyncio
    async def test_reply_to_reply_unsupported(self, unit_env):
        submit = await unit_env.get(SubmitReplyUseCase)
        reply = make_reply()
        state = ThreadState([make_review(replies=[reply])])

        with pytest.raises(UnsupportedActionError):
            await submit.execute(
                SubmitReplyRequest(
                    parent=EntityRef(type=VotableType.REPLY, id=reply.id, review_id="r"),
                    content="Nested",
                    author=VIEWER,
                    state=state,
                )
            )

    @pytest.mark.asyncio
    async def test_parent_must_be_loaded(self, unit_env):
        submit = await unit_env.get(SubmitReplyUseCase)

        with pytest.raises(NotFoundError):
            await submit.execute(reply_to_review(make_review(), ThreadState()))
