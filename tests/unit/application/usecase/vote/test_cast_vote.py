"""Unit tests for VoteUseCase."""

import asyncio

import pytest

from reel.adapter.inmemory import FaultInjector
from reel.application.state import ThreadState
from reel.application.usecase.vote import VoteRequest, VoteUseCase
from reel.domain.repository import PostRepository, ReviewRepository
from reel.domain.value import EntityRef, VotableType, VoteAction
from tests.conftest import VIEWER, make_comment, make_post, make_reply, make_review
from tests.harness import create_env_fixture

# Unit test fixture - in-memory backend
unit_env = create_env_fixture()


def review_vote(review, state, action=VoteAction.LIKE) -> VoteRequest:
    return VoteRequest(
        target=EntityRef(type=VotableType.REVIEW, id=review.id),
        action=action,
        user_id=VIEWER.id,
        state=state,
    )


class TestVoteUseCase:
    """Tests for VoteUseCase."""

    @pytest.mark.asyncio
    async def test_like_is_shown_before_the_response(self, unit_env):
        """The toggle is visible while the request is in flight."""
        # Arrange
        reviews = await unit_env.get(ReviewRepository)
        faults = await unit_env.get(FaultInjector)
        vote = await unit_env.get(VoteUseCase)
        review = make_review()
        reviews.add(review)
        state = ThreadState([review])
        faults.pause()

        # Act
        task = asyncio.create_task(vote.execute(review_vote(review, state)))
        await asyncio.sleep(0)

        # Assert
        assert state.items[0].like_count == 1
        faults.resume()
        response = await task
        assert response.applied and response.success
        assert state.items[0].likes == {VIEWER.id}
        assert state.items[0].dislike_count == 0

    @pytest.mark.asyncio
    async def test_like_then_dislike_settles_from_server(self, unit_env):
        reviews = await unit_env.get(ReviewRepository)
        vote = await unit_env.get(VoteUseCase)
        review = make_review(likes=["someone"])
        reviews.add(review)
        state = ThreadState([review])

        await vote.execute(review_vote(review, state, VoteAction.LIKE))
        await vote.execute(review_vote(review, state, VoteAction.DISLIKE))

        settled = state.items[0]
        assert settled.likes == {"someone"}
        assert settled.dislikes == {VIEWER.id}
        server = (await reviews.get_review(review.id)).data
        assert server.likes == settled.likes
        assert server.dislikes == settled.dislikes

    @pytest.mark.asyncio
    async def test_failed_like_reverts(self, unit_env):
        """Like on 0/0 shows 1/0, then returns to 0/0 when the server fails."""
        # Arrange
        reviews = await unit_env.get(ReviewRepository)
        faults = await unit_env.get(FaultInjector)
        vote = await unit_env.get(VoteUseCase)
        review = make_review()
        reviews.add(review)
        state = ThreadState([review])
        seen = []
        state.subscribe(lambda items: seen.append((items[0].like_count, items[0].dislike_count)))
        faults.fail_next("Server error")

        # Act
        response = await vote.execute(review_vote(review, state))

        # Assert
        assert response.applied
        assert not response.success
        assert response.message == "Server error"
        assert seen[0] == (1, 0)
        assert (state.items[0].like_count, state.items[0].dislike_count) == (0, 0)

    @pytest.mark.asyncio
    async def test_offline_vote_restores_previous_vote(self, unit_env):
        """A prior dislike is back after a failed like, even without refetch."""
        reviews = await unit_env.get(ReviewRepository)
        faults = await unit_env.get(FaultInjector)
        vote = await unit_env.get(VoteUseCase)
        review = make_review(dislikes=[VIEWER.id])
        reviews.add(review)
        state = ThreadState([review])
        faults.go_offline()

        response = await vote.execute(review_vote(review, state))

        assert not response.success
        assert response.message.startswith("Network error")
        assert state.items[0].dislikes == {VIEWER.id}
        assert state.items[0].likes == frozenset()

    @pytest.mark.asyncio
    async def test_failure_refetches_parent(self, unit_env):
        """After a failure the server's copy replaces the local one."""
        reviews = await unit_env.get(ReviewRepository)
        faults = await unit_env.get(FaultInjector)
        vote = await unit_env.get(VoteUseCase)
        review = make_review()
        reviews.add(review)
        # Someone else liked it since the list was loaded
        reviews.add(review.model_copy(update={"likes": frozenset({"other-1"})}))
        state = ThreadState([review])
        faults.fail_next("Server error")

        await vote.execute(review_vote(review, state))

        assert faults.calls == ["vote_review", "get_review"]
        assert state.items[0].likes == {"other-1"}

    @pytest.mark.asyncio
    async def test_duplicate_vote_dropped_while_in_flight(self, unit_env):
        """A second click on the same entity is ignored, not queued."""
        # Arrange
        reviews = await unit_env.get(ReviewRepository)
        faults = await unit_env.get(FaultInjector)
        vote = await unit_env.get(VoteUseCase)
        review = make_review()
        reviews.add(review)
        state = ThreadState([review])
        faults.pause()

        # Act
        first = asyncio.create_task(vote.execute(review_vote(review, state)))
        await asyncio.sleep(0)
        second = await vote.execute(review_vote(review, state))
        faults.resume()
        first_response = await first

        # Assert
        assert second.applied is False
        assert first_response.success
        assert faults.calls == ["vote_review"]
        assert state.items[0].like_count == 1

    @pytest.mark.asyncio
    async def test_different_entities_vote_concurrently(self, unit_env):
        reviews = await unit_env.get(ReviewRepository)
        faults = await unit_env.get(FaultInjector)
        vote = await unit_env.get(VoteUseCase)
        first, second = make_review(), make_review()
        reviews.add(first, second)
        state = ThreadState([first, second])
        faults.pause()

        tasks = [
            asyncio.create_task(vote.execute(review_vote(first, state))),
            asyncio.create_task(vote.execute(review_vote(second, state))),
        ]
        await asyncio.sleep(0)

        assert faults.calls == ["vote_review", "vote_review"]
        faults.resume()
        responses = await asyncio.gather(*tasks)
        assert all(r.success for r in responses)
        assert [r.like_count for r in state.items] == [1, 1]

    @pytest.mark.asyncio
    async def test_guard_released_after_failure(self, unit_env):
        reviews = await unit_env.get(ReviewRepository)
        faults = await unit_env.get(FaultInjector)
        vote = await unit_env.get(VoteUseCase)
        review = make_review()
        reviews.add(review)
        state = ThreadState([review])
        faults.fail_next("Server error")

        await vote.execute(review_vote(review, state))
        retry = await vote.execute(review_vote(review, state))

        assert retry.applied and retry.success
        assert state.items[0].like_count == 1

    @pytest.mark.asyncio
    async def test_late_failure_after_close_is_ignored(self, unit_env):
        """Neither rollback nor refetch runs once the state is closed."""
        # Arrange
        reviews = await unit_env.get(ReviewRepository)
        faults = await unit_env.get(FaultInjector)
        vote = await unit_env.get(VoteUseCase)
        review = make_review()
        reviews.add(review)
        state = ThreadState([review])
        faults.pause()
        faults.fail_next("Server error")

        # Act
        task = asyncio.create_task(vote.execute(review_vote(review, state)))
        await asyncio.sleep(0)
        optimistic = state.items[0]
        state.close()
        faults.resume()
        response = await task

        # Assert
        assert not response.success
        assert state.items[0] is optimistic
        assert faults.calls == ["vote_review"]

    @pytest.mark.asyncio
    async def test_unknown_entity_not_applied(self, unit_env):
        vote = await unit_env.get(VoteUseCase)
        faults = await unit_env.get(FaultInjector)
        state = ThreadState([make_review()])

        response = await vote.execute(review_vote(make_review(), state))

        assert response.applied is False
        assert faults.calls == []

    @pytest.mark.asyncio
    async def test_vote_on_comment_reply(self, unit_env):
        """Replies under comments route to the comment reply endpoint."""
        posts = await unit_env.get(PostRepository)
        vote = await unit_env.get(VoteUseCase)
        reply = make_reply()
        comment = make_comment(replies=[reply])
        post = make_post(comments=[comment])
        posts.add(post)
        state = ThreadState(post.comments)

        response = await vote.execute(
            VoteRequest(
                target=EntityRef(
                    type=VotableType.REPLY,
                    id=reply.id,
                    post_id=post.id,
                    comment_id=comment.id,
                ),
                action=VoteAction.DISLIKE,
                user_id=VIEWER.id,
                state=state,
            )
        )

        assert response.success
        assert state.items[0].replies[0].dislikes == {VIEWER.id}
        stored = posts.stored(post.id)
        assert stored.comments[0].replies[0].dislikes == {VIEWER.id}

    @pytest.mark.asyncio
    async def test_vote_on_post(self, unit_env):
        posts = await unit_env.get(PostRepository)
        vote = await unit_env.get(VoteUseCase)
        post = make_post()
        posts.add(post)
        state = ThreadState([post])

        response = await vote.execute(
            VoteRequest(
                target=EntityRef(type=VotableType.POST, id=post.id),
                action=VoteAction.LIKE,
                user_id=VIEWER.id,
                state=state,
            )
        )

        assert response.success
        assert state.items[0].score == 1
