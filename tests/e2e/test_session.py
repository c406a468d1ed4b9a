"""End-to-end tests for the client session entry point."""

import pytest

from reel.application.state import ThreadState
from reel.application.usecase.vote import VoteRequest, VoteUseCase
from reel.config import Settings
from reel.domain.repository import ReviewRepository
from reel.domain.value import EntityRef, VotableType, VoteAction
from reel.interface.session import open_session
from tests.conftest import VIEWER, make_review
from tests.di import build_test_container


class TestOpenSession:
    """Tests for open_session."""

    @pytest.mark.asyncio
    async def test_session_resolves_use_cases(self):
        """A session wires settings, repositories and use cases together."""
        # Arrange
        review = make_review()

        async with open_session(build_test_container()) as session:
            settings = await session.get(Settings)
            reviews = await session.get(ReviewRepository)
            reviews.add(review)
            vote = await session.get(VoteUseCase)
            state = ThreadState([review])

            # Act
            response = await vote.execute(
                VoteRequest(
                    target=EntityRef(type=VotableType.REVIEW, id=review.id),
                    action=VoteAction.LIKE,
                    user_id=VIEWER.id,
                    state=state,
                )
            )

        # Assert
        assert settings.environment == "test"
        assert response.success
        assert state.items[0].likes == {VIEWER.id}
