"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta
from uuid import uuid4

import logfire
import pytest

from reel.domain.model import Comment, Post, Reply, Review, UserRef
from reel.domain.value import MediaType

os.environ.setdefault("ENVIRONMENT", "test")

VIEWER = UserRef(id="viewer-1", username="viewer", full_name="Test Viewer")
OTHER = UserRef(id="other-1", username="other", full_name="Other User")


@pytest.fixture(scope="session", autouse=True)
def quiet_logfire():
    """Keep telemetry local during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def server_id() -> str:
    return uuid4().hex[:24]


def make_reply(user: UserRef = OTHER, content: str = "Good point", **fields) -> Reply:
    """Helper to build a confirmed reply."""
    return Reply(id=fields.pop("id", server_id()), user=user, content=content, **fields)


def make_review(
    user: UserRef = OTHER,
    media_id: str = "550",
    media_type: MediaType = MediaType.MOVIE,
    age_minutes: int = 0,
    **fields,
) -> Review:
    """Helper to build a confirmed review.

    ``age_minutes`` backdates ``created_at`` so listings sort predictably.
    """
    created = datetime.now() - timedelta(minutes=age_minutes)
    return Review(
        id=fields.pop("id", server_id()),
        user=user,
        media_id=media_id,
        media_type=media_type,
        media_title=fields.pop("media_title", "Fight Club"),
        rating=fields.pop("rating", 8),
        title=fields.pop("title", "Holds up"),
        content=fields.pop("content", "Still sharp after all these years."),
        created_at=created,
        updated_at=created,
        **fields,
    )


def make_comment(user: UserRef = OTHER, content: str = "Agreed", **fields) -> Comment:
    """Helper to build a confirmed comment."""
    return Comment(
        id=fields.pop("id", server_id()), user=user, content=content, **fields
    )


def make_post(
    user: UserRef = OTHER, community: str = "film-club", **fields
) -> Post:
    """Helper to build a confirmed community post."""
    return Post(
        id=fields.pop("id", server_id()),
        user=user,
        community=community,
        title=fields.pop("title", "Best ending of the decade?"),
        content=fields.pop("content", "Make your case."),
        **fields,
    )
