"""Unit tests for parsing backend documents into domain models."""

import pytest

from reel.domain.model import MediaItem, Post, RelatedMedia, Review, VoteSummary
from reel.domain.value import EntityRef, MediaType, VotableType


class TestReviewParsing:
    """Tests for Review documents."""

    def test_parses_populated_document(self):
        review = Review.model_validate(
            {
                "_id": "r1",
                "user": {"_id": "u1", "username": "ana", "fullName": "Ana"},
                "mediaId": "550",
                "mediaType": "movie",
                "mediaTitle": "Fight Club",
                "rating": 9,
                "title": "Classic",
                "content": "Rewatched it again.",
                "likes": ["u2", {"_id": "u3"}, None],
                "dislikes": [],
                "replies": [
                    {"_id": "p1", "user": "u2", "content": "Agreed"},
                ],
                "createdAt": "2024-05-01T10:00:00Z",
            }
        )

        assert review.id == "r1"
        assert review.user.full_name == "Ana"
        assert review.media_type == MediaType.MOVIE
        assert review.likes == {"u2", "u3"}
        assert review.replies[0].user.id == "u2"
        assert review.reply_count == 1
        assert review.key.type == "review"

    def test_server_reply_count_wins(self):
        review = Review.model_validate(
            {
                "_id": "r1",
                "user": "u1",
                "mediaId": "550",
                "mediaType": "tv",
                "replies": [],
                "replyCount": 4,
            }
        )

        assert review.reply_count == 4

    def test_wire_round_trip_uses_backend_names(self):
        review = Review(
            id="r1", user="u1", media_id="550", media_type=MediaType.MOVIE, likes=["u2"]
        )

        wire = review.to_wire()

        assert wire["_id"] == "r1"
        assert wire["mediaId"] == "550"
        assert wire["likes"] == ["u2"]
        assert Review.model_validate(wire) == review


class TestPostParsing:
    """Tests for Post documents."""

    def test_total_comments_sets_comment_count(self):
        post = Post.model_validate(
            {
                "_id": "p1",
                "user": "u1",
                "community": {"_id": "c1", "slug": "film-club"},
                "comments": [{"_id": "c1", "user": "u2"}],
                "totalComments": 37,
            }
        )

        assert post.community == "film-club"
        assert post.comment_count == 37
        assert post.total_comments == 37
        assert len(post.comments) == 1


class TestMediaParsing:
    """Tests for TMDB-style listing entries."""

    def test_numeric_id_and_tv_name(self):
        item = MediaItem.model_validate(
            {"id": 1399, "mediaType": "tv", "name": "Game of Thrones", "firstAirDate": "2011-04-17"}
        )

        assert item.id == "1399"
        assert item.title == "Game of Thrones"
        assert item.release_date == "2011-04-17"
        assert str(item.key) == "tv-1399"

    def test_related_lists_merge_without_duplicates(self):
        related = RelatedMedia.model_validate(
            {
                "recommendations": [{"id": 1, "title": "A"}, {"id": 2, "title": "B"}],
                "similar": [{"id": 2, "title": "B"}, {"id": 3, "title": "C"}],
            }
        )

        assert [m.id for m in related.merged()] == ["1", "2", "3"]
        assert [m.id for m in related.merged(limit=2)] == ["1", "2"]


class TestVoteSummaryParsing:
    def test_camel_case_flags(self):
        summary = VoteSummary.model_validate(
            {"likes": 3, "dislikes": 1, "userLiked": True, "userDisliked": False}
        )

        assert summary.user_liked is True
        assert summary.likes == 3


class TestEntityRef:
    """Tests for entity addresses."""

    def test_comment_needs_post(self):
        with pytest.raises(ValueError):
            EntityRef(type=VotableType.COMMENT, id="c1")

    def test_reply_needs_exactly_one_parent(self):
        with pytest.raises(ValueError):
            EntityRef(type=VotableType.REPLY, id="r1")
        with pytest.raises(ValueError):
            EntityRef(
                type=VotableType.REPLY,
                id="r1",
                review_id="rv1",
                post_id="p1",
                comment_id="c1",
            )

    def test_reply_on_review(self):
        ref = EntityRef(type=VotableType.REPLY, id="r1", review_id="rv1")

        assert ref.on_review
        assert str(ref.key) == "reply-r1"
