"""HTTP post repository."""

from pydantic import TypeAdapter

from reel.adapter.api.client import ApiClient, Body
from reel.adapter.api.pagination import from_pagination_block, from_total_comments
from reel.domain.model import ApiResult, Comment, Page, Post, VoteSummary
from reel.domain.repository import PostRepository
from reel.domain.value import SortOrder, VoteAction

_posts = TypeAdapter(list[Post])


class HttpPostRepository(PostRepository):
    """Post repository backed by the ``/posts`` and ``/communities`` endpoints."""

    def __init__(self, client: ApiClient) -> None:
        """Initialize HTTP post repository.

        Args:
            client: API client
        """
        self.client = client

    async def get_post(
        self, post_id: str, comments_page: int = 1, comments_limit: int = 10
    ) -> ApiResult[Post]:
        return await self.client.call(
            "GET",
            f"/posts/{post_id}",
            _parse_post,
            params={"commentsPage": comments_page, "commentsLimit": comments_limit},
        )

    async def list_comments(
        self, post_id: str, page: int = 1, limit: int = 10
    ) -> ApiResult[Page[Comment]]:
        def parse(body: Body) -> Page[Comment]:
            post = Post.model_validate(body["data"])
            return from_total_comments(body["data"], post.comments, page, limit)

        return await self.client.call(
            "GET",
            f"/posts/{post_id}",
            parse,
            params={"commentsPage": page, "commentsLimit": limit},
        )

    async def list_community_posts(
        self,
        slug: str,
        page: int = 1,
        limit: int = 10,
        sort_by: SortOrder = SortOrder.RECENT,
    ) -> ApiResult[Page[Post]]:
        def parse(body: Body) -> Page[Post]:
            items = _posts.validate_python(body["data"])
            return from_pagination_block(body, items, limit)

        return await self.client.call(
            "GET",
            f"/communities/{slug}/posts",
            parse,
            params={"page": page, "limit": limit, "sortBy": sort_by.value},
        )

    async def vote_post(self, post_id: str, action: VoteAction) -> ApiResult[VoteSummary]:
        return await self.client.call(
            "POST", f"/posts/{post_id}", _parse_summary, json={"action": action.value}
        )

    async def add_comment(
        self, post_id: str, content: str, spoiler: bool = False
    ) -> ApiResult[Post]:
        return await self.client.call(
            "POST",
            f"/posts/{post_id}/comment",
            _parse_post,
            json={"content": content, "spoiler": spoiler},
        )

    async def vote_comment(
        self, post_id: str, comment_id: str, action: VoteAction
    ) -> ApiResult[VoteSummary]:
        return await self.client.call(
            "PATCH",
            f"/posts/{post_id}/comment",
            _parse_summary,
            json={"commentId": comment_id, "action": action.value},
        )

    async def add_comment_reply(
        self, post_id: str, comment_id: str, content: str, spoiler: bool = False
    ) -> ApiResult[Post]:
        return await self.client.call(
            "POST",
            f"/posts/{post_id}/comment/{comment_id}/reply",
            _parse_post,
            json={"content": content, "spoiler": spoiler},
        )

    async def vote_comment_reply(
        self, post_id: str, comment_id: str, reply_id: str, action: VoteAction
    ) -> ApiResult[VoteSummary]:
        return await self.client.call(
            "PATCH",
            f"/posts/{post_id}/comment/{comment_id}/reply",
            _parse_summary,
            json={"replyId": reply_id, "action": action.value},
        )

    async def delete_comment(self, post_id: str, comment_id: str) -> ApiResult[None]:
        return await self.client.call(
            "DELETE", f"/posts/{post_id}/comment/{comment_id}", lambda body: None
        )


def _parse_post(body: Body) -> Post:
    return Post.model_validate(body["data"])


def _parse_summary(body: Body) -> VoteSummary:
    return VoteSummary.model_validate(body["data"])
