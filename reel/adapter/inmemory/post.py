"""In-memory post repository for testing."""

from datetime import datetime

from reel.adapter.inmemory.backend import (
    FaultInjector,
    new_server_id,
    paginate,
    vote_summary,
)
from reel.domain.error import ValidationError
from reel.domain.model import (
    ApiResult,
    Comment,
    Page,
    Post,
    Reply,
    UserRef,
    VoteSummary,
)
from reel.domain.repository import PostRepository
from reel.domain.service import (
    COMMENT_MAX_LENGTH,
    REPLY_MAX_LENGTH,
    apply_vote,
    find,
    remove,
    require_text,
    update_where,
)
from reel.domain.value import SortOrder, VoteAction


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Posts are stored with their full comment list; reads page the
    comments the way the post endpoint does.
    """

    def __init__(self, viewer: UserRef, faults: FaultInjector | None = None) -> None:
        self.viewer = viewer
        self.faults = faults or FaultInjector()
        self._posts: dict[str, Post] = {}

    def add(self, *posts: Post) -> None:
        """Seed posts."""
        for post in posts:
            self._posts[post.id] = post.model_copy(
                update={"comment_count": len(post.comments)}
            )

    def stored(self, post_id: str) -> Post | None:
        """Stored post with every comment, for assertions."""
        return self._posts.get(post_id)

    async def get_post(
        self, post_id: str, comments_page: int = 1, comments_limit: int = 10
    ) -> ApiResult[Post]:
        failure = await self.faults.gate("get_post")
        if failure:
            return failure

        post = self._posts.get(post_id)
        if post is None:
            return ApiResult.fail("Post not found")
        return ApiResult.ok(_with_comment_page(post, comments_page, comments_limit))

    async def list_comments(
        self, post_id: str, page: int = 1, limit: int = 10
    ) -> ApiResult[Page[Comment]]:
        failure = await self.faults.gate("list_comments")
        if failure:
            return failure

        post = self._posts.get(post_id)
        if post is None:
            return ApiResult.fail("Post not found")
        return ApiResult.ok(paginate(post.comments, page, limit))

    async def list_community_posts(
        self,
        slug: str,
        page: int = 1,
        limit: int = 10,
        sort_by: SortOrder = SortOrder.RECENT,
    ) -> ApiResult[Page[Post]]:
        failure = await self.faults.gate("list_community_posts")
        if failure:
            return failure

        posts = [p for p in self._posts.values() if p.community == slug]
        if sort_by == SortOrder.POPULAR:
            posts.sort(key=lambda p: (p.score, p.created_at), reverse=True)
        else:
            posts.sort(key=lambda p: p.created_at, reverse=True)
        return ApiResult.ok(paginate(posts, page, limit))

    async def vote_post(self, post_id: str, action: VoteAction) -> ApiResult[VoteSummary]:
        failure = await self.faults.gate("vote_post")
        if failure:
            return failure

        post = self._posts.get(post_id)
        if post is None:
            return ApiResult.fail("Post not found")
        post = apply_vote(post, action, self.viewer.id)
        self._posts[post_id] = post
        return ApiResult.ok(vote_summary(post, self.viewer.id))

    async def add_comment(
        self, post_id: str, content: str, spoiler: bool = False
    ) -> ApiResult[Post]:
        failure = await self.faults.gate("add_comment")
        if failure:
            return failure

        post = self._posts.get(post_id)
        if post is None:
            return ApiResult.fail("Post not found")
        try:
            content = require_text(
                content, field="comment", max_length=COMMENT_MAX_LENGTH
            )
        except ValidationError as e:
            return ApiResult.fail(str(e))

        now = datetime.now()
        comment = Comment(
            id=new_server_id(),
            user=self.viewer,
            content=content,
            spoiler=spoiler,
            created_at=now,
            updated_at=now,
        )
        post = post.model_copy(
            update={
                "comments": (*post.comments, comment),
                "comment_count": post.comment_count + 1,
            }
        )
        self._posts[post_id] = post
        return ApiResult.ok(_with_all_comments(post), "Comment added")

    async def vote_comment(
        self, post_id: str, comment_id: str, action: VoteAction
    ) -> ApiResult[VoteSummary]:
        failure = await self.faults.gate("vote_comment")
        if failure:
            return failure

        post = self._posts.get(post_id)
        comment = _find_comment(post, comment_id)
        if post is None or comment is None:
            return ApiResult.fail("Comment not found")
        comment = apply_vote(comment, action, self.viewer.id)
        self._posts[post_id] = post.model_copy(
            update={"comments": update_where(post.comments, comment_id, lambda _: comment)}
        )
        return ApiResult.ok(vote_summary(comment, self.viewer.id))

    async def add_comment_reply(
        self, post_id: str, comment_id: str, content: str, spoiler: bool = False
    ) -> ApiResult[Post]:
        failure = await self.faults.gate("add_comment_reply")
        if failure:
            return failure

        post = self._posts.get(post_id)
        comment = _find_comment(post, comment_id)
        if post is None or comment is None:
            return ApiResult.fail("Comment not found")
        try:
            content = require_text(content, field="reply", max_length=REPLY_MAX_LENGTH)
        except ValidationError as e:
            return ApiResult.fail(str(e))

        now = datetime.now()
        reply = Reply(
            id=new_server_id(),
            user=self.viewer,
            content=content,
            spoiler=spoiler,
            created_at=now,
            updated_at=now,
        )
        comment = comment.model_copy(
            update={
                "replies": (*comment.replies, reply),
                "reply_count": comment.reply_count + 1,
            }
        )
        post = post.model_copy(
            update={"comments": update_where(post.comments, comment_id, lambda _: comment)}
        )
        self._posts[post_id] = post
        return ApiResult.ok(_with_all_comments(post), "Reply added")

    async def vote_comment_reply(
        self, post_id: str, comment_id: str, reply_id: str, action: VoteAction
    ) -> ApiResult[VoteSummary]:
        failure = await self.faults.gate("vote_comment_reply")
        if failure:
            return failure

        post = self._posts.get(post_id)
        comment = _find_comment(post, comment_id)
        reply = find(comment.replies, reply_id) if comment else None
        if post is None or reply is None:
            return ApiResult.fail("Reply not found")
        reply = apply_vote(reply, action, self.viewer.id)
        self._posts[post_id] = post.model_copy(
            update={"comments": update_where(post.comments, reply_id, lambda _: reply)}
        )
        return ApiResult.ok(vote_summary(reply, self.viewer.id))

    async def delete_comment(self, post_id: str, comment_id: str) -> ApiResult[None]:
        failure = await self.faults.gate("delete_comment")
        if failure:
            return failure

        post = self._posts.get(post_id)
        comment = _find_comment(post, comment_id)
        if post is None or comment is None:
            return ApiResult.fail("Comment not found")
        if comment.user.id != self.viewer.id:
            return ApiResult.fail("Not authorized to delete this comment")
        self._posts[post_id] = post.model_copy(
            update={
                "comments": remove(post.comments, comment_id),
                "comment_count": max(0, post.comment_count - 1),
            }
        )
        return ApiResult.ok(None, "Comment deleted")


def _find_comment(post: Post | None, comment_id: str) -> Comment | None:
    if post is None:
        return None
    for comment in post.comments:
        if comment.id == comment_id:
            return comment
    return None


def _with_comment_page(post: Post, page: int, limit: int) -> Post:
    comments = paginate(post.comments, page, limit)
    return post.model_copy(
        update={"comments": comments.items, "total_comments": comments.total}
    )


def _with_all_comments(post: Post) -> Post:
    return post.model_copy(update={"total_comments": len(post.comments)})
