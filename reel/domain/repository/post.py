"""Post repository interface."""

from abc import ABC, abstractmethod

from reel.domain.model import ApiResult, Comment, Page, Post, VoteSummary
from reel.domain.value import SortOrder, VoteAction


class PostRepository(ABC):
    """Remote access to community posts, comments and comment replies.

    Every method returns an ``ApiResult``; expected failures are reported
    with ``success=False`` and never raised.
    """

    @abstractmethod
    async def get_post(
        self, post_id: str, comments_page: int = 1, comments_limit: int = 10
    ) -> ApiResult[Post]:
        """Fetch a post with one page of its comments.

        Args:
            post_id: Post ID
            comments_page: 1-based comment page
            comments_limit: Comments per page

        Returns:
            Result holding the post; ``comments`` is the requested page
        """
        pass

    @abstractmethod
    async def list_comments(
        self, post_id: str, page: int = 1, limit: int = 10
    ) -> ApiResult[Page[Comment]]:
        """Fetch one page of a post's comments.

        Served by the post endpoint, which reports ``totalComments``
        rather than a pagination block.

        Args:
            post_id: Post ID
            page: 1-based page number
            limit: Page size

        Returns:
            Result holding the comment page
        """
        pass

    @abstractmethod
    async def list_community_posts(
        self,
        slug: str,
        page: int = 1,
        limit: int = 10,
        sort_by: SortOrder = SortOrder.RECENT,
    ) -> ApiResult[Page[Post]]:
        """Fetch one page of a community's posts.

        Args:
            slug: Community slug
            page: 1-based page number
            limit: Page size
            sort_by: Server-side ordering

        Returns:
            Result holding the post page
        """
        pass

    @abstractmethod
    async def vote_post(self, post_id: str, action: VoteAction) -> ApiResult[VoteSummary]:
        """Toggle a like or dislike on a post."""
        pass

    @abstractmethod
    async def add_comment(
        self, post_id: str, content: str, spoiler: bool = False
    ) -> ApiResult[Post]:
        """Comment on a post.

        Returns:
            Result holding the updated post
        """
        pass

    @abstractmethod
    async def vote_comment(
        self, post_id: str, comment_id: str, action: VoteAction
    ) -> ApiResult[VoteSummary]:
        """Toggle a like or dislike on a comment."""
        pass

    @abstractmethod
    async def add_comment_reply(
        self, post_id: str, comment_id: str, content: str, spoiler: bool = False
    ) -> ApiResult[Post]:
        """Reply to a comment.

        Returns:
            Result holding the updated post
        """
        pass

    @abstractmethod
    async def vote_comment_reply(
        self, post_id: str, comment_id: str, reply_id: str, action: VoteAction
    ) -> ApiResult[VoteSummary]:
        """Toggle a like or dislike on a comment reply."""
        pass

    @abstractmethod
    async def delete_comment(self, post_id: str, comment_id: str) -> ApiResult[None]:
        """Delete a comment."""
        pass
