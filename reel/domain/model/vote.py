"""Vote summary returned by like/dislike endpoints."""

from reel.domain.model.common import DomainModel


class VoteSummary(DomainModel):
    """Authoritative vote state after a like/dislike request.

    Only the acting user's membership can be reconstructed from it;
    ``likes``/``dislikes`` are totals across all users.
    """

    likes: int = 0
    dislikes: int = 0
    user_liked: bool = False
    user_disliked: bool = False
