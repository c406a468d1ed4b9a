"""Vote use cases."""

from .cast_vote import VoteRequest, VoteResponse, VoteUseCase

__all__ = [
    "VoteRequest",
    "VoteResponse",
    "VoteUseCase",
]
