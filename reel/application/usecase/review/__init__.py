"""Review use cases."""

from .create_review import CreateReviewRequest, CreateReviewUseCase, ReviewResponse
from .edit_review import EditReviewRequest, EditReviewUseCase

__all__ = [
    "CreateReviewRequest",
    "CreateReviewUseCase",
    "EditReviewRequest",
    "EditReviewUseCase",
    "ReviewResponse",
]
