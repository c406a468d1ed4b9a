"""Comment use cases."""

from .submit_comment import (
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
)
from .submit_reply import SubmitReplyRequest, SubmitReplyResponse, SubmitReplyUseCase

__all__ = [
    "SubmitCommentRequest",
    "SubmitCommentResponse",
    "SubmitCommentUseCase",
    "SubmitReplyRequest",
    "SubmitReplyResponse",
    "SubmitReplyUseCase",
]
