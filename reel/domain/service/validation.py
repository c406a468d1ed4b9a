"""Input checks applied before any request is dispatched."""

from reel.domain.error import ValidationError
from reel.domain.model import ReviewDraft

REPLY_MAX_LENGTH = 1000
COMMENT_MAX_LENGTH = 2000
REVIEW_TITLE_MAX_LENGTH = 500
REVIEW_CONTENT_MIN_LENGTH = 10
REVIEW_CONTENT_MAX_LENGTH = 5000


def require_text(
    text: str,
    *,
    field: str = "content",
    min_length: int = 1,
    max_length: int | None = None,
) -> str:
    """Return the stripped text or raise if it is empty or out of bounds.

    Raises:
        ValidationError: If the text is blank, too short or too long
    """
    stripped = text.strip()
    label = field.capitalize()
    if not stripped:
        raise ValidationError(f"{label} is required")
    if len(stripped) < min_length:
        raise ValidationError(f"{label} must be at least {min_length} characters")
    if max_length is not None and len(stripped) > max_length:
        raise ValidationError(f"{label} cannot exceed {max_length} characters")
    return stripped


def validate_review_draft(draft: ReviewDraft) -> ReviewDraft:
    """Check a review draft and return it with trimmed text.

    Raises:
        ValidationError: If rating, title or content are invalid
    """
    if not 0 <= draft.rating <= 10:
        raise ValidationError("Rating must be between 0 and 10")
    title = require_text(draft.title, field="title", max_length=REVIEW_TITLE_MAX_LENGTH)
    content = require_text(
        draft.content,
        field="review",
        min_length=REVIEW_CONTENT_MIN_LENGTH,
        max_length=REVIEW_CONTENT_MAX_LENGTH,
    )
    return draft.model_copy(update={"title": title, "content": content})
