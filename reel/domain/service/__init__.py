"""Domain services: pure functions over immutable entities and collections."""

from reel.domain.service.mutation import (
    apply_vote,
    apply_vote_summary,
    drop_placeholders,
    find,
    insert_child_optimistic,
    insert_optimistic,
    make_placeholder,
    make_reply_placeholder,
    reconcile,
    remove,
    replace,
    replace_known,
    restore_vote,
    rollback,
    toggle_dislike,
    toggle_like,
    update_where,
)
from reel.domain.service.pagination import (
    compute_has_more,
    dedupe,
    merge_sources,
    merge_unique,
    page_count,
)
from reel.domain.service.validation import (
    COMMENT_MAX_LENGTH,
    REPLY_MAX_LENGTH,
    require_text,
    validate_review_draft,
)

__all__ = [
    # Mutation
    "toggle_like",
    "toggle_dislike",
    "apply_vote",
    "apply_vote_summary",
    "restore_vote",
    "make_placeholder",
    "make_reply_placeholder",
    "insert_optimistic",
    "insert_child_optimistic",
    "find",
    "update_where",
    "replace",
    "replace_known",
    "reconcile",
    "rollback",
    "remove",
    "drop_placeholders",
    # Pagination
    "dedupe",
    "merge_unique",
    "merge_sources",
    "compute_has_more",
    "page_count",
    # Validation
    "require_text",
    "validate_review_draft",
    "REPLY_MAX_LENGTH",
    "COMMENT_MAX_LENGTH",
]
