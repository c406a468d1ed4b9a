"""Domain value objects for Reel."""

from reel.domain.value.identifiers import (
    TEMP_ID_PREFIX,
    EntityId,
    UserId,
    is_temp_id,
    new_temp_id,
)
from reel.domain.value.types import (
    CompositeKey,
    EntityRef,
    InsertPosition,
    LoaderStatus,
    MediaType,
    SortOrder,
    VotableType,
    VoteAction,
)

__all__ = [
    # Identifiers
    "UserId",
    "EntityId",
    "TEMP_ID_PREFIX",
    "is_temp_id",
    "new_temp_id",
    # Types
    "CompositeKey",
    "EntityRef",
    "InsertPosition",
    "LoaderStatus",
    "MediaType",
    "SortOrder",
    "VotableType",
    "VoteAction",
]
