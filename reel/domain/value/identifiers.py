"""Identifiers for Reel entities.

The backend issues opaque string ids (document ids). Locally-synthesized
placeholders use the same type with a recognizable prefix.
"""

import secrets
import time
from typing import NewType

UserId = NewType("UserId", str)
EntityId = NewType("EntityId", str)

# Prefix of locally-synthesized placeholder ids
TEMP_ID_PREFIX = "temp-"


def new_temp_id(prefix: str = TEMP_ID_PREFIX) -> EntityId:
    """Create a placeholder id.

    Millisecond timestamp plus a random suffix, so two placeholders
    created in the same millisecond never collide.
    """
    return EntityId(f"{prefix}{int(time.time() * 1000)}-{secrets.token_hex(3)}")


def is_temp_id(entity_id: str, prefix: str = TEMP_ID_PREFIX) -> bool:
    """Whether an id belongs to an optimistic placeholder."""
    return entity_id.startswith(prefix)
