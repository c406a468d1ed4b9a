"""Base model for all domain entities."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DomainModel(BaseModel):
    """Base class for all domain models.

    Models are immutable: every optimistic change produces a new instance.
    Field names are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,
        alias_generator=to_camel,
        populate_by_name=True,  # Accept both createdAt and created_at
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize with wire (camelCase) field names."""
        return self.model_dump(mode="json", by_alias=True)
