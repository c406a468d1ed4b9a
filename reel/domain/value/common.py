"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable, hashable and compared by value, which
    lets them key dictionaries (composite keys, in-flight guards).
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )
