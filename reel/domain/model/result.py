"""Result envelope and page models shared by every backend call."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class ApiResult(BaseModel, Generic[T]):
    """Outcome of a backend call.

    Expected failures (transport errors, ``success: false`` bodies,
    malformed responses) are reported here instead of raised.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool
    data: T | None = None
    message: str | None = None

    @classmethod
    def ok(cls, data: T | None = None, message: str | None = None) -> "ApiResult[T]":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str) -> "ApiResult[T]":
        return cls(success=False, message=message)


class Page(BaseModel, Generic[T]):
    """One page of a paginated collection.

    ``pages`` is the server-reported total page count; it alone decides
    whether more pages exist.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: tuple[T, ...] = ()
    page: int
    pages: int
    total: int | None = None
