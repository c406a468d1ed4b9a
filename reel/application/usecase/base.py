"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict

from reel.application.state import ThreadState


class BaseUseCase(ABC):
    """Base use case for orchestrating an optimistic mutation."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class ThreadRequest(BaseModel):
    """Request that mutates a local collection."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    state: ThreadState


class MutationResponse(BaseModel):
    """Outcome of an optimistic mutation.

    ``message`` carries the server's error message on failure, for
    display to the user.
    """

    success: bool
    message: str | None = None
