"""Thread use cases."""

from .delete_item import DeleteRequest, DeleteUseCase
from .refetch import RefetchRequest, RefetchUseCase

__all__ = [
    "DeleteRequest",
    "DeleteUseCase",
    "RefetchRequest",
    "RefetchUseCase",
]
