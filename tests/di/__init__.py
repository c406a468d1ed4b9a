"""Mock providers for testing."""

from .api import VIEWER_ID, MockApiProvider
from .container import build_test_container

__all__ = [
    "MockApiProvider",
    "VIEWER_ID",
    "build_test_container",
]
