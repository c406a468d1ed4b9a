"""Unit tests for provider selection."""

import subprocess
import sys
from pathlib import Path

import pytest

from reel.util.di import ApiProvider, ProdApiProvider, ProdConfigProvider, get_provider
from reel.util.di.base import ProviderBase
from reel.util.error import DependencyInjectionError
from tests.di import MockApiProvider, build_test_container


class OrphanProvider(ProviderBase):
    """Mockable component with only a mock implementation."""

    __mock_component__ = "orphan"


class MockOnlyProvider(OrphanProvider):
    __is_mock__ = True


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_used_directly(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_production_implementation(self):
        assert get_provider(ApiProvider, use_mock=False) is ProdApiProvider

    def test_mock_implementation(self):
        assert get_provider(ApiProvider, use_mock=True) is MockApiProvider

    def test_missing_implementation(self):
        with pytest.raises(DependencyInjectionError, match="No production implementation for orphan"):
            get_provider(OrphanProvider, use_mock=False)


class TestBuildTestContainer:
    """Tests for the test container builder."""

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"database"})


class TestImport:
    """Tests for importing the container modules."""

    def test_container_imports_in_fresh_interpreter(self):
        """Generic models parameterized by the loader must build at import time."""
        # Arrange
        root = Path(__file__).parents[3]

        # Act
        result = subprocess.run(
            [
                sys.executable,
                "-c",
                "import reel.util.di, reel.application.loader, reel.interface.session",
            ],
            cwd=root,
            capture_output=True,
            text=True,
        )

        # Assert
        assert result.returncode == 0, result.stderr
