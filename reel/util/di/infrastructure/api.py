"""Backend API infrastructure providers."""

from collections.abc import AsyncIterator

import httpx
import logfire
from dishka import Scope, provide

from reel.adapter.api import (
    ApiClient,
    HttpMediaRepository,
    HttpPostRepository,
    HttpReviewRepository,
)
from reel.config import ApiSettings
from reel.domain.repository import MediaRepository, PostRepository, ReviewRepository
from reel.util.di.base import ProviderBase
from reel.util.error import ConfigurationError


class ApiProvider(ProviderBase):
    """Backend API component base."""

    __mock_component__ = "api"


class ProdApiProvider(ApiProvider):
    """Production API provider talking HTTP to the platform backend."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_http_client(
        self, settings: ApiSettings
    ) -> AsyncIterator[httpx.AsyncClient]:
        """Provide the shared HTTP client, closed with the container.

        Raises:
            ConfigurationError: If the API base URL is not configured
        """
        if not settings.base_url:
            raise ConfigurationError("API base URL must be configured")

        async with httpx.AsyncClient(
            base_url=settings.base_url,
            headers=settings.headers,
            timeout=settings.timeout_seconds,
        ) as client:
            logfire.info("HTTP client opened", base_url=settings.base_url)
            yield client

    @provide(scope=Scope.APP)
    def get_api_client(self, http: httpx.AsyncClient) -> ApiClient:
        """Provide API client."""
        return ApiClient(http)

    @provide(scope=Scope.APP)
    def get_review_repository(self, client: ApiClient) -> ReviewRepository:
        """Provide Review repository."""
        return HttpReviewRepository(client)

    @provide(scope=Scope.APP)
    def get_post_repository(self, client: ApiClient) -> PostRepository:
        """Provide Post repository."""
        return HttpPostRepository(client)

    @provide(scope=Scope.APP)
    def get_media_repository(self, client: ApiClient) -> MediaRepository:
        """Provide Media repository."""
        return HttpMediaRepository(client)
