"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from reel.config import ApiSettings, OptimisticSettings, PaginationSettings, Settings
from reel.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide client settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_api_settings(self, settings: Settings) -> ApiSettings:
        return settings.api

    @provide(scope=Scope.APP)
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        return settings.pagination

    @provide(scope=Scope.APP)
    def provide_optimistic_settings(self, settings: Settings) -> OptimisticSettings:
        return settings.optimistic
