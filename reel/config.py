"""Client configuration."""

from typing import Literal

from pydantic import BaseModel, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseModel):
    """Backend API configuration."""

    # Base URL of the platform API (all endpoint paths are relative to it)
    base_url: str = "http://localhost:3000/api"

    # Per-request timeout. Requests are never cancelled early.
    timeout_seconds: float = 10.0

    # Bearer token issued by the surrounding application (optional)
    # Can be set via API__TOKEN env var
    token: str | None = None

    @computed_field
    @property
    def headers(self) -> dict[str, str]:
        """Default headers sent with every request."""
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers


class PaginationSettings(BaseModel):
    """Page sizes for paginated collections."""

    # Reviews, community posts
    page_size: int = 10

    # Comments under a post (served with the post itself)
    comments_page_size: int = 10


class OptimisticSettings(BaseModel):
    """Optimistic mutation configuration."""

    # Prefix that marks locally-synthesized ids
    # Server ids never start with it
    temp_id_prefix: str = "temp-"

    # Reload the parent resource after a failed mutation
    # When False only the local compensating action is applied
    refetch_on_failure: bool = True


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Client settings.

    Set environment variables to override, using ``__`` for nested values:

        API__BASE_URL=https://reel.example.com/api
        API__TOKEN=<bearer token>
        PAGINATION__PAGE_SIZE=20
        OPTIMISTIC__REFETCH_ON_FAILURE=false
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows API__BASE_URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    api: ApiSettings = ApiSettings()
    pagination: PaginationSettings = PaginationSettings()
    optimistic: OptimisticSettings = OptimisticSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def normalize_base_url(self) -> "Settings":
        """Strip the trailing slash so paths join cleanly."""
        self.api.base_url = self.api.base_url.rstrip("/")
        return self
