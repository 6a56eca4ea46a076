# leapwire/dataforseo/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from ..config import BackoffStrategy, BaseApiSettings
from .constants import (
    DATAFORSEO_API_BASE_URL,
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_USER_AGENT,
)


class DataForSEOSettings(BaseApiSettings):
    """
    DataForSEO-specific settings.

    Settings are loaded from environment variables (prefixed with 'DATAFORSEO_')
    or .env/secrets.env files, e.g. ``DATAFORSEO_LOGIN``, ``DATAFORSEO_PASSWORD``.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),
        env_file_encoding="utf-8",
        env_prefix="DATAFORSEO_",
        extra="ignore",
        case_sensitive=False,
    )

    user_agent: str = Field(
        default=DEFAULT_USER_AGENT, description="User-Agent header for requests"
    )
    max_concurrency: int = Field(
        default=DEFAULT_MAX_CONCURRENCY,
        ge=1,
        description="Maximum number of in-flight calls per client instance",
    )
    backoff_strategy: BackoffStrategy = Field(
        default="exponential", description="DataForSEO sends no Retry-After hints"
    )

    # --- DataForSEO-specific Settings ---
    login: str | None = Field(default=None, description="DataForSEO API login")
    password: str | None = Field(default=None, description="DataForSEO API password")
    base_url: str = Field(
        default=DATAFORSEO_API_BASE_URL, description="DataForSEO API base URL"
    )


@lru_cache
def get_dataforseo_settings() -> DataForSEOSettings:
    """
    Provides access to the DataForSEO settings.

    The instance is cached after the first load.

    Returns:
        DataForSEOSettings: The settings instance.
    """
    return DataForSEOSettings()
