# leapwire/cfbrowser/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from ..config import BackoffStrategy, BaseApiSettings


class BrowserRenderingSettings(BaseApiSettings):
    """
    Settings for the browser rendering worker client.

    Loaded from environment variables prefixed with 'CFBROWSER_' (e.g.
    ``CFBROWSER_WORKER_URL``) or .env/secrets.env files.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),
        env_file_encoding="utf-8",
        env_prefix="CFBROWSER_",
        extra="ignore",
        case_sensitive=False,
    )

    max_concurrency: int = Field(
        default=10,
        ge=1,
        description="Maximum number of in-flight calls per client instance",
    )
    backoff_strategy: BackoffStrategy = Field(
        default="server_guided",
        description="The worker sends Retry-After on 429",
    )

    worker_url: str | None = Field(
        default=None, description="Base URL of the browser rendering worker"
    )


@lru_cache
def get_browser_rendering_settings() -> BrowserRenderingSettings:
    """Cached access to the browser rendering settings."""
    return BrowserRenderingSettings()
