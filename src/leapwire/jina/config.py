# leapwire/jina/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from ..config import BackoffStrategy, BaseApiSettings

JINA_READER_BASE_URL = "https://r.jina.ai/"


class JinaSettings(BaseApiSettings):
    """
    Settings for the Jina Reader client, loaded from 'JINA_'-prefixed
    environment variables (e.g. ``JINA_API_KEY``) or .env/secrets.env files.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),
        env_file_encoding="utf-8",
        env_prefix="JINA_",
        extra="ignore",
        case_sensitive=False,
    )

    backoff_strategy: BackoffStrategy = Field(default="server_guided")

    api_key: str | None = Field(
        default=None,
        description="Jina API key (optional, raises the rate limit when set)",
    )
    base_url: str = Field(
        default=JINA_READER_BASE_URL, description="Reader base URL"
    )


@lru_cache
def get_jina_settings() -> JinaSettings:
    return JinaSettings()
