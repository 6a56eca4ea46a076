# leapwire/pagespeed/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from ..config import BaseApiSettings

PAGESPEED_API_URL = "https://www.googleapis.com/pagespeedonline/v5/runPagespeed"


class PageSpeedSettings(BaseApiSettings):
    """
    Settings for the PageSpeed Insights client, loaded from 'PAGESPEED_'-prefixed
    environment variables (e.g. ``PAGESPEED_API_KEY``) or .env/secrets.env files.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),
        env_file_encoding="utf-8",
        env_prefix="PAGESPEED_",
        extra="ignore",
        case_sensitive=False,
    )

    # Lighthouse runs take a while
    request_timeout: float = Field(
        default=90.0, description="Default request timeout in seconds"
    )

    api_key: str | None = Field(default=None, description="Google API key")
    base_url: str = Field(
        default=PAGESPEED_API_URL, description="runPagespeed endpoint URL"
    )


@lru_cache
def get_pagespeed_settings() -> PageSpeedSettings:
    return PageSpeedSettings()
