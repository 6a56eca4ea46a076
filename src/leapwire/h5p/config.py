# leapwire/h5p/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from ..config import BaseApiSettings

H5P_HUB_URL = "https://hub-api.h5p.org"
H5P_CORE_API_VERSION = "1.26"


class H5PHubSettings(BaseApiSettings):
    """
    Settings for the H5P Hub client, loaded from 'H5P_HUB_'-prefixed
    environment variables or .env/secrets.env files.

    The platform fields identify this installation to the Hub when listing
    content types.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),
        env_file_encoding="utf-8",
        env_prefix="H5P_HUB_",
        extra="ignore",
        case_sensitive=False,
    )

    hub_url: str = Field(default=H5P_HUB_URL, description="H5P Hub API base URL")
    download_timeout: float = Field(
        default=300.0, description="Timeout in seconds for package downloads"
    )

    platform_uuid: str = Field(default="leaplearn-platform")
    platform_name: str = Field(default="LeapLearn")
    platform_version: str = Field(default="1.0")
    h5p_version: str = Field(default=H5P_CORE_API_VERSION)
    core_api_version: str = Field(default=H5P_CORE_API_VERSION)


@lru_cache
def get_h5p_hub_settings() -> H5PHubSettings:
    return H5PHubSettings()
