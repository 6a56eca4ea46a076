# leapwire/config.py
from typing import Any, Literal, TypeVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BackoffStrategy = Literal["exponential", "server_guided"]


class BaseApiSettings(BaseSettings):
    """
    Generic settings shared by every leapwire client, primarily loaded from
    environment variables or a .env file.

    Provider-specific settings classes inherit from this one, set their own
    ``env_prefix`` and override the defaults that differ per provider
    (concurrency, timeout, backoff strategy).
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),
        env_file_encoding="utf-8",
        env_prefix="LEAPWIRE_",
        extra="ignore",
        case_sensitive=False,
    )

    # --- Client Behavior Settings ---
    request_timeout: float = Field(
        default=30.0, description="Default request timeout in seconds"
    )
    max_attempts: int = Field(
        default=3,
        ge=1,
        description="Maximum number of attempts per call, including the first one",
    )
    max_concurrency: int = Field(
        default=5,
        ge=1,
        description="Maximum number of in-flight calls per client instance",
    )
    user_agent: str = Field(
        default="leapwire/0.1.0",
        description="User-Agent header for requests",
    )

    # --- Backoff Settings ---
    backoff_strategy: BackoffStrategy = Field(
        default="exponential",
        description=(
            "'exponential' waits multiplier * base**attempt; 'server_guided' honors "
            "Retry-After on 429 and otherwise doubles from the multiplier"
        ),
    )
    backoff_multiplier: float = Field(
        default=1.0, ge=0, description="Backoff scale in seconds"
    )
    backoff_base: float = Field(
        default=2.0, ge=1, description="Growth factor between consecutive waits"
    )


SettingsT = TypeVar("SettingsT", bound=BaseApiSettings)


def apply_overrides(settings: SettingsT, **overrides: Any) -> SettingsT:
    """Returns a copy of ``settings`` with every non-None override applied.

    Client constructors use this so that omitted keyword arguments keep the
    configured defaults and explicit ones always win. The original settings
    object (often a cached, shared instance) is never mutated.
    """
    update = {key: value for key, value in overrides.items() if value is not None}
    if not update:
        return settings
    return settings.model_copy(update=update)

