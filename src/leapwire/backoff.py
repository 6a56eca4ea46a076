"""Backoff policies for the retry loop in ``BaseApiClient``.

Two policies are supported and chosen per client through settings:

- ``ExponentialBackoff``: waits ``multiplier * base ** attempt`` seconds and
  ignores any server hint. With the defaults attempt 1 waits 2s and attempt 2
  waits 4s.
- ``ServerGuidedBackoff``: on a 429 that carries an integer ``Retry-After``
  header, waits exactly that long; otherwise (other 429s, 5xx, transport
  errors) doubles from ``initial`` seconds: 1s, 2s, 4s...
"""

from typing import Protocol, runtime_checkable

from .config import BaseApiSettings
from .exceptions import RateLimitError
from .log_config import logger


def parse_retry_after(value: str | None) -> float | None:
    """Parses a ``Retry-After`` header given as integer seconds.

    Returns None when the header is missing or is not a non-negative integer
    (HTTP-date values are not honored).
    """
    if value is None:
        return None
    try:
        seconds = int(value.strip())
    except ValueError:
        logger.debug(f"Ignoring unparseable Retry-After header: {value!r}")
        return None
    if seconds < 0:
        return None
    return float(seconds)


@runtime_checkable
class BackoffPolicy(Protocol):
    """Computes how long to wait before the next attempt."""

    def compute(self, attempt: int, error: BaseException | None) -> float:
        """Returns the delay in seconds.

        Args:
            attempt: Number of attempts already made (1 before the first retry).
            error: The failure that triggered the retry, if any.
        """
        ...


class ExponentialBackoff:
    """Pure exponential backoff from the attempt index."""

    def __init__(self, multiplier: float = 1.0, base: float = 2.0):
        self.multiplier = multiplier
        self.base = base

    def compute(self, attempt: int, error: BaseException | None) -> float:
        return self.multiplier * self.base**attempt

    def __repr__(self) -> str:
        return f"ExponentialBackoff(multiplier={self.multiplier}, base={self.base})"


class ServerGuidedBackoff:
    """Honors ``Retry-After`` on 429, with a doubling fallback."""

    def __init__(self, initial: float = 1.0, factor: float = 2.0):
        self.initial = initial
        self.factor = factor

    def compute(self, attempt: int, error: BaseException | None) -> float:
        if isinstance(error, RateLimitError) and error.response is not None:
            retry_after = parse_retry_after(error.response.headers.get("Retry-After"))
            if retry_after is not None:
                return retry_after
        return self.initial * self.factor ** max(attempt - 1, 0)

    def __repr__(self) -> str:
        return f"ServerGuidedBackoff(initial={self.initial}, factor={self.factor})"


def build_backoff_policy(settings: BaseApiSettings) -> BackoffPolicy:
    """Builds the policy named by ``settings.backoff_strategy``."""
    if settings.backoff_strategy == "server_guided":
        return ServerGuidedBackoff(
            initial=settings.backoff_multiplier, factor=settings.backoff_base
        )
    return ExponentialBackoff(
        multiplier=settings.backoff_multiplier, base=settings.backoff_base
    )
