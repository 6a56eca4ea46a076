"""Tests for the backoff policies."""

import httpx
import pytest

from leapwire.backoff import (
    ExponentialBackoff,
    ServerGuidedBackoff,
    build_backoff_policy,
    parse_retry_after,
)
from leapwire.config import BaseApiSettings
from leapwire.exceptions import RateLimitError, ServerError


def _rate_limit_error(headers: dict[str, str] | None = None) -> RateLimitError:
    response = httpx.Response(
        429,
        headers=headers or {},
        request=httpx.Request("GET", "https://api.example.com"),
    )
    return RateLimitError("HTTP 429: ", response=response)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("1", 1.0), (" 30 ", 30.0), ("0", 0.0), (None, None), ("-5", None), ("soon", None)],
)
def test_parse_retry_after(value, expected):
    assert parse_retry_after(value) == expected


def test_parse_retry_after_ignores_http_dates():
    assert parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT") is None


def test_exponential_backoff_defaults():
    policy = ExponentialBackoff()
    assert policy.compute(1, None) == 2.0
    assert policy.compute(2, None) == 4.0


def test_exponential_backoff_ignores_retry_after():
    policy = ExponentialBackoff(multiplier=0.5)
    error = _rate_limit_error({"Retry-After": "10"})
    assert policy.compute(1, error) == 1.0


def test_server_guided_honors_retry_after():
    policy = ServerGuidedBackoff()
    assert policy.compute(1, _rate_limit_error({"Retry-After": "7"})) == 7.0


def test_server_guided_fallback_doubles():
    policy = ServerGuidedBackoff(initial=1.0)
    server_error = ServerError("HTTP 503: ")
    assert policy.compute(1, server_error) == 1.0
    assert policy.compute(2, server_error) == 2.0
    assert policy.compute(3, server_error) == 4.0
    # 429 without a usable header falls back as well
    assert policy.compute(2, _rate_limit_error()) == 2.0
    assert policy.compute(1, _rate_limit_error({"Retry-After": "later"})) == 1.0


def test_build_backoff_policy_from_settings():
    exponential = build_backoff_policy(BaseApiSettings(backoff_multiplier=0.25))
    assert isinstance(exponential, ExponentialBackoff)
    assert exponential.multiplier == 0.25

    guided = build_backoff_policy(BaseApiSettings(backoff_strategy="server_guided"))
    assert isinstance(guided, ServerGuidedBackoff)
