"""Tests for the BaseApiClient retry executor."""

import asyncio
import time

import httpx
import pytest

from leapwire.backoff import ExponentialBackoff, ServerGuidedBackoff
from leapwire.client import BaseApiClient
from leapwire.config import BaseApiSettings
from leapwire.exceptions import (
    APIError,
    ClientError,
    DecodeError,
    NetworkError,
    RetriesExhaustedError,
    TimeoutError,
)

BASE_URL = "https://api.example.com"


def _client_with_handler(handler, settings: BaseApiSettings, **kwargs) -> BaseApiClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler), timeout=30)
    return BaseApiClient(
        settings, base_url=BASE_URL, provider="example", http_client=http_client, **kwargs
    )


@pytest.fixture
def base_api_client(fast_settings: BaseApiSettings) -> BaseApiClient:
    """Fixture for a BaseApiClient whose transport is mocked by pytest-httpx."""
    return BaseApiClient(fast_settings, base_url=BASE_URL, provider="example")


@pytest.mark.asyncio
async def test_request_success(base_api_client: BaseApiClient, httpx_mock):
    httpx_mock.add_response(url=f"{BASE_URL}/test", json={"status": "ok"})

    response = await base_api_client.request("GET", "/test")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert base_api_client.gate.in_flight == 0


@pytest.mark.asyncio
async def test_request_with_retry_failure_then_success(
    base_api_client: BaseApiClient, httpx_mock
):
    """A 500 followed by a 200 succeeds on the second attempt."""
    httpx_mock.add_response(status_code=500)
    httpx_mock.add_response(status_code=200, json={"status": "ok"})

    response = await base_api_client.request("GET", "/test")

    assert response.json() == {"status": "ok"}
    assert len(httpx_mock.get_requests()) == 2


@pytest.mark.asyncio
async def test_server_errors_exhaust_attempts(base_api_client: BaseApiClient, httpx_mock):
    """Three 503s produce exactly three attempts and an exhausted error."""
    httpx_mock.add_response(status_code=503, text="upstream down", is_reusable=True)

    with pytest.raises(RetriesExhaustedError) as exc_info:
        await base_api_client.request("GET", "/test")

    err = exc_info.value
    assert err.attempts == 3
    assert len(httpx_mock.get_requests()) == 3
    assert "max retries exceeded after 3 attempts" in err.message
    assert "HTTP 503: upstream down" in err.message
    assert str(err).startswith("example: ")
    assert err.status_code == 503
    assert err.__cause__ is err.last_error
    assert base_api_client.gate.in_flight == 0


@pytest.mark.asyncio
async def test_exhausted_foreign_error_is_reraised(fast_settings: BaseApiSettings):
    """An error outside the leapwire tree is re-raised as-is once attempts run out."""

    class RetryEverythingClient(BaseApiClient):
        def _should_retry_request(self, retry_state) -> bool:
            return retry_state.outcome is not None and retry_state.outcome.failed

    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        raise ValueError("handler blew up")

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = RetryEverythingClient(
        fast_settings, base_url=BASE_URL, provider="example", http_client=http_client
    )

    with pytest.raises(ValueError, match="handler blew up"):
        await client.request("GET", "/test")

    assert calls == 3
    await http_client.aclose()


@pytest.mark.asyncio
async def test_client_error_is_not_retried(base_api_client: BaseApiClient, httpx_mock):
    httpx_mock.add_response(status_code=404, text="not found")

    with pytest.raises(ClientError, match="HTTP 404: not found"):
        await base_api_client.request("GET", "/missing")

    assert len(httpx_mock.get_requests()) == 1


@pytest.mark.asyncio
async def test_redirect_status_is_an_api_error(base_api_client: BaseApiClient, httpx_mock):
    httpx_mock.add_response(status_code=304)

    with pytest.raises(APIError, match="HTTP 304"):
        await base_api_client.request("GET", "/test")

    assert len(httpx_mock.get_requests()) == 1


@pytest.mark.asyncio
async def test_long_error_body_is_truncated(base_api_client: BaseApiClient, httpx_mock):
    httpx_mock.add_response(status_code=400, text="x" * 1000)

    with pytest.raises(ClientError) as exc_info:
        await base_api_client.request("GET", "/test")

    assert exc_info.value.message == "HTTP 400: " + "x" * 200 + "..."


@pytest.mark.asyncio
async def test_network_error_is_retried(base_api_client: BaseApiClient, httpx_mock):
    httpx_mock.add_exception(httpx.ConnectError("connection refused"))
    httpx_mock.add_response(json={"status": "ok"})

    response = await base_api_client.request("GET", "/test")

    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_timeouts_exhaust_attempts(base_api_client: BaseApiClient, httpx_mock):
    httpx_mock.add_exception(httpx.ReadTimeout("timed out"), is_reusable=True)

    with pytest.raises(RetriesExhaustedError) as exc_info:
        await base_api_client.request("GET", "/slow")

    assert isinstance(exc_info.value.last_error, TimeoutError)
    assert exc_info.value.attempts == 3


@pytest.mark.asyncio
async def test_connection_errors_become_network_errors(
    base_api_client: BaseApiClient, httpx_mock
):
    httpx_mock.add_exception(httpx.RemoteProtocolError("peer closed"), is_reusable=True)

    with pytest.raises(RetriesExhaustedError) as exc_info:
        await base_api_client.request("GET", "/test")

    assert isinstance(exc_info.value.last_error, NetworkError)


@pytest.mark.asyncio
async def test_retry_after_is_honored(fast_settings: BaseApiSettings):
    """A 429 with ``Retry-After: 1`` delays the next attempt by about a second."""
    attempts: list[float] = []

    def handler(request: httpx.Request) -> httpx.Response:
        attempts.append(time.monotonic())
        if len(attempts) == 1:
            return httpx.Response(429, headers={"Retry-After": "1"}, text="slow down")
        return httpx.Response(200, json={"status": "ok"})

    client = _client_with_handler(
        handler, fast_settings, backoff_policy=ServerGuidedBackoff(initial=0.0)
    )
    response = await client.request("GET", "/test")

    assert response.status_code == 200
    assert len(attempts) == 2
    delay = attempts[1] - attempts[0]
    assert 0.9 <= delay < 3.0


@pytest.mark.asyncio
async def test_cancel_during_backoff_returns_promptly(fast_settings: BaseApiSettings):
    """Cancelling the caller interrupts a long backoff sleep and frees the gate."""
    attempts = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal attempts
        attempts += 1
        return httpx.Response(503)

    client = _client_with_handler(
        handler, fast_settings, backoff_policy=ExponentialBackoff(multiplier=30.0)
    )
    task = asyncio.create_task(client.request("GET", "/test"))
    await asyncio.sleep(0.1)

    started = time.monotonic()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert time.monotonic() - started < 1.0
    assert attempts == 1
    assert client.gate.in_flight == 0


@pytest.mark.asyncio
async def test_caller_deadline_cancels_request(fast_settings: BaseApiSettings):
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(10)
        return httpx.Response(200)

    client = _client_with_handler(handler, fast_settings)
    with pytest.raises(asyncio.TimeoutError):
        async with asyncio.timeout(0.1):
            await client.request("GET", "/test")

    assert client.gate.in_flight == 0


@pytest.mark.asyncio
async def test_gate_bounds_concurrent_requests():
    settings = BaseApiSettings(max_concurrency=2, backoff_multiplier=0.0)
    active = 0
    peak = 0

    async def handler(request: httpx.Request) -> httpx.Response:
        nonlocal active, peak
        active += 1
        peak = max(peak, active)
        await asyncio.sleep(0.02)
        active -= 1
        return httpx.Response(200, json={})

    client = _client_with_handler(handler, settings)
    await asyncio.gather(*(client.request("GET", f"/item/{i}") for i in range(10)))

    assert peak == 2


@pytest.mark.asyncio
async def test_per_request_timeout_overrides_client_default(
    fast_settings: BaseApiSettings,
):
    seen_timeouts: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_timeouts.append(request.extensions["timeout"])
        return httpx.Response(200)

    client = _client_with_handler(handler, fast_settings)
    await client.request("GET", "/default")
    await client.request("GET", "/long", timeout=300)

    assert seen_timeouts[0]["read"] == 30
    assert seen_timeouts[1]["read"] == 300


@pytest.mark.asyncio
async def test_empty_path_targets_base_url(base_api_client: BaseApiClient, httpx_mock):
    httpx_mock.add_response(json={})

    await base_api_client.request("GET", "")

    request = httpx_mock.get_request()
    assert request.url.host == "api.example.com"
    assert request.url.path == "/"


@pytest.mark.asyncio
async def test_decode_json_failure(base_api_client: BaseApiClient):
    response = httpx.Response(200, text="<html>", request=httpx.Request("GET", BASE_URL))

    with pytest.raises(DecodeError, match="decode widgets response"):
        base_api_client.decode_json(response, "widgets")


def test_decode_model_validates_container_types(base_api_client: BaseApiClient):
    assert base_api_client.decode_model(list[int], ["1", 2], "numbers") == [1, 2]
    with pytest.raises(DecodeError, match="decode numbers"):
        base_api_client.decode_model(list[int], {"not": "a list"}, "numbers")


@pytest.mark.asyncio
async def test_owned_http_client_closed(fast_settings: BaseApiSettings):
    async with BaseApiClient(fast_settings, base_url=BASE_URL) as client:
        http_client = client._http_client
    assert http_client.is_closed


@pytest.mark.asyncio
async def test_external_http_client_left_open(fast_settings: BaseApiSettings):
    external = httpx.AsyncClient()
    async with BaseApiClient(fast_settings, base_url=BASE_URL, http_client=external):
        pass
    assert not external.is_closed
    await external.aclose()
