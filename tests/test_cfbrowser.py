"""Tests for the browser rendering worker client."""

import json

import pytest

from leapwire.cfbrowser import BrowserRenderingClient, BrowserRenderingSettings
from leapwire.exceptions import ConfigurationError, DecodeError, RetriesExhaustedError

WORKER_URL = "https://render.example.workers.dev"


@pytest.fixture
def client() -> BrowserRenderingClient:
    settings = BrowserRenderingSettings(
        worker_url=WORKER_URL, backoff_multiplier=0.0, max_attempts=2
    )
    return BrowserRenderingClient(settings)


def test_worker_url_required():
    with pytest.raises(ConfigurationError, match="a worker URL is required"):
        BrowserRenderingClient(BrowserRenderingSettings(worker_url=None))


def test_defaults():
    client = BrowserRenderingClient(BrowserRenderingSettings(worker_url=WORKER_URL))
    assert client.gate.capacity == 10
    assert client.provider == "cfbrowser"


@pytest.mark.asyncio
async def test_get_markdown(client: BrowserRenderingClient, httpx_mock):
    httpx_mock.add_response(
        method="POST",
        url=f"{WORKER_URL}/markdown",
        json={"content": "# Example", "title": "Example", "url": "https://example.com"},
    )

    result = await client.get_markdown("https://example.com")

    assert result.content == "# Example"
    assert result.title == "Example"
    assert json.loads(httpx_mock.get_request().content) == {"url": "https://example.com"}


@pytest.mark.asyncio
async def test_get_links_null_list(client: BrowserRenderingClient, httpx_mock):
    httpx_mock.add_response(url=f"{WORKER_URL}/links", json={"links": None})

    result = await client.get_links("https://example.com")

    assert result.links is None


@pytest.mark.asyncio
async def test_scrape(client: BrowserRenderingClient, httpx_mock):
    httpx_mock.add_response(
        url=f"{WORKER_URL}/scrape",
        json={"data": {"heading": "Hello"}, "url": "https://example.com"},
    )

    result = await client.scrape("https://example.com", {"heading": "h1"})

    assert result.data == {"heading": "Hello"}
    assert json.loads(httpx_mock.get_request().content) == {
        "url": "https://example.com",
        "selectors": {"heading": "h1"},
    }


@pytest.mark.asyncio
async def test_invalid_json(client: BrowserRenderingClient, httpx_mock):
    httpx_mock.add_response(text="<html>oops</html>")

    with pytest.raises(DecodeError, match="decode markdown response"):
        await client.get_markdown("https://example.com")


@pytest.mark.asyncio
async def test_rate_limited_then_exhausted(client: BrowserRenderingClient, httpx_mock):
    httpx_mock.add_response(status_code=429, headers={"Retry-After": "0"}, is_reusable=True)

    with pytest.raises(RetriesExhaustedError) as exc_info:
        await client.get_markdown("https://example.com")

    assert exc_info.value.attempts == 2
    assert "HTTP 429" in str(exc_info.value)
