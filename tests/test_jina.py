"""Tests for the Jina Reader client."""

import pytest

from leapwire.exceptions import ClientError
from leapwire.jina import JinaClient, JinaSettings


@pytest.mark.asyncio
async def test_get_markdown_anonymous(httpx_mock):
    httpx_mock.add_response(text="# Example Domain\n")
    client = JinaClient(JinaSettings(api_key=None))

    markdown = await client.get_markdown("https://example.com/page")

    request = httpx_mock.get_request()
    assert str(request.url) == "https://r.jina.ai/https://example.com/page"
    assert request.headers["Accept"] == "text/markdown"
    assert "Authorization" not in request.headers
    assert markdown == "# Example Domain\n"


@pytest.mark.asyncio
async def test_get_markdown_with_api_key(httpx_mock):
    httpx_mock.add_response(text="")
    client = JinaClient(JinaSettings(), api_key="jina_test")

    markdown = await client.get_markdown("https://example.com")

    assert httpx_mock.get_request().headers["Authorization"] == "Bearer jina_test"
    assert markdown == ""


@pytest.mark.asyncio
async def test_get_markdown_client_error(httpx_mock):
    httpx_mock.add_response(status_code=422, text="invalid url")
    client = JinaClient(JinaSettings(api_key=None))

    with pytest.raises(ClientError) as exc_info:
        await client.get_markdown("not-a-url")

    assert str(exc_info.value).startswith("jina: HTTP 422: invalid url")
