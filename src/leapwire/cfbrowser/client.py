import httpx
from pydantic import BaseModel

from ..backoff import BackoffPolicy
from ..client import BaseApiClient
from ..config import apply_overrides
from ..exceptions import ConfigurationError
from ..log_config import logger
from .config import BrowserRenderingSettings, get_browser_rendering_settings
from .models import (
    LinksRequest,
    LinksResponse,
    MarkdownRequest,
    MarkdownResponse,
    ScrapeRequest,
    ScrapeResponse,
)


class BrowserRenderingClient(BaseApiClient):
    """Client for a browser rendering worker.

    The worker renders a page in a headless browser and returns markdown,
    links or scraped selector text. Requests are single JSON objects (not
    array-wrapped). Rate limiting answers 429 with ``Retry-After``, which the
    default server-guided backoff honors.
    """

    provider_name = "cfbrowser"

    def __init__(
        self,
        settings: BrowserRenderingSettings | None = None,
        *,
        worker_url: str | None = None,
        timeout: float | None = None,
        max_concurrency: int | None = None,
        backoff_policy: BackoffPolicy | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initializes the BrowserRenderingClient.

        Args:
            settings: Optional settings; defaults to the ``CFBROWSER_*`` environment.
            worker_url: Base URL of the worker.
            timeout: Request timeout override in seconds.
            max_concurrency: Gate capacity override (default 10).
            backoff_policy: Backoff policy override.
            http_client: Optional externally owned httpx.AsyncClient.

        Raises:
            ConfigurationError: If no worker URL is configured.
        """
        resolved = apply_overrides(
            settings or get_browser_rendering_settings(),
            worker_url=worker_url,
            request_timeout=timeout,
            max_concurrency=max_concurrency,
        )
        if not resolved.worker_url:
            raise ConfigurationError(
                "a worker URL is required", provider=self.provider_name
            )
        super().__init__(
            resolved,
            base_url=resolved.worker_url,
            http_client=http_client,
            backoff_policy=backoff_policy,
        )

    async def _post(
        self, path: str, body: BaseModel, response_model: type[BaseModel], what: str
    ):
        response = await self.request(
            "POST", path, json_data=body.model_dump(mode="json")
        )
        payload = self.decode_json(response, what)
        return self.decode_model(response_model, payload, f"{what} response")

    async def get_markdown(self, url: str) -> MarkdownResponse:
        """Fetches ``url`` and returns its content as clean markdown."""
        logger.info(f"Rendering markdown for {url}")
        return await self._post(
            "/markdown", MarkdownRequest(url=url), MarkdownResponse, "markdown"
        )

    async def get_links(self, url: str) -> LinksResponse:
        """Fetches ``url`` and returns every link found on it."""
        return await self._post("/links", LinksRequest(url=url), LinksResponse, "links")

    async def scrape(self, url: str, selectors: dict[str, str]) -> ScrapeResponse:
        """Fetches ``url`` and extracts the text matched by each CSS selector."""
        return await self._post(
            "/scrape",
            ScrapeRequest(url=url, selectors=selectors),
            ScrapeResponse,
            "scrape",
        )
