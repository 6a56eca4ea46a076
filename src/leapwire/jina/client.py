import httpx

from ..auth import NoAuth, StaticTokenAuth
from ..backoff import BackoffPolicy
from ..client import BaseApiClient
from ..config import apply_overrides
from ..log_config import logger
from .config import JinaSettings, get_jina_settings


class JinaClient(BaseApiClient):
    """Client for the Jina Reader API, which converts any URL to markdown.

    ``GET <reader base URL><target URL>`` with ``Accept: text/markdown``; the
    response is plain text, not JSON. The API key is optional and sent as a
    Bearer token when configured.
    """

    provider_name = "jina"

    def __init__(
        self,
        settings: JinaSettings | None = None,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        max_concurrency: int | None = None,
        backoff_policy: BackoffPolicy | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        resolved = apply_overrides(
            settings or get_jina_settings(),
            api_key=api_key,
            base_url=base_url,
            request_timeout=timeout,
            max_concurrency=max_concurrency,
        )
        if resolved.api_key:
            auth_strategy = StaticTokenAuth(resolved.api_key)
        else:
            logger.info("No Jina API key configured, using anonymous access.")
            auth_strategy = NoAuth()
        super().__init__(
            resolved,
            auth_strategy,
            base_url=resolved.base_url,
            http_client=http_client,
            backoff_policy=backoff_policy,
        )

    async def get_markdown(self, url: str) -> str:
        """Returns the content of ``url`` as markdown (possibly empty)."""
        logger.info(f"Fetching markdown for {url} via Jina Reader")
        response = await self.request(
            "GET", url, headers={"Accept": "text/markdown"}
        )
        return response.text
