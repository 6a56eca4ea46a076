from collections.abc import Mapping, Sequence
from typing import Any

import httpx
from pydantic import BaseModel

from ..auth import AuthStrategy, BasicAuth
from ..backoff import BackoffPolicy
from ..client import BaseApiClient
from ..config import apply_overrides
from ..log_config import logger
from .config import DataForSEOSettings, get_dataforseo_settings
from .envelope import ResponseEnvelope, decode_envelope
from .resources import BacklinksClient, KeywordsClient, LabsClient, OnPageClient

Payload = BaseModel | Mapping[str, Any]


def wrap_payload(payload: Payload | Sequence[Payload]) -> list[Any]:
    """Serializes ``payload`` into the JSON array the API requires.

    A single item is wrapped into a one-element list; models are dumped
    without unset optional fields.
    """
    items = [payload] if isinstance(payload, BaseModel | Mapping) else list(payload)
    return [
        item.model_dump(mode="json", exclude_none=True)
        if isinstance(item, BaseModel)
        else dict(item)
        for item in items
    ]


class DataForSEOClient(BaseApiClient):
    """Asynchronous client for the DataForSEO v3 API.

    All requests use HTTP Basic authentication and an array-wrapped JSON body.
    Endpoint groups are available as properties:

    ```python
    async with DataForSEOClient(login="...", password="...") as client:
        summary = await client.backlinks.get_summary("example.com")
        page = await client.labs.get_domain_ranking_keywords("example.com", 2036, "en")
    ```

    Attributes:
        keywords (KeywordsClient): Google Ads keyword data endpoints.
        labs (LabsClient): DataForSEO Labs endpoints.
        backlinks (BacklinksClient): Backlinks endpoints.
        on_page (OnPageClient): On-Page audit endpoints.
    """

    provider_name = "dataforseo"

    def __init__(
        self,
        settings: DataForSEOSettings | None = None,
        auth_strategy: AuthStrategy | None = None,
        *,
        login: str | None = None,
        password: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        max_concurrency: int | None = None,
        backoff_policy: BackoffPolicy | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initializes the DataForSEOClient.

        Keyword arguments override the matching fields of ``settings``; omitted
        ones keep the configured defaults.

        Args:
            settings: Optional settings. If None, loaded via
                ``get_dataforseo_settings()`` (``DATAFORSEO_*`` environment).
            auth_strategy: Optional explicit strategy replacing Basic auth.
            login: API login.
            password: API password.
            base_url: API base URL override.
            timeout: Request timeout override in seconds.
            max_concurrency: Gate capacity override.
            backoff_policy: Backoff policy override.
            http_client: Optional externally owned httpx.AsyncClient.

        Raises:
            ConfigurationError: If no auth strategy is given and the login or
                password is missing.
        """
        resolved = apply_overrides(
            settings or get_dataforseo_settings(),
            login=login,
            password=password,
            base_url=base_url,
            request_timeout=timeout,
            max_concurrency=max_concurrency,
        )
        self._settings: DataForSEOSettings = resolved

        if auth_strategy is None:
            auth_strategy = BasicAuth(resolved.login, resolved.password)

        super().__init__(
            resolved,
            auth_strategy,
            base_url=resolved.base_url,
            http_client=http_client,
            backoff_policy=backoff_policy,
        )

        self._keywords = KeywordsClient(api_client=self)
        self._labs = LabsClient(api_client=self)
        self._backlinks = BacklinksClient(api_client=self)
        self._on_page = OnPageClient(api_client=self)
        logger.debug("DataForSEOClient initialized successfully.")

    @property
    def keywords(self) -> KeywordsClient:
        return self._keywords

    @property
    def labs(self) -> LabsClient:
        return self._labs

    @property
    def backlinks(self) -> BacklinksClient:
        return self._backlinks

    @property
    def on_page(self) -> OnPageClient:
        return self._on_page

    async def post(
        self, path: str, payload: Payload | Sequence[Payload]
    ) -> ResponseEnvelope:
        """POSTs an array-wrapped payload and decodes the envelope strictly.

        Raises:
            EnvelopeError: If the top-level status is not 20000.
        """
        response = await self.request("POST", path, json_data=wrap_payload(payload))
        return decode_envelope(response, strict=True, provider=self.provider)

    async def post_raw(
        self, path: str, payload: Payload | Sequence[Payload]
    ) -> ResponseEnvelope:
        """Like ``post`` but leaves the top-level status for the caller to check."""
        response = await self.request("POST", path, json_data=wrap_payload(payload))
        return decode_envelope(response, strict=False, provider=self.provider)

    async def get_raw(self, path: str) -> ResponseEnvelope:
        """GETs ``path`` and decodes the envelope without checking its status."""
        response = await self.request("GET", path)
        return decode_envelope(response, strict=False, provider=self.provider)
