from typing import Literal

import httpx

from ..backoff import BackoffPolicy
from ..client import BaseApiClient
from ..config import apply_overrides
from ..exceptions import APIError, DecodeError
from ..log_config import logger
from .config import PageSpeedSettings, get_pagespeed_settings
from .models import PageSpeedApiResponse, PageSpeedResult
from .parsing import parse_result

Strategy = Literal["mobile", "desktop"]

CATEGORIES = ("performance", "accessibility", "best-practices", "seo")


class PageSpeedClient(BaseApiClient):
    """Client for the Google PageSpeed Insights API v5.

    ``run`` fetches a Lighthouse report and condenses it into category
    scores, Core Web Vitals and the top recommendations.
    """

    provider_name = "pagespeed"

    def __init__(
        self,
        settings: PageSpeedSettings | None = None,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        max_concurrency: int | None = None,
        backoff_policy: BackoffPolicy | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        resolved = apply_overrides(
            settings or get_pagespeed_settings(),
            api_key=api_key,
            base_url=base_url,
            request_timeout=timeout,
            max_concurrency=max_concurrency,
        )
        if not resolved.api_key:
            logger.warning(
                "No PageSpeed API key configured; requests are heavily rate limited."
            )
        super().__init__(
            resolved,
            base_url=resolved.base_url,
            http_client=http_client,
            backoff_policy=backoff_policy,
        )

    async def run(self, url: str, strategy: Strategy = "mobile") -> PageSpeedResult:
        """Audits ``url`` with the given device strategy.

        Raises:
            APIError: If the response carries an API-level error.
            DecodeError: If the response is not JSON or has no Lighthouse result.
        """
        params: list[tuple[str, str]] = [
            ("url", url),
            ("strategy", strategy or "mobile"),
        ]
        if self._settings.api_key:
            params.append(("key", self._settings.api_key))
        params.extend(("category", category) for category in CATEGORIES)

        logger.info(f"Running PageSpeed audit for {url} ({strategy})")
        response = await self.request("GET", "", params=params)
        payload = self.decode_json(response, "pagespeed")
        api_response = self.decode_model(
            PageSpeedApiResponse, payload, "pagespeed response"
        )

        if api_response.error is not None:
            raise APIError(
                f"API error: {api_response.error.message}",
                provider=self.provider,
                response=response,
            )
        if api_response.lighthouseResult is None:
            raise DecodeError(
                "missing lighthouseResult in response",
                provider=self.provider,
                response=response,
            )
        return parse_result(api_response.lighthouseResult, url)
