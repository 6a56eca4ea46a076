"""Client for the H5P Hub API (content type listing and package downloads)."""

import httpx

from ..backoff import BackoffPolicy
from ..client import BaseApiClient
from ..config import apply_overrides
from ..log_config import logger
from .config import H5PHubSettings, get_h5p_hub_settings
from .models import HubResponse

CONTENT_TYPES_PATH = "/v1/content-types/"


class H5PHubClient(BaseApiClient):
    """Client for the H5P Hub.

    ``fetch_content_types`` registers this platform with a form POST and lists
    the available content types; ``download_package`` fetches the ``.h5p``
    archive of one content type with the long download timeout.
    """

    provider_name = "h5p-hub"

    def __init__(
        self,
        settings: H5PHubSettings | None = None,
        *,
        hub_url: str | None = None,
        timeout: float | None = None,
        download_timeout: float | None = None,
        max_concurrency: int | None = None,
        backoff_policy: BackoffPolicy | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        resolved = apply_overrides(
            settings or get_h5p_hub_settings(),
            hub_url=hub_url,
            request_timeout=timeout,
            download_timeout=download_timeout,
            max_concurrency=max_concurrency,
        )
        super().__init__(
            resolved,
            base_url=resolved.hub_url,
            http_client=http_client,
            backoff_policy=backoff_policy,
        )

    async def fetch_content_types(self) -> HubResponse:
        """Lists the content types available on the Hub."""
        settings = self._settings
        form = {
            "uuid": settings.platform_uuid,
            "platform_name": settings.platform_name,
            "platform_version": settings.platform_version,
            "h5p_version": settings.h5p_version,
            "type": "local",
            "core_api_version": settings.core_api_version,
        }
        response = await self.request("POST", CONTENT_TYPES_PATH, data=form)
        payload = self.decode_json(response, "hub content types")
        hub_response = self.decode_model(HubResponse, payload, "hub content types")
        logger.info(f"H5P Hub lists {len(hub_response.contentTypes)} content types")
        return hub_response

    async def download_package(self, machine_name: str) -> bytes:
        """Downloads the ``.h5p`` package of a content type.

        Args:
            machine_name: The content type id, e.g. "H5P.Accordion".
        """
        logger.info(f"Downloading H5P package {machine_name}")
        response = await self.request(
            "GET",
            self._build_path(machine_name),
            timeout=self._settings.download_timeout,
        )
        logger.debug(f"Downloaded {machine_name}: {len(response.content)} bytes")
        return response.content

    @staticmethod
    def _build_path(machine_name: str) -> str:
        return f"{CONTENT_TYPES_PATH}{machine_name}"
