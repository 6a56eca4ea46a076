"""Base class for endpoint groups attached to a provider client.

A provider client exposes related remote operations as resource clients
(e.g. ``client.backlinks``, ``client.on_page``). Each resource client holds a
reference to the provider client and issues its requests through it, so all
of them share the same concurrency gate, retry policy and authentication.
"""

from typing import TYPE_CHECKING

from .log_config import logger

if TYPE_CHECKING:
    from .client import BaseApiClient


class BaseResourceClient:
    """Base class for all resource clients.

    Attributes:
        _api_client: The provider client used for making HTTP requests.
    """

    def __init__(self, api_client: "BaseApiClient"):
        """Initialize the base resource client.

        Args:
            api_client: The provider client this group belongs to.
        """
        self._api_client = api_client
        logger.debug(f"{self.__class__.__name__} initialized")

    @property
    def provider(self) -> str:
        return self._api_client.provider

    def _endpoint(self, *segments: str) -> str:
        """Joins path ``segments`` into a single request path."""
        parts = [s.strip("/") for s in segments]
        return "/" + "/".join(p for p in parts if p)
