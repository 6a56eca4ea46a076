# leapwire/dataforseo/resources/base_client.py
"""Base class for DataForSEO endpoint groups."""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from ...exceptions import DecodeError
from ...models import ResultPage
from ...resources import BaseResourceClient
from ..envelope import first_result
from ..models import ItemsResult

if TYPE_CHECKING:
    from pydantic import BaseModel

    from ..client import DataForSEOClient

T = TypeVar("T")
ItemT = TypeVar("ItemT")


class DataForSEOResourceClient(BaseResourceClient):
    """Shared request helpers for the DataForSEO endpoint groups.

    Every helper goes through ``DataForSEOClient.post`` (strict envelope check)
    and ``first_result`` (task check and typed decoding).
    """

    _api_client: "DataForSEOClient"

    def __init__(self, api_client: "DataForSEOClient"):
        super().__init__(api_client)

    async def _post_result(
        self, path: str, payload: "BaseModel | Sequence[BaseModel]", result_type: Any
    ) -> Any:
        envelope = await self._api_client.post(path, payload)
        return first_result(envelope, result_type, provider=self.provider)

    async def _post_items(
        self, path: str, payload: "BaseModel", item_type: type[ItemT]
    ) -> ResultPage[ItemT]:
        """Fetches a list endpoint and returns the first result's items.

        An empty result list or null ``items`` yields an empty page.
        """
        results: list[ItemsResult[Any]] = await self._post_result(
            path, payload, list[ItemsResult[item_type]]
        )
        if not results:
            return ResultPage[item_type]()
        first = results[0]
        return ResultPage[item_type](items=first.items, total_count=first.total_count)

    async def _post_single(
        self, path: str, payload: "BaseModel", result_model: type[T], what: str
    ) -> T:
        """Fetches an endpoint that returns exactly one object."""
        results = await self._post_result(path, payload, list[result_model])
        if not results:
            raise DecodeError(f"empty {what} result", provider=self.provider)
        return results[0]
