# leapwire/types.py
"""Request data structure shared by the client and its retry loop."""

from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field


class RequestData(BaseModel):
    """Encapsulates everything needed to build one HTTP request attempt.

    A fresh ``httpx.Request`` is built from this for every attempt, so a
    retried call never reuses a consumed request object.
    """

    method: str
    url: str
    params: Mapping[str, Any] | list[tuple[str, Any]] | None = None
    json_data: Any | None = None
    data: Mapping[str, Any] | None = None
    headers: dict[str, str] = Field(default_factory=dict)
    timeout: float | None = None

    model_config = ConfigDict(extra="allow")

    def build_request(self, http_client: httpx.AsyncClient) -> httpx.Request:
        """Builds an httpx.Request through ``http_client`` so its default
        headers and timeout apply; ``timeout`` overrides the latter."""
        return http_client.build_request(
            method=self.method,
            url=self.url,
            params=self.params,
            json=self.json_data,
            data=self.data,
            headers=self.headers,
            timeout=(
                self.timeout if self.timeout is not None else httpx.USE_CLIENT_DEFAULT
            ),
        )
