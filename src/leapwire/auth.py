import base64
from typing import Protocol

import httpx

from .exceptions import ConfigurationError
from .log_config import logger


class AuthStrategy(Protocol):
    """Protocol defining the interface for authentication strategies.

    Concrete implementations add credentials (headers) to an outgoing request.
    They are applied on every attempt, so they must be safe to call repeatedly
    on fresh requests.
    """

    async def async_authenticate(self, request: httpx.Request) -> None:
        """
        Asynchronously modifies the request to add authentication information.

        Args:
            request: The httpx.Request object to modify.
        """
        ...

    async def async_close(self) -> None:
        """
        Closes any resources used by the strategy. Must be idempotent.
        """
        ...


class NoAuth:
    """Implements the AuthStrategy protocol for requests requiring no authentication."""

    async def async_authenticate(self, request: httpx.Request) -> None:
        """Does nothing as no authentication is needed."""
        logger.trace("Using NoAuth strategy, no authentication applied.")

    async def async_close(self) -> None:
        """No resources to close for NoAuth, this method is a no-op."""


class BasicAuth:
    """Implements AuthStrategy with HTTP Basic credentials.

    The ``Authorization: Basic <base64(login:password)>`` header value is
    computed once at construction.
    """

    def __init__(self, login: str | None, password: str | None):
        if not login or not password:
            raise ConfigurationError("BasicAuth requires a non-empty 'login' and 'password'.")
        token = base64.b64encode(f"{login}:{password}".encode()).decode("ascii")
        self._header_value: str = f"Basic {token}"
        logger.debug("BasicAuth initialized.")

    @property
    def header_value(self) -> str:
        return self._header_value

    async def async_authenticate(self, request: httpx.Request) -> None:
        logger.trace("Authenticating request using BasicAuth.")
        request.headers["Authorization"] = self._header_value

    async def async_close(self) -> None:
        """No resources to close for BasicAuth, this method is a no-op."""


class StaticTokenAuth:
    """Implements AuthStrategy using a static Bearer token.

    The token is added to the ``Authorization`` header as a Bearer token.

    Attributes:
        _token: The static API token.
    """

    def __init__(self, token: str | None):
        """Initializes StaticTokenAuth with the provided API token.

        Raises:
            ConfigurationError: If the token is None or empty.
        """
        if not token:
            raise ConfigurationError("StaticTokenAuth requires a non-empty 'token'.")
        self._token: str = token
        logger.debug("StaticTokenAuth initialized.")

    async def async_authenticate(self, request: httpx.Request) -> None:
        """Adds the static 'Authorization: Bearer <token>' header to the request."""
        logger.trace("Authenticating request using StaticTokenAuth.")
        request.headers["Authorization"] = f"Bearer {self._token}"

    async def async_close(self) -> None:
        """No resources to close for StaticTokenAuth, this method is a no-op."""
