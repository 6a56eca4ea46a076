"""Generic API client implementation for leapwire.

This module provides ``BaseApiClient``, which holds all the provider-agnostic
HTTP plumbing shared by the concrete clients: bounded concurrency, retries
with a pluggable backoff policy, authentication, error classification and
JSON/model decoding. Provider clients subclass it and only add their
endpoint methods and envelope handling.
"""

import asyncio
import ssl
from http import HTTPStatus
from typing import Any, Self, TypeVar

import certifi
import httpx
import tenacity
from pydantic import ValidationError
from tenacity import AsyncRetrying, stop_after_attempt

from .auth import AuthStrategy, NoAuth
from .backoff import BackoffPolicy, build_backoff_policy
from .config import BaseApiSettings
from .exceptions import (
    APIError,
    ClientError,
    DecodeError,
    LeapwireError,
    NetworkError,
    RateLimitError,
    RequestError,
    RetriesExhaustedError,
    ServerError,
    TimeoutError,
    truncate_body,
)
from .gate import ConcurrencyGate
from .log_config import logger
from .models import type_adapter
from .types import RequestData

T = TypeVar("T")


class BaseApiClient:
    """Generic asynchronous HTTP client for a single remote provider.

    One instance is meant to live for the whole process and be shared by
    every caller. It is safe for concurrent use: the only mutable state
    shared between calls is the concurrency gate, and every call owns its own
    retry loop.

    Key features:
    - A ``ConcurrencyGate`` limiting in-flight calls (held across all retries
      of one call, released on every exit path)
    - Retries on transport errors, 429 and 5xx, driven by tenacity with a
      selectable ``BackoffPolicy``; other 4xx fail immediately
    - Cancellable waits: cancelling the calling task interrupts gate waits,
      backoff sleeps and network I/O alike
    - Pluggable authentication strategies
    - Errors prefixed with the provider name

    Attributes:
        _settings: Configuration settings for the client.
        _provider: Short provider name used in logs and error messages.
        _base_url: The base URL for API requests.
        _auth_strategy: Authentication strategy instance.
        _gate: Admission control for outbound calls.
        _backoff_policy: Computes the wait between attempts.
        _http_client: The underlying httpx.AsyncClient.
        _should_close_client: Whether this instance owns ``_http_client``.
    """

    provider_name: str = "leapwire"

    def __init__(
        self,
        settings: BaseApiSettings,
        auth_strategy: AuthStrategy | None = None,
        *,
        base_url: str,
        provider: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        backoff_policy: BackoffPolicy | None = None,
    ):
        """Initialize the BaseApiClient.

        Args:
            settings: Configuration settings for timeouts, attempts,
                concurrency and backoff.
            auth_strategy: Optional authentication strategy. If None, uses NoAuth.
            base_url: The base URL for API requests.
            provider: Provider name for log and error prefixes. Defaults to
                the class attribute ``provider_name``.
            http_client: Optional pre-configured httpx.AsyncClient. The caller
                keeps ownership of it.
            backoff_policy: Optional policy overriding ``settings.backoff_strategy``.
        """
        self._settings = settings
        self._provider: str = provider or self.provider_name
        self._base_url: str = base_url.rstrip("/")
        self._auth_strategy: AuthStrategy = auth_strategy or NoAuth()
        self._gate = ConcurrencyGate(settings.max_concurrency)
        self._backoff_policy: BackoffPolicy = backoff_policy or build_backoff_policy(
            settings
        )

        self._should_close_client = http_client is None
        self._http_client = http_client or self._create_default_http_client()

        logger.debug(
            f"{self._provider}: client initialized (base_url={self._base_url}, "
            f"timeout={settings.request_timeout}s, max_attempts={settings.max_attempts}, "
            f"max_concurrency={settings.max_concurrency}, backoff={self._backoff_policy!r}, "
            f"auth={type(self._auth_strategy).__name__})"
        )

    @property
    def settings(self) -> BaseApiSettings:
        return self._settings

    @property
    def provider(self) -> str:
        return self._provider

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def gate(self) -> ConcurrencyGate:
        return self._gate

    @property
    def backoff_policy(self) -> BackoffPolicy:
        return self._backoff_policy

    def _create_default_http_client(self) -> httpx.AsyncClient:
        """Create a default httpx.AsyncClient with configured settings.

        Returns:
            httpx.AsyncClient: HTTP client with certifi SSL verification, the
                configured timeout and user agent header.
        """
        try:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            verify_ssl: ssl.SSLContext | bool = ssl_context
            logger.debug("Using certifi SSL context.")
        except Exception:
            verify_ssl = True
            logger.warning(
                "certifi not found or failed to load. Using default SSL verification."
            )

        return httpx.AsyncClient(
            timeout=self._settings.request_timeout,
            verify=verify_ssl,
            headers={"User-Agent": self._settings.user_agent},
        )

    def _build_url(self, path: str, base_url_override: str | None = None) -> str:
        target_base_url = (base_url_override or self._base_url).rstrip("/")
        if not path:
            return target_base_url
        return f"{target_base_url}/{path.lstrip('/')}"

    async def _execute_single_request(self, request_data: RequestData) -> httpx.Response:
        """Execute a single HTTP attempt and classify the outcome.

        Args:
            request_data: The request data including method, URL, body, etc.

        Returns:
            httpx.Response: A 2xx response with its body already read.

        Raises:
            TimeoutError: If the request times out.
            NetworkError: For connection, DNS and body read failures.
            RateLimitError: On 429.
            ServerError: On 5xx.
            ClientError: On any other 4xx.
            APIError: On any other non-2xx status.
        """
        request = request_data.build_request(self._http_client)
        await self._auth_strategy.async_authenticate(request)

        logger.debug(f"{self._provider}: sending request {request.method} {request.url}")
        if request.content:
            logger.trace(f"Request Body: {request.content.decode(errors='replace')}")

        try:
            response = await self._http_client.send(request)
        except httpx.TimeoutException as e:
            logger.warning(f"{self._provider}: request timed out: {request.url}")
            raise TimeoutError(
                f"request timed out: {e}", provider=self._provider, request=request
            ) from e
        except httpx.RequestError as e:
            logger.warning(f"{self._provider}: request to {request.url} failed: {e!r}")
            raise NetworkError(
                f"request failed: {e!r}", provider=self._provider, request=request
            ) from e

        logger.debug(
            f"{self._provider}: received response {response.status_code} for {request.url}"
        )
        logger.trace(f"Response Headers: {response.headers}")

        status = response.status_code
        if HTTPStatus.OK <= status < HTTPStatus.MULTIPLE_CHOICES:
            return response

        message = f"HTTP {status}: {truncate_body(response.text)}"
        if status == HTTPStatus.TOO_MANY_REQUESTS:
            raise RateLimitError(message, provider=self._provider, response=response)
        if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            raise ServerError(message, provider=self._provider, response=response)
        if status >= HTTPStatus.BAD_REQUEST:
            logger.error(f"{self._provider}: {message} (not retried)")
            raise ClientError(message, provider=self._provider, response=response)
        raise APIError(message, provider=self._provider, response=response)

    def _should_retry_request(self, retry_state: tenacity.RetryCallState) -> bool:
        """Predicate for tenacity: transport errors, 429 and 5xx are retried.

        Anything else (including cancellation) ends the loop and is re-raised
        unchanged.
        """
        outcome = retry_state.outcome
        if outcome is None or not outcome.failed:
            return False
        exc = outcome.exception()
        return isinstance(exc, RequestError | RateLimitError | ServerError)

    def _wait_before_retry(self, retry_state: tenacity.RetryCallState) -> float:
        """Wait strategy for tenacity, delegating to the backoff policy."""
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        return self._backoff_policy.compute(retry_state.attempt_number, exc)

    async def _before_retry_sleep(self, retry_state: tenacity.RetryCallState) -> None:
        """Log details before tenacity sleeps between attempts."""
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        sleep_time = (
            getattr(retry_state.next_action, "sleep", 0)
            if retry_state.next_action
            else 0
        )
        logger.info(
            f"{self._provider}: retrying request in {sleep_time:.2f} seconds "
            f"after {retry_state.attempt_number} attempt(s) due to: "
            f"{type(exc).__name__} - {exc}"
        )

    async def _request_with_retry(
        self, request_data: RequestData
    ) -> tuple[httpx.Response, int]:
        """Run the attempt loop for one logical call.

        Returns:
            tuple[httpx.Response, int]: The successful response and the number
                of attempts made.

        Raises:
            RetriesExhaustedError: If every attempt failed with a retryable error.
            LeapwireError: The first non-retryable failure, unchanged.
        """
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._settings.max_attempts),
            wait=self._wait_before_retry,
            retry=self._should_retry_request,
            before_sleep=self._before_retry_sleep,
        )
        try:
            response = await retrying(self._execute_single_request, request_data)
        except tenacity.RetryError as e:
            last_attempt = e.last_attempt
            last_error = last_attempt.exception()
            attempts = last_attempt.attempt_number
            logger.error(
                f"{self._provider}: {request_data.method} {request_data.url} failed "
                f"after {attempts} attempt(s): {last_error}"
            )
            if not isinstance(last_error, LeapwireError):
                e.reraise()
            raise RetriesExhaustedError(
                f"max retries exceeded after {attempts} attempts: {last_error.message}",
                attempts=attempts,
                last_error=last_error,
                provider=self._provider,
            ) from last_error
        return response, retrying.statistics.get("attempt_number", 1)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Any | None = None,
        json_data: Any | None = None,
        data: Any | None = None,
        headers: dict[str, str] | None = None,
        base_url_override: str | None = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        """Perform one logical call: gate admission, attempts, classification.

        Args:
            method: HTTP method (GET, POST, etc.).
            path: Request path relative to the base URL. An empty path targets
                the base URL itself.
            params: Query parameters.
            json_data: JSON-serializable request body.
            data: Form data for the request body.
            headers: Extra request headers.
            base_url_override: Optional override for the base URL.
            timeout: Optional per-call timeout overriding the client default.

        Returns:
            httpx.Response: The successful (2xx) response.

        Raises:
            asyncio.CancelledError: If the calling task is cancelled; the gate
                slot is released and no further attempt is made.
        """
        request_data = RequestData(
            method=method,
            url=self._build_url(path, base_url_override),
            params=params,
            json_data=json_data,
            data=data,
            headers=headers or {},
            timeout=timeout,
        )
        try:
            async with self._gate:
                response, attempts = await self._request_with_retry(request_data)
        except asyncio.CancelledError as e:
            e.add_note(f"{self._provider}: {method} {request_data.url} cancelled")
            raise
        logger.debug(
            f"{self._provider}: {method} {request_data.url} succeeded after {attempts} attempt(s)"
        )
        return response

    def decode_json(self, response: httpx.Response, context: str) -> Any:
        """Parse a response body as JSON.

        Raises:
            DecodeError: If the body is not valid JSON.
        """
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(
                f"decode {context} response: {e}",
                provider=self._provider,
                response=response,
            ) from e

    def decode_model(self, target: type[T] | Any, payload: Any, context: str) -> T:
        """Validate already-parsed JSON into ``target`` (a model or any type
        pydantic can validate, e.g. ``list[Model]``).

        Raises:
            DecodeError: If validation fails.
        """
        try:
            return type_adapter(target).validate_python(payload)
        except ValidationError as e:
            raise DecodeError(
                f"decode {context}: {e}", provider=self._provider
            ) from e

    async def aclose(self) -> None:
        """Close the underlying HTTP client (if owned) and the auth strategy."""
        if self._should_close_client and not self._http_client.is_closed:
            await self._http_client.aclose()
            logger.debug(f"{self._provider}: internal HTTP client closed.")
        await self._auth_strategy.async_close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        await self.aclose()
