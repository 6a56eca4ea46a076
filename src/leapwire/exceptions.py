"""Exception hierarchy for leapwire clients.

Every error raised by a client carries the name of the remote provider it
talked to, so a log line or traceback says which dependency failed. The
classes split failures along the lines callers care about: transient
(transport, 429, 5xx), permanent (other 4xx, business errors, decode errors)
and the non-fatal "task not ready yet" condition.
"""

import httpx

MAX_BODY_IN_MESSAGE = 200


def truncate_body(text: str, max_len: int = MAX_BODY_IN_MESSAGE) -> str:
    """Shortens a response body for inclusion in an error message."""
    if len(text) <= max_len:
        return text
    return text[:max_len] + "..."


class LeapwireError(Exception):
    """Base exception class for all leapwire errors."""

    def __init__(
        self,
        message: str,
        *,
        provider: str | None = None,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        """Initializes the base exception.

        Args:
            message: The error message.
            provider: Short name of the remote provider (e.g. "dataforseo").
            response: Optional httpx.Response associated with the error.
            request: Optional httpx.Request associated with the error.
        """
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.response = response
        self.request = request

    def _prefixed(self) -> str:
        if self.provider:
            return f"{self.provider}: {self.message}"
        return self.message

    def __str__(self) -> str:
        if self.response is not None:
            try:
                url_info = self.response.request.url
            except RuntimeError:
                # Responses built without a request (e.g. in tests) have no URL
                url_info = "N/A"
            return (
                f"{self._prefixed()} (Status: {self.response.status_code}, URL: {url_info})"
            )
        if isinstance(self.request, httpx.Request):
            return f"{self._prefixed()} (URL: {self.request.url})"
        return self._prefixed()


class ConfigurationError(LeapwireError):
    """Represents an error in a client's configuration (e.g. missing credentials)."""

    def __init__(self, message: str, *, provider: str | None = None):
        super().__init__(message, provider=provider)


# --- Transport ---


class RequestError(LeapwireError):
    """A request never produced an HTTP response (connect, DNS, read failures)."""


class NetworkError(RequestError):
    """Represents a network connection error (e.g. DNS failure, connection refused,
    connection dropped while reading the body)."""


class TimeoutError(RequestError):
    """Represents a request that did not complete within the configured timeout."""


# --- HTTP status ---


class APIError(LeapwireError):
    """Represents a non-successful HTTP response from the remote API."""

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None


class ClientError(APIError):
    """4xx response other than 429. Never retried."""


class RateLimitError(APIError):
    """Represents hitting the API rate limit (429 Too Many Requests)."""


class ServerError(APIError):
    """5xx response from the remote API."""


class RetriesExhaustedError(APIError):
    """All attempts were consumed without a successful response.

    Attributes:
        attempts: Number of attempts made.
        last_error: The failure observed on the final attempt.
    """

    def __init__(
        self,
        message: str,
        *,
        attempts: int,
        last_error: LeapwireError,
        provider: str | None = None,
    ):
        super().__init__(
            message,
            provider=provider,
            response=last_error.response,
            request=last_error.request,
        )
        self.attempts = attempts
        self.last_error = last_error


# --- Payload / envelope ---


class DecodeError(LeapwireError):
    """A successful response could not be decoded into the expected shape."""


class EnvelopeError(LeapwireError):
    """The response envelope reported a business-level failure.

    Attributes:
        status_code: The provider's status code (e.g. 40501).
        status_message: The provider's status message.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        status_message: str = "",
        provider: str | None = None,
    ):
        super().__init__(message, provider=provider)
        self.status_code = status_code
        self.status_message = status_message


class TaskError(EnvelopeError):
    """A task inside an otherwise successful envelope reported a failure."""


class TaskNotReadyError(LeapwireError):
    """An asynchronous task exists but has not finished processing yet.

    This is a polling signal, not a failure: wait and ask again.
    """

    def __init__(
        self,
        message: str = "task not ready",
        *,
        task_id: str | None = None,
        provider: str | None = None,
    ):
        super().__init__(message, provider=provider)
        self.task_id = task_id


# --- H5P packages ---


class PackageError(LeapwireError):
    """An H5P package could not be extracted or parsed."""
