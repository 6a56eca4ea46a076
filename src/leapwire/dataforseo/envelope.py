# leapwire/dataforseo/envelope.py
"""Decoding of the DataForSEO response envelope.

Every DataForSEO endpoint answers with the same wrapper: a top-level status
(``20000`` means the request was accepted) and a list of tasks, each with its
own status and an endpoint-specific ``result`` payload. Both layers have to
be checked.

Two decoding modes exist:

- strict (``decode_envelope(..., strict=True)``): a top-level status other
  than ``20000`` raises ``EnvelopeError`` straight away;
- permissive (``strict=False``): the envelope is returned unchecked so the
  caller can interpret specific codes itself (``40400`` on summary endpoints
  means "not ready yet").

``first_result`` is the one place where a task's ``result`` is turned into a
typed value; endpoint methods never pick tasks apart themselves.
"""

from typing import Any, TypeVar

import httpx
from pydantic import ConfigDict, Field, ValidationError

from ..exceptions import DecodeError, EnvelopeError, TaskError
from ..log_config import logger
from ..models import NullTolerantModel, type_adapter
from .constants import STATUS_OK

T = TypeVar("T")

PROVIDER = "dataforseo"


class Task(NullTolerantModel):
    """One task entry of a response envelope.

    Attributes:
        id: Task identifier (used to poll asynchronous tasks).
        status_code: The task's own status, independent of the envelope's.
        status_message: Human-readable task status.
        time: Processing time as reported by the API.
        cost: Cost charged for this task.
        result_count: Number of entries in ``result``.
        path: Endpoint path segments the task ran against.
        data: Echo of the request parameters (raw JSON).
        result: Endpoint-specific payload (raw JSON), None when absent or null.
    """

    id: str = ""
    status_code: int = 0
    status_message: str = ""
    time: str | None = None
    cost: float = 0.0
    result_count: int = 0
    path: list[str] = Field(default_factory=list)
    data: Any | None = None
    result: Any | None = None

    model_config = ConfigDict(extra="allow")

    @property
    def ok(self) -> bool:
        return self.status_code == STATUS_OK


class ResponseEnvelope(NullTolerantModel):
    """Top-level wrapper returned by every DataForSEO endpoint."""

    version: str = ""
    status_code: int = 0
    status_message: str = ""
    time: str | None = None
    cost: float = 0.0
    tasks_count: int = 0
    tasks_error: int = 0
    tasks: list[Task] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")

    @property
    def ok(self) -> bool:
        return self.status_code == STATUS_OK


def check_envelope(envelope: ResponseEnvelope, *, provider: str = PROVIDER) -> None:
    """Raises ``EnvelopeError`` unless the top-level status is ``20000``."""
    if not envelope.ok:
        raise EnvelopeError(
            f"API error {envelope.status_code}: {envelope.status_message}",
            status_code=envelope.status_code,
            status_message=envelope.status_message,
            provider=provider,
        )


def decode_envelope(
    response: httpx.Response, *, strict: bool = True, provider: str = PROVIDER
) -> ResponseEnvelope:
    """Parses a successful HTTP response into a ``ResponseEnvelope``.

    Args:
        response: A 2xx response from a DataForSEO endpoint.
        strict: Whether to reject envelopes whose top-level status is not
            ``20000``.
        provider: Name used to prefix errors.

    Raises:
        DecodeError: If the body is not JSON or does not have the envelope shape.
        EnvelopeError: In strict mode, if the top-level status is not ``20000``.
    """
    try:
        envelope = ResponseEnvelope.model_validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(
            f"unmarshal response: {e}", provider=provider, response=response
        ) from e

    logger.debug(
        f"{provider}: envelope status {envelope.status_code} "
        f"({envelope.status_message}), {len(envelope.tasks)} task(s), cost {envelope.cost}"
    )
    if strict:
        check_envelope(envelope, provider=provider)
    return envelope


def first_task(envelope: ResponseEnvelope, *, provider: str = PROVIDER) -> Task:
    """Returns the first task of the envelope.

    Requests always carry exactly one item, so exactly one task is expected.
    Any further tasks are logged and ignored.

    Raises:
        DecodeError: If the envelope has no tasks.
    """
    if not envelope.tasks:
        raise DecodeError("no tasks in response", provider=provider)
    if len(envelope.tasks) > 1:
        logger.warning(
            f"{provider}: envelope carries {len(envelope.tasks)} tasks, "
            "only the first one is used"
        )
    return envelope.tasks[0]


def first_result(
    envelope: ResponseEnvelope, result_type: type[T] | Any, *, provider: str = PROVIDER
) -> T:
    """Validates the first task's ``result`` into ``result_type``.

    Args:
        envelope: A decoded envelope.
        result_type: The destination type, typically ``list[SomeModel]``.
        provider: Name used to prefix errors.

    Raises:
        DecodeError: "no tasks in response", "empty result" or
            "unmarshal result: ..." when the payload does not fit ``result_type``.
        TaskError: "task error <code>: <message>" when the task failed.
    """
    task = first_task(envelope, provider=provider)
    if not task.ok:
        raise TaskError(
            f"task error {task.status_code}: {task.status_message}",
            status_code=task.status_code,
            status_message=task.status_message,
            provider=provider,
        )
    if task.result is None:
        raise DecodeError("empty result", provider=provider)
    try:
        return type_adapter(result_type).validate_python(task.result)
    except ValidationError as e:
        raise DecodeError(f"unmarshal result: {e}", provider=provider) from e
