"""DataForSEO v3 API client."""

from .client import DataForSEOClient
from .config import DataForSEOSettings, get_dataforseo_settings
from .envelope import (
    ResponseEnvelope,
    Task,
    check_envelope,
    decode_envelope,
    first_result,
    first_task,
)

__all__ = [
    "DataForSEOClient",
    "DataForSEOSettings",
    "ResponseEnvelope",
    "Task",
    "check_envelope",
    "decode_envelope",
    "first_result",
    "first_task",
    "get_dataforseo_settings",
]
