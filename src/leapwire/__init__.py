"""Leapwire: resilient asynchronous clients for third-party HTTP APIs.

This package provides the shared outbound-request machinery (bounded
concurrency, retry with selectable backoff, error classification, response
decoding) and the provider clients built on it: DataForSEO, a browser
rendering worker, Jina Reader, PageSpeed Insights and the H5P Hub, plus an
H5P package extractor.
"""

__version__ = "0.1.0"

# Import core modules for easy access
from . import (
    auth,
    backoff,
    client,
    config,
    exceptions,
    gate,
    log_config,
    models,
    resources,
    types,
)
from .backoff import ExponentialBackoff, ServerGuidedBackoff
from .client import BaseApiClient
from .exceptions import LeapwireError, TaskNotReadyError
from .gate import ConcurrencyGate

__all__ = [
    "__version__",
    "auth",
    "backoff",
    "client",
    "config",
    "exceptions",
    "gate",
    "log_config",
    "models",
    "resources",
    "types",
    "BaseApiClient",
    "ConcurrencyGate",
    "ExponentialBackoff",
    "LeapwireError",
    "ServerGuidedBackoff",
    "TaskNotReadyError",
]
