"""Jina Reader client (URL to markdown)."""

from .client import JinaClient
from .config import JinaSettings, get_jina_settings

__all__ = ["JinaClient", "JinaSettings", "get_jina_settings"]
