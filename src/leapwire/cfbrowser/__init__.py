"""Client for a headless browser rendering worker."""

from .client import BrowserRenderingClient
from .config import BrowserRenderingSettings, get_browser_rendering_settings
from .models import Link, LinksResponse, MarkdownResponse, ScrapeResponse

__all__ = [
    "BrowserRenderingClient",
    "BrowserRenderingSettings",
    "Link",
    "LinksResponse",
    "MarkdownResponse",
    "ScrapeResponse",
    "get_browser_rendering_settings",
]
