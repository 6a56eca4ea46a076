"""Request and response models of the browser rendering worker."""

from pydantic import BaseModel, ConfigDict


class MarkdownRequest(BaseModel):
    url: str


class MarkdownResponse(BaseModel):
    """A page rendered to clean markdown."""

    content: str = ""
    title: str = ""
    url: str = ""
    model_config = ConfigDict(extra="allow")


class LinksRequest(BaseModel):
    url: str


class Link(BaseModel):
    url: str = ""
    text: str = ""
    model_config = ConfigDict(extra="allow")


class LinksResponse(BaseModel):
    """Every link found on a rendered page."""

    links: list[Link] | None = None
    model_config = ConfigDict(extra="allow")


class ScrapeRequest(BaseModel):
    """Extract text for each named CSS selector.

    Attributes:
        url: Page to render.
        selectors: Result key to CSS selector.
    """

    url: str
    selectors: dict[str, str]


class ScrapeResponse(BaseModel):
    data: dict[str, str] | None = None
    url: str = ""
    model_config = ConfigDict(extra="allow")
