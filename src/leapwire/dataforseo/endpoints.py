"""DataForSEO endpoint paths and request payload models.

Request models are serialized with ``exclude_none=True`` so optional
parameters that were not given are left out of the payload entirely. Every
payload is sent inside a JSON array, even when it holds a single item.
"""

from pydantic import BaseModel, ConfigDict, Field

# --- Endpoint Paths ---
KEYWORDS_SEARCH_VOLUME = "/keywords_data/google_ads/search_volume/live"

LABS_KEYWORD_SUGGESTIONS = "/dataforseo_labs/google/keyword_suggestions/live"
LABS_RANKED_KEYWORDS = "/dataforseo_labs/google/ranked_keywords/live"
LABS_COMPETITORS_DOMAIN = "/dataforseo_labs/google/competitors_domain/live"
LABS_DOMAIN_INTERSECTION = "/dataforseo_labs/google/domain_intersection/live"

BACKLINKS_SUMMARY = "/backlinks/summary/live"
BACKLINKS_REFERRING_DOMAINS = "/backlinks/referring_domains/live"
BACKLINKS_ANCHORS = "/backlinks/anchors/live"

ON_PAGE_TASK_POST = "/on_page/task_post"
ON_PAGE_SUMMARY = "/on_page/summary"  # GET /on_page/summary/{task_id}
ON_PAGE_PAGES = "/on_page/pages"


# --- Request Payload Models ---


class KeywordSearchVolumeRequest(BaseModel):
    """Parameters of a Google Ads search volume query."""

    keywords: list[str] = Field(min_length=1)
    location_code: int
    language_code: str
    search_partners: bool | None = None
    date_from: str | None = None
    date_to: str | None = None
    model_config = ConfigDict(extra="forbid")


class KeywordSuggestionsRequest(BaseModel):
    keyword: str
    location_code: int
    language_code: str
    limit: int | None = None


class RankedKeywordsRequest(BaseModel):
    target: str
    location_code: int
    language_code: str
    limit: int | None = None
    offset: int | None = None


class CompetitorDomainsRequest(BaseModel):
    target: str
    location_code: int
    language_code: str
    limit: int | None = None


class DomainIntersectionRequest(BaseModel):
    target1: str
    target2: str
    location_code: int
    language_code: str
    limit: int | None = None


class BacklinksSummaryRequest(BaseModel):
    target: str


class BacklinksListRequest(BaseModel):
    """Paginated backlinks query (referring domains, anchors)."""

    target: str
    limit: int | None = None
    offset: int | None = None


class OnPageTaskPostRequest(BaseModel):
    """Parameters for creating an on-page audit task.

    Attributes:
        target: Domain to crawl, without scheme.
        max_crawl_pages: Upper bound on crawled pages.
        start_url: Page to start crawling from.
        max_crawl_depth: Maximum link depth from the start page.
        enable_sitemap_checking: Also crawl pages listed in the sitemap.
        enable_javascript: Execute JavaScript while crawling.
        load_resources: Load images, stylesheets and scripts.
        allow_subdomains: Follow links into subdomains.
        enable_browser_rendering: Emulate a browser to measure Core Web Vitals.
        tag: Free-form tag echoed back in the task data.
    """

    target: str
    max_crawl_pages: int | None = None
    start_url: str | None = None
    max_crawl_depth: int | None = None
    enable_sitemap_checking: bool | None = None
    enable_javascript: bool | None = None
    load_resources: bool | None = None
    allow_subdomains: bool | None = None
    enable_browser_rendering: bool | None = None
    tag: str | None = None
    model_config = ConfigDict(extra="forbid")


class OnPagePagesRequest(BaseModel):
    id: str
    limit: int | None = None
    offset: int | None = None
