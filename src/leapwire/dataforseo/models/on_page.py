"""Models for the On-Page audit endpoints.

Several fields of these responses change JSON type between sites
(``page_not_found_status_code``, ``certificate_version``, ``charset``); they
are kept in the small union types from ``leapwire.models`` and interpreted on
access.
"""

from typing import Any

from pydantic import ConfigDict, Field

from ...models import IntOrList, NullTolerantModel, StrOrNumber
from .base import ItemsResult


class OnPageCrawlStatus(NullTolerantModel):
    """Crawl progress counters."""

    max_crawl_pages: int = 0
    pages_in_queue: int = 0
    pages_crawled: int = 0
    model_config = ConfigDict(extra="allow")


class OnPageSSLInfo(NullTolerantModel):
    """SSL certificate details of the audited domain."""

    valid_certificate: bool = False
    certificate_issuer: str | None = None
    certificate_subject: str | None = None
    certificate_version: StrOrNumber = Field(default_factory=StrOrNumber)
    certificate_hash: str | None = None
    certificate_expiration_date: str | None = None
    model_config = ConfigDict(extra="allow")


class OnPageDomainInfo(NullTolerantModel):
    """Domain-level information from the audit.

    Attributes:
        page_not_found_status_code: The status returned for missing pages; the
            API sends a number, a list of numbers or null.
    """

    name: str | None = None
    cms: str | None = None
    ip: str | None = None
    server: str | None = None
    crawl_start: str | None = None
    crawl_end: str | None = None
    ssl_info: OnPageSSLInfo | None = None
    checks: dict[str, bool] | None = None
    total_pages: int = 0
    page_not_found_status_code: IntOrList = Field(default_factory=IntOrList)
    model_config = ConfigDict(extra="allow")


class OnPagePageMetrics(NullTolerantModel):
    """Aggregated page-level metrics."""

    onpage_score: float = 0.0
    total_pages: int = 0
    duplicate_title: int = 0
    duplicate_description: int = 0
    duplicate_content: int = 0
    broken_links: int = 0
    broken_resources: int = 0
    links_external: int = 0
    links_internal: int = 0
    non_indexable: int = 0
    checks: dict[str, int] | None = None
    model_config = ConfigDict(extra="allow")


class OnPageSummary(NullTolerantModel):
    """Summary of an on-page audit task."""

    crawl_progress: str | None = None
    crawl_status: OnPageCrawlStatus | None = None
    crawl_gateway_address: str | None = None
    crawl_stop_reason: str | None = None
    domain_info: OnPageDomainInfo | None = None
    page_metrics: OnPagePageMetrics | None = None
    model_config = ConfigDict(extra="allow")

    @property
    def finished(self) -> bool:
        return self.crawl_progress == "finished"


class OnPageContentMeta(NullTolerantModel):
    """Content statistics and readability indexes of a page."""

    plain_text_word_count: int = 0
    plain_text_size: int = 0
    automated_readability_index: float | None = None
    coleman_liau_readability_index: float | None = None
    dale_chall_readability_index: float | None = None
    flesch_kincaid_readability_index: float | None = None
    smog_readability_index: float | None = None
    model_config = ConfigDict(extra="allow")


class OnPagePageMeta(NullTolerantModel):
    """Metadata of a crawled page.

    Attributes:
        charset: Sent as a string or a number; use ``charset.as_str()``.
        htags: Heading texts keyed by tag ("h1", "h2", ...).
    """

    title: str | None = None
    description: str | None = None
    charset: StrOrNumber = Field(default_factory=StrOrNumber)
    favicon: str | None = None
    canonical: str | None = None
    internal_links_count: int = 0
    external_links_count: int = 0
    inbound_links_count: int = 0
    images_count: int = 0
    images_size: int = 0
    content: OnPageContentMeta | None = None
    htags: dict[str, list[str]] | None = None
    model_config = ConfigDict(extra="allow")

    @property
    def word_count(self) -> int:
        """Plain text word count, 0 when content metadata is missing."""
        if self.content is None:
            return 0
        return self.content.plain_text_word_count


class OnPagePageTiming(NullTolerantModel):
    """Page load timing metrics, in milliseconds."""

    time_to_interactive: float | None = None
    dom_complete: float | None = None
    largest_contentful_paint: float | None = None
    first_input_delay: float | None = None
    connection_time: float | None = None
    time_to_secure_connection: float | None = None
    request_sent_time: float | None = None
    waiting_time: float | None = None
    download_time: float | None = None
    duration_time: float | None = None
    model_config = ConfigDict(extra="allow")


class OnPagePage(NullTolerantModel):
    """A single crawled page."""

    resource_type: str | None = None
    status_code: int = 0
    url: str = ""
    size: int = 0
    onpage_score: float = 0.0
    total_dom_size: int = 0
    encoded_size: int = 0
    click_depth: int = 0
    broken_resources: bool = False
    meta: OnPagePageMeta | None = None
    page_timing: OnPagePageTiming | None = None
    checks: dict[str, bool] | None = None
    cache_control: dict[str, Any] | None = None
    model_config = ConfigDict(extra="allow")


class OnPagePagesResult(ItemsResult[OnPagePage]):
    """The ``result[0]`` wrapper of the pages endpoint.

    Attributes:
        crawl_progress: "in_progress" or "finished".
        total_items_count: Number of crawled pages matching the query.
    """

    crawl_progress: str | None = None
    total_items_count: int | None = None

    @property
    def total(self) -> int:
        if self.total_items_count is not None:
            return self.total_items_count
        return self.items_count
