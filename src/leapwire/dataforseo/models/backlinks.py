"""Models for the Backlinks endpoints."""

from pydantic import ConfigDict, Field

from ...models import NullTolerantModel, StrOrList


class BacklinksInfo(NullTolerantModel):
    """Meta-information about a backlinks target.

    Attributes:
        platform_type: Sent either as a single string or as a list of strings;
            use ``platform_type.as_list()``.
    """

    server: str | None = None
    cms: str | None = None
    platform_type: StrOrList = Field(default_factory=StrOrList)
    ip_address: str | None = None
    country: str | None = None
    spam_score: int | None = None
    model_config = ConfigDict(extra="allow")


class _LinkCounts(NullTolerantModel):
    """Counters shared by the summary, referring-domain and anchor models."""

    rank: int = 0
    backlinks: int = 0
    first_seen: str | None = None
    lost_date: str | None = None
    backlinks_spam_score: int = 0
    broken_backlinks: int = 0
    broken_pages: int = 0
    referring_domains: int = 0
    referring_domains_nofollow: int = 0
    referring_main_domains: int = 0
    referring_ips: int = 0
    referring_subnets: int = 0
    referring_pages: int = 0
    referring_pages_nofollow: int = 0
    referring_links_types: dict[str, int] | None = None
    referring_links_attributes: dict[str, int] | None = None
    referring_links_platform_types: dict[str, int] | None = None
    referring_links_countries: dict[str, int] | None = None
    model_config = ConfigDict(extra="allow")


class BacklinksSummary(_LinkCounts):
    """Backlink profile summary of a domain or URL."""

    target: str = ""
    crawled_pages: int = 0
    internal_links_count: int = 0
    external_links_count: int = 0
    referring_main_domains_nofollow: int = 0
    referring_links_tld: dict[str, int] | None = None
    info: BacklinksInfo | None = None


class ReferringDomain(_LinkCounts):
    """A domain linking to the target."""

    type: str | None = None
    domain: str = ""
    referring_main_domains_nofollow: int = 0


class AnchorText(_LinkCounts):
    """An anchor text used in links to the target."""

    anchor: str = ""
