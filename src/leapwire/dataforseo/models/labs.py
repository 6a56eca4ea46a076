"""Models for the DataForSEO Labs endpoints.

The ranked-keywords endpoint nests keyword data inside a ``keyword_data``
object; ``RankedKeywordItem`` mirrors that raw shape and ``DomainKeyword`` is
the flattened view returned to callers.
"""

from pydantic import ConfigDict, Field

from ...models import NullTolerantModel

from .base import (
    AvgBacklinksInfo,
    KeywordInfo,
    KeywordProperties,
    SearchIntentInfo,
    SERPInfo,
    SERPItem,
)


class KeywordSuggestion(NullTolerantModel):
    """A keyword suggested for a seed keyword."""

    se_type: str | None = None
    keyword: str = ""
    location_code: int | None = None
    language_code: str | None = None
    keyword_info: KeywordInfo = Field(default_factory=KeywordInfo)
    keyword_properties: KeywordProperties = Field(default_factory=KeywordProperties)
    search_intent_info: SearchIntentInfo | None = None
    serp_info: SERPInfo | None = None
    avg_backlinks_info: AvgBacklinksInfo | None = None
    model_config = ConfigDict(extra="allow")


class RankedSERPElement(NullTolerantModel):
    """SERP position of a domain for one keyword."""

    se_type: str | None = None
    serp_item: SERPItem = Field(default_factory=SERPItem)
    model_config = ConfigDict(extra="allow")


class NestedKeywordData(NullTolerantModel):
    """Keyword data nested inside ranked-keywords and intersection items."""

    keyword: str = ""
    location_code: int | None = None
    language_code: str | None = None
    keyword_info: KeywordInfo = Field(default_factory=KeywordInfo)
    keyword_properties: KeywordProperties = Field(default_factory=KeywordProperties)
    search_intent_info: SearchIntentInfo | None = None
    serp_info: SERPInfo | None = None
    model_config = ConfigDict(extra="allow")


class RankedKeywordItem(NullTolerantModel):
    """Raw item of the ranked-keywords endpoint."""

    se_type: str | None = None
    keyword_data: NestedKeywordData | None = None
    ranked_serp_element: RankedSERPElement | None = None
    model_config = ConfigDict(extra="allow")


class DomainKeyword(NullTolerantModel):
    """A keyword a domain ranks for, with the nested keyword data hoisted up.

    Attributes:
        se_type: Search engine type.
        keyword: The keyword (empty if the API omitted ``keyword_data``).
        keyword_info: Core keyword metrics.
        keyword_properties: Supplementary keyword metadata.
        search_intent_info: Search intent, if known.
        ranked_serp_element: Where the domain ranks for this keyword.
    """

    se_type: str | None = None
    keyword: str = ""
    keyword_info: KeywordInfo = Field(default_factory=KeywordInfo)
    keyword_properties: KeywordProperties = Field(default_factory=KeywordProperties)
    search_intent_info: SearchIntentInfo | None = None
    ranked_serp_element: RankedSERPElement | None = None

    @classmethod
    def from_ranked_item(cls, item: RankedKeywordItem) -> "DomainKeyword":
        """Flattens a raw ranked-keywords item."""
        flattened = cls(
            se_type=item.se_type, ranked_serp_element=item.ranked_serp_element
        )
        if item.keyword_data is not None:
            flattened.keyword = item.keyword_data.keyword
            flattened.keyword_info = item.keyword_data.keyword_info
            flattened.keyword_properties = item.keyword_data.keyword_properties
            flattened.search_intent_info = item.keyword_data.search_intent_info
        return flattened


class PositionMetrics(NullTolerantModel):
    """Ranking counts bucketed by SERP position."""

    pos_1: int = 0
    pos_2_3: int = 0
    pos_4_10: int = 0
    pos_11_20: int = 0
    pos_21_30: int = 0
    pos_31_40: int = 0
    pos_41_50: int = 0
    pos_51_60: int = 0
    pos_61_70: int = 0
    pos_71_80: int = 0
    pos_81_90: int = 0
    pos_91_100: int = 0
    etv: float = 0.0
    count: int = 0
    estimated_paid_traffic_cost: float = 0.0
    is_new: int = 0
    is_up: int = 0
    is_down: int = 0
    is_lost: int = 0
    model_config = ConfigDict(extra="allow")


class CompetitorDomain(NullTolerantModel):
    """A domain competing with the target in organic search.

    Attributes:
        domain: The competitor domain.
        avg_position: Average SERP position over shared keywords.
        sum_position: Sum of positions over shared keywords.
        intersections: Number of keywords both domains rank for.
        full_domain_metrics: Position buckets for the competitor's whole domain,
            keyed by SERP element type.
        metrics: Position buckets over the intersecting keywords.
    """

    se_type: str | None = None
    domain: str = ""
    avg_position: float | None = None
    sum_position: int | None = None
    intersections: int | None = None
    full_domain_metrics: dict[str, PositionMetrics | None] | None = None
    metrics: dict[str, PositionMetrics | None] | None = None
    model_config = ConfigDict(extra="allow")


class KeywordGap(NullTolerantModel):
    """A keyword from a two-domain intersection analysis."""

    se_type: str | None = None
    keyword_data: NestedKeywordData | None = None
    first_domain_serp_element: SERPItem | None = None
    second_domain_serp_element: SERPItem | None = None
    model_config = ConfigDict(extra="allow")
