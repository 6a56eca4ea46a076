"""Pydantic models for DataForSEO results."""

from .backlinks import AnchorText, BacklinksInfo, BacklinksSummary, ReferringDomain
from .base import (
    AvgBacklinksInfo,
    ItemsResult,
    KeywordInfo,
    KeywordProperties,
    MonthlySearch,
    SearchIntentInfo,
    SERPInfo,
    SERPItem,
)
from .keywords import KeywordData
from .labs import (
    CompetitorDomain,
    DomainKeyword,
    KeywordGap,
    KeywordSuggestion,
    NestedKeywordData,
    PositionMetrics,
    RankedKeywordItem,
    RankedSERPElement,
)
from .on_page import (
    OnPageContentMeta,
    OnPageCrawlStatus,
    OnPageDomainInfo,
    OnPagePage,
    OnPagePageMeta,
    OnPagePageMetrics,
    OnPagePageTiming,
    OnPagePagesResult,
    OnPageSSLInfo,
    OnPageSummary,
)

__all__ = [
    "AnchorText",
    "AvgBacklinksInfo",
    "BacklinksInfo",
    "BacklinksSummary",
    "CompetitorDomain",
    "DomainKeyword",
    "ItemsResult",
    "KeywordData",
    "KeywordGap",
    "KeywordInfo",
    "KeywordProperties",
    "KeywordSuggestion",
    "MonthlySearch",
    "NestedKeywordData",
    "OnPageContentMeta",
    "OnPageCrawlStatus",
    "OnPageDomainInfo",
    "OnPagePage",
    "OnPagePageMeta",
    "OnPagePageMetrics",
    "OnPagePageTiming",
    "OnPagePagesResult",
    "OnPageSSLInfo",
    "OnPageSummary",
    "PositionMetrics",
    "RankedKeywordItem",
    "RankedSERPElement",
    "ReferringDomain",
    "SearchIntentInfo",
    "SERPInfo",
    "SERPItem",
]
