"""Shared result shapes used by several DataForSEO endpoint groups."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, Field

from ...models import NullTolerantModel

ItemT = TypeVar("ItemT")


class ItemsResult(NullTolerantModel, Generic[ItemT]):
    """The ``result[0]`` wrapper of list endpoints.

    Attributes:
        se_type: Search engine type, where the endpoint reports one.
        total_count: Total number of matching items on the provider side.
        items_count: Number of items in this response.
        items: The items themselves; null from the API becomes an empty list.
    """

    se_type: str | None = None
    total_count: int = 0
    items_count: int = 0
    items: list[ItemT] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class MonthlySearch(NullTolerantModel):
    """Search volume for a single month."""

    year: int = 0
    month: int = 0
    search_volume: int | None = None
    model_config = ConfigDict(extra="allow")


class KeywordInfo(NullTolerantModel):
    """Core keyword metrics from DataForSEO Labs.

    Attributes:
        search_volume: Average monthly searches.
        competition: Competition score between 0 and 1.
        competition_level: "LOW", "MEDIUM" or "HIGH".
        cpc: Average cost per click.
        low_top_of_page_bid: Lower bid range for the top of page.
        high_top_of_page_bid: Upper bid range for the top of page.
        monthly_searches: Month-by-month search volumes.
    """

    search_volume: int | None = None
    competition: float | None = None
    competition_level: str | None = None
    cpc: float | None = None
    low_top_of_page_bid: float | None = None
    high_top_of_page_bid: float | None = None
    monthly_searches: list[MonthlySearch] | None = None
    model_config = ConfigDict(extra="allow")


class KeywordProperties(NullTolerantModel):
    """Supplementary keyword metadata."""

    core_keyword: str | None = None
    keyword_difficulty: int | None = None
    detected_language: str | None = None
    keyword_word_count: int | None = None
    model_config = ConfigDict(extra="allow")


class SearchIntentInfo(NullTolerantModel):
    """Search intent classification of a keyword."""

    main_intent: str | None = None
    foreign_intent: list[str] | None = None
    model_config = ConfigDict(extra="allow")


class SERPInfo(NullTolerantModel):
    """SERP-level data for a keyword."""

    se_type: str | None = None
    check_url: str | None = None
    serp_item_types: list[str] | None = None
    se_results_count: int | None = None
    last_updated_time: str | None = None
    model_config = ConfigDict(extra="allow")


class AvgBacklinksInfo(NullTolerantModel):
    """Average backlink metrics of the pages ranking for a keyword."""

    se_type: str | None = None
    backlinks: float | None = None
    dofollow: float | None = None
    referring_pages: float | None = None
    referring_domains: float | None = None
    referring_main_domains: float | None = None
    rank: float | None = None
    main_domain_rank: float | None = None
    last_updated_time: str | None = None
    model_config = ConfigDict(extra="allow")


class SERPItem(NullTolerantModel):
    """Position details of a page in a SERP.

    Attributes:
        type: SERP element type, e.g. "organic".
        rank_group: Position among elements of the same type.
        rank_absolute: Absolute position in the SERP.
        position: "left" or "right".
        etv: Estimated traffic volume.
        is_up / is_down / is_new / is_lost: Movement flags since the last check.
    """

    type: str | None = None
    rank_group: int | None = None
    rank_absolute: int | None = None
    position: str | None = None
    title: str | None = None
    description: str | None = None
    url: str | None = None
    breadcrumb: str | None = None
    etv: float | None = None
    estimated_paid_traffic_cost: float | None = None
    is_up: bool | None = None
    is_down: bool | None = None
    is_new: bool | None = None
    is_lost: bool | None = None
    model_config = ConfigDict(extra="allow")
