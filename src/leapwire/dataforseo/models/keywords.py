"""Models for the Google Ads keywords data endpoints."""

from pydantic import ConfigDict

from ...models import NullTolerantModel
from .base import MonthlySearch


class KeywordData(NullTolerantModel):
    """Search volume and competition data for one keyword.

    Attributes:
        keyword: The keyword as submitted.
        spell: Corrected spelling, if Google suggested one.
        competition: "LOW", "MEDIUM" or "HIGH".
        competition_index: Competition on a 0-100 scale.
        search_volume: Average monthly searches.
        cpc: Average cost per click.
        monthly_searches: Month-by-month search volumes.
    """

    keyword: str = ""
    spell: str | None = None
    location_code: int | None = None
    language_code: str | None = None
    search_partners: bool = False
    competition: str | None = None
    competition_index: int | None = None
    search_volume: int | None = None
    low_top_of_page_bid: float | None = None
    high_top_of_page_bid: float | None = None
    cpc: float | None = None
    monthly_searches: list[MonthlySearch] | None = None
    model_config = ConfigDict(extra="allow")
