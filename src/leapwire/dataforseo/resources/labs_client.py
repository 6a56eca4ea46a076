# leapwire/dataforseo/resources/labs_client.py
"""Client for the DataForSEO Labs (Google) endpoints.

Provides keyword suggestions, the keywords a domain ranks for, competitor
discovery and two-domain keyword intersection.
"""

from ...log_config import logger
from ...models import ResultPage
from ..endpoints import (
    LABS_COMPETITORS_DOMAIN,
    LABS_DOMAIN_INTERSECTION,
    LABS_KEYWORD_SUGGESTIONS,
    LABS_RANKED_KEYWORDS,
    CompetitorDomainsRequest,
    DomainIntersectionRequest,
    KeywordSuggestionsRequest,
    RankedKeywordsRequest,
)
from ..models import (
    CompetitorDomain,
    DomainKeyword,
    KeywordGap,
    KeywordSuggestion,
    RankedKeywordItem,
)
from .base_client import DataForSEOResourceClient


class LabsClient(DataForSEOResourceClient):
    """Client for the DataForSEO Labs endpoints."""

    async def get_keyword_suggestions(
        self,
        keyword: str,
        location_code: int,
        language_code: str,
        limit: int | None = None,
    ) -> list[KeywordSuggestion]:
        """Retrieves keyword suggestions for a seed keyword."""
        request = KeywordSuggestionsRequest(
            keyword=keyword,
            location_code=location_code,
            language_code=language_code,
            limit=limit,
        )
        page = await self._post_items(
            LABS_KEYWORD_SUGGESTIONS, request, KeywordSuggestion
        )
        return page.items

    async def get_domain_ranking_keywords(
        self,
        target: str,
        location_code: int,
        language_code: str,
        limit: int | None = None,
        offset: int | None = None,
    ) -> ResultPage[DomainKeyword]:
        """Retrieves the keywords ``target`` ranks for.

        The nested ``keyword_data`` object of every item is flattened into a
        ``DomainKeyword``; items without it keep only their SERP data.

        Returns:
            ResultPage[DomainKeyword]: The keywords on this page and the total
                number of ranked keywords.
        """
        request = RankedKeywordsRequest(
            target=target,
            location_code=location_code,
            language_code=language_code,
            limit=limit,
            offset=offset,
        )
        raw = await self._post_items(LABS_RANKED_KEYWORDS, request, RankedKeywordItem)
        keywords = [DomainKeyword.from_ranked_item(item) for item in raw.items]
        logger.debug(
            f"Ranked keywords for {target}: {len(keywords)} of {raw.total_count}"
        )
        return ResultPage[DomainKeyword](items=keywords, total_count=raw.total_count)

    async def get_competitor_domains(
        self,
        target: str,
        location_code: int,
        language_code: str,
        limit: int | None = None,
    ) -> list[CompetitorDomain]:
        """Discovers domains competing with ``target`` in organic search."""
        request = CompetitorDomainsRequest(
            target=target,
            location_code=location_code,
            language_code=language_code,
            limit=limit,
        )
        page = await self._post_items(
            LABS_COMPETITORS_DOMAIN, request, CompetitorDomain
        )
        return page.items

    async def get_keyword_gaps(
        self,
        target1: str,
        target2: str,
        location_code: int,
        language_code: str,
        limit: int | None = None,
    ) -> list[KeywordGap]:
        """Finds keywords both domains rank for."""
        request = DomainIntersectionRequest(
            target1=target1,
            target2=target2,
            location_code=location_code,
            language_code=language_code,
            limit=limit,
        )
        page = await self._post_items(LABS_DOMAIN_INTERSECTION, request, KeywordGap)
        return page.items
