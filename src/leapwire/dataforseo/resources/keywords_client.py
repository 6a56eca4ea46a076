# leapwire/dataforseo/resources/keywords_client.py
"""Client for the Google Ads keyword data endpoints."""

from ...log_config import logger
from ..endpoints import KEYWORDS_SEARCH_VOLUME, KeywordSearchVolumeRequest
from ..models import KeywordData
from .base_client import DataForSEOResourceClient


class KeywordsClient(DataForSEOResourceClient):
    """Keyword search volume lookups."""

    async def get_search_volume(
        self, request: KeywordSearchVolumeRequest
    ) -> list[KeywordData]:
        """Retrieves search volume data for a list of keywords.

        Returns:
            list[KeywordData]: One entry per keyword Google has data for; empty
                when there is none.
        """
        logger.info(
            f"Fetching search volume for {len(request.keywords)} keyword(s) "
            f"(location={request.location_code}, language={request.language_code})"
        )
        page = await self._post_items(KEYWORDS_SEARCH_VOLUME, request, KeywordData)
        return page.items
