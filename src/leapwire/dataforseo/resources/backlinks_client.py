# leapwire/dataforseo/resources/backlinks_client.py
from ..endpoints import (
    BACKLINKS_ANCHORS,
    BACKLINKS_REFERRING_DOMAINS,
    BACKLINKS_SUMMARY,
    BacklinksListRequest,
    BacklinksSummaryRequest,
)
from ..models import AnchorText, BacklinksSummary, ReferringDomain
from .base_client import DataForSEOResourceClient


class BacklinksClient(DataForSEOResourceClient):
    """Client for the Backlinks endpoints."""

    async def get_summary(self, target: str) -> BacklinksSummary:
        """Retrieves the backlink profile summary for a domain or URL.

        Raises:
            DecodeError: If the API returned no summary object.
        """
        return await self._post_single(
            BACKLINKS_SUMMARY,
            BacklinksSummaryRequest(target=target),
            BacklinksSummary,
            "backlinks summary",
        )

    async def get_referring_domains(
        self, target: str, limit: int | None = None, offset: int | None = None
    ) -> list[ReferringDomain]:
        request = BacklinksListRequest(target=target, limit=limit, offset=offset)
        page = await self._post_items(
            BACKLINKS_REFERRING_DOMAINS, request, ReferringDomain
        )
        return page.items

    async def get_anchors(
        self, target: str, limit: int | None = None, offset: int | None = None
    ) -> list[AnchorText]:
        request = BacklinksListRequest(target=target, limit=limit, offset=offset)
        page = await self._post_items(BACKLINKS_ANCHORS, request, AnchorText)
        return page.items
