"""Resource clients for the DataForSEO endpoint groups."""

from .backlinks_client import BacklinksClient
from .base_client import DataForSEOResourceClient
from .keywords_client import KeywordsClient
from .labs_client import LabsClient
from .on_page_client import OnPageClient

__all__ = [
    "BacklinksClient",
    "DataForSEOResourceClient",
    "KeywordsClient",
    "LabsClient",
    "OnPageClient",
]
