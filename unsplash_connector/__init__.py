"""Unsplash digital asset connector for editorial backends."""

from unsplash_connector.domain.models import AssetDetail, SearchRequest, SearchResult, SearchResultItem
from unsplash_connector.services.connector import UnsplashConnector

__all__ = [
    "AssetDetail",
    "SearchRequest",
    "SearchResult",
    "SearchResultItem",
    "UnsplashConnector",
]
