"""Translate a backend search request into Unsplash query parameters."""

from __future__ import annotations

from typing import Any

from unsplash_connector.domain.models import SearchRequest
from unsplash_connector.services.exceptions import ValidationError

SORT_ORDER = "relevance"
RESULTS_PER_PAGE = 50


def build_query(request: SearchRequest, access_key: str) -> dict[str, Any]:
    query = request.q.strip()
    if not query:
        raise ValidationError("Search query must not be empty.")

    params: dict[str, Any] = {
        "query": query,
        "sort": SORT_ORDER,
        "per_page": RESULTS_PER_PAGE,
        "page": request.page,
        "orientation": request.orientation,
        "color": request.color,
        "client_id": access_key,
    }
    # Unset filters are not sent at all.
    return {key: value for key, value in params.items() if value}


__all__ = ["build_query", "SORT_ORDER", "RESULTS_PER_PAGE"]
