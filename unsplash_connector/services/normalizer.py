"""Convert raw Unsplash search responses into the common result shape."""

from __future__ import annotations

from typing import Any, Mapping

from unsplash_connector.domain.models import SearchResult, SearchResultItem
from unsplash_connector.logging import logger
from unsplash_connector.services.exceptions import ParseError


def normalize(raw: Any, params: Mapping[str, str | int]) -> SearchResult:
    if not isinstance(raw, dict):
        raise ParseError("Search response format is invalid.")
    if "total" not in raw or "results" not in raw:
        raise ParseError("Search response is missing 'total' or 'results'.")

    results = raw.get("results") or []
    if not isinstance(results, list):
        raise ParseError("Search response 'results' is not a list.")

    items: list[SearchResultItem] = []
    skipped = 0
    for position, entry in enumerate(results):
        item = _to_item(entry)
        if item is None:
            skipped += 1
            logger.warning("search_item_skipped", position=position)
            continue
        items.append(item)

    return SearchResult(
        search=dict(params),
        total_count=_to_int(raw.get("total")),
        data=tuple(items),
        skipped=skipped,
    )


def _to_item(entry: Any) -> SearchResultItem | None:
    if not isinstance(entry, dict):
        return None
    item_id = entry.get("id")
    urls = entry.get("urls")
    preview = urls.get("regular") if isinstance(urls, dict) else None
    if not item_id or not preview:
        return None
    return SearchResultItem(id=str(item_id), preview=str(preview))


def _to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


__all__ = ["normalize"]
