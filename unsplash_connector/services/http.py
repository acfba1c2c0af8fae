"""Thin JSON GET helper shared by the search and detail calls."""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from unsplash_connector.services.exceptions import ParseError, TransportError


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    params: Mapping[str, Any],
    timeout: float | None = None,
) -> Any:
    """GET ``url`` and decode the body as JSON.

    Raises ``TransportError`` for connection, timeout and HTTP status failures
    and ``ParseError`` when the body is not JSON.
    """

    try:
        response = await client.get(url, params=dict(params), timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        detail = exc.response.text[:500] if exc.response is not None else str(exc)
        status_code = exc.response.status_code if exc.response is not None else "unknown"
        raise TransportError(f"Unsplash request failed ({status_code}): {detail}") from exc
    except httpx.RequestError as exc:
        raise TransportError(f"Failed to contact Unsplash: {exc}") from exc

    try:
        return response.json()
    except ValueError as exc:
        raise ParseError("Unsplash response is not valid JSON.") from exc


__all__ = ["fetch_json"]
