"""Resolve a single Unsplash photo into a downloadable file plus metadata."""

from __future__ import annotations

import re
from typing import Any

import httpx

from unsplash_connector.config import ConnectorSettings
from unsplash_connector.domain.models import AssetDetail, AssetMetadata
from unsplash_connector.services.exceptions import ParseError, ResolutionError, TransportError
from unsplash_connector.services.http import fetch_json

# Unsplash encodes the image format as the ``fm`` query parameter of its CDN URLs.
_FORMAT_PATTERN = re.compile(r"&fm=([a-z0-9]+)")


def extract_extension(url: str) -> str:
    match = _FORMAT_PATTERN.search(url or "")
    return match.group(1) if match else ""


def format_attribution(user: Any) -> str:
    """Return ``"First Last (profile url)"`` with whichever parts exist."""

    if not isinstance(user, dict):
        return ""
    first_name = _text(user.get("first_name"))
    last_name = _text(user.get("last_name"))
    links = user.get("links")
    profile_url = _text(links.get("html")) if isinstance(links, dict) else ""

    if first_name or last_name:
        author = f"{first_name} {last_name}".strip()
        if profile_url:
            return f"{author} ({profile_url})"
        return author
    return profile_url


def build_asset_detail(asset_id: str, payload: Any) -> AssetDetail:
    if not isinstance(payload, dict):
        raise ParseError("Photo response format is invalid.")

    urls = payload.get("urls")
    file_url = _text(urls.get("full")) if isinstance(urls, dict) else ""

    return AssetDetail(
        id=asset_id,
        url=file_url,
        extension=extract_extension(file_url),
        filename=_text(payload.get("slug")),
        metadata=AssetMetadata(
            title=_text(payload.get("description")),
            alternative=_text(payload.get("alt_description")),
            description=format_attribution(payload.get("user")),
            width=_dimension(payload.get("width")),
            height=_dimension(payload.get("height")),
        ),
    )


class AssetResolver:
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        access_key: str,
        settings: ConnectorSettings | None = None,
    ) -> None:
        self._client = http_client
        self._access_key = access_key
        self._settings = settings or ConnectorSettings()

    async def resolve(self, asset_id: str) -> AssetDetail:
        asset_id = (asset_id or "").strip()
        if not asset_id:
            raise ResolutionError("Asset id must not be empty.")

        try:
            payload = await fetch_json(
                self._client,
                self._settings.detail_url(asset_id),
                params={"client_id": self._access_key},
                timeout=self._settings.request_timeout_seconds,
            )
            return build_asset_detail(asset_id, payload)
        except (TransportError, ParseError) as exc:
            raise ResolutionError(f"Could not resolve asset {asset_id}: {exc}") from exc


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _dimension(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


__all__ = [
    "AssetResolver",
    "build_asset_detail",
    "extract_extension",
    "format_attribution",
]
