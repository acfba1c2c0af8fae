"""Unsplash connector used by the editorial backend to search and import photos."""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from unsplash_connector.config import ConnectorSettings
from unsplash_connector.domain.models import AssetDetail, SearchRequest, SearchResult
from unsplash_connector.i18n import I18nService
from unsplash_connector.logging import logger
from unsplash_connector.services.exceptions import (
    ConfigurationError,
    ParseError,
    ResolutionError,
    SearchError,
    TransportError,
    ValidationError,
)
from unsplash_connector.services.filters import build_filters, filters_as_dict
from unsplash_connector.services.http import fetch_json
from unsplash_connector.services.normalizer import normalize
from unsplash_connector.services.query_builder import build_query
from unsplash_connector.services.resolver import AssetResolver

# Hosts the backend must allow in its image Content-Security-Policy to show previews.
IMAGE_SOURCES = ("*.unsplash.com",)


class UnsplashConnector:
    """Search Unsplash and resolve photos into importable assets.

    Both operations are stateless and never raise to the caller: failures are
    logged and returned as ``SearchResult(success=False)`` or ``None``.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        access_key: str,
        settings: ConnectorSettings | None = None,
        i18n: I18nService | None = None,
    ) -> None:
        self._client = http_client
        self._access_key = access_key
        self._settings = settings or ConnectorSettings()
        self._i18n = i18n or I18nService(default_locale=self._settings.default_language)
        self._resolver = AssetResolver(http_client, access_key, settings=self._settings)

    @classmethod
    def from_settings(
        cls,
        http_client: httpx.AsyncClient,
        settings: ConnectorSettings,
        i18n: I18nService | None = None,
    ) -> "UnsplashConnector":
        if settings.access_key is None:
            raise ConfigurationError("Unsplash access key is not configured.")
        return cls(
            http_client,
            settings.access_key.get_secret_value(),
            settings=settings,
            i18n=i18n,
        )

    async def search(
        self,
        request: SearchRequest | Mapping[str, Any],
        *,
        locale: str | None = None,
    ) -> SearchResult:
        if not isinstance(request, SearchRequest):
            request = SearchRequest.from_params(request)

        try:
            params = build_query(request, self._access_key)
        except ValidationError:
            return SearchResult.failure(self._i18n.gettext("error.query_required", locale=locale))

        try:
            result = await self._run_search(params)
        except SearchError as exc:
            logger.critical("search_failed", query=request.q, error=str(exc))
            return SearchResult.failure(str(exc), search=_public_params(params))

        logger.info(
            "search_completed",
            query=request.q,
            total=result.total_count,
            returned=len(result.data),
            skipped=result.skipped,
        )
        return result.model_copy(update={"page": request.page})

    async def _run_search(self, params: dict[str, Any]) -> SearchResult:
        try:
            raw = await fetch_json(
                self._client,
                self._settings.search_url(),
                params=params,
                timeout=self._settings.request_timeout_seconds,
            )
            return normalize(raw, _public_params(params))
        except (TransportError, ParseError) as exc:
            raise SearchError(str(exc)) from exc

    async def resolve_asset(self, asset_id: str) -> AssetDetail | None:
        try:
            return await self._resolver.resolve(asset_id)
        except ResolutionError as exc:
            logger.critical("asset_resolution_failed", asset_id=asset_id, error=str(exc))
            return None

    async def get_file_url_and_extension(self, asset_id: str) -> dict[str, Any]:
        detail = await self.resolve_asset(asset_id)
        if detail is None:
            return {}
        return detail.as_host_payload()

    def get_available_filters(self, locale: str | None = None) -> dict[str, Any]:
        return filters_as_dict(build_filters(self._i18n, locale=locale))

    @staticmethod
    def image_sources() -> tuple[str, ...]:
        return IMAGE_SOURCES


def _public_params(params: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in params.items() if key != "client_id"}


__all__ = ["UnsplashConnector", "IMAGE_SOURCES"]
