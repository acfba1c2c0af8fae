"""Pydantic value objects exchanged between the connector and its host."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class _ValueModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class SearchRequest(_ValueModel):
    q: str = ""
    orientation: str = ""
    color: str = ""
    page: int | None = None

    @field_validator("q", "orientation", "color", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("page", mode="before")
    @classmethod
    def _positive_page(cls, value):
        if value in (None, ""):
            return None
        try:
            page = int(value)
        except (TypeError, ValueError, OverflowError):
            return None
        return page if page > 0 else None

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "SearchRequest":
        """Build a request from the host's raw parameter map, ignoring unknown keys."""

        known = {key: params.get(key) for key in ("q", "orientation", "color", "page") if key in params}
        return cls(**known)


class SearchResultItem(_ValueModel):
    id: str
    preview: str


class SearchResult(_ValueModel):
    success: bool = True
    message: str = ""
    search: Mapping[str, str | int] = Field(default_factory=dict, validate_default=True)
    total_count: int = 0
    data: tuple[SearchResultItem, ...] = ()
    page: int | None = None
    skipped: int = 0

    @field_validator("search", mode="after")
    @classmethod
    def _read_only_search(cls, value):
        return MappingProxyType(dict(value))

    @field_serializer("search")
    def _dump_search(self, value):
        return dict(value)

    @classmethod
    def failure(cls, message: str, search: Mapping[str, str | int] | None = None) -> "SearchResult":
        return cls(success=False, message=message, search=dict(search or {}))


class AssetMetadata(_ValueModel):
    title: str = ""
    alternative: str = ""
    description: str = ""
    width: int = 0
    height: int = 0


class AssetDetail(_ValueModel):
    id: str
    url: str = ""
    extension: str = ""
    filename: str = ""
    metadata: AssetMetadata = Field(default_factory=AssetMetadata)

    def as_host_payload(self) -> dict[str, Any]:
        """Dictionary shape expected by the editorial backend when importing a file."""

        return {
            "url": self.url,
            "filename": self.filename,
            "extension": self.extension,
            "metadata": self.metadata.model_dump(),
        }


class FilterOption(_ValueModel):
    label: str
    value: str


class FilterDefinition(_ValueModel):
    label: str
    options: tuple[FilterOption, ...]


__all__ = [
    "SearchRequest",
    "SearchResultItem",
    "SearchResult",
    "AssetMetadata",
    "AssetDetail",
    "FilterOption",
    "FilterDefinition",
]
