"""Static filter schema offered to the backend search form."""

from __future__ import annotations

from typing import Any

from unsplash_connector.domain.models import FilterDefinition, FilterOption
from unsplash_connector.i18n import I18nService

# Empty value means "any" and is dropped from the outbound query.
FILTER_VALUES: dict[str, tuple[str, ...]] = {
    "orientation": ("", "landscape", "portrait", "squarish"),
    "color": (
        "",
        "black_and_white",
        "white",
        "black",
        "blue",
        "magenta",
        "green",
        "orange",
        "purple",
        "red",
        "teal",
        "yellow",
    ),
}


def build_filters(i18n: I18nService, *, locale: str | None = None) -> dict[str, FilterDefinition]:
    filters: dict[str, FilterDefinition] = {}
    for name, values in FILTER_VALUES.items():
        options = tuple(
            FilterOption(
                label=i18n.gettext(f"filter.{name}.{value or 'any'}", locale=locale),
                value=value,
            )
            for value in values
        )
        filters[name] = FilterDefinition(
            label=i18n.gettext(f"filter.{name}.label", locale=locale),
            options=options,
        )
    return filters


def filters_as_dict(filters: dict[str, FilterDefinition]) -> dict[str, Any]:
    """JSON-ready shape fed to the host's "add media" form."""

    return {name: definition.model_dump(mode="json") for name, definition in filters.items()}


__all__ = ["FILTER_VALUES", "build_filters", "filters_as_dict"]
