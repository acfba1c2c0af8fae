"""Translations for user-facing connector strings."""

from unsplash_connector.i18n.service import I18nService

__all__ = ["I18nService"]
