"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from urllib.parse import quote

from pydantic import AnyHttpUrl, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConnectorSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="UNSPLASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    access_key: SecretStr | None = None
    search_endpoint: AnyHttpUrl = Field(default="https://api.unsplash.com/search/photos")
    detail_endpoint: AnyHttpUrl = Field(default="https://api.unsplash.com/photos")
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)
    default_language: str = "en"

    @field_validator("access_key", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def search_url(self) -> str:
        return str(self.search_endpoint).rstrip("/")

    def detail_url(self, asset_id: str) -> str:
        return f"{str(self.detail_endpoint).rstrip('/')}/{quote(asset_id, safe='')}"


@lru_cache
def get_settings() -> ConnectorSettings:
    """Return cached settings instance."""

    return ConnectorSettings()


__all__ = ["ConnectorSettings", "get_settings"]
