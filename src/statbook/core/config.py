from __future__ import annotations

from typing import Any

import pydantic
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from statbook.errors import ConfigurationError, MissingCredentialError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # mysportsfeeds
    stats_api_key: str | None = Field(default=None, repr=False)
    stats_base_url: str = "https://api.mysportsfeeds.com/v2.1"

    # newsapi
    news_api_key: str | None = Field(default=None, repr=False)
    news_base_url: str = "https://newsapi.org/v2"

    http_timeout_s: float = 30.0

    # news behavior
    news_max_articles: int = 5
    news_days_back: int | None = None
    news_language: str = "en"

    # -----------------------------
    # Required-key helpers
    # -----------------------------

    def require_stats_api_key(self) -> str:
        if not self.stats_api_key or not self.stats_api_key.strip():
            raise MissingCredentialError("STATS_API_KEY")
        return self.stats_api_key

    def require_news_api_key(self) -> str:
        if not self.news_api_key or not self.news_api_key.strip():
            raise MissingCredentialError("NEWS_API_KEY")
        return self.news_api_key


def load_settings(**overrides: Any) -> Settings:
    """Settings from the environment / .env; malformed values raise ConfigurationError."""
    try:
        return Settings(**overrides)
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"invalid settings: {e}") from e
