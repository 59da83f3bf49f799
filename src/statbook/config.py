from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime, timedelta
from typing import TYPE_CHECKING
from urllib.parse import urlparse

from statbook.errors import ConfigurationError, MissingCredentialError
from statbook.models.news import NewsQuery, SortBy

if TYPE_CHECKING:
    from statbook.core.config import Settings

DEFAULT_STATS_BASE_URL = "https://api.mysportsfeeds.com/v2.1"
DEFAULT_NEWS_BASE_URL = "https://newsapi.org/v2"

# newsapi.org refuses larger pages.
MAX_ARTICLES_LIMIT = 100


@dataclass(frozen=True)
class NewsConfig:
    """How the summary's default news query is shaped."""

    max_articles: int = 5
    days_back: int | None = None
    sort_by: SortBy = SortBy.RECENCY
    language: str | None = "en"

    def validate(self) -> NewsConfig:
        if not 1 <= self.max_articles <= MAX_ARTICLES_LIMIT:
            raise ConfigurationError(
                f"news max_articles must be between 1 and {MAX_ARTICLES_LIMIT}, "
                f"got {self.max_articles}"
            )
        if self.days_back is not None and self.days_back < 0:
            raise ConfigurationError(f"news days_back must not be negative, got {self.days_back}")
        try:
            SortBy(self.sort_by)
        except ValueError as e:
            raise ConfigurationError(f"unknown news sort order {self.sort_by!r}") from e
        return self

    def with_max_articles(self, max_articles: int) -> NewsConfig:
        return replace(self, max_articles=max_articles)

    def with_days_back(self, days_back: int | None) -> NewsConfig:
        return replace(self, days_back=days_back)

    def with_sort_by(self, sort_by: SortBy) -> NewsConfig:
        return replace(self, sort_by=sort_by)

    def with_language(self, language: str | None) -> NewsConfig:
        return replace(self, language=language)

    def query_for(self, player: str, *, today: date | None = None) -> NewsQuery:
        query = (
            NewsQuery.for_player(player)
            .with_page_size(self.max_articles)
            .with_sort_by(self.sort_by)
            .with_language(self.language)
        )
        if self.days_back is not None:
            today = today or datetime.now(UTC).date()
            query = query.with_date_range(today - timedelta(days=self.days_back))
        return query


def _require_key(value: str | None, key: str) -> str:
    if value is None or not value.strip():
        raise MissingCredentialError(key)
    return value.strip()


def _check_base_url(value: str, name: str) -> str:
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"{name} must be an absolute http(s) URL, got {value!r}")
    return value.rstrip("/")


@dataclass(frozen=True)
class StatbookConfig:
    """
    Credentials and endpoints for the real providers.

    Prefer StatbookConfig.build(...), which validates; direct construction does not.
    """

    stats_api_key: str = field(repr=False)
    news_api_key: str = field(repr=False)
    stats_base_url: str = DEFAULT_STATS_BASE_URL
    news_base_url: str = DEFAULT_NEWS_BASE_URL
    timeout_s: float = 30.0
    news: NewsConfig = field(default_factory=NewsConfig)

    @classmethod
    def build(
        cls,
        *,
        stats_api_key: str | None = None,
        news_api_key: str | None = None,
        stats_base_url: str | None = None,
        news_base_url: str | None = None,
        timeout_s: float | None = None,
        news: NewsConfig | None = None,
    ) -> StatbookConfig:
        """Assemble and validate a configuration.

        Raises MissingCredentialError for absent/blank keys and ConfigurationError for
        malformed URLs, non-positive timeouts or out-of-range news settings.
        """

        if timeout_s is not None and timeout_s <= 0:
            raise ConfigurationError(f"timeout_s must be positive, got {timeout_s}")

        return cls(
            stats_api_key=_require_key(stats_api_key, "STATS_API_KEY"),
            news_api_key=_require_key(news_api_key, "NEWS_API_KEY"),
            stats_base_url=_check_base_url(
                stats_base_url or DEFAULT_STATS_BASE_URL, "stats_base_url"
            ),
            news_base_url=_check_base_url(news_base_url or DEFAULT_NEWS_BASE_URL, "news_base_url"),
            timeout_s=30.0 if timeout_s is None else timeout_s,
            news=(news or NewsConfig()).validate(),
        )

    def validate(self) -> StatbookConfig:
        """Run the build(...) checks on an already constructed config."""
        return type(self).build(
            stats_api_key=self.stats_api_key,
            news_api_key=self.news_api_key,
            stats_base_url=self.stats_base_url,
            news_base_url=self.news_base_url,
            timeout_s=self.timeout_s,
            news=self.news,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> StatbookConfig:
        return cls.build(
            stats_api_key=settings.require_stats_api_key(),
            news_api_key=settings.require_news_api_key(),
            stats_base_url=settings.stats_base_url,
            news_base_url=settings.news_base_url,
            timeout_s=settings.http_timeout_s,
            news=NewsConfig(
                max_articles=settings.news_max_articles,
                days_back=settings.news_days_back,
                language=settings.news_language or None,
            ),
        )
