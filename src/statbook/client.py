from __future__ import annotations

import asyncio
import logging
from typing import Any

from statbook.config import NewsConfig, StatbookConfig
from statbook.core.config import load_settings
from statbook.core.text import to_dash_case
from statbook.errors import ValidationError
from statbook.models.fetch import FetchStrategy, coerce_strategy
from statbook.models.news import Article, NewsQuery, PlayerNews
from statbook.models.player import PlayerStats, PlayerSummary
from statbook.models.season import Season, YearRangeLike, resolve_season_token
from statbook.providers.base.protocols import NewsProvider, StatsProvider
from statbook.providers.mock import MockNewsProvider, MockStatsProvider
from statbook.providers.mysportsfeeds.client import MySportsFeedsStatsProvider
from statbook.providers.newsapi.client import NewsApiProvider

logger = logging.getLogger(__name__)


def normalize_player(identifier: str) -> str:
    if not isinstance(identifier, str) or not identifier.strip():
        raise ValidationError("player identifier must be a non-empty string")
    return to_dash_case(identifier)


class StatbookClient:
    """
    One stats provider and one news provider behind a single async interface.

    Providers are fixed at construction and shared by every call; the client itself
    keeps no per-request state, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        stats_provider: StatsProvider,
        news_provider: NewsProvider,
        *,
        news_config: NewsConfig | None = None,
    ) -> None:
        self._stats_provider = stats_provider
        self._news_provider = news_provider
        self._news_config = (news_config or NewsConfig()).validate()

    @classmethod
    def from_config(cls, config: StatbookConfig) -> StatbookClient:
        # Validate everything before either HTTP client is opened.
        config = config.validate()
        return cls(
            MySportsFeedsStatsProvider.from_config(config),
            NewsApiProvider.from_config(config),
            news_config=config.news,
        )

    @classmethod
    def from_env(cls) -> StatbookClient:
        """Read STATS_API_KEY / NEWS_API_KEY (and friends) from the environment or .env."""
        return cls.from_config(StatbookConfig.from_settings(load_settings()))

    @classmethod
    def with_mocks(
        cls,
        stats: MockStatsProvider | None = None,
        news: MockNewsProvider | None = None,
    ) -> StatbookClient:
        return cls(
            stats if stats is not None else MockStatsProvider.with_defaults(),
            news if news is not None else MockNewsProvider.with_defaults(),
        )

    @property
    def stats_provider(self) -> StatsProvider:
        return self._stats_provider

    @property
    def news_provider(self) -> NewsProvider:
        return self._news_provider

    @property
    def news_config(self) -> NewsConfig:
        return self._news_config

    async def aclose(self) -> None:
        for provider in (self._stats_provider, self._news_provider):
            aclose = getattr(provider, "aclose", None)
            if aclose is not None:
                await aclose()

    async def __aenter__(self) -> StatbookClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def get_player_stats(
        self,
        identifier: str,
        year_range: YearRangeLike | None = None,
        season: Season | str = Season.REGULAR,
    ) -> PlayerStats:
        """Stats only. Provider errors propagate unchanged."""

        player = normalize_player(identifier)
        token = resolve_season_token(season, year_range)
        logger.debug("Fetching stats for %s (season=%s)", player, token)
        return await self._stats_provider.fetch_player_stats(player, token)

    async def get_player_news(self, query: NewsQuery) -> PlayerNews:
        """News only. Provider errors propagate unchanged."""

        if not isinstance(query, NewsQuery):
            raise ValidationError(f"expected a NewsQuery, got {type(query).__name__}")
        logger.debug("Fetching news for %s (page_size=%s)", query.player, query.page_size)
        return await self._news_provider.fetch_player_news(query)

    async def get_player_summary(
        self,
        identifier: str,
        year_range: YearRangeLike | None = None,
        season: Season | str = Season.REGULAR,
        *,
        strategy: FetchStrategy | str = FetchStrategy.BOTH,
    ) -> PlayerSummary:
        """
        Stats and news fetched concurrently, merged into one summary.

        Stats is mandatory: its failure fails the summary. With the default BOTH
        strategy news is best-effort: any failure there yields a summary with an
        empty news tuple and is not raised. BOTH_STRICT raises it instead.
        STATS_ONLY and NEWS_ONLY call a single provider; see FetchStrategy.
        """

        player = normalize_player(identifier)
        token = resolve_season_token(season, year_range)
        strategy = coerce_strategy(strategy)

        if strategy is FetchStrategy.STATS_ONLY:
            stats = await self._stats_provider.fetch_player_stats(player, token)
            return PlayerSummary.from_parts(stats)

        query = self._news_config.query_for(player)

        if strategy is FetchStrategy.NEWS_ONLY:
            news = await self._news_provider.fetch_player_news(query)
            return PlayerSummary.news_only(token, news)

        # Both calls are in flight before either result is looked at.
        stats_result, news_result = await asyncio.gather(
            self._stats_provider.fetch_player_stats(player, token),
            self._news_provider.fetch_player_news(query),
            return_exceptions=True,
        )

        if isinstance(stats_result, BaseException):
            raise stats_result
        if strategy is FetchStrategy.BOTH_STRICT and isinstance(news_result, BaseException):
            raise news_result

        return PlayerSummary.from_parts(stats_result, self._articles_or_empty(player, news_result))

    @staticmethod
    def _articles_or_empty(player: str, news_result: Any) -> tuple[Article, ...]:
        if isinstance(news_result, Exception):
            logger.warning(
                "News fetch failed for %s; returning summary without articles: %s",
                player,
                news_result,
            )
            return ()
        if isinstance(news_result, BaseException):
            raise news_result
        return tuple(news_result)
