from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import replace

from statbook.errors import NewsApiError, PlayerNotFoundError, StatbookError
from statbook.models.news import Article, NewsQuery, PlayerNews
from statbook.models.player import PlayerStats

ErrorFactory = Callable[[], StatbookError]


def _default_news_error() -> StatbookError:
    return NewsApiError(500, "Mock news error")


class MockStatsProvider:
    """
    Deterministic in-memory stats provider.

    Entries are keyed by (player, season); an entry registered without a season
    answers for every season and echoes the requested token back on the result.
    Registration is meant to happen before the provider is shared; serving only reads.
    Errors are registered as factories so every call raises its own instance.
    """

    def __init__(self, *, delay_s: float = 0.0) -> None:
        self.delay_s = delay_s
        self._responses: dict[tuple[str, str | None], PlayerStats] = {}
        self._errors: dict[str, ErrorFactory] = {}
        self.calls: list[tuple[str, str]] = []

    @classmethod
    def with_defaults(cls, *, delay_s: float = 0.0) -> MockStatsProvider:
        provider = cls(delay_s=delay_s)
        provider.add_player_stats(
            "josh-allen",
            PlayerStats(
                first_name="Josh",
                last_name="Allen",
                primary_position="QB",
                jersey_number=17,
                current_team="BUF",
                injury="",
                rookie=False,
                games_played=16,
                season="regular",
            ),
        )
        provider.add_player_stats(
            "tom-brady",
            PlayerStats(
                first_name="Tom",
                last_name="Brady",
                primary_position="QB",
                jersey_number=12,
                current_team="TB",
                injury="",
                rookie=False,
                games_played=17,
                season="regular",
            ),
        )
        return provider

    def add_player_stats(
        self, player: str, stats: PlayerStats, *, season: str | None = None
    ) -> None:
        self._responses[(player, season)] = stats

    def add_player_error(self, player: str, make_error: ErrorFactory) -> None:
        self._errors[player] = make_error

    def add_player_not_found(self, player: str) -> None:
        self._errors[player] = lambda: PlayerNotFoundError(player)

    async def fetch_player_stats(self, player: str, season: str) -> PlayerStats:
        self.calls.append((player, season))
        if self.delay_s > 0:
            await asyncio.sleep(self.delay_s)

        make_error = self._errors.get(player)
        if make_error is not None:
            raise make_error()

        stats = self._responses.get((player, season))
        if stats is None:
            stats = self._responses.get((player, None))
        if stats is None:
            raise PlayerNotFoundError(player)

        return replace(stats, season=season)


class MockNewsProvider:
    """Deterministic in-memory news provider; unknown players get no articles."""

    def __init__(self, *, delay_s: float = 0.0) -> None:
        self.delay_s = delay_s
        self._responses: dict[str, tuple[Article, ...]] = {}
        self._errors: dict[str, ErrorFactory] = {}
        self.calls: list[NewsQuery] = []

    @classmethod
    def with_defaults(cls, *, delay_s: float = 0.0) -> MockNewsProvider:
        provider = cls(delay_s=delay_s)
        provider.add_news_articles(
            "josh-allen",
            [
                Article(
                    title="Josh Allen leads Bills to victory",
                    description="Quarterback throws for 300 yards",
                    content="Full article content here...",
                    published_at="2024-01-15T10:00:00Z",
                ),
                Article(
                    title="Allen named AFC Player of the Week",
                    description="Recognition for outstanding performance",
                    content="More article content...",
                    published_at="2024-01-14T15:30:00Z",
                ),
            ],
        )
        provider.add_news_articles(
            "tom-brady",
            [
                Article(
                    title="Brady announces retirement",
                    description="Legendary quarterback calls it a career",
                    content="Retirement announcement content...",
                    published_at="2024-01-10T12:00:00Z",
                )
            ],
        )
        return provider

    def add_news_articles(self, player: str, articles: list[Article]) -> None:
        self._responses[player] = tuple(articles)

    def add_news_error(self, player: str, make_error: ErrorFactory | None = None) -> None:
        self._errors[player] = make_error or _default_news_error

    async def fetch_player_news(self, query: NewsQuery) -> PlayerNews:
        self.calls.append(query)
        if self.delay_s > 0:
            await asyncio.sleep(self.delay_s)

        make_error = self._errors.get(query.player)
        if make_error is not None:
            raise make_error()

        articles = self._responses.get(query.player, ())
        return PlayerNews(
            articles=articles[: query.page_size],
            query=query,
            total_results=len(articles),
        )
