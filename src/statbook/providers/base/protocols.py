from __future__ import annotations

from typing import Protocol, runtime_checkable

from statbook.models.news import NewsQuery, PlayerNews
from statbook.models.player import PlayerStats


@runtime_checkable
class StatsProvider(Protocol):
    """
    The client depends on this, not on any HTTP client.

    Implementations must be safe to await concurrently from several in-flight requests.
    """

    async def fetch_player_stats(self, player: str, season: str) -> PlayerStats:
        """
        Resolve `player` against the source and return its stats for `season`.

        Raises PlayerNotFoundError when nothing matches, StatsApiError for non-success
        responses and NetworkError for transport failures.
        """
        ...


@runtime_checkable
class NewsProvider(Protocol):
    async def fetch_player_news(self, query: NewsQuery) -> PlayerNews:
        """
        Paging, date range, sort order and language are passed through best-effort.
        Raises NewsApiError / NetworkError on failure.
        """
        ...
