from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from statbook.errors import MissingCredentialError, StatsApiError
from statbook.models.player import PlayerStats
from statbook.providers.base.client import BaseHttpClient
from statbook.providers.mysportsfeeds.parser import parse_player_stats

if TYPE_CHECKING:
    from statbook.config import StatbookConfig

# MySportsFeeds authenticates with HTTP Basic: the API key as username and this
# fixed string as password.
MYSPORTSFEEDS_PASSWORD = "MYSPORTSFEEDS"

SPORT = "nfl"


class MySportsFeedsStatsProvider:
    """Stats provider backed by the MySportsFeeds v2.x REST API."""

    def __init__(self, *, http: BaseHttpClient) -> None:
        self.http = http

    @classmethod
    def create(
        cls,
        *,
        api_key: str,
        base_url: str = "https://api.mysportsfeeds.com/v2.1",
        timeout_s: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> MySportsFeedsStatsProvider:
        if not api_key or not api_key.strip():
            raise MissingCredentialError("STATS_API_KEY")

        http = BaseHttpClient(
            base_url=base_url,
            source="stats",
            api_error=StatsApiError,
            timeout_s=timeout_s,
            auth=(api_key, MYSPORTSFEEDS_PASSWORD),
            transport=transport,
        )
        return cls(http=http)

    @classmethod
    def from_config(
        cls,
        config: StatbookConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> MySportsFeedsStatsProvider:
        return cls.create(
            api_key=config.stats_api_key,
            base_url=config.stats_base_url,
            timeout_s=config.timeout_s,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> MySportsFeedsStatsProvider:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def fetch_player_stats(self, player: str, season: str) -> PlayerStats:
        """Season totals for one player.

        Endpoint: GET /pull/nfl/{season}/player_stats_totals.json?player=...
        """

        payload = await self.http.get_json(
            f"/pull/{SPORT}/{season}/player_stats_totals.json",
            params={"player": player},
        )
        return parse_player_stats(payload, player=player, season=season)
