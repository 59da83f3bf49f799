from __future__ import annotations

import base64

import httpx
import pytest

from statbook.errors import (
    MissingCredentialError,
    NetworkError,
    PlayerNotFoundError,
    StatsApiError,
)
from statbook.providers.mysportsfeeds.client import MySportsFeedsStatsProvider
from statbook.providers.mysportsfeeds.parser import parse_player_stats

JOSH_ALLEN_PAYLOAD = {
    "lastUpdatedOn": "2024-01-16T04:10:00.000Z",
    "playerStatsTotals": [
        {
            "player": {
                "id": 7549,
                "firstName": "Josh",
                "lastName": "Allen",
                "primaryPosition": "QB",
                "jerseyNumber": 17,
                "currentTeam": {"id": 48, "abbreviation": "BUF"},
                "currentInjury": None,
                "rookie": False,
            },
            "team": {"id": 48, "abbreviation": "BUF"},
            "stats": {"gamesPlayed": 17, "passing": {"passYards": 4306}},
        }
    ],
}


def _provider(handler) -> MySportsFeedsStatsProvider:
    return MySportsFeedsStatsProvider.create(
        api_key="test-key",
        base_url="https://api.mysportsfeeds.com/v2.1",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.anyio
async def test_fetch_player_stats_builds_request_and_parses() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/v2.1/pull/nfl/2023-2024-regular/player_stats_totals.json")
        assert request.url.params["player"] == "josh-allen"
        expected = base64.b64encode(b"test-key:MYSPORTSFEEDS").decode()
        assert request.headers["Authorization"] == f"Basic {expected}"
        return httpx.Response(200, json=JOSH_ALLEN_PAYLOAD)

    async with _provider(handler) as provider:
        stats = await provider.fetch_player_stats("josh-allen", "2023-2024-regular")

    assert stats.full_name == "Josh Allen"
    assert stats.primary_position == "QB"
    assert stats.jersey_number == 17
    assert stats.current_team == "BUF"
    assert stats.injury == ""
    assert stats.rookie is False
    assert stats.games_played == 17
    assert stats.season == "2023-2024-regular"


@pytest.mark.anyio
async def test_empty_result_is_player_not_found() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"playerStatsTotals": []})

    async with _provider(handler) as provider:
        with pytest.raises(PlayerNotFoundError) as excinfo:
            await provider.fetch_player_stats("nobody", "regular")
    assert excinfo.value.name == "nobody"


@pytest.mark.anyio
async def test_non_success_status_is_stats_api_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"message": "Bad credentials"})

    async with _provider(handler) as provider:
        with pytest.raises(StatsApiError) as excinfo:
            await provider.fetch_player_stats("josh-allen", "regular")
    assert excinfo.value.status == 401
    assert excinfo.value.message == "Bad credentials"


@pytest.mark.anyio
async def test_invalid_json_is_stats_api_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>oops</html>")

    async with _provider(handler) as provider:
        with pytest.raises(StatsApiError) as excinfo:
            await provider.fetch_player_stats("josh-allen", "regular")
    assert excinfo.value.status == 200


@pytest.mark.anyio
async def test_transport_failure_is_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    async with _provider(handler) as provider:
        with pytest.raises(NetworkError) as excinfo:
            await provider.fetch_player_stats("josh-allen", "regular")
    assert excinfo.value.source == "stats"
    assert isinstance(excinfo.value.__cause__, httpx.ConnectTimeout)


def test_missing_key() -> None:
    with pytest.raises(MissingCredentialError):
        MySportsFeedsStatsProvider.create(api_key=" ")


def test_parser_defaults_and_fallbacks() -> None:
    payload = {
        "playerStatsTotals": [
            {
                "player": {
                    "firstName": "Rookie",
                    "lastName": "Player",
                    "jerseyNumber": -4,
                    "currentInjury": {"description": "Ankle", "playingProbability": "QUESTIONABLE"},
                    "rookie": True,
                },
                "team": {"abbreviation": "KC"},
            }
        ]
    }

    stats = parse_player_stats(payload, player="rookie-player", season="latest")

    assert stats.primary_position == ""
    assert stats.jersey_number == 0
    assert stats.current_team == "KC"
    assert stats.injury == "Ankle"
    assert stats.rookie is True
    assert stats.games_played == 0
    assert stats.season == "latest"
