from __future__ import annotations

from typing import Any

from statbook.errors import PlayerNotFoundError
from statbook.models.player import PlayerStats

ApiItem = dict[str, Any]


def _str(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _non_negative_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(value, 0)


def _team_abbreviation(player_info: ApiItem, entry: ApiItem) -> str:
    for team in (player_info.get("currentTeam"), entry.get("team")):
        if isinstance(team, dict):
            abbreviation = _str(team.get("abbreviation"))
            if abbreviation:
                return abbreviation
    return ""


def _injury(value: Any) -> str:
    # v2.x reports {"description": ..., "playingProbability": ...}; older feeds a plain string.
    if isinstance(value, dict):
        return _str(value.get("description"))
    return _str(value)


def parse_player_stats(payload: ApiItem, *, player: str, season: str) -> PlayerStats:
    """Parse a player_stats_totals.json payload into PlayerStats.

    Uses the first `playerStatsTotals` entry; an empty (or missing) list means the
    source had no player matching `player`. Missing optional fields default to
    empty / zero / False. `season` is echoed onto the result.
    """

    entries = payload.get("playerStatsTotals")
    if not isinstance(entries, list):
        raise PlayerNotFoundError(player)

    entry = next((e for e in entries if isinstance(e, dict)), None)
    if entry is None:
        raise PlayerNotFoundError(player)

    player_info = entry.get("player")
    if not isinstance(player_info, dict):
        player_info = {}

    stats = entry.get("stats")
    if not isinstance(stats, dict):
        stats = {}

    return PlayerStats(
        first_name=_str(player_info.get("firstName")),
        last_name=_str(player_info.get("lastName")),
        primary_position=_str(player_info.get("primaryPosition")),
        jersey_number=_non_negative_int(player_info.get("jerseyNumber")),
        current_team=_team_abbreviation(player_info, entry),
        injury=_injury(player_info.get("currentInjury")),
        rookie=player_info.get("rookie") is True,
        games_played=_non_negative_int(stats.get("gamesPlayed")),
        season=season,
    )
