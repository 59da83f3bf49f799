from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from statbook.models.news import Article


@dataclass(frozen=True)
class PlayerStats:
    first_name: str
    last_name: str
    primary_position: str
    jersey_number: int
    current_team: str
    injury: str
    rookie: bool
    games_played: int
    season: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class PlayerSummary:
    """
    Stats fields flattened next to the player's recent news.

    `news` is always a tuple: a failed news fetch shows up as an empty one.
    """

    first_name: str
    last_name: str
    primary_position: str
    jersey_number: int
    current_team: str
    injury: str
    rookie: bool
    games_played: int
    season: str
    news: tuple[Article, ...] = ()

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_parts(cls, stats: PlayerStats, articles: Iterable[Article] = ()) -> PlayerSummary:
        return cls(
            first_name=stats.first_name,
            last_name=stats.last_name,
            primary_position=stats.primary_position,
            jersey_number=stats.jersey_number,
            current_team=stats.current_team,
            injury=stats.injury,
            rookie=stats.rookie,
            games_played=stats.games_played,
            season=stats.season,
            news=tuple(articles),
        )

    @classmethod
    def news_only(cls, season: str, articles: Iterable[Article]) -> PlayerSummary:
        """Blank stats fields; only `season` and `news` carry data."""
        return cls(
            first_name="",
            last_name="",
            primary_position="",
            jersey_number=0,
            current_team="",
            injury="",
            rookie=False,
            games_played=0,
            season=season,
            news=tuple(articles),
        )
