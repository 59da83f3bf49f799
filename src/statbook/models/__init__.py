from statbook.models.fetch import FetchStrategy
from statbook.models.news import Article, NewsQuery, PlayerNews, SortBy
from statbook.models.player import PlayerStats, PlayerSummary
from statbook.models.season import (
    Season,
    SeasonDescriptor,
    YearRange,
    resolve_season_token,
)

__all__ = [
    "Article",
    "FetchStrategy",
    "NewsQuery",
    "PlayerNews",
    "PlayerStats",
    "PlayerSummary",
    "Season",
    "SeasonDescriptor",
    "SortBy",
    "YearRange",
    "resolve_season_token",
]
