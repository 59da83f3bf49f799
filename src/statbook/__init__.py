"""Player statistics and player news behind one async client."""

from statbook.client import StatbookClient
from statbook.config import NewsConfig, StatbookConfig
from statbook.errors import (
    ApiError,
    ConfigurationError,
    MissingCredentialError,
    NetworkError,
    NewsApiError,
    PlayerNotFoundError,
    StatbookError,
    StatsApiError,
    ValidationError,
)
from statbook.models import (
    Article,
    FetchStrategy,
    NewsQuery,
    PlayerNews,
    PlayerStats,
    PlayerSummary,
    Season,
    SeasonDescriptor,
    SortBy,
    YearRange,
    resolve_season_token,
)
from statbook.providers.base.protocols import NewsProvider, StatsProvider
from statbook.providers.mock import MockNewsProvider, MockStatsProvider

__all__ = [
    "ApiError",
    "Article",
    "ConfigurationError",
    "FetchStrategy",
    "MissingCredentialError",
    "MockNewsProvider",
    "MockStatsProvider",
    "NetworkError",
    "NewsApiError",
    "NewsConfig",
    "NewsProvider",
    "NewsQuery",
    "PlayerNews",
    "PlayerNotFoundError",
    "PlayerStats",
    "PlayerSummary",
    "Season",
    "SeasonDescriptor",
    "SortBy",
    "StatbookClient",
    "StatbookConfig",
    "StatbookError",
    "StatsApiError",
    "StatsProvider",
    "ValidationError",
    "YearRange",
    "resolve_season_token",
]
