from __future__ import annotations

from enum import StrEnum

from statbook.errors import ValidationError


class FetchStrategy(StrEnum):
    """
    What a summary fetches and how a news failure is treated.

    BOTH is the default: stats and news run concurrently and a news failure leaves
    the news empty. BOTH_STRICT raises the news error instead. STATS_ONLY never
    calls the news provider; NEWS_ONLY never calls the stats provider and leaves
    the stats fields blank.
    """

    BOTH = "both"
    BOTH_STRICT = "both-strict"
    STATS_ONLY = "stats-only"
    NEWS_ONLY = "news-only"


def coerce_strategy(value: FetchStrategy | str) -> FetchStrategy:
    try:
        return FetchStrategy(value.lower() if isinstance(value, str) else value)
    except ValueError as e:
        raise ValidationError(f"unknown fetch strategy {value!r}") from e
