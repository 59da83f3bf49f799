from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from datetime import date
from enum import StrEnum

from statbook.errors import ValidationError

DEFAULT_PAGE_SIZE = 5


class SortBy(StrEnum):
    RELEVANCY = "relevancy"
    RECENCY = "recency"
    POPULARITY = "popularity"


def _parse_from_date(value: date | str | None) -> date | None:
    if value is None or isinstance(value, date):
        return value
    v = value.strip()
    if not v:
        return None
    try:
        return date.fromisoformat(v)
    except ValueError as e:
        raise ValidationError(f"from_date must be an ISO date (YYYY-MM-DD), got {value!r}") from e


@dataclass(frozen=True)
class NewsQuery:
    """
    Parameters for a player news search.

    Immutable: every with_* call returns a new query and leaves the receiver untouched.
    """

    player: str
    page_size: int = DEFAULT_PAGE_SIZE
    from_date: date | None = None
    sort_by: SortBy = SortBy.RECENCY
    language: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.player, str) or not self.player.strip():
            raise ValidationError("news query requires a non-empty player identifier")
        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int):
            raise ValidationError(f"page_size must be an integer, got {self.page_size!r}")
        if self.page_size < 1:
            raise ValidationError(f"page_size must be positive, got {self.page_size}")

        object.__setattr__(self, "from_date", _parse_from_date(self.from_date))
        try:
            object.__setattr__(self, "sort_by", SortBy(self.sort_by))
        except ValueError as e:
            raise ValidationError(f"unknown sort order {self.sort_by!r}") from e

    @classmethod
    def for_player(cls, player: str) -> NewsQuery:
        """Default query: newest first, 5 articles, no date filter."""
        return cls(player=player)

    def with_page_size(self, page_size: int) -> NewsQuery:
        return replace(self, page_size=page_size)

    def with_date_range(self, from_date: date | str | None) -> NewsQuery:
        return replace(self, from_date=from_date)

    def with_sort_by(self, sort_by: SortBy | str) -> NewsQuery:
        return replace(self, sort_by=sort_by)

    def with_language(self, language: str | None) -> NewsQuery:
        return replace(self, language=language)


@dataclass(frozen=True)
class Article:
    title: str
    description: str
    content: str
    published_at: str
    url: str = ""
    source_name: str = ""


@dataclass(frozen=True)
class PlayerNews:
    """Articles in provider order, plus the query that produced them."""

    articles: tuple[Article, ...]
    query: NewsQuery
    total_results: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "articles", tuple(self.articles))

    def __iter__(self) -> Iterator[Article]:
        return iter(self.articles)

    def __len__(self) -> int:
        return len(self.articles)

    @classmethod
    def empty(cls, query: NewsQuery) -> PlayerNews:
        return cls(articles=(), query=query, total_results=0)
