from __future__ import annotations

from datetime import date

import pytest

from statbook.errors import ValidationError
from statbook.models.news import Article, NewsQuery, PlayerNews, SortBy


def test_for_player_defaults() -> None:
    query = NewsQuery.for_player("josh-allen")
    assert query.player == "josh-allen"
    assert query.page_size == 5
    assert query.from_date is None
    assert query.sort_by is SortBy.RECENCY
    assert query.language is None


def test_with_methods_never_mutate_the_original() -> None:
    original = NewsQuery.for_player("josh-allen")
    bigger = original.with_page_size(10)

    assert bigger.page_size == 10
    assert original.page_size == 5
    assert bigger is not original

    dated = original.with_date_range("2024-01-01").with_sort_by("popularity")
    assert dated.from_date == date(2024, 1, 1)
    assert dated.sort_by is SortBy.POPULARITY
    assert original.from_date is None
    assert original.sort_by is SortBy.RECENCY


def test_blank_date_clears_the_filter() -> None:
    query = NewsQuery.for_player("josh-allen").with_date_range(date(2024, 1, 1))
    assert query.with_date_range("").from_date is None


@pytest.mark.parametrize("player", ["", "   "])
def test_empty_player_rejected(player: str) -> None:
    with pytest.raises(ValidationError):
        NewsQuery.for_player(player)


@pytest.mark.parametrize("page_size", [0, -3])
def test_non_positive_page_size_rejected(page_size: int) -> None:
    with pytest.raises(ValidationError):
        NewsQuery.for_player("josh-allen").with_page_size(page_size)


def test_bad_inputs_rejected() -> None:
    query = NewsQuery.for_player("josh-allen")
    with pytest.raises(ValidationError):
        query.with_date_range("01/02/2024")
    with pytest.raises(ValidationError):
        query.with_sort_by("newest")


def test_player_news_is_a_sized_iterable() -> None:
    query = NewsQuery.for_player("josh-allen")
    article = Article(title="t", description="d", content="c", published_at="2024-01-01T00:00:00Z")
    news = PlayerNews(articles=[article], query=query, total_results=12)

    assert len(news) == 1
    assert list(news) == [article]
    assert news.articles == (article,)
    assert len(PlayerNews.empty(query)) == 0
