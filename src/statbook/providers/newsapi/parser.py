from __future__ import annotations

from typing import Any

from statbook.errors import NewsApiError
from statbook.models.news import Article, NewsQuery, PlayerNews

ApiItem = dict[str, Any]


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def parse_article(item: ApiItem) -> Article:
    source = item.get("source")
    source_name = _str(source.get("name")) if isinstance(source, dict) else ""

    return Article(
        title=_str(item.get("title")),
        description=_str(item.get("description")),
        content=_str(item.get("content")),
        published_at=_str(item.get("publishedAt")),
        url=_str(item.get("url")),
        source_name=source_name,
    )


def parse_player_news(payload: ApiItem, *, query: NewsQuery, status: int = 200) -> PlayerNews:
    """Parse a NewsAPI /everything payload.

    An `"status": "error"` body raises NewsApiError with the upstream code/message.
    Articles keep provider order and are truncated to the query's page size.
    """

    if payload.get("status") == "error":
        code = _str(payload.get("code")) or "error"
        message = _str(payload.get("message")) or "NewsAPI returned an error"
        raise NewsApiError(status, f"{code}: {message}")

    raw_articles = payload.get("articles")
    if not isinstance(raw_articles, list):
        raise NewsApiError(status, "Response missing/invalid articles list")

    articles = [parse_article(a) for a in raw_articles if isinstance(a, dict)]

    total = payload.get("totalResults")
    total_results = total if isinstance(total, int) and not isinstance(total, bool) else None

    return PlayerNews(
        articles=tuple(articles[: query.page_size]),
        query=query,
        total_results=total_results,
    )
