from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from statbook.core.text import dash_case_to_words
from statbook.errors import MissingCredentialError, NewsApiError
from statbook.models.news import NewsQuery, PlayerNews, SortBy
from statbook.providers.base.client import BaseHttpClient
from statbook.providers.newsapi.parser import parse_player_news

if TYPE_CHECKING:
    from statbook.config import StatbookConfig

MAX_PAGE_SIZE = 100

_SORT_PARAMS = {
    SortBy.RELEVANCY: "relevancy",
    SortBy.RECENCY: "publishedAt",
    SortBy.POPULARITY: "popularity",
}


class NewsApiProvider:
    """News provider backed by newsapi.org.

    Date filtering (`from`) is only sent when the query sets one; the free tier rejects it.
    """

    def __init__(self, *, http: BaseHttpClient, api_key: str) -> None:
        if not api_key or not api_key.strip():
            raise MissingCredentialError("NEWS_API_KEY")
        self.http = http
        self.api_key = api_key

    @classmethod
    def create(
        cls,
        *,
        api_key: str,
        base_url: str = "https://newsapi.org/v2",
        timeout_s: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> NewsApiProvider:
        if not api_key or not api_key.strip():
            raise MissingCredentialError("NEWS_API_KEY")

        http = BaseHttpClient(
            base_url=base_url,
            source="news",
            api_error=NewsApiError,
            timeout_s=timeout_s,
            headers={"User-Agent": "statbook/0.1"},
            transport=transport,
        )
        return cls(http=http, api_key=api_key)

    @classmethod
    def from_config(
        cls,
        config: StatbookConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> NewsApiProvider:
        return cls.create(
            api_key=config.news_api_key,
            base_url=config.news_base_url,
            timeout_s=config.timeout_s,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> NewsApiProvider:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def build_params(self, query: NewsQuery) -> dict[str, str]:
        params: dict[str, str] = {
            "q": dash_case_to_words(query.player),
            "pageSize": str(min(query.page_size, MAX_PAGE_SIZE)),
            "sortBy": _SORT_PARAMS[query.sort_by],
            "apiKey": self.api_key,
        }
        if query.from_date is not None:
            params["from"] = query.from_date.isoformat()
        if query.language:
            params["language"] = query.language
        return params

    async def fetch_player_news(self, query: NewsQuery) -> PlayerNews:
        """Endpoint: GET /everything?q=...&pageSize=...&sortBy=..."""

        payload = await self.http.get_json("/everything", params=self.build_params(query))
        return parse_player_news(payload, query=query)
