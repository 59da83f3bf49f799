from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from statbook.errors import ApiError, NetworkError

logger = logging.getLogger(__name__)

Json = dict[str, Any]


@dataclass
class BaseHttpClient:
    """
    Provider-agnostic async HTTP client wrapper.

    - Uses a single underlying httpx.AsyncClient for connection pooling; it is safe to
      share across concurrent requests.
    - Provides consistent error handling: transport failures raise NetworkError,
      non-2xx and non-JSON responses raise `api_error` (the source's ApiError subclass).
    - Provider-specific clients wrap it and add endpoints / auth.
    """

    base_url: str
    source: str
    api_error: type[ApiError] = ApiError
    timeout_s: float = 30.0
    connect_timeout_s: float = 10.0
    headers: Mapping[str, str] = field(default_factory=dict)
    auth: tuple[str, str] | None = None

    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        self._client = httpx.AsyncClient(
            base_url=self.base_url.rstrip("/") + "/",
            timeout=httpx.Timeout(self.timeout_s, connect=self.connect_timeout_s),
            headers=dict(self.headers),
            auth=self.auth,
            transport=self.transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> BaseHttpClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Json:
        """
        Perform an HTTP request and return parsed JSON (dict).
        Raises NetworkError on transport issues and `api_error` on non-2xx / bad bodies.
        """
        try:
            resp = await self._client.request(
                method=method,
                url=path.lstrip("/"),
                params=params,
                headers=headers,
            )
        except httpx.TransportError as e:
            raise NetworkError(str(e) or type(e).__name__, source=self.source) from e

        logger.debug("%s %s -> HTTP %s", method, resp.request.url.path, resp.status_code)

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self.api_error(
                resp.status_code, _error_message(resp, f"HTTP {resp.status_code} for {method}")
            ) from e

        try:
            data = resp.json()
        except ValueError as e:
            raise self.api_error(resp.status_code, "Response was not valid JSON.") from e

        if not isinstance(data, dict):
            raise self.api_error(resp.status_code, f"Expected JSON object, got {type(data)}")

        return data

    async def get_json(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Json:
        return await self.request_json("GET", path, params=params, headers=headers)


def _error_message(resp: httpx.Response, fallback: str) -> str:
    # Both upstreams put a human readable reason in a top-level "message" field.
    try:
        body = resp.json()
    except ValueError:
        return fallback
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return fallback
