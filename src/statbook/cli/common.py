from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

import typer

from statbook.client import StatbookClient
from statbook.errors import StatbookError
from statbook.models.season import YearRange

T = TypeVar("T")


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def make_client(*, mock: bool) -> StatbookClient:
    if mock:
        return StatbookClient.with_mocks()
    return StatbookClient.from_env()


def parse_years(value: str | None) -> YearRange | None:
    if value is None or not value.strip():
        return None
    return YearRange.parse(value)


def run_with_client(mock: bool, action: Callable[[StatbookClient], Awaitable[T]]) -> T:
    """
    Build a client, run one async action against it and close it afterwards.
    StatbookError becomes a message on stderr and exit code 1.
    """

    async def _run() -> T:
        async with make_client(mock=mock) as client:
            return await action(client)

    try:
        return asyncio.run(_run())
    except StatbookError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e
