from __future__ import annotations

import typer

from statbook.cli.common import configure_logging, parse_years, run_with_client
from statbook.client import StatbookClient, normalize_player
from statbook.models.fetch import FetchStrategy
from statbook.models.news import Article, NewsQuery, SortBy
from statbook.models.season import Season

app = typer.Typer(no_args_is_help=True, help="Player stats and news from one client.")

MOCK_HELP = "Serve from the built-in mock providers instead of the real APIs."


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    configure_logging(verbose)


def _echo_articles(articles: tuple[Article, ...] | list[Article]) -> None:
    if not articles:
        typer.echo("No news articles.")
        return
    for i, article in enumerate(articles, start=1):
        typer.echo(f"  {i}. {article.title} ({article.published_at})")
        if article.description:
            typer.echo(f"     {article.description}")


@app.command("stats")
def stats_cmd(
    player: str = typer.Argument(..., help="Player name or slug (e.g. josh-allen)."),
    season: Season = typer.Option(Season.REGULAR, "--season", help="Season variant."),
    years: str | None = typer.Option(None, "--years", help="Explicit years, e.g. 2023-2024."),
    mock: bool = typer.Option(False, "--mock", help=MOCK_HELP),
) -> None:
    """Fetch season stats for one player."""

    async def action(client: StatbookClient) -> None:
        stats = await client.get_player_stats(player, parse_years(years), season)
        typer.echo(
            " ".join(
                [
                    f"{stats.full_name} {stats.primary_position} #{stats.jersey_number}",
                    f"team={stats.current_team}",
                    f"games_played={stats.games_played}",
                    f"season={stats.season}",
                    f"injury={stats.injury or 'healthy'}",
                ]
            )
        )

    run_with_client(mock, action)


@app.command("news")
def news_cmd(
    player: str = typer.Argument(..., help="Player name or slug (e.g. josh-allen)."),
    page_size: int = typer.Option(5, "--page-size", help="Maximum number of articles."),
    from_date: str | None = typer.Option(None, "--from-date", help="Oldest date, YYYY-MM-DD."),
    sort_by: SortBy = typer.Option(SortBy.RECENCY, "--sort-by", help="Result ordering."),
    mock: bool = typer.Option(False, "--mock", help=MOCK_HELP),
) -> None:
    """Fetch recent news articles for one player."""

    async def action(client: StatbookClient) -> None:
        query = (
            NewsQuery.for_player(normalize_player(player))
            .with_page_size(page_size)
            .with_date_range(from_date)
            .with_sort_by(sort_by)
        )
        news = await client.get_player_news(query)
        typer.echo(f"Found {len(news)} news articles for {query.player}:")
        _echo_articles(news.articles)

    run_with_client(mock, action)


@app.command("summary")
def summary_cmd(
    player: str = typer.Argument(..., help="Player name or slug (e.g. josh-allen)."),
    season: Season = typer.Option(Season.REGULAR, "--season", help="Season variant."),
    years: str | None = typer.Option(None, "--years", help="Explicit years, e.g. 2023-2024."),
    strategy: FetchStrategy = typer.Option(
        FetchStrategy.BOTH, "--strategy", help="What to fetch and how news failures are handled."
    ),
    mock: bool = typer.Option(False, "--mock", help=MOCK_HELP),
) -> None:
    """Fetch stats and news for one player; --strategy picks what runs and how news errors surface."""

    async def action(client: StatbookClient) -> None:
        summary = await client.get_player_summary(
            player, parse_years(years), season, strategy=strategy
        )
        typer.echo(
            f"{summary.full_name} - {summary.primary_position} ({summary.current_team}) "
            f"#{summary.jersey_number} | {summary.games_played} games | season={summary.season}"
        )
        _echo_articles(summary.news)

    run_with_client(mock, action)
