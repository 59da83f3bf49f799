from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from statbook.cli.app import app

runner = CliRunner()


def test_cli_help_smoke() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("stats", "news", "summary"):
        assert command in result.stdout


def test_stats_with_mock_providers() -> None:
    result = runner.invoke(app, ["stats", "Josh Allen", "--mock", "--years", "2023-2024"])
    assert result.exit_code == 0
    assert "Josh Allen QB #17" in result.stdout
    assert "season=2023-2024-regular" in result.stdout


def test_news_with_mock_providers() -> None:
    result = runner.invoke(app, ["news", "josh-allen", "--mock", "--page-size", "1"])
    assert result.exit_code == 0
    assert "Found 1 news articles for josh-allen" in result.stdout


def test_summary_with_mock_providers() -> None:
    result = runner.invoke(app, ["summary", "tom-brady", "--mock", "--season", "playoffs"])
    assert result.exit_code == 0
    assert "Tom Brady - QB (TB)" in result.stdout
    assert "season=playoffs" in result.stdout
    assert "Brady announces retirement" in result.stdout


def test_unknown_player_exits_with_error() -> None:
    result = runner.invoke(app, ["summary", "nobody", "--mock"])
    assert result.exit_code == 1
    assert "Player 'nobody' not found" in result.output


def test_invalid_year_range_exits_with_error() -> None:
    result = runner.invoke(app, ["stats", "josh-allen", "--mock", "--years", "soon"])
    assert result.exit_code == 1
    assert "invalid year range" in result.output


def test_missing_credentials_exit_with_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("STATS_API_KEY", raising=False)
    monkeypatch.delenv("NEWS_API_KEY", raising=False)
    # No stray .env file.
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["stats", "josh-allen"])
    assert result.exit_code == 1
    assert "STATS_API_KEY" in result.output


def test_malformed_settings_exit_with_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STATS_API_KEY", "s")
    monkeypatch.setenv("NEWS_API_KEY", "n")
    monkeypatch.setenv("NEWS_MAX_ARTICLES", "abc")
    result = runner.invoke(app, ["stats", "josh-allen"])
    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_summary_stats_only_strategy() -> None:
    result = runner.invoke(
        app, ["summary", "josh-allen", "--mock", "--strategy", "stats-only"]
    )
    assert result.exit_code == 0
    assert "Josh Allen - QB (BUF)" in result.stdout
    assert "No news articles." in result.stdout
