from __future__ import annotations

import pytest

from statbook.errors import ValidationError
from statbook.models.season import Season, SeasonDescriptor, YearRange, resolve_season_token


@pytest.mark.parametrize(
    ("season", "expected"),
    [
        (Season.REGULAR, "regular"),
        (Season.PLAYOFFS, "playoffs"),
        (Season.CURRENT, "current"),
        (Season.LATEST, "latest"),
        (Season.UPCOMING, "upcoming"),
    ],
)
def test_bare_season_tokens(season: Season, expected: str) -> None:
    assert resolve_season_token(season) == expected


def test_year_range_tokens() -> None:
    assert resolve_season_token(Season.PLAYOFFS, (2023, 2024)) == "2023-2024-playoffs"
    assert resolve_season_token(Season.REGULAR, YearRange(2022, 2023)) == "2022-2023-regular"


def test_token_is_deterministic() -> None:
    a = SeasonDescriptor(Season.REGULAR, (2023, 2024))
    b = SeasonDescriptor("REGULAR", YearRange(2023, 2024))
    assert a == b
    assert a.token == b.token == "2023-2024-regular"


@pytest.mark.parametrize("season", [Season.CURRENT, Season.LATEST, Season.UPCOMING])
def test_open_ended_seasons_reject_year_range(season: Season) -> None:
    with pytest.raises(ValidationError):
        resolve_season_token(season, (2023, 2024))


def test_year_range_validation() -> None:
    with pytest.raises(ValidationError):
        YearRange(2024, 2023)
    with pytest.raises(ValidationError):
        YearRange(0, 2023)
    with pytest.raises(ValidationError):
        resolve_season_token(Season.REGULAR, (2023,))  # type: ignore[arg-type]


def test_unknown_season_variant() -> None:
    with pytest.raises(ValidationError):
        resolve_season_token("preseason")


def test_year_range_parse() -> None:
    assert YearRange.parse("2023-2024") == YearRange(2023, 2024)
    assert YearRange.parse(" 2024 ") == YearRange(2024, 2024)
    with pytest.raises(ValidationError):
        YearRange.parse("last-year")
    with pytest.raises(ValidationError):
        YearRange.parse("2021-2022-2023")
