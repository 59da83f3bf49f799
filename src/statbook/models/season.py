from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from statbook.errors import ValidationError


class Season(StrEnum):
    REGULAR = "regular"
    PLAYOFFS = "playoffs"
    CURRENT = "current"
    LATEST = "latest"
    UPCOMING = "upcoming"


# Only these variants can be pinned to explicit years.
_RANGED_SEASONS = frozenset({Season.REGULAR, Season.PLAYOFFS})


@dataclass(frozen=True)
class YearRange:
    start: int
    end: int

    def __post_init__(self) -> None:
        for label, year in (("start", self.start), ("end", self.end)):
            if isinstance(year, bool) or not isinstance(year, int) or year <= 0:
                raise ValidationError(f"year range {label} must be a positive integer, got {year!r}")
        if self.end < self.start:
            raise ValidationError(
                f"year range end ({self.end}) must not precede start ({self.start})"
            )

    @classmethod
    def parse(cls, value: str) -> YearRange:
        """Parse "2023-2024" (or a single "2024", meaning 2024-2024)."""

        parts = [p.strip() for p in value.strip().split("-")]
        try:
            years = [int(p) for p in parts]
        except ValueError as e:
            raise ValidationError(f"invalid year range {value!r}") from e

        if len(years) == 1:
            return cls(years[0], years[0])
        if len(years) == 2:
            return cls(years[0], years[1])
        raise ValidationError(f"invalid year range {value!r}")


YearRangeLike = YearRange | tuple[int, int]


def _coerce_year_range(value: YearRangeLike | None) -> YearRange | None:
    if value is None or isinstance(value, YearRange):
        return value
    if isinstance(value, tuple) and len(value) == 2:
        return YearRange(*value)
    raise ValidationError(f"year range must be a YearRange or (start, end) tuple, got {value!r}")


def _coerce_season(value: Season | str) -> Season:
    try:
        return Season(value.lower() if isinstance(value, str) else value)
    except ValueError as e:
        raise ValidationError(f"unknown season variant {value!r}") from e


@dataclass(frozen=True)
class SeasonDescriptor:
    """
    Which statistical period to query.

    The token is both the request parameter handed to the stats provider and the
    value echoed back on PlayerStats.season.
    """

    season: Season = Season.REGULAR
    year_range: YearRange | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "season", _coerce_season(self.season))
        object.__setattr__(self, "year_range", _coerce_year_range(self.year_range))

        if self.year_range is not None and self.season not in _RANGED_SEASONS:
            raise ValidationError(
                f"season {self.season.value!r} cannot be combined with an explicit year range"
            )

    @property
    def token(self) -> str:
        if self.year_range is None:
            return self.season.value
        return f"{self.year_range.start}-{self.year_range.end}-{self.season.value}"


def resolve_season_token(
    season: Season | str = Season.REGULAR,
    year_range: YearRangeLike | None = None,
) -> str:
    return SeasonDescriptor(season=season, year_range=year_range).token
