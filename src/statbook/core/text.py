from __future__ import annotations

import re

_whitespace_re = re.compile(r"\s+")


def to_dash_case(value: str) -> str:
    """Normalize a player identifier for stable lookups across sources.

    "Josh Allen" -> "josh-allen"; an already dashed slug passes through.
    """

    v = value.strip().lower()
    return _whitespace_re.sub("-", v)


def dash_case_to_words(value: str) -> str:
    """Turn a dashed slug back into a free-text search phrase."""

    return " ".join(part for part in value.split("-") if part)
