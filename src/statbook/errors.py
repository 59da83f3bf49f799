from __future__ import annotations


class StatbookError(RuntimeError):
    """Base exception for every failure surfaced by statbook."""


class PlayerNotFoundError(StatbookError):
    """The stats source has no player matching the queried identifier."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Player '{name}' not found")
        self.name = name


class NetworkError(StatbookError):
    """Transport-level failure (connectivity, DNS, timeouts) talking to a source."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        prefix = f"Network error ({source})" if source else "Network error"
        super().__init__(f"{prefix}: {message}")
        self.message = message
        self.source = source


class ApiError(StatbookError):
    """A source answered, but with a non-success status or an unusable body."""

    source_label = "API"

    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"{self.source_label} error: {status} - {message}")
        self.status = status
        self.message = message


class StatsApiError(ApiError):
    source_label = "Stats API"


class NewsApiError(ApiError):
    source_label = "News API"


class MissingCredentialError(StatbookError):
    """A required credential (API key) is absent or blank."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Missing API key: {key}. Set it in the environment or .env file.")
        self.key = key


class ConfigurationError(StatbookError):
    """Configuration values are present but do not form a usable combination."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Configuration error: {message}")
        self.message = message


class ValidationError(StatbookError, ValueError):
    """Caller input was rejected (season/year-range combination, blank identifier, ...)."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Validation error: {message}")
        self.message = message
