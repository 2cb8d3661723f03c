"""Error taxonomy shared by the sync pipeline and its adapters."""

from __future__ import annotations


class RedaSyncError(RuntimeError):
    """Base class for failures that abort a single project's sync."""


class TransportError(RedaSyncError):
    """Raised when a source endpoint does not answer with a usable response."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PublishError(RedaSyncError):
    """Raised when the destination store rejects a read or write."""


class DateParseError(ValueError):
    """Raised internally when a timestamp cannot be read as a calendar date."""
