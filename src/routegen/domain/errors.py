from __future__ import annotations

"""
Domain Exception Hierarchy.

Validation failures are raised synchronously, before any filesystem work
starts. Filesystem failures are never raised through this hierarchy; they
are reported as per-node outcomes instead.
"""


class RouteGenError(Exception):
    """Base class for every error raised by routegen."""


class OptionsValidationError(RouteGenError, TypeError):
    """Raised when a generation option has the wrong type or value."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


class RouteDataError(RouteGenError, ValueError):
    """Raised when the route array cannot be read with the configured aliases."""


class RouteFileError(RouteGenError):
    """Raised when a routes or options document cannot be loaded."""
