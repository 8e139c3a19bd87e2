"""FleetView exception classes."""

from __future__ import annotations


class FleetViewError(RuntimeError):
    """Base exception for FleetView errors."""


class UserError(FleetViewError):
    """Errors that should be shown to user without traceback."""

    def __init__(self, message: str, rc: int = 2):
        super().__init__(message)
        self.rc = rc


class MalformedResultError(FleetViewError):
    """Query result is missing the series, columns or values needed for export."""
