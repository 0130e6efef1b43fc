"""Exception types raised by errorpoints.

Every error subclasses ValueError as well as ErrorPointsError, so callers
that already catch ValueError keep working.
"""

from __future__ import annotations


class ErrorPointsError(Exception):
    """Base class for all errorpoints errors."""


class ConfigurationError(ErrorPointsError, ValueError):
    """Caller passed impossible input (e.g. fewer than 2 points)."""


class OutOfDomainError(ErrorPointsError, ValueError):
    """An interpolation function was queried outside the range it defines."""

    def __init__(self, x: float, lower: float, upper: float, message: str) -> None:
        super().__init__(message)
        self.x = x
        self.lower = lower
        self.upper = upper


class NonFiniteValueError(ErrorPointsError, ValueError):
    """A coordinate, observation or error bound was NaN or infinite."""

    def __init__(self, value: float) -> None:
        super().__init__(f"non-finite value: {value!r}")
        self.value = value
