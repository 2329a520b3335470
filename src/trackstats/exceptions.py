"""Exception types raised while loading and analysing tracks."""

from typing import Optional


class TrackStatsError(Exception):
    """Base class for trackstats errors."""


class TrackParseError(TrackStatsError, ValueError):
    """Raised when track input cannot be parsed into points."""

    def __init__(self, message: str, index: Optional[int] = None):
        if index is not None:
            message = f"Point {index}: {message}"
        super().__init__(message)
        self.index = index


class InsufficientPointsError(TrackStatsError, ValueError):
    """Raised when an operation receives too few points to be defined."""

    def __init__(self, operation: str, required: int, actual: int):
        super().__init__(
            f"{operation} requires at least {required} points, got {actual}"
        )
        self.operation = operation
        self.required = required
        self.actual = actual


def require_points(points, operation: str, required: int = 2) -> None:
    """
    Check that a point sequence is long enough for an operation.

    Raises:
        InsufficientPointsError: If fewer than `required` points are given
    """
    if len(points) < required:
        raise InsufficientPointsError(operation, required, len(points))
