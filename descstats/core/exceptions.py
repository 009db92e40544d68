"""Exceptions raised by the statistics engine."""

from __future__ import annotations


class StatisticsError(Exception):
    """Base class for all statistics engine errors."""


class InvalidInputError(StatisticsError):
    """Raised when the sample collection itself is missing."""

    def __init__(self, message: str = "Sample collection must not be None") -> None:
        super().__init__(message)


class NotEnoughDataError(StatisticsError):
    """Raised when a sample collection is shorter than an operation needs.

    Attributes:
        required: Minimum number of values the operation needs
        actual: Number of values that were supplied
    """

    def __init__(self, required: int, actual: int) -> None:
        self.required = required
        self.actual = actual
        super().__init__(
            f"There is not enough data! Minimum quantity of values needed: "
            f"{required}, got {actual}."
        )
