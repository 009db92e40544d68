"""Core functionality for descstats.

This module contains:
- Input validation and error types
- In-place ordering primitives
- The statistics engine (extremes, mean, median, quartiles, variance, mode)
- Result records for modes and summary reports
"""

from descstats.core.engine import (
    first_quartile,
    iqr,
    maximum,
    mean,
    median,
    minimum,
    mode,
    summarize,
    third_quartile,
    three_over_two_iqr,
    variance,
)
from descstats.core.exceptions import (
    InvalidInputError,
    NotEnoughDataError,
    StatisticsError,
)
from descstats.core.ordering import sort_ascending, sort_descending
from descstats.core.summary import ModeResult, SummaryReport
from descstats.core.validation import validate

__all__ = [
    # Errors
    "InvalidInputError",
    "NotEnoughDataError",
    "StatisticsError",
    "validate",
    # Ordering
    "sort_ascending",
    "sort_descending",
    # Statistics
    "minimum",
    "maximum",
    "mean",
    "median",
    "first_quartile",
    "third_quartile",
    "iqr",
    "three_over_two_iqr",
    "variance",
    "mode",
    "summarize",
    # Results
    "ModeResult",
    "SummaryReport",
]
