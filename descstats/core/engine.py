"""Descriptive statistics over a sample collection.

Every function validates its input first and raises InvalidInputError or
NotEnoughDataError; nothing here catches those errors.

Note:
    median, the quartiles, iqr, three_over_two_iqr, mode and summarize sort
    their input in place. Use descstats.core.snapshot when the caller's
    ordering must be kept.

Example:
    >>> from descstats.core.engine import median, first_quartile
    >>> data = [1.0, 3.0, 2.0, 2.0]
    >>> median(data)
    2.0
    >>> first_quartile(data)
    1.5
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from descstats.core.ordering import Samples, sort_ascending
from descstats.core.summary import ModeResult, SummaryReport
from descstats.core.validation import validate

logger = logging.getLogger(__name__)

# Minimum collection sizes
SINGLE_PASS_MIN_LENGTH = 1
QUARTILE_MIN_LENGTH = 2

FENCE_MULTIPLIER = 1.5


def minimum(data: Sequence[float]) -> float:
    """Return the smallest value."""
    validate(data, SINGLE_PASS_MIN_LENGTH)

    current = data[0]
    for value in data[1:]:
        if value < current:
            current = value
    return float(current)


def maximum(data: Sequence[float]) -> float:
    """Return the largest value."""
    validate(data, SINGLE_PASS_MIN_LENGTH)

    current = data[0]
    for value in data[1:]:
        if value > current:
            current = value
    return float(current)


def mean(data: Sequence[float]) -> float:
    """Return the arithmetic mean."""
    validate(data, SINGLE_PASS_MIN_LENGTH)

    total = 0.0
    for value in data:
        total += value
    return float(total / len(data))


def median(data: Samples) -> float:
    """Return the median, sorting data in place.

    For an even number of values this is the mean of the two central values.
    """
    validate(data, SINGLE_PASS_MIN_LENGTH)

    sort_ascending(data)

    length = len(data)
    middle = length // 2
    if length % 2 == 1:
        return float(data[middle])
    return float((data[middle - 1] + data[middle]) / 2)


def first_quartile(data: Samples) -> float:
    """Return the median of the lower half, sorting data in place.

    The lower half is data[0:n//2], so for odd n the central value is
    excluded.

    Raises:
        NotEnoughDataError: If data has fewer than two values
    """
    validate(data, QUARTILE_MIN_LENGTH)

    sort_ascending(data)
    return median(data[: len(data) // 2])


def third_quartile(data: Samples) -> float:
    """Return the median of the upper half, sorting data in place.

    The upper half is data[n//2+1:] for odd n (central value excluded) and
    data[n//2:] for even n.

    Raises:
        NotEnoughDataError: If data has fewer than two values
    """
    validate(data, QUARTILE_MIN_LENGTH)

    sort_ascending(data)

    length = len(data)
    start = length // 2 + 1 if length % 2 == 1 else length // 2
    logger.debug(f"Third quartile over indices [{start}, {length})")
    return median(data[start:])


def iqr(data: Samples) -> float:
    """Return the interquartile range, third minus first quartile."""
    validate(data, QUARTILE_MIN_LENGTH)

    return third_quartile(data) - first_quartile(data)


def three_over_two_iqr(data: Samples) -> float:
    """Return 1.5 times the interquartile range (the Tukey fence width)."""
    validate(data, QUARTILE_MIN_LENGTH)

    return FENCE_MULTIPLIER * iqr(data)


def variance(data: Sequence[float]) -> float:
    """Return the Bessel-corrected sample variance.

    Sum of squared deviations from the mean divided by n - 1.

    Raises:
        NotEnoughDataError: If data has fewer than two values
    """
    validate(data, QUARTILE_MIN_LENGTH)

    average = mean(data)

    squared_deviations = 0.0
    for value in data:
        squared_deviations += (value - average) ** 2
    return float(squared_deviations / (len(data) - 1))


def mode(data: Samples) -> list[float]:
    """Return the mode value(s) followed by their occurrence count.

    Sorts data in place, then scans runs of equal values. A run as long as
    the longest seen so far joins the modes; a longer run replaces them.
    When every value is distinct every value is a mode with count 1.

    Returns:
        [mode_1, ..., mode_k, count] with modes ascending

    Example:
        >>> mode([3.0, 1.0, 3.0, 1.0, 2.0])
        [1.0, 3.0, 2.0]
    """
    validate(data, SINGLE_PASS_MIN_LENGTH)

    sort_ascending(data)

    modes: list[float] = []
    max_count = 1
    index = 0
    length = len(data)

    while index < length:
        value = data[index]
        count = 1
        index += 1

        while index < length and data[index] == value:
            count += 1
            index += 1

        if count == max_count:
            modes.append(float(value))
        elif count > max_count:
            max_count = count
            modes.clear()
            modes.append(float(value))

    logger.debug(f"Found {len(modes)} mode(s) occurring {max_count} time(s)")
    return [*modes, float(max_count)]


def summarize(data: Samples) -> SummaryReport:
    """Compute every statistic for a sample collection.

    Each statistic is an independent call; the first failure propagates.
    Sorts data in place.

    Raises:
        InvalidInputError: If data is None
        NotEnoughDataError: If data has fewer than two values
    """
    validate(data, QUARTILE_MIN_LENGTH)

    logger.debug(f"Summarizing {len(data)} values")
    return SummaryReport(
        minimum=minimum(data),
        maximum=maximum(data),
        mean=mean(data),
        mode=ModeResult.from_sequence(mode(data)),
        first_quartile=first_quartile(data),
        median=median(data),
        third_quartile=third_quartile(data),
        iqr=iqr(data),
        three_over_two_iqr=three_over_two_iqr(data),
    )
