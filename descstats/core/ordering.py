"""In-place ordering primitives for sample collections.

Both functions mutate and return the collection they are given. Lists and
one-dimensional numpy arrays are supported.
"""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

from descstats.core.validation import validate

Samples = TypeVar("Samples", list, np.ndarray)


def _total_order_key(value: float) -> tuple[bool, float]:
    # NaN compares false against everything; push it past every number
    return (math.isnan(value), value)


def sort_ascending(data: Samples) -> Samples:
    """Sort a sample collection in ascending order, in place.

    Args:
        data: List or 1-D array of floats

    Returns:
        The same collection object, now sorted

    Example:
        >>> sort_ascending([3.0, 1.0, 2.0])
        [1.0, 2.0, 3.0]
    """
    validate(data, 0)

    if isinstance(data, np.ndarray):
        # numpy already sorts NaN to the end
        data.sort()
    else:
        data.sort(key=_total_order_key)
    return data


def sort_descending(data: Samples) -> Samples:
    """Sort a sample collection in descending order, in place.

    Sorts ascending first, then swaps symmetric positions.
    """
    sort_ascending(data)

    length = len(data)
    for index in range(length // 2):
        mirror = length - index - 1
        data[index], data[mirror] = data[mirror], data[index]
    return data
