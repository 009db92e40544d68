"""Order-preserving variants of the engine's entry points.

Each function here copies its input into a private list before delegating to
descstats.core.engine, so the caller's collection is never reordered. Any
sequence is accepted, including tuples, numpy arrays and pandas Series.

Example:
    >>> from descstats.core import snapshot
    >>> data = (3.0, 1.0, 2.0)
    >>> snapshot.median(data)
    2.0
    >>> data
    (3.0, 1.0, 2.0)
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

from descstats.core import engine, ordering

T = TypeVar("T")


def private_copy(data: Iterable[float] | None) -> list[float] | None:
    """Copy a sample collection into a new list of floats.

    None passes through so validation still reports InvalidInputError.
    """
    if data is None:
        return None
    return [float(value) for value in data]


def _on_copy(func: Callable[[Any], T]) -> Callable[[Sequence[float] | None], T]:
    @functools.wraps(func)
    def wrapper(data: Sequence[float] | None) -> T:
        return func(private_copy(data))

    return wrapper


sort_ascending = _on_copy(ordering.sort_ascending)
sort_descending = _on_copy(ordering.sort_descending)
minimum = _on_copy(engine.minimum)
maximum = _on_copy(engine.maximum)
mean = _on_copy(engine.mean)
median = _on_copy(engine.median)
first_quartile = _on_copy(engine.first_quartile)
third_quartile = _on_copy(engine.third_quartile)
iqr = _on_copy(engine.iqr)
three_over_two_iqr = _on_copy(engine.three_over_two_iqr)
variance = _on_copy(engine.variance)
mode = _on_copy(engine.mode)
summarize = _on_copy(engine.summarize)

__all__ = [
    "first_quartile",
    "iqr",
    "maximum",
    "mean",
    "median",
    "minimum",
    "mode",
    "private_copy",
    "sort_ascending",
    "sort_descending",
    "summarize",
    "third_quartile",
    "three_over_two_iqr",
    "variance",
]
