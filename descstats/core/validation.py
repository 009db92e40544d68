"""Input validation shared by every statistic."""

from __future__ import annotations

from collections.abc import Sequence

from descstats.core.exceptions import InvalidInputError, NotEnoughDataError


def validate(data: Sequence[float] | None, min_length: int) -> None:
    """Check that a sample collection is present and long enough.

    Args:
        data: Sample collection to check
        min_length: Minimum number of values required

    Raises:
        InvalidInputError: If data is None
        NotEnoughDataError: If data has fewer than min_length values
    """
    if data is None:
        raise InvalidInputError()
    if len(data) < min_length:
        raise NotEnoughDataError(required=min_length, actual=len(data))
