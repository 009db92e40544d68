"""Tests for the ordering primitives."""

import math

import numpy as np
import pytest

from descstats.core.exceptions import InvalidInputError
from descstats.core.ordering import sort_ascending, sort_descending


class TestSortAscending:
    """Tests for sort_ascending function."""

    def test_sorts_in_place(self, unsorted_values: list[float]) -> None:
        """Test sorting returns the same, now sorted, list."""
        result = sort_ascending(unsorted_values)

        assert result is unsorted_values
        assert result == [3, 5, 7, 8, 12, 17, 18, 21, 69, 169]

    @pytest.mark.parametrize(
        "data,expected",
        [
            ([], []),
            ([1.0], [1.0]),
            ([18.0, 17.0], [17.0, 18.0]),
        ],
    )
    def test_small_collections(self, data: list[float], expected: list[float]) -> None:
        """Test empty, singleton and pair collections."""
        assert sort_ascending(data) == expected

    def test_idempotent(self, unsorted_values: list[float]) -> None:
        """Test sorting twice gives the same result as sorting once."""
        once = list(sort_ascending(unsorted_values))
        assert sort_ascending(unsorted_values) == once

    def test_numpy_array(self) -> None:
        """Test sorting a numpy array in place."""
        data = np.array([3.0, -1.0, 2.0])
        result = sort_ascending(data)

        assert result is data
        np.testing.assert_array_equal(data, [-1.0, 2.0, 3.0])

    def test_nan_sorted_last(self) -> None:
        """Test that NaN is ordered after every number."""
        data = [2.0, float("nan"), -5.0, 1.0]
        sort_ascending(data)

        assert data[:3] == [-5.0, 1.0, 2.0]
        assert math.isnan(data[3])

    def test_none_raises(self) -> None:
        """Test that None is rejected."""
        with pytest.raises(InvalidInputError):
            sort_ascending(None)


class TestSortDescending:
    """Tests for sort_descending function."""

    def test_sorts_in_place(self, unsorted_values: list[float]) -> None:
        """Test sorting in descending order."""
        result = sort_descending(unsorted_values)

        assert result is unsorted_values
        assert result == [169, 69, 21, 18, 17, 12, 8, 7, 5, 3]

    @pytest.mark.parametrize(
        "data,expected",
        [
            ([], []),
            ([19.0], [19.0]),
            ([69.0, 169.0], [169.0, 69.0]),
            ([1.0, 3.0, 2.0], [3.0, 2.0, 1.0]),
        ],
    )
    def test_small_collections(self, data: list[float], expected: list[float]) -> None:
        """Test empty, singleton, pair and odd-length collections."""
        assert sort_descending(data) == expected

    def test_reverse_of_ascending(self, unsorted_values: list[float]) -> None:
        """Test descending order equals reversed ascending order."""
        ascending = sort_ascending(list(unsorted_values))
        descending = sort_descending(list(unsorted_values))

        assert descending == list(reversed(ascending))

    def test_idempotent(self, unsorted_values: list[float]) -> None:
        """Test sorting twice gives the same result as sorting once."""
        once = list(sort_descending(unsorted_values))
        assert sort_descending(unsorted_values) == once

    def test_numpy_array(self) -> None:
        """Test sorting a numpy array in place."""
        data = np.array([3.0, -1.0, 2.0, 7.0])
        sort_descending(data)

        np.testing.assert_array_equal(data, [7.0, 3.0, 2.0, -1.0])
