"""Tests for the order-preserving variants."""

import numpy as np
import pandas as pd
import pytest

from descstats.core import engine, snapshot
from descstats.core.exceptions import InvalidInputError, NotEnoughDataError


class TestPrivateCopy:
    """Tests for private_copy function."""

    def test_returns_new_list(self) -> None:
        """Test a fresh list of floats is returned."""
        data = [3, 1, 2]
        copy = snapshot.private_copy(data)

        assert copy == [3.0, 1.0, 2.0]
        assert copy is not data

    def test_none_passes_through(self) -> None:
        """Test None is left for validation to report."""
        assert snapshot.private_copy(None) is None


class TestSnapshotStatistics:
    """Tests for the copying entry points."""

    def test_median_preserves_order(self, measurements: list[float]) -> None:
        """Test the caller's list keeps its order."""
        original = list(measurements)

        assert snapshot.median(measurements) == 8.6
        assert measurements == original

    def test_sort_returns_copy(self, unsorted_values: list[float]) -> None:
        """Test sorting returns a sorted copy."""
        original = list(unsorted_values)
        result = snapshot.sort_descending(unsorted_values)

        assert result == sorted(original, reverse=True)
        assert unsorted_values == original

    def test_accepts_tuple(self) -> None:
        """Test immutable sequences are accepted."""
        assert snapshot.first_quartile((3.0, 2.0, 1.0, 2.0)) == 1.5

    def test_numpy_array_untouched(self) -> None:
        """Test a numpy array is not reordered."""
        data = np.array([3.0, 1.0, 2.0])
        snapshot.summarize(data)
        np.testing.assert_array_equal(data, [3.0, 1.0, 2.0])

    def test_pandas_series(self) -> None:
        """Test a pandas Series input."""
        series = pd.Series([1.0, 2.0, 2.0, 3.0])
        assert snapshot.mode(series) == [2.0, 2.0]

    def test_matches_engine(self, measurements: list[float]) -> None:
        """Test results equal the in-place engine's."""
        expected = engine.summarize(list(measurements))
        assert snapshot.summarize(measurements) == expected

    def test_errors_propagate(self) -> None:
        """Test validation errors are raised unchanged."""
        with pytest.raises(InvalidInputError):
            snapshot.mean(None)
        with pytest.raises(NotEnoughDataError):
            snapshot.variance([1.0])

    def test_wraps_metadata(self) -> None:
        """Test the wrapper keeps the engine function's name and docs."""
        assert snapshot.iqr.__name__ == "iqr"
        assert snapshot.iqr.__doc__ == engine.iqr.__doc__
