"""Pytest configuration and fixtures for descstats tests."""

import pytest


@pytest.fixture
def measurements() -> list[float]:
    """Return thirteen unsorted measurements with median 8.6."""
    return [5.5, 6.5, 8, 9, 10, 9.4, 8.6, 9.5, 7.5, 7.6, 10.4, 10.5, 8.5]


@pytest.fixture
def unsorted_values() -> list[float]:
    """Return ten distinct unsorted values."""
    return [69, 12, 3, 169, 7, 17, 8, 21, 5, 18]


@pytest.fixture
def bimodal_values() -> list[float]:
    """Return values where 2.0 and 7.0 both occur three times."""
    return [7.0, 2.0, 5.0, 2.0, 7.0, 1.0, 7.0, 2.0, 9.0]
