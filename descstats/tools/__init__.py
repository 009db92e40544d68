"""Caller-facing tools for descstats.

This module contains:
- compute_statistic: Compute one statistic from a validated request
- describe_columns: Summarize numeric DataFrame columns
- outlier_fences: Tukey fences from the quartiles
"""

from descstats.tools.analysis import (
    AnalysisResult,
    OutlierFences,
    compute_statistic,
    describe_columns,
    outlier_fences,
)
from descstats.tools.requests import StatisticName, StatisticRequest

__all__ = [
    "compute_statistic",
    "describe_columns",
    "outlier_fences",
    "AnalysisResult",
    "OutlierFences",
    "StatisticName",
    "StatisticRequest",
]
