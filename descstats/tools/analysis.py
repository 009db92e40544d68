"""Caller-facing analysis tools.

This module wraps the statistics engine for callers that prefer a tagged
result over exceptions:
- Single statistics from a validated request
- Per-column summaries of a pandas DataFrame
- Tukey outlier fences
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import ModuleType
from typing import Any

import numpy as np
import pandas as pd
from pydantic import ValidationError

from descstats.config import get_settings
from descstats.core import engine, snapshot
from descstats.core.exceptions import InvalidInputError, NotEnoughDataError
from descstats.core.summary import ModeResult, SummaryReport
from descstats.tools.requests import StatisticName, StatisticRequest

logger = logging.getLogger(__name__)


_OPERATIONS = {
    StatisticName.MIN: "minimum",
    StatisticName.MAX: "maximum",
    StatisticName.MEAN: "mean",
    StatisticName.MEDIAN: "median",
    StatisticName.FIRST_QUARTILE: "first_quartile",
    StatisticName.THIRD_QUARTILE: "third_quartile",
    StatisticName.IQR: "iqr",
    StatisticName.THREE_OVER_TWO_IQR: "three_over_two_iqr",
    StatisticName.VARIANCE: "variance",
    StatisticName.MODE: "mode",
    StatisticName.SUMMARY: "summarize",
}


@dataclass
class AnalysisResult:
    """Result from an analysis tool.

    Attributes:
        success: Whether the computation completed
        statistic: Name of the statistic computed (if a single one)
        value: Scalar result, or the [mode..., count] encoding for mode
        summaries: Summary reports keyed by label
        skipped: Labels skipped for lack of data
        error: Error message if failed
        error_type: "invalid_input", "not_enough_data" or "validation"
        details: Additional context (e.g. required/actual lengths)
    """

    success: bool
    statistic: str | None = None
    value: float | list[float] | None = None
    summaries: dict[str, SummaryReport] = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)
    error: str | None = None
    error_type: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "success": self.success,
            "statistic": self.statistic,
            "value": self.value,
            "summaries": {k: s.to_dict() for k, s in self.summaries.items()},
            "skipped": self.skipped,
            "error": self.error,
            "error_type": self.error_type,
            "details": self.details,
        }

    def format_for_display(self, precision: int | None = None) -> str:
        """Format as human-readable string."""
        if not self.success:
            return f"Analysis failed: {self.error}"

        parts: list[str] = []
        if self.value is not None:
            if self.statistic == StatisticName.MODE.value:
                rendered = ModeResult.from_sequence(self.value).format_for_display(precision)
            elif precision is None:
                rendered = repr(self.value)
            else:
                rendered = f"{self.value:.{precision}g}"
            parts.append(f"{self.statistic}: {rendered}")
        single = len(self.summaries) == 1 and self.statistic == StatisticName.SUMMARY.value
        for label, summary in self.summaries.items():
            text = summary.format_for_display(precision)
            parts.append(text if single else f"[{label}]\n{text}")
        if self.skipped:
            parts.append(f"Skipped (not enough data): {', '.join(self.skipped)}")

        return "\n\n".join(parts) if parts else "No analysis results."


def _backend(preserve_order: bool | None) -> ModuleType:
    if preserve_order is None:
        preserve_order = get_settings().preserve_input_order
    return snapshot if preserve_order else engine


def _failure(statistic: str | None, exc: Exception) -> AnalysisResult:
    if isinstance(exc, NotEnoughDataError):
        return AnalysisResult(
            success=False,
            statistic=statistic,
            error=str(exc),
            error_type="not_enough_data",
            details={"required": exc.required, "actual": exc.actual},
        )
    if isinstance(exc, InvalidInputError):
        return AnalysisResult(
            success=False,
            statistic=statistic,
            error=str(exc),
            error_type="invalid_input",
        )
    return AnalysisResult(
        success=False,
        statistic=statistic,
        error=f"Request validation failed: {exc}",
        error_type="validation",
    )


def compute_statistic(
    request: StatisticRequest | dict[str, Any],
    preserve_order: bool | None = None,
) -> AnalysisResult:
    """Compute one statistic, reporting failures in the result.

    Args:
        request: StatisticRequest or a dict with "statistic" and "values"
        preserve_order: Work on a private copy (None = use settings)

    Returns:
        AnalysisResult with value (scalar or mode encoding) or summaries

    Example:
        >>> result = compute_statistic({"statistic": "q1", "values": [1, 2, 2, 3]})
        >>> result.value
        1.5
    """
    try:
        if not isinstance(request, StatisticRequest):
            request = StatisticRequest.model_validate(request)
    except ValidationError as e:
        logger.warning(f"Rejected statistic request: {e.error_count()} error(s)")
        return _failure(None, e)

    name = request.statistic.value
    operation = getattr(_backend(preserve_order), _OPERATIONS[request.statistic])

    try:
        outcome = operation(request.values)
    except (InvalidInputError, NotEnoughDataError) as e:
        logger.warning(f"Could not compute {name}: {e}")
        return _failure(name, e)

    if isinstance(outcome, SummaryReport):
        return AnalysisResult(success=True, statistic=name, summaries={"values": outcome})
    return AnalysisResult(success=True, statistic=name, value=outcome)


def describe_columns(
    df: pd.DataFrame,
    columns: list[str] | None = None,
) -> AnalysisResult:
    """Summarize numeric DataFrame columns.

    Missing values are dropped per column. Columns with fewer than two
    remaining values are listed in ``skipped``. The DataFrame is not
    modified.

    Args:
        df: DataFrame with sample columns
        columns: Column names to summarize (None = all numeric)

    Returns:
        AnalysisResult with one summary per column
    """
    if columns is None:
        columns = df.select_dtypes(include=[np.number]).columns.tolist()

    missing = [c for c in columns if c not in df.columns]
    if missing:
        return AnalysisResult(
            success=False,
            error=f"Columns not found in data: {', '.join(missing)}",
            error_type="invalid_input",
        )

    non_numeric = [c for c in columns if not pd.api.types.is_numeric_dtype(df[c])]
    if non_numeric:
        return AnalysisResult(
            success=False,
            error=f"Columns are not numeric: {', '.join(non_numeric)}",
            error_type="invalid_input",
        )

    summaries: dict[str, SummaryReport] = {}
    skipped: list[str] = []

    for column in columns:
        values = df[column].dropna().to_numpy(dtype=float, copy=True)
        try:
            summaries[column] = engine.summarize(values)
        except NotEnoughDataError:
            logger.debug(f"Skipping column {column}: {len(values)} value(s)")
            skipped.append(column)

    return AnalysisResult(success=True, summaries=summaries, skipped=skipped)


@dataclass
class OutlierFences:
    """Tukey fences around the quartiles.

    Attributes:
        lower: First quartile minus 1.5 IQR
        upper: Third quartile plus 1.5 IQR
        outliers: Values outside [lower, upper], ascending
    """

    lower: float
    upper: float
    outliers: list[float] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"lower": self.lower, "upper": self.upper, "outliers": self.outliers}


def outlier_fences(data: Any, preserve_order: bool | None = None) -> OutlierFences:
    """Compute Tukey outlier fences for a sample collection.

    With preserve_order the input is copied once up front, so any iterable
    (including a generator) is accepted.

    Args:
        data: Sample collection (sorted in place unless preserve_order)
        preserve_order: Work on a private copy (None = use settings)

    Raises:
        InvalidInputError: If data is None
        NotEnoughDataError: If data has fewer than two values
    """
    if preserve_order is None:
        preserve_order = get_settings().preserve_input_order
    if preserve_order:
        data = snapshot.private_copy(data)

    width = engine.three_over_two_iqr(data)
    lower = engine.first_quartile(data) - width
    upper = engine.third_quartile(data) + width
    outliers = sorted(float(v) for v in data if v < lower or v > upper)

    return OutlierFences(lower=lower, upper=upper, outliers=outliers)
