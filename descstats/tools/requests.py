"""Validated statistic requests.

A request names one statistic and carries the samples to compute it over.
Validation rejects unknown statistic names and non-finite values before the
engine is ever called.

Example:
    >>> from descstats.tools.requests import StatisticRequest
    >>> request = StatisticRequest(statistic="median", values=[3, 1, 2])
    >>> request.statistic
    <StatisticName.MEDIAN: 'median'>
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, field_validator


class StatisticName(str, Enum):
    """Statistics a request may ask for."""

    MIN = "min"
    MAX = "max"
    MEAN = "mean"
    MEDIAN = "median"
    FIRST_QUARTILE = "first_quartile"
    THIRD_QUARTILE = "third_quartile"
    IQR = "iqr"
    THREE_OVER_TWO_IQR = "three_over_two_iqr"
    VARIANCE = "variance"
    MODE = "mode"
    SUMMARY = "summary"

    @classmethod
    def aliases(cls) -> dict[str, StatisticName]:
        """Alternative spellings accepted on input."""
        return {
            "minimum": cls.MIN,
            "maximum": cls.MAX,
            "average": cls.MEAN,
            "q1": cls.FIRST_QUARTILE,
            "q3": cls.THIRD_QUARTILE,
            "fence": cls.THREE_OVER_TWO_IQR,
            "var": cls.VARIANCE,
            "summarize": cls.SUMMARY,
        }


class StatisticRequest(BaseModel):
    """A request to compute one statistic.

    Attributes:
        statistic: Which statistic to compute
        values: Sample values (None is passed through and reported as invalid input)
    """

    model_config = ConfigDict(use_enum_values=False)

    statistic: StatisticName = Field(
        default=StatisticName.SUMMARY, description="Statistic to compute"
    )
    values: list[FiniteFloat] | None = Field(..., description="Sample values")

    @field_validator("statistic", mode="before")
    @classmethod
    def resolve_alias(cls, v: object) -> object:
        """Normalize statistic names and resolve aliases."""
        if isinstance(v, str) and not isinstance(v, StatisticName):
            normalized = v.strip().lower().replace("-", "_")
            return StatisticName.aliases().get(normalized, normalized)
        return v
