"""Result records produced by the statistics engine."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ModeResult:
    """Mode values sharing the highest occurrence count.

    The engine encodes this as a flat sequence whose last element is the
    count; use from_sequence/to_sequence to convert.

    Attributes:
        values: Tied mode values in ascending order
        count: Occurrence count shared by every mode value
    """

    values: list[float] = field(default_factory=list)
    count: int = 0

    @classmethod
    def from_sequence(cls, encoded: Sequence[float]) -> ModeResult:
        """Build from the engine's [mode..., count] encoding."""
        if len(encoded) < 2:
            raise ValueError(
                f"Mode sequence needs at least one value and a count, got {list(encoded)}"
            )
        return cls(values=[float(v) for v in encoded[:-1]], count=int(encoded[-1]))

    def to_sequence(self) -> list[float]:
        """Encode as [mode..., count]."""
        return [*self.values, float(self.count)]

    def format_for_display(self, precision: int | None = None) -> str:
        """Format as 'a, b, c; quantity: n'."""
        rendered = ", ".join(_format_value(v, precision) for v in self.values)
        return f"{rendered}; quantity: {self.count}"


@dataclass
class SummaryReport:
    """Summary statistics for one sample collection.

    Fields are declared in report order.

    Attributes:
        minimum: Smallest value
        maximum: Largest value
        mean: Arithmetic mean
        mode: Mode value(s) and their count
        first_quartile: Median of the lower half
        median: Middle value
        third_quartile: Median of the upper half
        iqr: Interquartile range
        three_over_two_iqr: 1.5 times the interquartile range
    """

    minimum: float
    maximum: float
    mean: float
    mode: ModeResult
    first_quartile: float
    median: float
    third_quartile: float
    iqr: float
    three_over_two_iqr: float

    LABELS = {
        "minimum": "Minimum",
        "maximum": "Maximum",
        "mean": "Average arithmetic",
        "mode": "Mode(s)",
        "first_quartile": "First quartile",
        "median": "Median",
        "third_quartile": "Third quartile",
        "iqr": "IQR",
        "three_over_two_iqr": "3/2 IQR",
    }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "minimum": self.minimum,
            "maximum": self.maximum,
            "mean": self.mean,
            "mode": {"values": list(self.mode.values), "count": self.mode.count},
            "first_quartile": self.first_quartile,
            "median": self.median,
            "third_quartile": self.third_quartile,
            "iqr": self.iqr,
            "three_over_two_iqr": self.three_over_two_iqr,
        }

    def format_for_display(self, precision: int | None = None) -> str:
        """Format as human-readable string, one labeled line per field.

        Args:
            precision: Significant digits to show (None = full repr)
        """
        lines = []
        for name, label in self.LABELS.items():
            value = getattr(self, name)
            if isinstance(value, ModeResult):
                rendered = value.format_for_display(precision)
            else:
                rendered = _format_value(value, precision)
            lines.append(f"{label}: {rendered}")
        return "\n".join(lines)


def _format_value(value: float, precision: int | None) -> str:
    if precision is None:
        return repr(float(value))
    return f"{value:.{precision}g}"
