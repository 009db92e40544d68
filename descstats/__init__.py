"""descstats: Descriptive statistics over real-valued samples.

This package computes extremes, central tendency, dispersion, quartile-based
measures and modes over an in-memory sample collection, and assembles them
into a summary report.
"""

__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy imports for main package exports."""
    if name == "summarize":
        from descstats.core.engine import summarize

        return summarize
    if name == "SummaryReport":
        from descstats.core.summary import SummaryReport

        return SummaryReport
    if name in ("InvalidInputError", "NotEnoughDataError", "StatisticsError"):
        from descstats.core import exceptions

        return getattr(exceptions, name)
    if name == "compute_statistic":
        from descstats.tools.analysis import compute_statistic

        return compute_statistic
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "InvalidInputError",
    "NotEnoughDataError",
    "StatisticsError",
    "SummaryReport",
    "compute_statistic",
    "summarize",
    "__version__",
]
