"""Command-line interface for descstats."""

import argparse
import json
import logging
import sys

from descstats import __version__
from descstats.config import get_settings
from descstats.tools.analysis import compute_statistic
from descstats.tools.requests import StatisticName


def _precision(text: str) -> int:
    """Parse a significant-digit count in the range 1..17."""
    value = int(text)
    if not 1 <= value <= 17:
        raise argparse.ArgumentTypeError(f"precision must be between 1 and 17, got {value}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="descstats",
        description="Descriptive statistics for a list of numbers",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "values",
        nargs="*",
        type=float,
        help="Sample values",
    )
    parser.add_argument(
        "--statistic",
        "-s",
        default=StatisticName.SUMMARY.value,
        help="Statistic to compute (default: summary). "
        f"One of: {', '.join(s.value for s in StatisticName)}",
    )
    parser.add_argument(
        "--precision",
        type=_precision,
        default=settings.display_precision,
        help="Significant digits to display (default: full precision)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    result = compute_statistic({"statistic": args.statistic, "values": args.values})

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    elif result.success:
        print(result.format_for_display(args.precision))
    else:
        print(f"Error: {result.error}", file=sys.stderr)

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
