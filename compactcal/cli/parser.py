"""Command-line argument parsing for compactcal.

This module builds the argument parser and turns the month-selection
options into a MonthFilter, rejecting invalid combinations before any
calendar is constructed.
"""

import argparse
import logging
from typing import Optional

from .. import __version__
from ..core.models import (
    MAX_YEAR,
    MIN_YEAR,
    ColorMode,
    PastDateDisplay,
    WeekendDisplay,
    WeekStart,
)
from ..core.month_filter import MAX_FOLLOWING_MONTHS, MonthFilter, MonthFilterKind
from ..utils.exceptions import MonthFilterError

logger = logging.getLogger(__name__)


def parse_year(value: str) -> int:
    """Parse and bound-check the ``--year`` option.

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer in range
    """
    try:
        year = int(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"Invalid year: {value}") from err
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise argparse.ArgumentTypeError(
            f"Year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )
    return year


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser.

    Returns:
        argparse.ArgumentParser: Parser with calendar, display and logging options

    Example:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["--year", "2024", "--month", "feb"])
        >>> args.month
        'feb'
    """
    parser = argparse.ArgumentParser(
        prog="compactcal",
        description="Compact full-year calendar for the terminal, with notes, ranges and colors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                              # Current year, annotations from ./calendar.yaml
  %(prog)s --year 2025 --sunday         # 2025 with weeks starting on Sunday
  %(prog)s --month march                # Only the weeks of March
  %(prog)s --month current -f 2         # Current month plus the next two
  %(prog)s --work --config team.yaml    # Never color weekends
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}", help="Show version"
    )

    parser.add_argument(
        "--year", "-y", type=parse_year, default=None, help="Year to display (default: current year)"
    )

    parser.add_argument(
        "--config",
        "-c",
        default=None,
        help="YAML file with date details and ranges (default: calendar.yaml)",
    )

    # Month selection
    month_group = parser.add_argument_group("months", "Restrict output to some months")

    month_group.add_argument(
        "--month",
        "-m",
        default=None,
        help="Display one month: a number 1-12, a name like 'march', or 'current'",
    )

    month_group.add_argument(
        "--following-months",
        "-f",
        type=int,
        default=None,
        metavar="N",
        help="With --month current, also display the next N months (at most 11)",
    )

    # Display options
    display_group = parser.add_argument_group("display", "Layout and styling options")

    display_group.add_argument(
        "--sunday", "-s", action="store_true", help="Week starts on Sunday (default is Monday)"
    )

    display_group.add_argument(
        "--no-dim-weekends",
        action="store_true",
        help="Don't dim weekend dates (by default weekends are dimmed)",
    )

    display_group.add_argument(
        "--work", "-w", action="store_true", help="Work mode: never color Saturdays and Sundays"
    )

    display_group.add_argument(
        "--no-strikethrough-past",
        action="store_true",
        help="Don't strike through past dates (by default they are crossed out)",
    )

    display_group.add_argument(
        "--plain",
        action="store_true",
        help="Plain text output without colors or styles (same as setting NO_COLOR)",
    )

    # Logging options
    logging_group = parser.add_argument_group("logging", "Diagnostic logging options")

    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set console log level (logs go to stderr)",
    )

    logging_group.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    logging_group.add_argument(
        "--quiet", "-q", action="store_true", help="Only show errors (sets log level to ERROR)"
    )

    logging_group.add_argument(
        "--no-log-colors", action="store_true", help="Disable colored log output"
    )

    return parser


def build_month_filter(month: Optional[str], following_months: Optional[int]) -> MonthFilter:
    """Combine ``--month`` and ``--following-months`` into a MonthFilter.

    Args:
        month: Raw ``--month`` value, or None
        following_months: Raw ``--following-months`` value, or None

    Returns:
        MonthFilter for the rendering pass

    Raises:
        MonthFilterError: If the month is invalid or the options are combined incorrectly
    """
    if month is None:
        if following_months is not None:
            raise MonthFilterError("--following-months requires --month current")
        return MonthFilter.all()

    month_filter = MonthFilter.parse_month(month)
    if following_months is None:
        return month_filter

    if month_filter.kind != MonthFilterKind.CURRENT:
        raise MonthFilterError(
            "--following-months can only be used with --month current", value=month
        )
    if following_months > MAX_FOLLOWING_MONTHS:
        raise MonthFilterError(
            f"--following-months cannot exceed {MAX_FOLLOWING_MONTHS}", value=following_months
        )
    if following_months < 0:
        raise MonthFilterError("--following-months cannot be negative", value=following_months)

    return MonthFilter.current_with_following(following_months)


def display_options(
    args: argparse.Namespace,
) -> tuple[WeekStart, WeekendDisplay, ColorMode, PastDateDisplay]:
    """Map the display flags onto the calendar enumerations."""
    week_start = WeekStart.SUNDAY if args.sunday else WeekStart.MONDAY
    weekend_display = WeekendDisplay.NORMAL if args.no_dim_weekends else WeekendDisplay.DIMMED
    color_mode = ColorMode.WORK if args.work else ColorMode.NORMAL
    past_date_display = (
        PastDateDisplay.NORMAL if args.no_strikethrough_past else PastDateDisplay.STRIKETHROUGH
    )
    return week_start, weekend_display, color_mode, past_date_display


__all__ = [
    "build_month_filter",
    "create_parser",
    "display_options",
    "parse_year",
]
