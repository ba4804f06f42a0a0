"""CLI module for compactcal.

Parses arguments, loads settings and the calendar file, and hands a fully
built Calendar to the renderer.
"""

import logging
import sys
from datetime import date
from typing import Optional, Sequence

from pydantic import ValidationError

from ..config.loader import build_calendar, load_config
from ..config.settings import get_settings
from ..display.calendar_renderer import CalendarRenderer
from ..utils.exceptions import CompactCalError
from ..utils.logging import apply_command_line_overrides, setup_logging
from .parser import build_month_filter, create_parser, display_options

logger = logging.getLogger(__name__)


def main_entry(argv: Optional[Sequence[str]] = None, today: Optional[date] = None) -> int:
    """Main entry point with argument parsing.

    Args:
        argv: Command-line arguments (defaults to ``sys.argv[1:]``)
        today: Current date; read from the system clock when omitted

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = apply_command_line_overrides(get_settings(), args)
    except ValidationError as e:
        print(f"Error: invalid environment settings: {e}", file=sys.stderr)
        return 1

    setup_logging(settings.log_level, enable_colors=settings.log_colors)

    current_date = today if today is not None else date.today()
    year = args.year if args.year is not None else current_date.year
    config_path = args.config if args.config is not None else settings.config_file

    try:
        month_filter = build_month_filter(args.month, args.following_months)
        config = load_config(config_path)
    except CompactCalError as e:
        logger.debug("Aborting before rendering", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    week_start, weekend_display, color_mode, past_date_display = display_options(args)
    calendar = build_calendar(
        year,
        week_start,
        weekend_display,
        color_mode,
        past_date_display,
        month_filter,
        config,
    )

    colors_enabled = settings.colors_enabled and not args.plain
    logger.verbose(  # type: ignore[attr-defined]
        f"Rendering {year} from {config_path} (colors={'on' if colors_enabled else 'off'})"
    )

    CalendarRenderer(calendar, today=current_date, colors_enabled=colors_enabled).render()
    return 0


__all__ = [
    "build_month_filter",
    "create_parser",
    "main_entry",
]
