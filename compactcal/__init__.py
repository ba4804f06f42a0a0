"""compactcal - a compact full-year calendar for the terminal."""

__version__ = "1.0.0"
__author__ = "compactcal contributors"

from .core.models import (  # noqa: E402
    Calendar,
    ColorMode,
    DateDetail,
    DateRange,
    PastDateDisplay,
    WeekendDisplay,
    WeekStart,
)
from .core.month_filter import MonthFilter  # noqa: E402
from .display.calendar_renderer import CalendarRenderer  # noqa: E402

__all__ = [
    "Calendar",
    "CalendarRenderer",
    "ColorMode",
    "DateDetail",
    "DateRange",
    "MonthFilter",
    "PastDateDisplay",
    "WeekStart",
    "WeekendDisplay",
    "__version__",
]
