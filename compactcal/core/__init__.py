"""Calendar model, month filtering and week layout."""

from .models import (
    Calendar,
    ColorMode,
    DateDetail,
    DateRange,
    PastDateDisplay,
    WeekendDisplay,
    WeekStart,
)
from .month_filter import MonthFilter, MonthFilterKind
from .week_layout import DAYS_IN_WEEK, MonthInfo, WeekLayout, align_to_week_start

__all__ = [
    "DAYS_IN_WEEK",
    "Calendar",
    "ColorMode",
    "DateDetail",
    "DateRange",
    "MonthFilter",
    "MonthFilterKind",
    "MonthInfo",
    "PastDateDisplay",
    "WeekLayout",
    "WeekStart",
    "WeekendDisplay",
    "align_to_week_start",
]
