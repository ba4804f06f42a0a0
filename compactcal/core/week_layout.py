"""Week-by-week layout primitives."""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from .models import Calendar

DAYS_IN_WEEK = 7


@dataclass(frozen=True)
class MonthInfo:
    """Display metadata for a month number."""

    number: int
    name: str

    @classmethod
    def from_month(cls, month: int) -> "MonthInfo":
        return cls(number=month, name=calendar.month_name[month])


def is_month_change(previous: date, current: date) -> bool:
    return current.month != previous.month or current.year != previous.year


def align_to_week_start(cal: Calendar, day: date) -> date:
    """Step back one day at a time until ``day`` sits in column 0."""
    aligned = day
    while cal.get_weekday_num(aligned) != 0:
        aligned -= timedelta(days=1)
    return aligned


@dataclass(frozen=True)
class WeekLayout:
    """Seven consecutive dates plus the first month-start marker among them.

    ``month_start`` is ``(index, month)`` for the first index whose date
    begins a month: index 0 when it is the 1st, otherwise any index whose
    month or year differs from the previous date.
    """

    dates: tuple[date, ...]
    month_start: Optional[tuple[int, int]]

    @classmethod
    def build(cls, cal: Calendar, anchor: date) -> "WeekLayout":
        start = align_to_week_start(cal, anchor)
        dates = tuple(start + timedelta(days=offset) for offset in range(DAYS_IN_WEEK))
        return cls(dates=dates, month_start=cls._find_month_start(dates))

    @staticmethod
    def _find_month_start(dates: tuple[date, ...]) -> Optional[tuple[int, int]]:
        for idx, day in enumerate(dates):
            if idx == 0:
                if day.day == 1:
                    return idx, day.month
            elif is_month_change(dates[idx - 1], day):
                return idx, day.month
        return None

    @property
    def first(self) -> date:
        return self.dates[0]

    @property
    def last(self) -> date:
        return self.dates[DAYS_IN_WEEK - 1]

    def boundary_index(self) -> Optional[int]:
        """Index of the first mid-week month change, ignoring a 1st at index 0."""
        for idx in range(1, DAYS_IN_WEEK):
            if is_month_change(self.dates[idx - 1], self.dates[idx]):
                return idx
        return None
