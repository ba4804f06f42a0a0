"""Per-date color precedence."""

from datetime import date
from typing import Optional

from ..core.models import Calendar, ColorMode

SATURDAY = 5
SUNDAY = 6


def is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)


class ColorResolver:
    """Resolve the display color of a date.

    First match wins:

    1. Work mode on a Saturday or Sunday: no color.
    2. Point detail with an explicit color.
    3. First range, in stored order, containing the date.
    4. No color.
    """

    def __init__(self, calendar: Calendar) -> None:
        self.calendar = calendar

    def resolve(self, day: date) -> Optional[str]:
        if self.calendar.color_mode == ColorMode.WORK and is_weekend(day):
            return None

        detail = self.calendar.details.get(day)
        if detail is not None and detail.color is not None:
            return detail.color

        for date_range in self.calendar.ranges:
            if date_range.contains(day):
                return date_range.color

        return None
