"""Month selection for a rendering pass."""

import calendar
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..utils.exceptions import MonthFilterError

MAX_FOLLOWING_MONTHS = 11

_MONTH_NAMES = {name.lower(): number for number, name in enumerate(calendar.month_name) if name}
_MONTH_ABBREVIATIONS = {
    name.lower(): number for number, name in enumerate(calendar.month_abbr) if name
}


class MonthFilterKind(str, Enum):
    """Display-mode selector variants."""

    ALL = "all"
    SINGLE = "single"
    CURRENT = "current"
    CURRENT_WITH_FOLLOWING = "current_with_following"


class MonthFilter(BaseModel):
    """Selects which months of the year are emitted.

    Build instances through the ``all``, ``single``, ``current`` and
    ``current_with_following`` constructors rather than directly.

    ``current`` and ``current_with_following`` always resolve against today's
    month number, even when the rendered year is not the current year.
    """

    model_config = ConfigDict(frozen=True)

    kind: MonthFilterKind = MonthFilterKind.ALL
    month: Optional[int] = Field(default=None, ge=1, le=12)
    following: int = Field(default=0, ge=0, le=MAX_FOLLOWING_MONTHS)

    @model_validator(mode="after")
    def _check_month(self) -> "MonthFilter":
        if self.kind == MonthFilterKind.SINGLE and self.month is None:
            raise ValueError("A single-month filter needs a month")
        return self

    @classmethod
    def all(cls) -> "MonthFilter":
        return cls(kind=MonthFilterKind.ALL)

    @classmethod
    def single(cls, month: int) -> "MonthFilter":
        if not 1 <= month <= 12:
            raise MonthFilterError(f"Month must be between 1 and 12, got {month}", value=month)
        return cls(kind=MonthFilterKind.SINGLE, month=month)

    @classmethod
    def current(cls) -> "MonthFilter":
        return cls(kind=MonthFilterKind.CURRENT)

    @classmethod
    def current_with_following(cls, following: int) -> "MonthFilter":
        if following < 0 or following > MAX_FOLLOWING_MONTHS:
            raise MonthFilterError(
                f"Following months must be between 0 and {MAX_FOLLOWING_MONTHS}, got {following}",
                value=following,
            )
        return cls(kind=MonthFilterKind.CURRENT_WITH_FOLLOWING, following=following)

    @classmethod
    def parse_month(cls, text: str) -> "MonthFilter":
        """Parse a command-line month selector.

        Accepts a month number (1-12), an English month name or its
        three-letter abbreviation (case-insensitive), or ``current``.

        Args:
            text: Raw selector value

        Returns:
            MonthFilter for the selector

        Raises:
            MonthFilterError: If the selector is not recognised

        Example:
            >>> MonthFilter.parse_month("March").month
            3
        """
        value = text.strip().lower()
        if value == "current":
            return cls.current()

        if value.isdigit():
            return cls.single(int(value))

        if value in _MONTH_NAMES:
            return cls.single(_MONTH_NAMES[value])
        if value in _MONTH_ABBREVIATIONS:
            return cls.single(_MONTH_ABBREVIATIONS[value])

        raise MonthFilterError(
            f"Invalid month '{text}'. Use a number 1-12, a month name like 'march', or 'current'",
            value=text,
        )

    def get_month_range(self, year: int, today: Optional[date] = None) -> tuple[int, int]:
        """Resolve the filter to an inclusive ``(start_month, end_month)`` pair.

        Args:
            year: Rendered year (does not influence the current-month variants)
            today: Current date; read from the system clock when omitted

        Returns:
            Inclusive month bounds, never extending past December
        """
        if self.kind == MonthFilterKind.ALL:
            return 1, 12
        if self.kind == MonthFilterKind.SINGLE and self.month is not None:
            return self.month, self.month

        current_month = (today or date.today()).month
        if self.kind == MonthFilterKind.CURRENT:
            return current_month, current_month
        return current_month, min(current_month + self.following, 12)

    def should_display_month(self, month: int, year: int, today: Optional[date] = None) -> bool:
        start_month, end_month = self.get_month_range(year, today)
        return start_month <= month <= end_month

    def get_date_range(self, year: int, today: Optional[date] = None) -> tuple[date, date]:
        """Concrete first and last day covered by the filter in ``year``."""
        start_month, end_month = self.get_month_range(year, today)
        last_day = calendar.monthrange(year, end_month)[1]
        return date(year, start_month, 1), date(year, end_month, last_day)
