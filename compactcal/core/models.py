"""Data models for a single calendar rendering pass."""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .month_filter import MonthFilter

# Week alignment and look-ahead must stay inside the range datetime.date supports
MIN_YEAR = 2
MAX_YEAR = 9998


class WeekStart(str, Enum):
    """First column of every rendered week."""

    MONDAY = "monday"
    SUNDAY = "sunday"


class WeekendDisplay(str, Enum):
    """Whether weekend cells without an explicit color are dimmed."""

    DIMMED = "dimmed"
    NORMAL = "normal"


class ColorMode(str, Enum):
    """Work mode never colors Saturdays or Sundays."""

    NORMAL = "normal"
    WORK = "work"


class PastDateDisplay(str, Enum):
    """Whether dates before today are struck through."""

    STRIKETHROUGH = "strikethrough"
    NORMAL = "normal"


class DateDetail(BaseModel):
    """Single-date annotation."""

    model_config = ConfigDict(frozen=True)

    description: str = Field(..., description="Text shown beside the week containing the date")
    color: Optional[str] = Field(default=None, description="Palette color name")


class DateRange(BaseModel):
    """Inclusive multi-day annotation."""

    model_config = ConfigDict(frozen=True)

    start: date
    end: date
    color: str = Field(..., description="Palette color name")
    description: Optional[str] = None

    @model_validator(mode="after")
    def _check_order(self) -> "DateRange":
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is after end {self.end}")
        return self

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def overlaps(self, first: date, last: date) -> bool:
        """Check whether the range intersects the inclusive span ``[first, last]``."""
        return self.start <= last and self.end >= first


class Calendar(BaseModel):
    """Root aggregate handed to the renderer.

    Ranges keep their insertion order; it breaks ties between overlapping
    ranges both for cell colors and for annotation order.
    """

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR)
    week_start: WeekStart = WeekStart.MONDAY
    weekend_display: WeekendDisplay = WeekendDisplay.DIMMED
    color_mode: ColorMode = ColorMode.NORMAL
    past_date_display: PastDateDisplay = PastDateDisplay.STRIKETHROUGH
    month_filter: MonthFilter = Field(default_factory=MonthFilter.all)
    details: dict[date, DateDetail] = Field(default_factory=dict)
    ranges: list[DateRange] = Field(default_factory=list)

    def get_weekday_num(self, day: date) -> int:
        """Column index (0-6) of ``day`` under the configured week start."""
        if self.week_start == WeekStart.SUNDAY:
            return (day.weekday() + 1) % 7
        return day.weekday()
