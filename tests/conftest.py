"""Shared fixtures for the compactcal test suite."""

import logging
from collections.abc import Iterator
from datetime import date

import pytest

from compactcal.config.settings import reset_settings
from compactcal.core.models import (
    Calendar,
    ColorMode,
    DateDetail,
    DateRange,
    PastDateDisplay,
    WeekendDisplay,
    WeekStart,
)
from compactcal.core.month_filter import MonthFilter


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep settings, color environment and the compactcal logger independent per test."""
    monkeypatch.delenv("NO_COLOR", raising=False)
    for key in ("COMPACTCAL_CONFIG_FILE", "COMPACTCAL_LOG_LEVEL", "COMPACTCAL_LOG_COLORS",
                "COMPACTCAL_NO_COLOR"):
        monkeypatch.delenv(key, raising=False)
    reset_settings()

    yield

    reset_settings()
    package_logger = logging.getLogger("compactcal")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_calendar():
    """Factory for calendars with test-friendly defaults."""

    def _make(
        year: int = 2024,
        week_start: WeekStart = WeekStart.MONDAY,
        weekend_display: WeekendDisplay = WeekendDisplay.NORMAL,
        color_mode: ColorMode = ColorMode.NORMAL,
        past_date_display: PastDateDisplay = PastDateDisplay.STRIKETHROUGH,
        month_filter: MonthFilter = None,
        details: dict = None,
        ranges: list = None,
    ) -> Calendar:
        return Calendar(
            year=year,
            week_start=week_start,
            weekend_display=weekend_display,
            color_mode=color_mode,
            past_date_display=past_date_display,
            month_filter=month_filter or MonthFilter.all(),
            details=details or {},
            ranges=ranges or [],
        )

    return _make


@pytest.fixture
def holiday_details() -> dict:
    return {
        date(2024, 1, 1): DateDetail(description="New Year", color="red"),
        date(2024, 7, 4): DateDetail(description="Holiday"),
        date(2024, 10, 31): DateDetail(description="Release", color="purple"),
    }


@pytest.fixture
def break_ranges() -> list:
    return [
        DateRange(start=date(2024, 12, 24), end=date(2024, 12, 26), color="red", description="Break"),
        DateRange(start=date(2024, 12, 28), end=date(2024, 12, 31), color="gray"),
    ]
