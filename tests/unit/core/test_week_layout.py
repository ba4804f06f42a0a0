"""Tests for compactcal.core.week_layout."""

from datetime import date, timedelta

import pytest

from compactcal.core.models import Calendar, WeekStart
from compactcal.core.week_layout import (
    DAYS_IN_WEEK,
    MonthInfo,
    WeekLayout,
    align_to_week_start,
    is_month_change,
)


@pytest.fixture
def monday_calendar() -> Calendar:
    return Calendar(year=2024, week_start=WeekStart.MONDAY)


@pytest.fixture
def sunday_calendar() -> Calendar:
    return Calendar(year=2024, week_start=WeekStart.SUNDAY)


class TestMonthInfo:
    """Test month metadata lookup."""

    def test_names(self) -> None:
        assert MonthInfo.from_month(1).name == "January"
        assert MonthInfo.from_month(9).name == "September"
        assert MonthInfo.from_month(12).name == "December"

    def test_names_fit_label_width(self) -> None:
        assert max(len(MonthInfo.from_month(m).name) for m in range(1, 13)) == 9


class TestAlignment:
    """Test week alignment."""

    def test_aligns_backwards_to_monday(self, monday_calendar: Calendar) -> None:
        assert align_to_week_start(monday_calendar, date(2024, 2, 1)) == date(2024, 1, 29)

    def test_aligns_backwards_to_sunday(self, sunday_calendar: Calendar) -> None:
        assert align_to_week_start(sunday_calendar, date(2024, 1, 1)) == date(2023, 12, 31)

    @pytest.mark.parametrize("week_start", [WeekStart.MONDAY, WeekStart.SUNDAY])
    def test_alignment_is_idempotent(self, week_start: WeekStart) -> None:
        cal = Calendar(year=2024, week_start=week_start)
        day = date(2024, 1, 1)
        for offset in range(400):
            aligned = align_to_week_start(cal, day + timedelta(days=offset))
            assert cal.get_weekday_num(aligned) == 0
            assert align_to_week_start(cal, aligned) == aligned


class TestWeekLayout:
    """Test the seven-date layout and month-start marker."""

    @pytest.mark.parametrize("week_start", [WeekStart.MONDAY, WeekStart.SUNDAY])
    def test_always_seven_consecutive_dates(self, week_start: WeekStart) -> None:
        cal = Calendar(year=2024, week_start=week_start)
        for offset in range(0, 366, 3):
            layout = WeekLayout.build(cal, date(2024, 1, 1) + timedelta(days=offset))
            assert len(layout.dates) == DAYS_IN_WEEK
            for previous, current in zip(layout.dates, layout.dates[1:]):
                assert current - previous == timedelta(days=1)

    def test_anchor_need_not_be_aligned(self, monday_calendar: Calendar) -> None:
        layout = WeekLayout.build(monday_calendar, date(2024, 2, 1))
        assert layout.first == date(2024, 1, 29)
        assert layout.last == date(2024, 2, 4)

    def test_mid_week_month_start(self, monday_calendar: Calendar) -> None:
        layout = WeekLayout.build(monday_calendar, date(2024, 1, 29))
        assert layout.month_start == (3, 2)
        assert layout.boundary_index() == 3

    def test_month_start_at_index_zero(self, monday_calendar: Calendar) -> None:
        layout = WeekLayout.build(monday_calendar, date(2024, 7, 1))
        assert layout.month_start == (0, 7)
        assert layout.boundary_index() is None

    def test_no_month_start(self, monday_calendar: Calendar) -> None:
        layout = WeekLayout.build(monday_calendar, date(2024, 7, 8))
        assert layout.month_start is None
        assert layout.boundary_index() is None

    def test_year_crossing(self, monday_calendar: Calendar) -> None:
        layout = WeekLayout.build(monday_calendar, date(2024, 12, 30))
        assert layout.dates[0] == date(2024, 12, 30)
        assert layout.dates[-1] == date(2025, 1, 5)
        assert layout.month_start == (2, 1)

    def test_sunday_start_year_crossing(self, sunday_calendar: Calendar) -> None:
        layout = WeekLayout.build(sunday_calendar, date(2024, 1, 1))
        assert layout.first == date(2023, 12, 31)
        assert layout.month_start == (1, 1)


class TestIsMonthChange:
    """Test month/year boundary detection between adjacent dates."""

    def test_same_month(self) -> None:
        assert not is_month_change(date(2024, 3, 1), date(2024, 3, 2))

    def test_new_month(self) -> None:
        assert is_month_change(date(2024, 3, 31), date(2024, 4, 1))

    def test_same_month_number_different_year(self) -> None:
        assert is_month_change(date(2023, 1, 31), date(2024, 1, 1))
