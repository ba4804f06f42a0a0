"""Tests for compactcal.config.loader."""

import logging
from datetime import date
from pathlib import Path

import pytest

from compactcal.config.loader import CalendarConfig, build_calendar, load_config, parse_config
from compactcal.core.models import (
    ColorMode,
    DateDetail,
    DateRange,
    PastDateDisplay,
    WeekendDisplay,
    WeekStart,
)
from compactcal.core.month_filter import MonthFilter
from compactcal.utils.exceptions import CompactCalError, ConfigError

CALENDAR_YAML = """\
dates:
  2024-07-04:
    description: Holiday
  "2024-10-31":
    description: Release
    color: purple
ranges:
  - start: 2024-12-28
    end: 2024-12-31
    color: gray
  - start: 2024-12-24
    end: 2024-12-26
    color: red
    description: Break
"""


@pytest.fixture
def calendar_file(tmp_path: Path) -> Path:
    path = tmp_path / "calendar.yaml"
    path.write_text(CALENDAR_YAML, encoding="utf-8")
    return path


class TestLoadConfig:
    """Test reading calendar files from disk."""

    def test_loads_dates_and_ranges(self, calendar_file: Path) -> None:
        config = load_config(calendar_file)

        assert config.dates == {
            date(2024, 7, 4): DateDetail(description="Holiday"),
            date(2024, 10, 31): DateDetail(description="Release", color="purple"),
        }
        assert [r.start for r in config.ranges] == [date(2024, 12, 28), date(2024, 12, 24)]
        assert config.ranges[1].description == "Break"
        assert config.ranges[0].description is None

    def test_accepts_string_path(self, calendar_file: Path) -> None:
        assert len(load_config(str(calendar_file)).ranges) == 2

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "absent.yaml")
        assert config == CalendarConfig()

    def test_empty_file_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == CalendarConfig()

    def test_null_sections(self, tmp_path: Path) -> None:
        path = tmp_path / "calendar.yaml"
        path.write_text("dates:\nranges:\n", encoding="utf-8")
        config = load_config(path)
        assert config.dates == {}
        assert config.ranges == []

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("dates: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="Could not parse calendar file") as exc_info:
            load_config(path)

        assert exc_info.value.path == path
        assert str(path) in str(exc_info.value)

    def test_unreadable_path(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Could not read calendar file"):
            load_config(tmp_path)

    def test_duplicate_dates_keep_last(self, tmp_path: Path) -> None:
        path = tmp_path / "calendar.yaml"
        path.write_text(
            "dates:\n"
            "  2024-03-01: {description: First}\n"
            "  2024-03-01: {description: Second, color: green}\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.dates[date(2024, 3, 1)] == DateDetail(description="Second", color="green")


class TestParseConfig:
    """Test validation of deserialized calendar data."""

    def test_none_is_empty(self) -> None:
        assert parse_config(None) == CalendarConfig()

    @pytest.mark.parametrize("data", [["a", "b"], "text", 42])
    def test_non_mapping_rejected(self, data: object) -> None:
        with pytest.raises(ConfigError, match="must contain a mapping"):
            parse_config(data, "calendar.yaml")

    def test_range_start_after_end(self) -> None:
        data = {"ranges": [{"start": "2024-05-10", "end": "2024-05-01", "color": "red"}]}

        with pytest.raises(ConfigError, match="Invalid calendar file") as exc_info:
            parse_config(data, "calendar.yaml")

        assert "is after end" in str(exc_info.value)

    def test_missing_description(self) -> None:
        with pytest.raises(ConfigError):
            parse_config({"dates": {"2024-05-01": {"color": "red"}}})

    def test_invalid_date_key(self) -> None:
        with pytest.raises(ConfigError):
            parse_config({"dates": {"not-a-date": {"description": "x"}}})

    def test_config_errors_are_compactcal_errors(self) -> None:
        with pytest.raises(CompactCalError):
            parse_config([])

    def test_unknown_color_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        data = {
            "dates": {"2024-05-01": {"description": "x", "color": "teal"}},
            "ranges": [
                {"start": "2024-05-02", "end": "2024-05-03", "color": "teal"},
                {"start": "2024-05-04", "end": "2024-05-05", "color": "red"},
            ],
        }

        with caplog.at_level(logging.WARNING, logger="compactcal"):
            config = parse_config(data, "calendar.yaml")

        assert config.unknown_colors() == ["teal"]
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "Unknown color 'teal'" in warnings[0].getMessage()

    def test_known_colors_do_not_warn(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="compactcal"):
            parse_config({"dates": {"2024-05-01": {"description": "x", "color": "light_cyan"}}})
        assert caplog.records == []


class TestBuildCalendar:
    """Test assembling the calendar from options and file contents."""

    def test_builds_calendar(self, calendar_file: Path) -> None:
        config = load_config(calendar_file)

        cal = build_calendar(
            2024,
            WeekStart.SUNDAY,
            WeekendDisplay.NORMAL,
            ColorMode.WORK,
            PastDateDisplay.NORMAL,
            MonthFilter.single(12),
            config,
        )

        assert cal.year == 2024
        assert cal.week_start == WeekStart.SUNDAY
        assert cal.weekend_display == WeekendDisplay.NORMAL
        assert cal.color_mode == ColorMode.WORK
        assert cal.past_date_display == PastDateDisplay.NORMAL
        assert cal.month_filter == MonthFilter.single(12)
        assert cal.details == config.dates
        assert cal.ranges == config.ranges

    def test_range_order_preserved(self) -> None:
        ranges = [
            DateRange(start=date(2024, 6, day), end=date(2024, 6, day + 1), color="blue")
            for day in (20, 3, 11)
        ]
        cal = build_calendar(
            2024,
            WeekStart.MONDAY,
            WeekendDisplay.DIMMED,
            ColorMode.NORMAL,
            PastDateDisplay.STRIKETHROUGH,
            MonthFilter.all(),
            CalendarConfig(ranges=ranges),
        )
        assert [r.start.day for r in cal.ranges] == [20, 3, 11]
