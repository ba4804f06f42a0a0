"""Box-drawn, week-per-row renderer for a full calendar year."""

import logging
import sys
from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from typing import Optional, TextIO

from ..core.models import Calendar, DateDetail, PastDateDisplay, WeekStart, WeekendDisplay
from ..core.week_layout import (
    DAYS_IN_WEEK,
    MonthInfo,
    WeekLayout,
    align_to_week_start,
    is_month_change,
)
from .color_resolver import ColorResolver, is_weekend
from .palette import ColorPalette, Style

logger = logging.getLogger(__name__)

CALENDAR_WIDTH = 34
HEADER_WIDTH = 48
LABEL_WIDTH = 13
CELL_WIDTH = 5

WEEKDAY_HEADERS = {
    WeekStart.MONDAY: "Mon  Tue  Wed  Thu  Fri  Sat  Sun",
    WeekStart.SUNDAY: "Sun  Mon  Tue  Wed  Thu  Fri  Sat",
}


def boundary_widths(idx: int) -> tuple[int, int]:
    """Widths of the day-area segments before and after a boundary glyph at ``idx``.

    Args:
        idx: Column (1-6) of the first day of the new month

    Returns:
        ``(before, after)`` where ``before + 1 + after == CALENDAR_WIDTH``
    """
    before = (idx - 1) * CELL_WIDTH + 4
    after = (DAYS_IN_WEEK - idx) * CELL_WIDTH - 1
    return before, after


@dataclass
class RenderSession:
    """Working state for one render pass, discarded afterwards."""

    today: date
    palette: ColorPalette
    pending_details: dict[date, DateDetail]
    pending_ranges: set[int]
    week_num: int = 1
    opened: bool = False
    lines: list[str] = field(default_factory=list)

    @classmethod
    def start(cls, calendar: Calendar, today: date, colors_enabled: bool) -> "RenderSession":
        return cls(
            today=today,
            palette=ColorPalette(colors_enabled),
            pending_details=dict(calendar.details),
            pending_ranges=set(range(len(calendar.ranges))),
        )


class CalendarRenderer:
    """Renders a Calendar as fixed-width text, one week per row."""

    def __init__(
        self,
        calendar: Calendar,
        today: Optional[date] = None,
        colors_enabled: bool = True,
    ) -> None:
        """Initialize the renderer.

        Args:
            calendar: Fully built calendar model
            today: Date treated as "today"; the system date is read once per
                render when omitted
            colors_enabled: Emit ANSI styling from ``render``
        """
        self.calendar = calendar
        self.today = today
        self.colors_enabled = colors_enabled
        self.resolver = ColorResolver(calendar)

    def render(self, stream: Optional[TextIO] = None) -> None:
        """Write the calendar to ``stream`` (stdout by default)."""
        output = stream if stream is not None else sys.stdout
        output.write(self.format(self.colors_enabled))
        output.flush()

    def render_to_string(self) -> str:
        """Return the calendar as plain text, without any escape sequences."""
        return self.format(colors_enabled=False)

    def format(self, colors_enabled: bool) -> str:
        today = self.today if self.today is not None else date.today()
        session = RenderSession.start(self.calendar, today, colors_enabled)

        logger.debug(
            f"Rendering {self.calendar.year} (filter={self.calendar.month_filter.kind.value}, "
            f"colors={colors_enabled}, today={today.isoformat()})"
        )

        self._render_header(session)
        self._render_weeks(session)

        logger.debug(f"Rendered {session.week_num - 1} weeks")
        return "".join(session.lines) + "\n"

    def _render_header(self, session: RenderSession) -> None:
        title = f"COMPACT CALENDAR {self.calendar.year}"
        session.lines.append(f"┌{'─' * HEADER_WIDTH}┐\n")
        session.lines.append(f"│{title:^{HEADER_WIDTH}}│\n")
        session.lines.append(f"├{'─' * HEADER_WIDTH}┤\n")
        weekdays = WEEKDAY_HEADERS[self.calendar.week_start]
        session.lines.append(f"│{' ' * (LABEL_WIDTH + 1)}{weekdays} │\n")

    def _should_render_week(self, layout: WeekLayout, today: date) -> bool:
        """Keep a week if any of its days falls in a filtered month of the rendered year."""
        year = self.calendar.year
        month_filter = self.calendar.month_filter
        return any(
            day.year == year and month_filter.should_display_month(day.month, year, today)
            for day in layout.dates
        )

    def _render_weeks(self, session: RenderSession) -> None:
        year = self.calendar.year
        start_date, end_date = self.calendar.month_filter.get_date_range(year, session.today)
        week = timedelta(days=DAYS_IN_WEEK)

        current = align_to_week_start(self.calendar, start_date)
        while current <= end_date:
            layout = WeekLayout.build(self.calendar, current)
            next_week_date = current + week

            if not self._should_render_week(layout, session.today):
                logger.debug(f"Skipping week starting {current.isoformat()}")
                current = next_week_date
                continue

            next_layout = WeekLayout.build(self.calendar, next_week_date)

            if layout.month_start is not None and not session.opened:
                session.opened = True
                idx, _ = layout.month_start
                if idx > 0:
                    session.lines.append(self._opening_border(idx))

            row = self._week_row(session, layout)
            annotations = self._annotations(session, layout)
            session.lines.append(f"{row}{annotations}\n")

            is_last_week = next_week_date.year > year or next_week_date > end_date
            if is_last_week:
                session.lines.append(self._closing_border(layout))
            elif layout.month_start is not None and layout.month_start[0] > 0:
                session.lines.append(self._mid_table_separator(layout.month_start[0]))
            elif next_layout.month_start is not None:
                session.lines.append(self._pre_month_separator(next_layout.month_start[0]))

            current = next_week_date
            session.week_num += 1

            if current.year > year:
                break

    def _opening_border(self, idx: int) -> str:
        before, after = boundary_widths(idx)
        return f"│{' ' * LABEL_WIDTH}┌{'─' * before}┬{'─' * after}┤\n"

    def _mid_table_separator(self, idx: int) -> str:
        before, after = boundary_widths(idx)
        return f"│{' ' * LABEL_WIDTH}├{'─' * before}┘{' ' * after}│\n"

    def _pre_month_separator(self, next_idx: int) -> str:
        if next_idx == 0:
            return f"│{' ' * LABEL_WIDTH}├{'─' * CALENDAR_WIDTH}┤\n"
        before, after = boundary_widths(next_idx)
        return f"│{' ' * LABEL_WIDTH}│{' ' * before}┌{'─' * after}┤\n"

    def _closing_border(self, layout: WeekLayout) -> str:
        boundary = layout.boundary_index()
        if boundary is None:
            return f"└{'─' * LABEL_WIDTH}┴{'─' * CALENDAR_WIDTH}┘\n"
        before, after = boundary_widths(boundary)
        return f"└{'─' * LABEL_WIDTH}┴{'─' * before}┴{'─' * after}┘\n"

    def _week_row(self, session: RenderSession, layout: WeekLayout) -> str:
        if layout.month_start is not None:
            month_name = MonthInfo.from_month(layout.month_start[1]).name
            label = f"│W{session.week_num:02} {month_name:<9}"
        else:
            label = f"│W{session.week_num:02}{' ' * 10}"

        parts = [label, "│"]
        dates = layout.dates
        for idx, day in enumerate(dates):
            if idx > 0 and is_month_change(dates[idx - 1], day):
                parts.append("│")

            parts.append(" ")
            parts.append(self._day_text(session, day))

            if idx < DAYS_IN_WEEK - 1 and not is_month_change(day, dates[idx + 1]):
                parts.append("  ")
            else:
                parts.append(" ")

        parts.append("│")
        return "".join(parts)

    def _day_text(self, session: RenderSession, day: date) -> str:
        text = f"{day.day:02}"
        palette = session.palette
        if not palette.colors_enabled:
            return text

        is_today = day == session.today
        is_past = (
            self.calendar.past_date_display == PastDateDisplay.STRIKETHROUGH
            and day < session.today
        )
        dim_weekend = self.calendar.weekend_display == WeekendDisplay.DIMMED and is_weekend(day)

        color = self.resolver.resolve(day)
        if color is not None:
            style = replace(
                palette.get_highlight_style(color, dimmed=dim_weekend),
                strikethrough=is_past,
                underline=is_today,
            )
        else:
            style = Style(dim=dim_weekend, underline=is_today, strikethrough=is_past)
        return style.apply(text)

    def _annotations(self, session: RenderSession, layout: WeekLayout) -> str:
        """Drain every pending detail and range that intersects this week."""
        first, last = layout.first, layout.last
        palette = session.palette
        annotations = []

        for day in sorted(d for d in session.pending_details if first <= d <= last):
            detail = session.pending_details.pop(day)
            text = f"{day:%m/%d} - {detail.description}"
            if detail.color is not None:
                text = palette.get_highlight_style(detail.color).apply(text)
            annotations.append(text)

        for idx, date_range in enumerate(self.calendar.ranges):
            if idx not in session.pending_ranges or not date_range.overlaps(first, last):
                continue
            text = f"{date_range.start:%m/%d} to {date_range.end:%m/%d}"
            if date_range.description is not None:
                text = f"{text} - {date_range.description}"
            annotations.append(palette.get_highlight_style(date_range.color).apply(text))
            session.pending_ranges.discard(idx)

        return ", ".join(annotations)
