"""Helpers for asserting on rendered calendar text."""

import re

from compactcal.core.models import WeekStart

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")

H = "─"


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences from rendered output."""
    return ANSI_ESCAPE.sub("", text)


def header_lines(year: int, week_start: WeekStart = WeekStart.MONDAY) -> list[str]:
    """Expected four header lines for ``year``."""
    title = f"COMPACT CALENDAR {year}"
    pad = 48 - len(title)
    left = pad // 2
    weekdays = (
        "Mon  Tue  Wed  Thu  Fri  Sat  Sun"
        if week_start == WeekStart.MONDAY
        else "Sun  Mon  Tue  Wed  Thu  Fri  Sat"
    )
    return [
        "┌" + H * 48 + "┐",
        "│" + " " * left + title + " " * (pad - left) + "│",
        "├" + H * 48 + "┤",
        "│" + " " * 14 + weekdays + " │",
    ]


def week_rows(output: str) -> list[str]:
    """Lines of the output that are week rows."""
    return [line for line in output.splitlines() if line.startswith("│W")]
