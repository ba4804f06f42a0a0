"""Text rendering of a calendar year."""

from .calendar_renderer import CalendarRenderer, RenderSession
from .color_resolver import ColorResolver
from .palette import ColorPalette, ColorValue, Style

__all__ = [
    "CalendarRenderer",
    "ColorPalette",
    "ColorResolver",
    "ColorValue",
    "RenderSession",
    "Style",
]
