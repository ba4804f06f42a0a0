"""Settings and calendar file loading."""

from .loader import CalendarConfig, build_calendar, load_config, parse_config
from .settings import CompactCalSettings, get_settings, reset_settings

__all__ = [
    "CalendarConfig",
    "CompactCalSettings",
    "build_calendar",
    "get_settings",
    "load_config",
    "parse_config",
    "reset_settings",
]
