"""Load date details and ranges from a YAML calendar file."""

import logging
from datetime import date
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from ..core.models import (
    Calendar,
    ColorMode,
    DateDetail,
    DateRange,
    PastDateDisplay,
    WeekendDisplay,
    WeekStart,
)
from ..core.month_filter import MonthFilter
from ..display.palette import ColorPalette
from ..utils.exceptions import ConfigError

logger = logging.getLogger(__name__)


class CalendarConfig(BaseModel):
    """Annotations read from a calendar file.

    Example file::

        dates:
          2024-07-04:
            description: Holiday
            color: red
        ranges:
          - start: 2024-12-24
            end: 2024-12-26
            color: red
            description: Break
    """

    dates: dict[date, DateDetail] = Field(default_factory=dict)
    ranges: list[DateRange] = Field(default_factory=list)

    def unknown_colors(self) -> list[str]:
        """Color names referenced by the file that are missing from the palette."""
        names = [detail.color for detail in self.dates.values() if detail.color is not None]
        names.extend(date_range.color for date_range in self.ranges)
        unknown = []
        for name in names:
            if not ColorPalette.is_known_color(name) and name not in unknown:
                unknown.append(name)
        return unknown


def parse_config(config_data: Any, source: Union[str, Path] = "<memory>") -> CalendarConfig:
    """Validate already-deserialized YAML data.

    Args:
        config_data: Result of ``yaml.safe_load``; ``None`` means an empty file
        source: Where the data came from, for error messages

    Returns:
        Validated CalendarConfig

    Raises:
        ConfigError: If the data does not describe dates and ranges
    """
    if config_data is None:
        return CalendarConfig()
    if not isinstance(config_data, dict):
        raise ConfigError(
            "Calendar file must contain a mapping", path=source, cause=type(config_data).__name__
        )

    # A null section is treated like a missing one
    data = {key: value for key, value in config_data.items() if value is not None}

    try:
        config = CalendarConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError("Invalid calendar file", path=source, cause=e) from e

    for name in config.unknown_colors():
        logger.warning(f"Unknown color '{name}' in {source}; it will be shown without background")

    return config


def load_config(path: Union[str, Path]) -> CalendarConfig:
    """Load a calendar file.

    A missing file is not an error: the calendar is simply rendered without
    annotations.

    Args:
        path: Path of the YAML calendar file

    Returns:
        CalendarConfig with the file's dates and ranges

    Raises:
        ConfigError: If the file exists but cannot be read or parsed
    """
    config_path = Path(path)
    if not config_path.exists():
        logger.debug(f"Calendar file {config_path} not found, rendering without annotations")
        return CalendarConfig()

    try:
        with config_path.open(encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError("Could not read calendar file", path=config_path, cause=e) from e
    except yaml.YAMLError as e:
        raise ConfigError("Could not parse calendar file", path=config_path, cause=e) from e

    config = parse_config(config_data, config_path)
    logger.debug(
        f"Loaded {len(config.dates)} date details and {len(config.ranges)} ranges from {config_path}"
    )
    return config


def build_calendar(
    year: int,
    week_start: WeekStart,
    weekend_display: WeekendDisplay,
    color_mode: ColorMode,
    past_date_display: PastDateDisplay,
    month_filter: MonthFilter,
    config: CalendarConfig,
) -> Calendar:
    """Assemble the Calendar handed to the renderer, keeping range order."""
    return Calendar(
        year=year,
        week_start=week_start,
        weekend_display=weekend_display,
        color_mode=color_mode,
        past_date_display=past_date_display,
        month_filter=month_filter,
        details=dict(config.dates),
        ranges=list(config.ranges),
    )
