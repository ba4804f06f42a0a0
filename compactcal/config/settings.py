"""Settings management using Pydantic for type validation and configuration."""

from pathlib import Path
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL")


class CompactCalSettings(BaseSettings):
    """Application settings with environment variable support.

    Every field can be set through a ``COMPACTCAL_``-prefixed environment
    variable. Colored output is also disabled by the ``NO_COLOR`` convention:
    the variable being present at all, even empty, counts as set.
    """

    config_file: Path = Field(
        default=Path("calendar.yaml"), description="YAML file with date details and ranges"
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    log_colors: bool = Field(default=True, description="Enable colored log level names")
    no_color: bool = Field(
        default=False,
        description="Suppress all color and style escape sequences in calendar output",
    )
    no_color_env: bool = Field(
        default=False,
        validation_alias="NO_COLOR",
        description="Set when the NO_COLOR environment variable is present",
    )

    model_config = SettingsConfigDict(
        env_prefix="COMPACTCAL_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("no_color_env", mode="before")
    @classmethod
    def _presence_means_disabled(cls, value: Any) -> Any:
        # NO_COLOR semantics: any value, including an empty string, counts as set
        if isinstance(value, str):
            return True
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level '{value}'. Choose from {', '.join(LOG_LEVELS)}")
        return level

    @property
    def colors_enabled(self) -> bool:
        return not (self.no_color or self.no_color_env)


# Global settings management
_settings_instance: Optional[CompactCalSettings] = None


def get_settings() -> CompactCalSettings:
    """Get the global settings instance, creating it lazily if needed.

    Returns:
        CompactCalSettings: The global settings instance
    """
    if globals()["_settings_instance"] is None:
        globals()["_settings_instance"] = CompactCalSettings()
    return globals()["_settings_instance"]


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    globals()["_settings_instance"] = None
