"""Logging configuration and setup utilities."""

import logging
import os
import sys
from typing import TYPE_CHECKING, Any, Optional, TextIO

if TYPE_CHECKING:
    from ..config.settings import CompactCalSettings

# Custom log level between INFO(20) and DEBUG(10)
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")


def verbose(self: logging.Logger, message: Any, *args: Any, **kwargs: Any) -> None:
    """Add verbose() method to Logger class for detailed diagnostic logging.

    Args:
        self (logging.Logger): Logger instance (automatically provided)
        message (Any): Log message or format string
        *args (Any): Arguments for string formatting
        **kwargs (Any): Additional keyword arguments for logging

    Example:
        >>> logger = logging.getLogger(__name__)
        >>> logger.verbose("Loaded %d ranges", len(ranges))
    """
    if self.isEnabledFor(VERBOSE):
        self._log(VERBOSE, message, args, **kwargs)


# Add verbose method to all Logger instances
logging.Logger.verbose = verbose  # type: ignore[attr-defined]


def get_log_level(level_name: str) -> int:
    """Get numeric log level from string name, including custom VERBOSE level.

    Args:
        level_name (str): Log level name (DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        int: Numeric log level value, INFO for unrecognised names

    Example:
        >>> get_log_level("verbose")
        15
    """
    level_name = level_name.upper()
    if level_name == "VERBOSE":
        return VERBOSE
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        return logging.INFO
    return level


class AutoColoredFormatter(logging.Formatter):
    """Formatter that auto-detects terminal color support."""

    # Color schemes for different terminal types
    COLORS = {
        "ERROR": {"truecolor": "\033[91m", "basic": "\033[31m", "none": ""},
        "INFO": {"truecolor": "\033[94m", "basic": "\033[34m", "none": ""},
        "VERBOSE": {"truecolor": "\033[92m", "basic": "\033[32m", "none": ""},
        "WARNING": {"truecolor": "\033[93m", "basic": "\033[33m", "none": ""},
        "DEBUG": {"truecolor": "\033[95m", "basic": "\033[35m", "none": ""},
        "CRITICAL": {"truecolor": "\033[91m\033[1m", "basic": "\033[31m\033[1m", "none": ""},
        "RESET": {"truecolor": "\033[0m", "basic": "\033[0m", "none": ""},
    }

    def __init__(
        self,
        *args: Any,
        enable_colors: bool = True,
        stream: Optional[TextIO] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.enable_colors = enable_colors
        self.stream = stream if stream is not None else sys.stderr
        self.color_mode = self._detect_color_support() if enable_colors else "none"

    def _detect_color_support(self) -> str:
        """Auto-detect terminal color capabilities of the target stream."""
        if not hasattr(self.stream, "isatty") or not self.stream.isatty():
            return "none"

        # Respect the informal NO_COLOR convention for log output too
        if "NO_COLOR" in os.environ:
            return "none"

        term = os.environ.get("TERM", "").lower()
        colorterm = os.environ.get("COLORTERM", "").lower()

        if term == "dumb":
            return "none"

        if colorterm in ("truecolor", "24bit") or "256color" in term:
            return "truecolor"

        if term and "color" in term:
            return "basic"

        # Windows Terminal detection
        if os.name == "nt" and "WT_SESSION" in os.environ:
            return "truecolor"

        return "none"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors if supported."""
        formatted = super().format(record)

        if self.color_mode == "none":
            return formatted

        level_name = record.levelname
        if level_name in self.COLORS:
            color_start = self.COLORS[level_name][self.color_mode]
            color_end = self.COLORS["RESET"][self.color_mode]

            colored_level = f"{color_start}{level_name}{color_end}"
            formatted = formatted.replace(level_name, colored_level, 1)

        return formatted


def setup_logging(
    log_level: str = "WARNING",
    enable_colors: bool = True,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Set up application logging on a single console handler.

    Log records go to stderr by default so they never interleave with the
    calendar written to stdout.

    Args:
        log_level: Logging level (DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL)
        enable_colors: Allow colored level names when the stream supports them
        stream: Target stream for log records (defaults to sys.stderr)

    Returns:
        Configured ``compactcal`` logger instance
    """
    numeric_level = get_log_level(log_level)
    target = stream if stream is not None else sys.stderr

    logger = logging.getLogger("compactcal")
    logger.setLevel(numeric_level)
    logger.propagate = False

    # Clear any existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(target)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(
        AutoColoredFormatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
            enable_colors=enable_colors,
            stream=target,
        )
    )
    logger.addHandler(console_handler)

    logger.debug(f"Logging initialized at {log_level.upper()} level")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the compactcal namespace.

    Args:
        name (str): Logger name, typically the module's __name__ value

    Returns:
        logging.Logger: Logger under the ``compactcal`` hierarchy

    Example:
        >>> logger = get_logger("config.loader")
        >>> logger.name
        'compactcal.config.loader'
    """
    if name == "compactcal" or name.startswith("compactcal."):
        return logging.getLogger(name)
    return logging.getLogger(f"compactcal.{name}")


def apply_command_line_overrides(
    settings: "CompactCalSettings", args: Any
) -> "CompactCalSettings":
    """Apply command-line argument overrides to logging settings.

    Priority: Command-line > Environment > Defaults. Modifies the settings
    object in-place and returns it for convenience.

    Args:
        settings (CompactCalSettings): Current settings object to modify
        args (Any): Parsed command-line arguments from argparse

    Returns:
        CompactCalSettings: Settings object with command-line overrides applied
    """
    if getattr(args, "log_level", None):
        settings.log_level = args.log_level

    if getattr(args, "verbose", False):
        settings.log_level = "VERBOSE"

    if getattr(args, "quiet", False):
        settings.log_level = "ERROR"

    if getattr(args, "no_log_colors", False):
        settings.log_colors = False

    return settings
