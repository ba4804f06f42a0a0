"""Exceptions raised at the configuration and command-line boundary."""

from typing import Any, Optional


class CompactCalError(Exception):
    """Base exception for all compactcal errors.

    Args:
        message: Human-readable error description
        details: Optional dictionary containing additional error context

    Example:
        >>> raise CompactCalError("Configuration failed", {"path": "calendar.yaml"})
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class MonthFilterError(CompactCalError, ValueError):
    """Exception raised when a month selector cannot be parsed or is out of range."""

    def __init__(self, message: str, value: Optional[Any] = None) -> None:
        """Initialize MonthFilterError.

        Args:
            message: Error message
            value: The rejected selector value, if any
        """
        self.value = value
        super().__init__(message)


class ConfigError(CompactCalError):
    """Exception raised when a calendar configuration file cannot be loaded."""

    def __init__(self, message: str, path: Optional[Any] = None, cause: Optional[Any] = None) -> None:
        """Initialize ConfigError.

        Args:
            message: Error message
            path: Path of the offending configuration file
            cause: Underlying error description
        """
        self.path = path
        self.cause = cause
        details: dict[str, Any] = {}
        if path is not None:
            details["path"] = str(path)
        if cause is not None:
            details["cause"] = str(cause)
        super().__init__(message, details)
