"""
Log level enumeration and level comparison

Levels form a total order: TRACE < DEBUG < INFO < WARN < ERROR.
"""

from enum import IntEnum
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are compatible with Python's logging module.
    """

    TRACE = 5       # Most verbose, detailed tracing
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    def __format__(self, format_spec: str) -> str:
        """Format by name so f-strings and padding render "WARN", not 30."""
        return format(self.name, format_spec)

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level = LEVEL_FROM_NAME.get(level_str.strip().upper())
        if level is None:
            raise ValueError(f"Invalid log level: {level_str}")
        return level


DEFAULT_ROOT_LEVEL = LogLevel.DEBUG

# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {level: level.name for level in LogLevel}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}


def resolve_level(value: Any) -> Optional[LogLevel]:
    """
    Resolve a level value without raising.

    Accepts LogLevel members and level names in any case. Anything else
    (unknown names, None, numbers outside the enum) resolves to None.
    """
    if isinstance(value, LogLevel):
        return value
    if isinstance(value, str):
        return LEVEL_FROM_NAME.get(value.strip().upper())
    return None


def loggable(message_level: Any, threshold_level: Any, root_level: Any = DEFAULT_ROOT_LEVEL) -> bool:
    """
    Check whether a message at message_level clears threshold_level.

    An unset threshold (None) falls back to root_level. If either side of
    the comparison cannot be resolved to a known level the message passes,
    so a misconfigured level name never hides diagnostics.

    Args:
        message_level: Level of the message being logged
        threshold_level: Minimum level of the logger or appender, or None
        root_level: Level used when threshold_level is unset

    Returns:
        True if the message should be emitted
    """
    if threshold_level is None:
        threshold_level = root_level

    message = resolve_level(message_level)
    threshold = resolve_level(threshold_level)
    if message is None or threshold is None:
        return True
    return message >= threshold
