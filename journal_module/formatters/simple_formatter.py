"""
Plain text formatter

Produces "<timestamp> <LEVEL> <logger>: <message>" lines
"""

from datetime import datetime
from typing import Any


class SimpleFormatter:
    """Format log events as plain single-line text."""

    TEMPLATE = "{timestamp} {level:<5} {logger}: {message}"

    def __init__(self, timestamp_format: str = "%Y-%m-%d %H:%M:%S.%f"):
        """
        Initialize simple formatter.

        Args:
            timestamp_format: strftime format for timestamps. A trailing
                %f is cut down to milliseconds.
        """
        self.timestamp_format = timestamp_format

    def timestamp(self) -> str:
        """Current local time rendered with timestamp_format."""
        now = datetime.now().strftime(self.timestamp_format)
        if self.timestamp_format.endswith("%f"):
            now = now[:-3]  # Remove last 3 digits
        return now

    def format(self, logger_name: str, level: Any, message: Any) -> str:
        """
        Format log event.

        Args:
            logger_name: Emitting logger name
            level: Message level
            message: Message text

        Returns:
            Formatted string
        """
        return self.TEMPLATE.format(
            timestamp=self.timestamp(),
            level=str(level).upper(),
            logger=logger_name,
            message=message,
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"SimpleFormatter(timestamp_format='{self.timestamp_format}')"
