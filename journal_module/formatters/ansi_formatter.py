"""
ANSI color formatter

Wraps the plain layout in a color escape keyed by level
"""

from typing import Any, Dict

from journal_module.core.log_level import LogLevel, resolve_level
from journal_module.formatters.simple_formatter import SimpleFormatter


class AnsiFormatter(SimpleFormatter):
    """Format log events as plain text colored for terminals."""

    COLORS: Dict[LogLevel, str] = {
        LogLevel.TRACE: "\033[35m",     # Magenta
        LogLevel.DEBUG: "\033[34m",     # Blue
        LogLevel.INFO: "\033[32m",      # Green
        LogLevel.WARN: "\033[33m",      # Yellow
        LogLevel.ERROR: "\033[31m",     # Red
    }
    RESET = "\033[0m"

    def color_code(self, level: Any) -> str:
        """ANSI color for level, or empty string for unmapped levels."""
        resolved = resolve_level(level)
        if resolved is None:
            return ""
        return self.COLORS.get(resolved, "")

    def format(self, logger_name: str, level: Any, message: Any) -> str:
        line = super().format(logger_name, level, message)
        return f"{self.color_code(level)}{line}{self.RESET}"

    def __repr__(self) -> str:
        """String representation."""
        return f"AnsiFormatter(timestamp_format='{self.timestamp_format}')"
