"""
Named logger

Loggers filter messages against their own level and hand the survivors to
every appender of their registry.
"""

from __future__ import annotations
from typing import Any, TYPE_CHECKING

from journal_module.core.log_level import LogLevel

if TYPE_CHECKING:
    from journal_module.core.registry import Registry


class Logger:
    """Named logger bound to a registry."""

    def __init__(self, name: str, registry: "Registry", level: Any = None):
        """
        Initialize logger.

        Use Registry.get_or_create_logger() rather than constructing
        loggers directly, so each name maps to a single instance.

        Args:
            name: Logger name
            registry: Registry providing appenders and the root level
            level: Minimum level, or None to use the root level
        """
        self._name = name
        self._registry = registry
        self.level = level

    @property
    def name(self) -> str:
        """Logger name."""
        return self._name

    @property
    def registry(self) -> "Registry":
        """Owning registry."""
        return self._registry

    def log(self, level: Any, message: Any) -> None:
        """Log a message."""
        if not self._registry.loggable(level, self.level):
            return

        for appender in self._registry.get_appenders():
            appender.log(self._name, level, message)

    def trace(self, message: Any) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, message)

    def debug(self, message: Any) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message)

    def info(self, message: Any) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message)

    def warn(self, message: Any) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, message)

    def error(self, message: Any) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message)

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(name={self._name!r}, level={self.level})"
