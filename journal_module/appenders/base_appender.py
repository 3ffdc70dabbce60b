"""
Base appender

Shared filter and write contract for all appenders
"""

from __future__ import annotations
from typing import Any, Optional, TYPE_CHECKING

from journal_module.core.log_level import DEFAULT_ROOT_LEVEL, loggable
from journal_module.formatters.simple_formatter import SimpleFormatter

if TYPE_CHECKING:
    from journal_module.core.registry import Registry


class AbstractAppender:
    """
    Named sink with its own level and formatter.

    Subclasses set ``stream`` at construction. Messages reaching an appender
    have already passed the logger's filter and are filtered again against
    the appender's own level, falling back to the root level of the registry
    the appender was added to.
    """

    def __init__(self, name: str, level: Any = None, formatter: Any = None):
        """
        Initialize appender.

        Args:
            name: Unique appender name within a registry
            level: Minimum level, or None to use the root level
            formatter: Object with format(logger_name, level, message)
                (default: SimpleFormatter)
        """
        self._name = name
        self.level = level
        self.formatter = formatter if formatter is not None else SimpleFormatter()
        self.stream: Any = None
        self.registry: Optional["Registry"] = None

    @property
    def name(self) -> str:
        """Appender name."""
        return self._name

    @property
    def root_level(self) -> Any:
        """Root level of the owning registry."""
        if self.registry is None:
            return DEFAULT_ROOT_LEVEL
        return self.registry.root_level

    def log(self, logger_name: str, level: Any, message: Any) -> None:
        """Format and write message if level clears this appender's filter."""
        if not loggable(level, self.level, self.root_level):
            return
        self.stream.write(self.formatter.format(logger_name, level, message) + "\n")

    def flush(self) -> None:
        """Flush stream."""
        self.stream.flush()

    def __repr__(self) -> str:
        """String representation."""
        return f"{type(self).__name__}(name={self.name!r}, level={self.level}, formatter={self.formatter!r})"
