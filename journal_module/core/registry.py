"""
Logger and appender registry

Holds the loggers, appenders and root level shared by one application
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from journal_module.core.log_level import DEFAULT_ROOT_LEVEL, loggable
from journal_module.core.logger import Logger
from journal_module.core.config_loader import ConfigLoader


class Registry:
    """
    Registry of named loggers and appenders.

    Logger names and appender names live in separate namespaces, so a
    logger and an appender may share a name. Each logger name maps to one
    Logger for the lifetime of the registry.

    Filtering cascades root level => logger level => appender level: a
    message is written by an appender only if it clears both the logger's
    and the appender's effective level, where an unset level falls back to
    the root level.

    Thread Safety:
        No locking is performed. Register loggers and appenders during a
        single-threaded setup phase; logging from several threads after
        setup is fine, but registering while other threads log is
        undefined. Appender streams are shared without synchronization.

    Example:
        registry = Registry()
        registry.add_appender(ConsoleAppender("con", LogLevel.INFO))
        registry.add_appender(FileAppender("file", "app.log", LogLevel.DEBUG))

        log = registry["App.Controller"]
        log.debug("before change")
    """

    def __init__(self, root_level: Any = DEFAULT_ROOT_LEVEL):
        """
        Initialize registry.

        Args:
            root_level: Level used wherever a logger or appender level is unset
        """
        self._loggers: Dict[str, Logger] = {}
        self._appenders: Dict[str, Any] = {}
        self._root_level = root_level

    def get_or_create_logger(self, name: Any, level: Any = None) -> Logger:
        """
        Get an existing logger or create a new one.

        If a logger with this name exists it is returned unchanged and
        ``level`` is ignored.

        Args:
            name: Logger name; non-strings (e.g. classes) are converted with str()
            level: Level for a newly created logger, or None for the root level

        Returns:
            Logger for name
        """
        key = str(name)
        logger = self._loggers.get(key)
        if logger is None:
            logger = Logger(key, self, level)
            self._loggers[key] = logger
        return logger

    def __getitem__(self, name: Any) -> Logger:
        return self.get_or_create_logger(name)

    def get_loggers(self) -> List[Logger]:
        """Snapshot of registered loggers."""
        return list(self._loggers.values())

    @property
    def root_level(self) -> Any:
        """Root level."""
        return self._root_level

    @root_level.setter
    def root_level(self, level: Any) -> None:
        self._root_level = level

    def set_root_level(self, level: Any) -> None:
        """Set the root level."""
        self._root_level = level

    def get_root_level(self) -> Any:
        """Get the root level."""
        return self._root_level

    def add_appender(self, appender: Any) -> None:
        """
        Register an appender, replacing any appender with the same name.

        Args:
            appender: Appender with name and log(logger_name, level, message)
        """
        if hasattr(appender, "registry"):
            appender.registry = self
        self._appenders[appender.name] = appender

    def get_appender(self, name: str) -> Optional[Any]:
        """
        Get a registered appender by name.

        Returns:
            Appender instance or None if not found
        """
        return self._appenders.get(name)

    def get_appenders(self) -> List[Any]:
        """Snapshot of registered appenders."""
        return list(self._appenders.values())

    def loggable(self, message_level: Any, threshold_level: Any) -> bool:
        """Level check with this registry's root level as fallback."""
        return loggable(message_level, threshold_level, self._root_level)

    def configure(self, path: Union[str, Path]) -> None:
        """Load loggers and appenders from a YAML config file."""
        ConfigLoader(self).load(path)

    def auto_configure(self, search_dir: Union[str, Path] = ".") -> Optional[Path]:
        """
        Find and load the first matching config file.

        Returns:
            Path of the loaded file, or None if none was found
        """
        return ConfigLoader(self).auto_configure(search_dir)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"Registry(root_level={self._root_level}, "
            f"loggers={list(self._loggers)}, "
            f"appenders={list(self._appenders)})"
        )
