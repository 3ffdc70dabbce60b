"""
YAML config loader

Populates a registry from a declarative config file.

Sample config file:

    appenders:
      # For console type only name is required
      - name: console
        type: console
        formatter: AnsiFormatter
        level: info
        fd: STDERR

      # For file type only name and file are required;
      # relative paths are relative to the config file's directory
      - name: file
        type: file
        file: app.log
        level: debug
        truncate: true
        formatter: SimpleFormatter

    loggers:
      root: trace
      App.Controller: debug
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Union, TYPE_CHECKING

import yaml

from journal_module.appenders.console_appender import ConsoleAppender
from journal_module.appenders.file_appender import FileAppender
from journal_module.core.appender_config import AppenderConfig

if TYPE_CHECKING:
    from journal_module.core.registry import Registry

ROOT_LOGGER_NAME = "root"
LOADER_LOGGER_NAME = "Journal"
ENV_VARIABLE = "JOURNAL_ENV"
CONFIG_BASENAME = "logger"


def _level_from_config(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


class ConfigLoader:
    """Create loggers and appenders in a registry from config data."""

    def __init__(self, registry: "Registry"):
        self.registry = registry

    def load(self, path: Union[str, Path]) -> None:
        """
        Load a YAML config file.

        Args:
            path: Config file path

        Raises:
            ValueError: If the file's root is not a mapping
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
        if config is None:
            config = {}
        if not isinstance(config, dict):
            raise ValueError(f"Configuration root must be a mapping: {path}")

        self.create_loggers(config.get("loggers"))
        self.create_appenders(path.parent, config.get("appenders"))

        self.registry[LOADER_LOGGER_NAME].debug(f'Loaded config file "{path}"')

    def create_loggers(self, loggers: Optional[Mapping[str, Any]]) -> None:
        """
        Create loggers from a name -> level mapping.

        The name "root" (any case) sets the registry root level instead of
        creating a logger.
        """
        if not loggers:
            return
        for name, level_str in loggers.items():
            level = _level_from_config(level_str)
            if str(name).lower() == ROOT_LOGGER_NAME:
                self.registry.set_root_level(level)
            else:
                self.registry.get_or_create_logger(name, level)

    def create_appenders(
        self,
        config_dir: Union[str, Path],
        appenders: Optional[Iterable[Mapping[str, Any]]],
    ) -> None:
        """
        Build appenders from descriptors and add them to the registry.

        Args:
            config_dir: Directory relative file paths resolve against
            appenders: Appender descriptor mappings
        """
        if not appenders:
            return
        for data in appenders:
            config = AppenderConfig.from_dict(data, path=Path(config_dir))
            if config.type == "console":
                self.registry.add_appender(ConsoleAppender.build(config))
            elif config.type == "file":
                self.registry.add_appender(FileAppender.build(config))

    @staticmethod
    def candidate_paths(search_dir: Union[str, Path] = ".") -> List[Path]:
        """
        Config files auto_configure() looks for, in order.

        config/ (when present) is searched before search_dir itself, and
        logger.<JOURNAL_ENV>.yml before logger.yml.
        """
        base = Path(search_dir)
        dirs = [base]
        if (base / "config").is_dir():
            dirs.insert(0, base / "config")

        files = [f"{CONFIG_BASENAME}.yml"]
        env = os.environ.get(ENV_VARIABLE)
        if env:
            files.insert(0, f"{CONFIG_BASENAME}.{env}.yml")

        return [d / f for d in dirs for f in files]

    def auto_configure(self, search_dir: Union[str, Path] = ".") -> Optional[Path]:
        """
        Load the first config file found by candidate_paths().

        Returns:
            Path of the loaded file, or None if no file was found
        """
        for candidate in self.candidate_paths(search_dir):
            if candidate.is_file():
                self.load(candidate)
                return candidate
        return None
