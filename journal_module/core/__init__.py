"""
Core module for journal system

This module contains the fundamental classes:
- LogLevel: Log level enumeration and level comparison
- Logger: Named logger
- Registry: Logger/appender registry with the root level
- AppenderConfig: Appender descriptor from config files
- ConfigLoader: YAML config loading
"""

from journal_module.core.log_level import LogLevel, DEFAULT_ROOT_LEVEL, loggable, resolve_level
from journal_module.core.logger import Logger
from journal_module.core.registry import Registry
from journal_module.core.appender_config import AppenderConfig
from journal_module.core.config_loader import ConfigLoader

__all__ = [
    "LogLevel",
    "DEFAULT_ROOT_LEVEL",
    "loggable",
    "resolve_level",
    "Logger",
    "Registry",
    "AppenderConfig",
    "ConfigLoader",
]
