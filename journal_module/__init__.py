"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Journal - A hierarchical multi-appender logging framework
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from journal_module.core.log_level import LogLevel, loggable
from journal_module.core.logger import Logger
from journal_module.core.registry import Registry
from journal_module.core.appender_config import AppenderConfig
from journal_module.core.config_loader import ConfigLoader
from journal_module.appenders import AbstractAppender, ConsoleAppender, FileAppender
from journal_module.formatters import AnsiFormatter, Formatter, SimpleFormatter

# Import submodules (not all classes by default)
from journal_module import appenders
from journal_module import formatters

__all__ = [
    "LogLevel",
    "loggable",
    "Logger",
    "Registry",
    "AppenderConfig",
    "ConfigLoader",
    "AbstractAppender",
    "ConsoleAppender",
    "FileAppender",
    "AnsiFormatter",
    "Formatter",
    "SimpleFormatter",
    "appenders",
    "formatters",
]
