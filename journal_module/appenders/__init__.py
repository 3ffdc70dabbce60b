"""Appenders module - named log sinks"""

from journal_module.appenders.base_appender import AbstractAppender
from journal_module.appenders.console_appender import ConsoleAppender
from journal_module.appenders.file_appender import FileAppender

__all__ = ["AbstractAppender", "ConsoleAppender", "FileAppender"]
