#!/usr/bin/env python3
"""Basic usage example"""

import sys

from journal_module import AnsiFormatter, ConsoleAppender, FileAppender, LogLevel, Registry


def main():
    registry = Registry(root_level=LogLevel.TRACE)

    # Output with one or multiple appenders
    registry.add_appender(ConsoleAppender("con", LogLevel.INFO, AnsiFormatter(), sys.stderr))
    registry.add_appender(FileAppender("file", "logs/example.log", LogLevel.DEBUG))

    log = registry["example"]
    log.trace("This is trace")
    log.debug("This is debug")
    log.info("Application started")
    log.warn("This is warning")
    log.error("This is error")

    # Only warn or higher for this logger from now on
    log.level = LogLevel.WARN
    log.info("Not written anywhere")


if __name__ == "__main__":
    main()
