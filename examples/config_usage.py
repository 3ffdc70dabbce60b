#!/usr/bin/env python3
"""Configure loggers and appenders from logger.yml"""

from pathlib import Path

from journal_module import Registry


def main():
    registry = Registry()
    registry.configure(Path(__file__).parent / "logger.yml")

    log = registry["App.Controller"]
    log.debug("Only in logs/app.log")
    log.info("On the console and in logs/app.log")


if __name__ == "__main__":
    main()
