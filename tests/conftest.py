"""Shared fixtures and test doubles"""

import io

import pytest

from journal_module import Registry


class RecordingAppender:
    """Appender double recording every call it receives."""

    def __init__(self, name: str = "recording"):
        self.name = name
        self.calls = []

    def log(self, logger_name, level, message):
        self.calls.append((logger_name, level, message))

    def clear(self):
        self.calls.clear()


class RecordingFormatter:
    """Formatter double recording events and producing a fixed layout."""

    def __init__(self, tag: str = "fmt"):
        self.tag = tag
        self.events = []

    def format(self, logger_name, level, message):
        self.events.append((logger_name, level, message))
        return f"{self.tag}|{level}|{logger_name}|{message}"


@pytest.fixture
def registry():
    return Registry()


@pytest.fixture
def stream():
    return io.StringIO()
