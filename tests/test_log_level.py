"""Tests for log levels and level comparison"""

import itertools

import pytest

from journal_module import LogLevel, Registry, loggable
from journal_module.core.log_level import DEFAULT_ROOT_LEVEL, resolve_level

ALL_LEVELS = list(LogLevel)


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.TRACE < LogLevel.DEBUG
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARN
        assert LogLevel.WARN < LogLevel.ERROR

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        assert LogLevel.from_string("info") == LogLevel.INFO
        assert LogLevel.from_string("Warn") == LogLevel.WARN

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            LogLevel.from_string("verbose")

    def test_str(self):
        assert str(LogLevel.WARN) == "WARN"

    def test_default_root_level(self):
        assert DEFAULT_ROOT_LEVEL == LogLevel.DEBUG


class TestResolveLevel:
    """Test tolerant level resolution."""

    def test_resolves_members_and_names(self):
        assert resolve_level(LogLevel.ERROR) is LogLevel.ERROR
        assert resolve_level("trace") is LogLevel.TRACE
        assert resolve_level(" ERROR ") is LogLevel.ERROR

    @pytest.mark.parametrize("value", ["verbose", "", None, 42, object()])
    def test_unknown_values_resolve_to_none(self, value):
        assert resolve_level(value) is None


class TestLoggable:
    """Test level comparison with root fallback."""

    def test_total_order(self):
        for high, low in itertools.combinations_with_replacement(reversed(ALL_LEVELS), 2):
            assert loggable(high, low) is True
            assert loggable(low, high) is (low == high)

    def test_reflexive(self):
        for level in ALL_LEVELS:
            assert loggable(level, level) is True

    def test_unset_threshold_uses_root(self):
        assert loggable(LogLevel.DEBUG, None, LogLevel.INFO) is False
        assert loggable(LogLevel.INFO, None, LogLevel.INFO) is True
        assert loggable(LogLevel.DEBUG, None, LogLevel.TRACE) is True

    def test_unset_threshold_defaults_to_debug_root(self):
        assert loggable(LogLevel.TRACE, None) is False
        assert loggable(LogLevel.DEBUG, None) is True

    def test_string_levels(self):
        assert loggable("warn", "info") is True
        assert loggable("debug", "INFO") is False

    @pytest.mark.parametrize("message_level", ALL_LEVELS + ["bogus"])
    def test_unresolvable_threshold_passes(self, message_level):
        assert loggable(message_level, "bogus") is True

    def test_unresolvable_root_passes(self):
        for level in ALL_LEVELS:
            assert loggable(level, None, "nonsense") is True

    def test_unresolvable_message_level_passes(self):
        assert loggable("fatal", LogLevel.ERROR) is True

    def test_root_change_affects_unset_threshold(self):
        registry = Registry()
        logger = registry.get_or_create_logger("svc")

        assert registry.loggable(LogLevel.DEBUG, logger.level) is True
        registry.set_root_level(LogLevel.WARN)
        assert registry.loggable(LogLevel.DEBUG, logger.level) is False
        assert logger.level is None
