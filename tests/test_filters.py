"""Tests for log filters"""

import io
import pytest

from litelog import ColorMode, LocationMode, LogEntry, LogLevel, Logger, LoggerConfig
from litelog.filters import BaseFilter, CallbackFilter, LevelFilter, TagFilter


class TestLevelFilter:
    """Test effective threshold filtering."""

    def test_global_level(self):
        f = LevelFilter(LoggerConfig(level=LogLevel.WARN))
        assert not f.should_log(LogEntry(level=LogLevel.INFO, message="x"))
        assert f.should_log(LogEntry(level=LogLevel.WARN, message="x"))
        assert f(LogEntry(level=LogLevel.FATAL, message="x"))

    def test_tag_override(self):
        config = LoggerConfig(level=LogLevel.WARN, tag_levels={"NETWORK": LogLevel.TRACE})
        f = LevelFilter(config)
        assert f.should_log(LogEntry(level=LogLevel.TRACE, message="x", tag="NETWORK"))
        assert not f.should_log(LogEntry(level=LogLevel.TRACE, message="x", tag="UI"))

    def test_off_entry_rejected(self):
        f = LevelFilter(LoggerConfig(level=LogLevel.TRACE))
        assert not f.should_log(LogEntry(level=LogLevel.OFF, message="x"))

    def test_sees_config_changes(self):
        config = LoggerConfig(level=LogLevel.ERROR)
        f = LevelFilter(config)
        entry = LogEntry(level=LogLevel.INFO, message="x")
        assert not f.should_log(entry)
        config.level = LogLevel.INFO
        assert f.should_log(entry)


class TestTagFilter:
    """Test tag enable gate."""

    def test_untagged_passes(self):
        assert TagFilter(LoggerConfig()).should_log(LogEntry(level=LogLevel.INFO, message="x"))

    def test_disabled_tag(self):
        config = LoggerConfig()
        config.tag_configs["SYSTEM"].enabled = False
        f = TagFilter(config)
        assert not f.should_log(LogEntry(level=LogLevel.FATAL, message="x", tag="SYSTEM"))
        assert f.should_log(LogEntry(level=LogLevel.FATAL, message="x", tag="UI"))
        assert "SYSTEM" in repr(f)

    def test_unknown_tag_passes(self):
        f = TagFilter(LoggerConfig())
        assert f.should_log(LogEntry(level=LogLevel.INFO, message="x", tag="NEW"))


class TestCallbackFilter:
    """Test custom predicate filters."""

    def test_requires_callable(self):
        with pytest.raises(TypeError):
            CallbackFilter("not callable")

    def test_predicate(self):
        f = CallbackFilter(lambda e: e.tag == "UI")
        assert f.should_log(LogEntry(level=LogLevel.INFO, message="x", tag="UI"))
        assert not f.should_log(LogEntry(level=LogLevel.INFO, message="x", tag="DB"))

    def test_raising_callback_lets_entry_through(self):
        def broken(entry):
            raise RuntimeError("bug")

        assert CallbackFilter(broken).should_log(LogEntry(level=LogLevel.INFO, message="x"))

    def test_repr(self):
        def no_heartbeats(entry):
            return True

        assert repr(CallbackFilter(no_heartbeats)) == "CallbackFilter(callback=no_heartbeats)"


class TestLoggerFilters:
    """Test filters attached to a logger."""

    def make(self):
        stream = io.StringIO()
        logger = Logger(
            LoggerConfig(color_mode=ColorMode.OFF, show_timestamp=False, location_mode=LocationMode.NONE),
            console_stream=stream,
        )
        return logger, stream

    def test_user_filter_sees_formatted_message(self):
        logger, stream = self.make()
        seen = []

        def record(entry):
            seen.append(entry.message)
            return "drop" not in entry.message

        logger.add_filter(record)
        logger.emit(LogLevel.INFO, None, None, 0, None, "keep %d", 1)
        logger.emit(LogLevel.INFO, None, None, 0, None, "%s me", "drop")

        assert seen == ["keep 1", "drop me"]
        assert stream.getvalue() == "[INFO] keep 1\n"
        assert logger.get_metrics()["suppressed"] == 1

    def test_user_filter_not_called_for_suppressed(self):
        logger, _ = self.make()
        calls = []
        logger.add_filter(lambda e: calls.append(e) or True)
        logger.emit(LogLevel.DEBUG, None, None, 0, None, "below threshold")
        assert calls == []

    def test_custom_base_filter(self):
        class OnlyMain(BaseFilter):
            def should_log(self, entry):
                return entry.thread_name == "MainThread"

        logger, stream = self.make()
        logger.add_filter(OnlyMain())
        logger.emit(LogLevel.INFO, None, None, 0, None, "main")
        assert stream.getvalue() == "[INFO] main\n"

    def test_raising_filter_lets_entry_through(self):
        class BrokenFilter(BaseFilter):
            def should_log(self, entry):
                raise RuntimeError("filter bug")

        logger, stream = self.make()
        logger.add_filter(BrokenFilter())
        logger.add_filter(lambda e: "skip" not in e.message)
        logger.emit(LogLevel.INFO, None, None, 0, None, "kept")
        logger.emit(LogLevel.INFO, None, None, 0, None, "skip")

        assert stream.getvalue() == "[INFO] kept\n"
        assert logger.get_metrics()["suppressed"] == 1
