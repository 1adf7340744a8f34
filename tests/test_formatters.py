"""Tests for line rendering"""

import io
import pytest
from datetime import datetime

from litelog import (
    ColorMode,
    LocationMode,
    LogEntry,
    LogLevel,
    Logger,
    LoggerConfig,
    TagConfig,
    TimestampPrecision,
)
from litelog.formatters import LineFormatter, display_path, format_location, format_timestamp

RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
BLUE = "\033[34m"
YELLOW = "\033[33m"
MAGENTA = "\033[35m"

FIXED_TIME = datetime(2024, 1, 2, 10, 20, 30, 123456)


def entry(level=LogLevel.INFO, message="hello", tag=None, file_name=None, line=0, function=None):
    return LogEntry(
        level=level,
        message=message,
        tag=tag,
        timestamp=FIXED_TIME,
        file_name=file_name,
        line_number=line,
        function_name=function,
    )


class TestFormatTimestamp:
    """Test timestamp prefix."""

    def test_seconds(self):
        assert format_timestamp(FIXED_TIME, TimestampPrecision.SECONDS) == "[2024-01-02 10:20:30]"

    def test_milliseconds(self):
        assert format_timestamp(FIXED_TIME, TimestampPrecision.MILLISECONDS) == "[2024-01-02 10:20:30.123]"

    def test_microseconds(self):
        assert format_timestamp(FIXED_TIME, TimestampPrecision.MICROSECONDS) == "[2024-01-02 10:20:30.123456]"

    def test_zero_padding(self):
        ts = datetime(2024, 1, 2, 3, 4, 5, 7)
        assert format_timestamp(ts, TimestampPrecision.MILLISECONDS) == "[2024-01-02 03:04:05.000]"
        assert format_timestamp(ts, TimestampPrecision.MICROSECONDS) == "[2024-01-02 03:04:05.000007]"


class TestFormatLocation:
    """Test location suffix."""

    def test_filename_only(self):
        assert format_location("/a/b/c.txt", 10, "f", LocationMode.FILENAME_ONLY) == "[c.txt:10-f]"

    def test_full_path(self):
        assert format_location("/a/b/c.txt", 10, "f", LocationMode.FULL_PATH) == "[/a/b/c.txt:10-f]"

    def test_none(self):
        assert format_location("/a/b/c.txt", 10, "f", LocationMode.NONE) == ""

    def test_missing_file_or_function(self):
        assert format_location(None, 10, "f", LocationMode.FULL_PATH) == ""
        assert format_location("/a/b/c.txt", 10, None, LocationMode.FULL_PATH) == ""

    def test_filename_only_windows_separator(self):
        assert display_path("C:\\src\\app\\main.cpp", LocationMode.FILENAME_ONLY) == "main.cpp"

    def test_filename_only_without_separator(self):
        assert display_path("main.py", LocationMode.FILENAME_ONLY) == "main.py"

    @pytest.mark.parametrize("base", ["/home/dev/project", "/home/dev/project/"])
    def test_relative_path(self, base):
        path = display_path("/home/dev/project/src/net.py", LocationMode.RELATIVE_PATH, base)
        assert path == "src/net.py"

    def test_relative_path_outside_base(self):
        path = display_path("/opt/lib/x.py", LocationMode.RELATIVE_PATH, "/home/dev/project")
        assert path == "/opt/lib/x.py"

    def test_relative_path_requires_separator_boundary(self):
        path = display_path("/home/dev/project2/x.py", LocationMode.RELATIVE_PATH, "/home/dev/project")
        assert path == "/home/dev/project2/x.py"

    def test_relative_path_empty_base(self):
        path = display_path("/a/b/c.txt", LocationMode.RELATIVE_PATH, "")
        assert path == "/a/b/c.txt"


class TestLineFormatter:
    """Test full line assembly."""

    def test_plain_line(self):
        config = LoggerConfig(color_mode=ColorMode.OFF)
        line = LineFormatter(config).format(entry(tag="NETWORK", file_name="/a/b/c.txt", line=10, function="f"))
        assert line == "[2024-01-02 10:20:30.123][INFO][NETWORK][c.txt:10-f] hello"

    def test_no_timestamp_no_tag(self):
        config = LoggerConfig(color_mode=ColorMode.OFF, show_timestamp=False)
        assert LineFormatter(config).format(entry()) == "[INFO] hello"

    def test_tags_hidden(self):
        config = LoggerConfig(color_mode=ColorMode.OFF, show_timestamp=False, show_tags=False)
        assert LineFormatter(config).format(entry(tag="UI")) == "[INFO] hello"

    def test_tag_color_mode(self):
        config = LoggerConfig(color_mode=ColorMode.TAG, show_timestamp=False)
        line = LineFormatter(config).format(entry(tag="NETWORK"))
        assert line == f"{GREEN}[INFO]{RESET}{BLUE}[NETWORK]{RESET} hello"

    def test_tag_color_mode_with_style(self):
        config = LoggerConfig(color_mode=ColorMode.TAG, show_timestamp=False)
        config.tag_configs["PHYSICS"] = TagConfig(color="blue", style="bold")
        line = LineFormatter(config).format(entry(level=LogLevel.ERROR, tag="PHYSICS"))
        assert line == f"{RED}{BOLD}[ERROR]{RESET}{BOLD}{BLUE}[PHYSICS]{RESET} hello"

    def test_unknown_tag_uses_default_color(self):
        config = LoggerConfig(color_mode=ColorMode.TAG, show_timestamp=False)
        line = LineFormatter(config).format(entry(tag="MAIN"))
        assert line == f"{GREEN}[INFO]{RESET}\033[36m[MAIN]{RESET} hello"

    def test_line_color_mode(self):
        config = LoggerConfig(color_mode=ColorMode.LINE)
        line = LineFormatter(config).format(entry(level=LogLevel.FATAL, tag="NETWORK",
                                                  file_name="/a/b/c.txt", line=10, function="f"))
        assert line == (
            f"{MAGENTA}{BOLD}[2024-01-02 10:20:30.123][FATAL][NETWORK][c.txt:10-f] hello{RESET}"
        )

    def test_off_mode_has_no_escapes(self):
        config = LoggerConfig(color_mode=ColorMode.OFF)
        for level in (LogLevel.TRACE, LogLevel.WARN, LogLevel.FATAL):
            line = LineFormatter(config).format(entry(level=level, tag="SECURITY"))
            assert "\033" not in line

    def test_file_color_mode_follows_console(self):
        config = LoggerConfig(color_mode=ColorMode.LINE)
        assert LineFormatter(config, for_file=True).color_mode is ColorMode.LINE

    def test_file_color_mode_override(self):
        config = LoggerConfig(color_mode=ColorMode.TAG, file_color_mode=ColorMode.OFF, show_timestamp=False)
        console_line = LineFormatter(config).format(entry(level=LogLevel.WARN))
        file_line = LineFormatter(config, for_file=True).format(entry(level=LogLevel.WARN))
        assert console_line == f"{YELLOW}[WARN]{RESET} hello"
        assert file_line == "[WARN] hello"


class TestLoggerRendering:
    """Test rendering through the logger's setters."""

    def make(self):
        stream = io.StringIO()
        logger = Logger(LoggerConfig(), console_stream=stream, clock=lambda: FIXED_TIME)
        return logger, stream

    def test_default_rendering(self):
        logger, stream = self.make()
        logger.emit(LogLevel.INFO, "UI", "/src/app/view.py", 7, "draw", "frame %d", 3)
        assert stream.getvalue() == (
            f"[2024-01-02 10:20:30.123]{GREEN}[INFO]{RESET}\033[32m[UI]{RESET}[view.py:7-draw] frame 3\n"
        )

    def test_setters(self):
        logger, stream = self.make()
        logger.set_color_mode(ColorMode.OFF)
        logger.set_timestamp_precision(TimestampPrecision.SECONDS)
        logger.set_location_mode(LocationMode.RELATIVE_PATH, "/src")
        logger.emit(LogLevel.WARN, None, "/src/app/view.py", 7, "draw", "slow")
        logger.enable_timestamp(False)
        logger.set_location_mode(LocationMode.NONE)
        logger.emit(LogLevel.WARN, None, "/src/app/view.py", 7, "draw", "slow")

        assert stream.getvalue().splitlines() == [
            "[2024-01-02 10:20:30][WARN][app/view.py:7-draw] slow",
            "[WARN] slow",
        ]

    def test_set_location_mode_resets_base_path(self):
        logger, _ = self.make()
        logger.set_location_mode(LocationMode.RELATIVE_PATH, "/src")
        logger.set_location_mode(LocationMode.FULL_PATH)
        assert logger.config.base_path == ""

    def test_setters_accept_values(self):
        logger, _ = self.make()
        logger.set_color_mode("line")
        logger.set_timestamp_precision(6)
        logger.set_location_mode("full_path")
        assert logger.config.color_mode is ColorMode.LINE
        assert logger.config.timestamp_precision is TimestampPrecision.MICROSECONDS
        assert logger.config.location_mode is LocationMode.FULL_PATH

    def test_setter_rejects_unknown_mode(self):
        logger, _ = self.make()
        with pytest.raises(ValueError):
            logger.set_color_mode("rainbow")
