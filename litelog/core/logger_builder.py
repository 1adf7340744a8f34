"""Logger builder pattern"""

import copy
from datetime import datetime
from typing import Callable, List, Optional, TextIO, Tuple

from litelog.core.logger import Logger, LevelLike, _as_level
from litelog.core.logger_config import LoggerConfig
from litelog.core.modes import ColorMode, LocationMode, TimestampPrecision
from litelog.core.tag_config import TagConfig


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = LoggerConfig()
        self._console_stream: Optional[TextIO] = None
        self._clock: Callable[[], datetime] = datetime.now
        self._file: Optional[Tuple[str, bool]] = None
        self._directory: Optional[Tuple[str, str, bool, bool]] = None
        self._custom_filters: List = []

    def with_config(self, config: LoggerConfig) -> "LoggerBuilder":
        """Start from a copy of an existing configuration (e.g. a preset)."""
        self._config = copy.deepcopy(config)
        return self

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_level(self, level: LevelLike) -> "LoggerBuilder":
        """Set global log level."""
        self._config.level = _as_level(level)
        return self

    def with_tag_level(self, tag: str, level: LevelLike) -> "LoggerBuilder":
        """Override the log level of one tag."""
        self._config.tag_levels[tag] = _as_level(level)
        return self

    def with_tag(
        self,
        tag: str,
        color: str,
        style: str = "",
        enabled: bool = True
    ) -> "LoggerBuilder":
        """Configure how a tag is displayed."""
        self._config.tag_configs[tag] = TagConfig(color=color, style=style, enabled=enabled)
        return self

    def with_tags(self, enabled: bool = True) -> "LoggerBuilder":
        """Show or hide tag brackets."""
        self._config.show_tags = enabled
        return self

    def with_console(self, enabled: bool = True, stream: Optional[TextIO] = None) -> "LoggerBuilder":
        """Enable/disable console output, optionally to a custom stream."""
        self._config.console_output = enabled
        self._console_stream = stream
        return self

    def with_color_mode(self, mode: ColorMode) -> "LoggerBuilder":
        """Set color mode."""
        self._config.color_mode = ColorMode(mode)
        return self

    def with_file_color_mode(self, mode: Optional[ColorMode]) -> "LoggerBuilder":
        """Set color mode of the file sink (None follows the console)."""
        self._config.file_color_mode = None if mode is None else ColorMode(mode)
        return self

    def with_timestamp(
        self,
        enabled: bool = True,
        precision: Optional[TimestampPrecision] = None
    ) -> "LoggerBuilder":
        """Show or hide timestamps, optionally setting their precision."""
        self._config.show_timestamp = enabled
        if precision is not None:
            self._config.timestamp_precision = TimestampPrecision(precision)
        return self

    def with_location(self, mode: LocationMode, base_path: str = "") -> "LoggerBuilder":
        """Set source location display."""
        self._config.location_mode = LocationMode(mode)
        self._config.base_path = base_path
        return self

    def with_flush_level(self, level: LevelLike) -> "LoggerBuilder":
        """Set the level from which every line is flushed immediately."""
        self._config.flush_level = _as_level(level)
        return self

    def with_file(self, filepath: str, append: bool = True) -> "LoggerBuilder":
        """Enable file output to a fixed path."""
        self._file = (str(filepath), append)
        self._directory = None
        return self

    def with_directory(
        self,
        dir_path: str,
        file_prefix: str = "app",
        append: bool = True,
        daily_rotation: bool = False
    ) -> "LoggerBuilder":
        """
        Enable file output inside a directory (created if missing).

        Example:
            logger = (LoggerBuilder()
                .with_level(LogLevel.DEBUG)
                .with_directory("logs", "myapp", daily_rotation=True)
                .build())
        """
        self._directory = (str(dir_path), file_prefix, append, daily_rotation)
        self._file = None
        return self

    def with_clock(self, clock: Callable[[], datetime]) -> "LoggerBuilder":
        """Use a custom wall-clock source."""
        self._clock = clock
        return self

    def with_filter(self, log_filter) -> "LoggerBuilder":
        """
        Add a log filter.

        Args:
            log_filter: Filter instance (BaseFilter subclass) or callable

        Returns:
            Self for method chaining

        Example:
            from litelog.filters import CallbackFilter

            logger = (LoggerBuilder()
                .with_filter(CallbackFilter(lambda e: "password" not in e.message))
                .build())
        """
        self._custom_filters.append(log_filter)
        return self

    def build(self) -> Logger:
        """
        Build and return configured logger.

        Raises:
            OSError: If the configured log file or directory cannot be opened
        """
        # Each logger mutates its own config
        config = copy.deepcopy(self._config)
        logger = Logger(config, console_stream=self._console_stream, clock=self._clock)

        if self._file:
            path, append = self._file
            if not logger.set_log_file(path, append):
                raise OSError(f"Cannot open log file: {path}")

        if self._directory:
            dir_path, prefix, append, daily = self._directory
            if not logger.set_log_directory(dir_path, prefix, append, daily):
                raise OSError(f"Cannot open log file in directory: {dir_path}")

        for log_filter in self._custom_filters:
            logger.add_filter(log_filter)

        return logger
