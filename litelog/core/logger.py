"""
Main Logger class - synchronous, thread-safe leveled logger

Every public method takes the logger's re-entrant lock, so configuration
changes and emitted lines are serialized: each line reaches the sinks
whole, in the order the lock was granted.
"""

from __future__ import annotations
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, TextIO, Union
import atexit
import sys
import threading

from litelog.core.log_level import LogLevel
from litelog.core.log_entry import LogEntry
from litelog.core.logger_config import LoggerConfig
from litelog.core.modes import ColorMode, LocationMode, TimestampPrecision
from litelog.core.tag_config import TagConfig
from litelog.filters.base_filter import BaseFilter
from litelog.filters.callback_filter import CallbackFilter
from litelog.filters.level_filter import LevelFilter
from litelog.filters.tag_filter import TagFilter
from litelog.formatters.line_formatter import LineFormatter
from litelog.writers.console_writer import ConsoleWriter
from litelog.writers.daily_rotating_file_writer import DailyRotatingFileWriter
from litelog.writers.file_writer import FileWriter
from litelog.writers.paths import create_directory, directory_exists, log_file_path

LevelLike = Union[LogLevel, int, str]

# Errors a sink may raise while writing a line
SINK_ERRORS = (OSError, ValueError)


def _as_level(level: LevelLike) -> LogLevel:
    """Coerce a level name or number to LogLevel; raises ValueError/TypeError."""
    if isinstance(level, LogLevel):
        return level
    if isinstance(level, str):
        return LogLevel.from_string(level)
    if isinstance(level, int):
        return LogLevel(level)
    raise TypeError(f"Invalid log level: {level!r}")


def _interpolate(fmt: Any, args: tuple) -> str:
    """printf-style interpolation; a lone mapping argument feeds %(name)s fields."""
    if not args:
        return fmt if isinstance(fmt, str) else str(fmt)
    if len(args) == 1 and isinstance(args[0], Mapping):
        return fmt % args[0]
    return fmt % args


class Logger:
    """Main logger class: configuration, filtering, rendering and dispatch."""

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        console_stream: Optional[TextIO] = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        """
        Create a logger.

        Args:
            config: Initial configuration (default: LoggerConfig.default())
            console_stream: Console target (default: sys.stderr)
            clock: Source of local wall-clock time for timestamps and
                   daily file names
        """
        self._config = config or LoggerConfig.default()
        self._lock = threading.RLock()
        self._clock = clock
        self._console = ConsoleWriter(
            stream=console_stream,
            formatter=LineFormatter(self._config),
        )
        self._file_writer: Optional[FileWriter] = None
        self._filters: List[BaseFilter] = [TagFilter(self._config), LevelFilter(self._config)]
        self._user_filters: List[BaseFilter] = []
        self._metrics = {"logged": 0, "suppressed": 0, "dropped": 0, "write_errors": 0}

        atexit.register(self.shutdown)

    @property
    def config(self) -> LoggerConfig:
        """Live configuration; change it through the setters."""
        return self._config

    # ------------------------------------------------------------------
    # Level configuration
    # ------------------------------------------------------------------

    def set_level(self, level: LevelLike) -> None:
        """Set the global threshold."""
        level = _as_level(level)
        with self._lock:
            self._config.level = level

    def get_level(self) -> LogLevel:
        """Global threshold."""
        with self._lock:
            return self._config.level

    def set_tag_level(self, tag: str, level: LevelLike) -> None:
        """Override the threshold for messages carrying ``tag``."""
        level = _as_level(level)
        with self._lock:
            self._config.tag_levels[tag] = level

    def clear_tag_level(self, tag: str) -> None:
        """Remove a tag override; the tag falls back to the global level."""
        with self._lock:
            self._config.tag_levels.pop(tag, None)

    def get_effective_level(self, tag: Optional[str] = None) -> LogLevel:
        """Threshold that applies to ``tag`` right now."""
        with self._lock:
            return self._config.effective_level(tag)

    def is_enabled_for(self, level: LevelLike, tag: Optional[str] = None) -> bool:
        """
        Check whether a message at ``level`` carrying ``tag`` would be emitted.

        Runs the tag and level gates only; user filters need the
        message and are applied by emit().
        """
        level = _as_level(level)
        if level is LogLevel.OFF:
            return False
        probe = LogEntry(level=level, message="", tag=tag or None)
        with self._lock:
            return all(f.should_log(probe) for f in self._filters)

    # ------------------------------------------------------------------
    # Tag configuration
    # ------------------------------------------------------------------

    def configure_tag(self, tag: str, color: str, style: str = "", enabled: bool = True) -> None:
        """
        Create or replace the display config of a tag.

        Raises:
            ValueError: If color or style is not a known name
        """
        tag_config = TagConfig(color=color, style=style, enabled=enabled)
        with self._lock:
            self._config.tag_configs[tag] = tag_config

    def enable_tag(self, tag: str, enabled: bool) -> None:
        """Enable or disable a tag, creating a default config if needed."""
        with self._lock:
            tag_config = self._config.tag_configs.get(tag)
            if tag_config is None:
                self._config.tag_configs[tag] = TagConfig(enabled=enabled)
            else:
                tag_config.enabled = enabled

    def get_tag_config(self, tag: str) -> TagConfig:
        """Display config of a tag (a default one if never configured)."""
        with self._lock:
            return self._config.tag_config(tag)

    def enable_tags(self, enabled: bool) -> None:
        """Show or hide the tag bracket."""
        with self._lock:
            self._config.show_tags = enabled

    # ------------------------------------------------------------------
    # Rendering configuration
    # ------------------------------------------------------------------

    def set_color_mode(self, color_mode: ColorMode) -> None:
        """Set how colors are applied (console, and file unless overridden)."""
        color_mode = ColorMode(color_mode)
        with self._lock:
            self._config.color_mode = color_mode

    def set_file_color_mode(self, color_mode: Optional[ColorMode]) -> None:
        """Set the file sink's color mode; None follows the console mode."""
        if color_mode is not None:
            color_mode = ColorMode(color_mode)
        with self._lock:
            self._config.file_color_mode = color_mode

    def enable_timestamp(self, enabled: bool) -> None:
        """Show or hide the timestamp prefix."""
        with self._lock:
            self._config.show_timestamp = enabled

    def set_timestamp_precision(self, precision: TimestampPrecision) -> None:
        """Set the number of fractional-second digits."""
        precision = TimestampPrecision(precision)
        with self._lock:
            self._config.timestamp_precision = precision

    def set_location_mode(self, mode: LocationMode, base_path: str = "") -> None:
        """
        Set how the source location is shown.

        Args:
            mode: Location display mode
            base_path: Prefix stripped in RELATIVE_PATH mode
        """
        mode = LocationMode(mode)
        with self._lock:
            self._config.location_mode = mode
            self._config.base_path = base_path

    # ------------------------------------------------------------------
    # Sinks
    # ------------------------------------------------------------------

    def set_console_output(self, enabled: bool) -> None:
        """Enable or disable the console sink."""
        with self._lock:
            self._config.console_output = enabled

    def set_log_file(self, file_path: str, append: bool = True) -> bool:
        """
        Direct file output to ``file_path``.

        Any open log file is closed first. Parent directories are not
        created; use set_log_directory() for that.

        Args:
            file_path: Log file path
            append: Keep existing content (False truncates)

        Returns:
            True on success. On failure no file sink remains open.
        """
        with self._lock:
            return self._install_file_writer(
                lambda: FileWriter(
                    file_path,
                    append=append,
                    formatter=LineFormatter(self._config, for_file=True),
                )
            )

    def set_log_directory(
        self,
        dir_path: str,
        file_prefix: str = "app",
        append: bool = True,
        daily_rotation: bool = False
    ) -> bool:
        """
        Direct file output to a file inside ``dir_path``.

        The directory and any missing parents are created. The file is
        ``<prefix>.log``, or ``<prefix>_YYYYMMDD.log`` with daily rotation,
        in which case the logger moves to a new file when the date changes.

        Returns:
            True on success, False if the directory or file could not be
            created. A directory failure leaves the current sink as it
            was; a file failure leaves no file sink open.
        """
        with self._lock:
            if not directory_exists(dir_path) and not create_directory(dir_path):
                return False

            if not daily_rotation:
                return self.set_log_file(log_file_path(dir_path, file_prefix), append)

            return self._install_file_writer(
                lambda: DailyRotatingFileWriter(
                    dir_path,
                    prefix=file_prefix,
                    append=append,
                    formatter=LineFormatter(self._config, for_file=True),
                    clock=self._clock,
                )
            )

    def close_log_file(self) -> None:
        """Flush and close the log file, if any."""
        with self._lock:
            self._close_file_writer()

    def get_log_file_path(self) -> str:
        """Path of the open log file, or "" when there is none."""
        with self._lock:
            if self._file_writer is None:
                return ""
            return self._file_writer.path

    def _install_file_writer(self, factory: Callable[[], FileWriter]) -> bool:
        """Replace the file writer; caller holds the lock."""
        self._close_file_writer()
        try:
            self._file_writer = factory()
        except (OSError, ValueError):
            return False
        return True

    def _close_file_writer(self) -> None:
        """Close and forget the file writer; caller holds the lock."""
        writer, self._file_writer = self._file_writer, None
        if writer is None:
            return
        try:
            writer.close()
        except SINK_ERRORS:
            self._metrics["write_errors"] += 1

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------

    def add_filter(self, log_filter: Union[BaseFilter, Callable[[LogEntry], bool]]) -> None:
        """
        Add a log filter.

        Args:
            log_filter: Filter instance with should_log(entry) method, or a
                        plain callable taking a LogEntry
        """
        if not isinstance(log_filter, BaseFilter):
            log_filter = CallbackFilter(log_filter)
        with self._lock:
            self._user_filters.append(log_filter)

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def emit(
        self,
        level: LevelLike,
        tag: Optional[str],
        file: Optional[str],
        line: int,
        function: Optional[str],
        fmt: Any,
        *args: Any
    ) -> None:
        """
        Filter, render and write one message.

        Never raises: invalid levels and messages that fail to
        interpolate (bad arguments, or an argument whose __str__ raises)
        are dropped. A user filter that raises lets the entry through.

        Args:
            level: Message severity (OFF is ignored)
            tag: Optional tag, "" or None for untagged
            file: Source file of the call site
            line: Source line of the call site
            function: Function name of the call site
            fmt: printf-style message template
            *args: Template arguments
        """
        try:
            level = _as_level(level)
        except (TypeError, ValueError):
            return
        if level is LogLevel.OFF:
            return

        with self._lock:
            if not self.is_enabled_for(level, tag):
                self._metrics["suppressed"] += 1
                return

            try:
                message = _interpolate(fmt, args)
            except Exception:
                self._metrics["dropped"] += 1
                return

            entry = LogEntry(
                level=level,
                message=message,
                tag=tag or None,
                timestamp=self._clock(),
                file_name=file,
                line_number=line,
                function_name=function,
            )

            for f in self._user_filters:
                if not self._passes(f, entry):
                    self._metrics["suppressed"] += 1
                    return

            self._dispatch(entry)

    @staticmethod
    def _passes(log_filter: BaseFilter, entry: LogEntry) -> bool:
        """Run a user filter; one that raises lets the entry through."""
        try:
            return bool(log_filter.should_log(entry))
        except Exception:
            return True

    def _dispatch(self, entry: LogEntry) -> None:
        """Write entry to every active sink; caller holds the lock."""
        force_flush = entry.level >= self._config.flush_level
        writers: List[Any] = []
        if self._config.console_output:
            writers.append(self._console)
        if self._file_writer is not None:
            writers.append(self._file_writer)

        for writer in writers:
            try:
                writer.write(entry)
                if force_flush:
                    writer.flush()
            except SINK_ERRORS:
                self._metrics["write_errors"] += 1

        self._metrics["logged"] += 1

    def _emit_from_caller(self, level: LevelLike, tag: Optional[str], fmt: Any, args: tuple) -> None:
        """Emit with the location of the frame two levels up."""
        try:
            frame = sys._getframe(2)
        except ValueError:
            self.emit(level, tag, None, 0, None, fmt, *args)
            return
        code = frame.f_code
        self.emit(level, tag, code.co_filename, frame.f_lineno, code.co_name, fmt, *args)

    def log(self, level: LevelLike, fmt: Any, *args: Any, tag: Optional[str] = None) -> None:
        """Log a message at ``level`` with the caller's location."""
        self._emit_from_caller(level, tag, fmt, args)

    def trace(self, fmt: Any, *args: Any, tag: Optional[str] = None) -> None:
        """Log trace message."""
        self._emit_from_caller(LogLevel.TRACE, tag, fmt, args)

    def debug(self, fmt: Any, *args: Any, tag: Optional[str] = None) -> None:
        """Log debug message."""
        self._emit_from_caller(LogLevel.DEBUG, tag, fmt, args)

    def info(self, fmt: Any, *args: Any, tag: Optional[str] = None) -> None:
        """Log info message."""
        self._emit_from_caller(LogLevel.INFO, tag, fmt, args)

    def warn(self, fmt: Any, *args: Any, tag: Optional[str] = None) -> None:
        """Log warning message."""
        self._emit_from_caller(LogLevel.WARN, tag, fmt, args)

    def error(self, fmt: Any, *args: Any, tag: Optional[str] = None) -> None:
        """Log error message."""
        self._emit_from_caller(LogLevel.ERROR, tag, fmt, args)

    def fatal(self, fmt: Any, *args: Any, tag: Optional[str] = None) -> None:
        """Log fatal message."""
        self._emit_from_caller(LogLevel.FATAL, tag, fmt, args)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def flush(self) -> None:
        """Flush console and file sinks."""
        with self._lock:
            for writer in (self._console, self._file_writer):
                if writer is None:
                    continue
                try:
                    writer.flush()
                except SINK_ERRORS:
                    self._metrics["write_errors"] += 1

    def shutdown(self) -> None:
        """Flush everything and close the log file. Safe to call repeatedly."""
        with self._lock:
            self.flush()
            self._close_file_writer()
        atexit.unregister(self.shutdown)

    def get_metrics(self) -> Dict[str, int]:
        """Get logging metrics."""
        with self._lock:
            return self._metrics.copy()

    def __enter__(self) -> "Logger":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.shutdown()


_default_logger: Optional[Logger] = None
_default_lock = threading.Lock()


def get_logger() -> Logger:
    """
    Process-wide shared logger, created on first use.

    Libraries and applications that want one logger per process share
    this instance; tests and embedders can construct their own Logger.
    """
    global _default_logger
    if _default_logger is None:
        with _default_lock:
            if _default_logger is None:
                _default_logger = Logger()
    return _default_logger
