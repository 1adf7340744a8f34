"""
Line formatter

Renders a log entry as a single line:

    [2024-01-02 10:20:30.123][INFO][NETWORK][main.py:42-connect] message

with ANSI colors applied according to the configured color mode.
"""

from datetime import datetime
from typing import Optional

from litelog.core import ansi
from litelog.core.log_entry import LogEntry
from litelog.core.logger_config import LoggerConfig
from litelog.core.modes import ColorMode, LocationMode, TimestampPrecision
from litelog.formatters.base_formatter import BaseFormatter

PATH_SEPARATORS = "/\\"


def format_timestamp(
    timestamp: datetime,
    precision: TimestampPrecision = TimestampPrecision.MILLISECONDS
) -> str:
    """
    Format a timestamp as ``[YYYY-MM-DD HH:MM:SS(.fraction)]``.

    Args:
        timestamp: Local wall-clock time
        precision: Number of fractional-second digits (0, 3 or 6)

    Returns:
        Bracketed timestamp string
    """
    text = timestamp.strftime("%Y-%m-%d %H:%M:%S")
    if precision is TimestampPrecision.MILLISECONDS:
        text += f".{timestamp.microsecond // 1000:03d}"
    elif precision is TimestampPrecision.MICROSECONDS:
        text += f".{timestamp.microsecond:06d}"
    return f"[{text}]"


def display_path(file_name: str, mode: LocationMode, base_path: str = "") -> str:
    """
    Transform a source path for display.

    FILENAME_ONLY keeps the part after the last separator, RELATIVE_PATH
    strips ``base_path`` when the path starts with it, and FULL_PATH
    returns the path unchanged.
    """
    if mode is LocationMode.FILENAME_ONLY:
        cut = max(file_name.rfind(sep) for sep in PATH_SEPARATORS)
        return file_name[cut + 1:]

    if mode is LocationMode.RELATIVE_PATH and base_path:
        prefix = base_path
        if prefix[-1] not in PATH_SEPARATORS:
            prefix += "/"
        if file_name.startswith(prefix):
            return file_name[len(prefix):]

    return file_name


def format_location(
    file_name: Optional[str],
    line_number: int,
    function_name: Optional[str],
    mode: LocationMode = LocationMode.FILENAME_ONLY,
    base_path: str = ""
) -> str:
    """
    Build the ``[file:line-function]`` suffix.

    Returns an empty string when the mode is NONE or when the file or
    function is unknown.
    """
    if mode is LocationMode.NONE or not file_name or not function_name:
        return ""
    path = display_path(file_name, mode, base_path)
    return f"[{path}:{line_number}-{function_name}]"


class LineFormatter(BaseFormatter):
    """
    Format log entries the way the logger writes them to its sinks.

    The formatter reads the live LoggerConfig on every call, so the
    owning Logger must hold its lock while formatting.
    """

    def __init__(self, config: LoggerConfig, for_file: bool = False):
        """
        Initialize line formatter.

        Args:
            config: Configuration consulted for every entry
            for_file: Use the file color mode instead of the console one
        """
        self.config = config
        self.for_file = for_file

    @property
    def color_mode(self) -> ColorMode:
        """Color mode currently in effect for this formatter's sink."""
        if self.for_file:
            return self.config.effective_file_color_mode()
        return self.config.color_mode

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as a single line (without terminator).

        Args:
            entry: Log entry to format

        Returns:
            Rendered line
        """
        config = self.config
        mode = self.color_mode
        level = entry.level
        level_colors = level.color_code + level.style_code

        parts = []

        if mode is ColorMode.LINE:
            parts.append(level_colors)

        if config.show_timestamp:
            parts.append(format_timestamp(entry.timestamp, config.timestamp_precision))

        level_bracket = f"[{level.name}]"
        if mode is ColorMode.TAG:
            level_bracket = f"{level_colors}{level_bracket}{ansi.RESET}"
        parts.append(level_bracket)

        if config.show_tags and entry.tag:
            tag_bracket = f"[{entry.tag}]"
            if mode is ColorMode.TAG:
                tag = config.tag_config(entry.tag)
                tag_bracket = f"{tag.style_code}{tag.color_code}{tag_bracket}{ansi.RESET}"
            parts.append(tag_bracket)

        parts.append(format_location(
            entry.file_name,
            entry.line_number,
            entry.function_name,
            config.location_mode,
            config.base_path,
        ))

        parts.append(" ")
        parts.append(entry.message)

        if mode is ColorMode.LINE:
            parts.append(ansi.RESET)

        return "".join(parts)

    def __repr__(self) -> str:
        """String representation."""
        return f"LineFormatter(for_file={self.for_file})"
