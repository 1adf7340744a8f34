"""
Log level enumeration

Severity ordering used for filtering, plus the color and style each
level is rendered with.
"""

from enum import IntEnum
from typing import Dict

from litelog.core import ansi


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are compatible with Python's logging module.
    OFF is a threshold sentinel and is never emitted.
    """

    TRACE = 5       # Most verbose, detailed tracing
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages
    FATAL = 50      # Fatal errors
    OFF = 100       # Logging disabled

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level_str = level_str.strip().upper()
        if level_str in LEVEL_FROM_NAME:
            return LEVEL_FROM_NAME[level_str]
        if level_str in LEVEL_ALIASES:
            return LEVEL_ALIASES[level_str]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.TRACE: ansi.CYAN,
            LogLevel.DEBUG: ansi.BLUE,
            LogLevel.INFO: ansi.GREEN,
            LogLevel.WARN: ansi.YELLOW,
            LogLevel.ERROR: ansi.RED,
            LogLevel.FATAL: ansi.MAGENTA,
        }
        return colors.get(self, ansi.WHITE)

    @property
    def style_code(self) -> str:
        """ANSI style code (bold for ERROR and FATAL)."""
        if self in (LogLevel.ERROR, LogLevel.FATAL):
            return ansi.BOLD
        return ""

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return ansi.RESET


# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.FATAL: "FATAL",
    LogLevel.OFF: "OFF",
}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}

# Names used by Python's logging module
LEVEL_ALIASES: Dict[str, LogLevel] = {
    "WARNING": LogLevel.WARN,
    "CRITICAL": LogLevel.FATAL,
}
