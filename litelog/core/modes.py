"""
Rendering mode enumerations
"""

from enum import Enum


class ColorMode(Enum):
    """How ANSI colors are applied to a rendered line."""

    OFF = "off"     # No escape codes
    TAG = "tag"     # Level and tag brackets colored
    LINE = "line"   # Whole line in the level color


class TimestampPrecision(Enum):
    """Fractional-second digits shown in the timestamp."""

    SECONDS = 0
    MILLISECONDS = 3
    MICROSECONDS = 6


class LocationMode(Enum):
    """How the source file path is shown in the location suffix."""

    FULL_PATH = "full_path"
    FILENAME_ONLY = "filename_only"
    RELATIVE_PATH = "relative_path"
    NONE = "none"
