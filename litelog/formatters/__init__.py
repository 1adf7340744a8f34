"""
Log formatters module

Renders log entries into the lines written to console and file sinks.
"""

from litelog.formatters.base_formatter import BaseFormatter
from litelog.formatters.line_formatter import (
    LineFormatter,
    display_path,
    format_location,
    format_timestamp,
)

__all__ = [
    "BaseFormatter",
    "LineFormatter",
    "display_path",
    "format_location",
    "format_timestamp",
]
