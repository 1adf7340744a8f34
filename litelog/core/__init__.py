"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
- TagConfig: Per-tag display settings
- ColorMode, TimestampPrecision, LocationMode: Rendering modes
"""

from litelog.core.logger import Logger, get_logger
from litelog.core.logger_builder import LoggerBuilder
from litelog.core.log_entry import LogEntry
from litelog.core.log_level import LogLevel
from litelog.core.logger_config import LoggerConfig
from litelog.core.modes import ColorMode, LocationMode, TimestampPrecision
from litelog.core.tag_config import TagConfig

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "TagConfig",
    "ColorMode",
    "LocationMode",
    "TimestampPrecision",
    "get_logger",
]
