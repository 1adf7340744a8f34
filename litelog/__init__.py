"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

LiteLog - A lightweight thread-safe logging facility with tags,
colors, source locations and daily log files
"""

__version__ = "0.1.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from litelog.core.logger import Logger, get_logger
from litelog.core.logger_builder import LoggerBuilder
from litelog.core.log_entry import LogEntry
from litelog.core.log_level import LogLevel
from litelog.core.logger_config import LoggerConfig
from litelog.core.modes import ColorMode, LocationMode, TimestampPrecision
from litelog.core.tag_config import TagConfig

# Import submodules (not all classes by default)
from litelog import filters
from litelog import formatters
from litelog import writers

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
    "filters",
    "formatters",
    "writers",
]
