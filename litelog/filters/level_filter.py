"""
Level-based filter

Applies the effective threshold of an entry's tag
"""

from litelog.core.log_entry import LogEntry
from litelog.core.log_level import LogLevel
from litelog.core.logger_config import LoggerConfig
from litelog.filters.base_filter import BaseFilter


class LevelFilter(BaseFilter):
    """
    Filter log entries below their effective threshold.

    The threshold is the tag's level override when one is set,
    otherwise the global level of the configuration.
    """

    def __init__(self, config: LoggerConfig):
        """
        Initialize level filter.

        Args:
            config: Live configuration holding global and per-tag levels

        Example:
            config = LoggerConfig(level=LogLevel.WARN,
                                  tag_levels={"NETWORK": LogLevel.DEBUG})
            filter = LevelFilter(config)
        """
        self.config = config

    def should_log(self, entry: LogEntry) -> bool:
        """
        Check if entry's level reaches the effective threshold.

        Args:
            entry: Log entry to check

        Returns:
            False for OFF entries and entries below the threshold
        """
        if entry.level is LogLevel.OFF:
            return False
        return entry.level >= self.config.effective_level(entry.tag)

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(level={self.config.level}, overrides={len(self.config.tag_levels)})"
