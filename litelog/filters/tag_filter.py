"""
Tag-based filter

Suppresses entries whose tag has been disabled
"""

from litelog.core.log_entry import LogEntry
from litelog.core.logger_config import LoggerConfig
from litelog.filters.base_filter import BaseFilter


class TagFilter(BaseFilter):
    """
    Filter log entries carrying a disabled tag.

    Disabling a tag suppresses it at every severity, FATAL included.
    Untagged entries and tags never configured always pass.
    """

    def __init__(self, config: LoggerConfig):
        self.config = config

    def should_log(self, entry: LogEntry) -> bool:
        if not entry.tag:
            return True
        tag_config = self.config.tag_configs.get(entry.tag)
        return tag_config is None or tag_config.enabled

    def __repr__(self) -> str:
        """String representation."""
        disabled = sorted(t for t, c in self.config.tag_configs.items() if not c.enabled)
        return f"TagFilter(disabled={disabled})"
