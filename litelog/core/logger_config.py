"""
Logger configuration management

Holds every mutable setting consulted by the emit pipeline.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from litelog.core.log_level import LogLevel
from litelog.core.modes import ColorMode, LocationMode, TimestampPrecision
from litelog.core.tag_config import TagConfig, default_tag_configs


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    A Logger mutates its config in place under its own lock; do not
    share one config object between loggers.
    """

    # Basic settings
    name: str = "litelog"
    level: LogLevel = LogLevel.INFO
    flush_level: LogLevel = LogLevel.ERROR

    # Tag settings
    tag_levels: Dict[str, LogLevel] = field(default_factory=dict)
    tag_configs: Dict[str, TagConfig] = field(default_factory=default_tag_configs)
    show_tags: bool = True

    # Console settings
    console_output: bool = True

    # Color settings (file_color_mode None follows color_mode)
    color_mode: ColorMode = ColorMode.TAG
    file_color_mode: Optional[ColorMode] = None

    # Format settings
    show_timestamp: bool = True
    timestamp_precision: TimestampPrecision = TimestampPrecision.MILLISECONDS
    location_mode: LocationMode = LocationMode.FILENAME_ONLY
    base_path: str = ""

    def __post_init__(self):
        """Validate configuration after initialization."""
        # Convert level names to LogLevel
        if isinstance(self.level, str):
            self.level = LogLevel.from_string(self.level)
        if isinstance(self.flush_level, str):
            self.flush_level = LogLevel.from_string(self.flush_level)
        self.tag_levels = {
            tag: LogLevel.from_string(lvl) if isinstance(lvl, str) else lvl
            for tag, lvl in self.tag_levels.items()
        }

        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.flush_level, LogLevel):
            raise TypeError("flush_level must be LogLevel enum")
        if not all(isinstance(lvl, LogLevel) for lvl in self.tag_levels.values()):
            raise TypeError("tag_levels values must be LogLevel enum")
        if not isinstance(self.color_mode, ColorMode):
            raise TypeError("color_mode must be ColorMode enum")
        if self.file_color_mode is not None and not isinstance(self.file_color_mode, ColorMode):
            raise TypeError("file_color_mode must be ColorMode enum or None")
        if not isinstance(self.timestamp_precision, TimestampPrecision):
            raise TypeError("timestamp_precision must be TimestampPrecision enum")
        if not isinstance(self.location_mode, LocationMode):
            raise TypeError("location_mode must be LocationMode enum")

    def effective_level(self, tag: Optional[str]) -> LogLevel:
        """
        Threshold applying to messages carrying ``tag``.

        Args:
            tag: Tag name, or None/"" for untagged messages

        Returns:
            The tag override if one is set, otherwise the global level
        """
        if tag:
            return self.tag_levels.get(tag, self.level)
        return self.level

    def tag_config(self, tag: str) -> TagConfig:
        """Stored config for ``tag``, or a default one if never configured."""
        config = self.tag_configs.get(tag)
        if config is None:
            return TagConfig()
        return config

    def effective_file_color_mode(self) -> ColorMode:
        """Color mode used when rendering for the file sink."""
        if self.file_color_mode is None:
            return self.color_mode
        return self.file_color_mode

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            level=LogLevel.DEBUG,
            timestamp_precision=TimestampPrecision.MICROSECONDS,
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            level=LogLevel.WARN,
            console_output=False,
            color_mode=ColorMode.OFF,
            location_mode=LocationMode.NONE,
        )
