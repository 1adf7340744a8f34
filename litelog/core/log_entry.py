"""
Log entry data structure
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any
import threading

from litelog.core.log_level import LogLevel


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains all information about a single log message after its
    arguments have been interpolated.
    """

    level: LogLevel
    message: str
    tag: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)
    thread_id: int = field(default_factory=threading.get_ident)
    thread_name: str = field(default_factory=lambda: threading.current_thread().name)
    file_name: Optional[str] = None
    line_number: int = 0
    function_name: Optional[str] = None

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)

    @property
    def has_location(self) -> bool:
        """True when both file and function are known."""
        return bool(self.file_name) and bool(self.function_name)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "message": self.message,
            "tag": self.tag,
            "timestamp": self.timestamp.isoformat(),
            "thread_id": self.thread_id,
            "thread_name": self.thread_name,
            "file_name": self.file_name,
            "line_number": self.line_number,
            "function_name": self.function_name,
        }

    def __str__(self) -> str:
        """String representation."""
        tag = f"[{self.tag}]" if self.tag else ""
        return (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}]"
            f"[{self.level.name}]{tag} "
            f"{self.message}"
        )
