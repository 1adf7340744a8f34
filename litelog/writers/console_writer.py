"""Console writer with ANSI colors"""

import sys
from typing import Optional, TextIO

from litelog.core.log_entry import LogEntry
from litelog.formatters.base_formatter import BaseFormatter


class ConsoleWriter:
    """Write rendered log lines to a console stream."""

    def __init__(self, stream: Optional[TextIO] = None, formatter: Optional[BaseFormatter] = None):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stderr at write time)
            formatter: Log formatter (default: uses entry's __str__)
        """
        self._stream = stream
        self.formatter = formatter

    @property
    def stream(self) -> TextIO:
        """Target stream; follows sys.stderr when none was given."""
        return self._stream if self._stream is not None else sys.stderr

    def write(self, entry: LogEntry):
        """Write log entry to console."""
        if self.formatter:
            msg = self.formatter.format(entry)
        else:
            msg = str(entry)
        self.stream.write(msg + "\n")

    def flush(self):
        """Flush stream."""
        self.stream.flush()
