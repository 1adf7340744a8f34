"""File writer"""

from pathlib import Path
from typing import Optional

from litelog.core.log_entry import LogEntry
from litelog.formatters.base_formatter import BaseFormatter


class FileWriter:
    """Write logs to file."""

    def __init__(
        self,
        filepath: str,
        append: bool = True,
        encoding: str = "utf-8",
        formatter: Optional[BaseFormatter] = None
    ):
        """
        Initialize file writer.

        The file is opened immediately; parent directories are not created.

        Args:
            filepath: Path to log file
            append: Keep existing content (False truncates)
            encoding: File encoding (default: 'utf-8')
            formatter: Log formatter (default: uses entry's __str__)

        Raises:
            OSError: If the file cannot be opened
        """
        self.filepath = str(filepath)
        self.append = append
        self.encoding = encoding
        self.formatter = formatter
        self._file = None
        self._open(self.append)

    @property
    def path(self) -> str:
        """Path of the file currently written to."""
        return self.filepath

    @property
    def is_open(self) -> bool:
        """True until close() is called."""
        return self._file is not None

    def _open(self, append: bool):
        """Open log file."""
        mode = "a" if append else "w"
        self._file = open(Path(self.filepath), mode, encoding=self.encoding)

    def write(self, entry: LogEntry):
        """Write log entry to file."""
        if self._file:
            if self.formatter:
                msg = self.formatter.format(entry)
            else:
                msg = str(entry)
            self._file.write(msg + "\n")

    def flush(self):
        """Flush file buffer."""
        if self._file:
            self._file.flush()

    def close(self):
        """Flush and close file."""
        if self._file:
            try:
                self._file.flush()
            finally:
                self._file.close()
                self._file = None
