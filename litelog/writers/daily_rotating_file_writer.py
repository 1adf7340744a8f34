"""Daily rotating file writer"""

from datetime import date, datetime
from typing import Callable, Optional

from litelog.core.log_entry import LogEntry
from litelog.formatters.base_formatter import BaseFormatter
from litelog.writers.file_writer import FileWriter
from litelog.writers.paths import log_file_path


class DailyRotatingFileWriter(FileWriter):
    """
    Write logs to ``<directory>/<prefix>_YYYYMMDD.log``, switching files by date.

    The date of each entry's timestamp decides the target file. When it
    differs from the date the current file was opened for, the file is
    closed and the new day's file is opened in append mode.
    """

    def __init__(
        self,
        directory: str,
        prefix: str = "app",
        append: bool = True,
        encoding: str = "utf-8",
        formatter: Optional[BaseFormatter] = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        """
        Initialize daily rotating file writer.

        Args:
            directory: Existing directory holding the log files
            prefix: File name prefix
            append: Keep existing content of the first file (False truncates)
            encoding: File encoding (default: 'utf-8')
            formatter: Log formatter (default: uses entry's __str__)
            clock: Source of the current local time

        Raises:
            OSError: If the first file cannot be opened
        """
        self.directory = str(directory)
        self.prefix = prefix
        self._day = clock().date()
        self._closed = False
        super().__init__(
            log_file_path(self.directory, prefix, self._day),
            append=append,
            encoding=encoding,
            formatter=formatter,
        )

    @property
    def day(self) -> date:
        """Date the current file belongs to."""
        return self._day

    def _should_rotate(self, entry: LogEntry) -> bool:
        """Check if entry belongs to another day, or a previous reopen failed."""
        return self._file is None or entry.timestamp.date() != self._day

    def _do_rotate(self, day: date):
        """Close the current file and open the one for ``day``."""
        super().close()
        new_path = log_file_path(self.directory, self.prefix, day)
        self._file = open(new_path, "a", encoding=self.encoding)
        self.filepath = new_path
        self._day = day

    def write(self, entry: LogEntry):
        """Write log entry, rotating first when the date changed."""
        if self._closed:
            return
        if self._should_rotate(entry):
            self._do_rotate(entry.timestamp.date())
        super().write(entry)

    def close(self):
        """Close file; later writes are ignored."""
        self._closed = True
        super().close()
