"""Writers module - Log output handlers"""

from litelog.writers.console_writer import ConsoleWriter
from litelog.writers.file_writer import FileWriter
from litelog.writers.daily_rotating_file_writer import DailyRotatingFileWriter
from litelog.writers.paths import create_directory, directory_exists, log_file_path

__all__ = [
    "ConsoleWriter",
    "FileWriter",
    "DailyRotatingFileWriter",
    "create_directory",
    "directory_exists",
    "log_file_path",
]
