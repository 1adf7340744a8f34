"""
File-system helpers for the file sink
"""

import os
from datetime import date
from pathlib import Path
from typing import Optional


def directory_exists(path: str) -> bool:
    """True when ``path`` exists and is a directory."""
    return os.path.isdir(path)


def create_directory(path: str) -> bool:
    """
    Create ``path`` and any missing parents.

    An existing directory counts as success. An empty path is the
    current directory and always succeeds.

    Returns:
        True if the directory exists afterwards, False otherwise
    """
    if not path or directory_exists(path):
        return True
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError:
        return False
    return True


def log_filename(prefix: str, day: Optional[date] = None) -> str:
    """
    Log file name for ``prefix``.

    Returns ``prefix_YYYYMMDD.log`` when ``day`` is given, else ``prefix.log``.
    """
    if day is None:
        return f"{prefix}.log"
    return f"{prefix}_{day.strftime('%Y%m%d')}.log"


def log_file_path(directory: str, prefix: str, day: Optional[date] = None) -> str:
    """Join ``directory`` and the log file name with the platform separator."""
    return os.path.join(directory, log_filename(prefix, day))
