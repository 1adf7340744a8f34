"""
Log filters module

Gates applied to every entry before it is rendered.
"""

from litelog.filters.base_filter import BaseFilter
from litelog.filters.level_filter import LevelFilter
from litelog.filters.tag_filter import TagFilter
from litelog.filters.callback_filter import CallbackFilter

__all__ = [
    "BaseFilter",
    "LevelFilter",
    "TagFilter",
    "CallbackFilter",
]
