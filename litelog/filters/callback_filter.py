"""
Callback-based filter

Filters log entries using a caller-supplied predicate
"""

from typing import Callable
from litelog.core.log_entry import LogEntry
from litelog.filters.base_filter import BaseFilter


class CallbackFilter(BaseFilter):
    """
    Filter log entries using a custom callback function.

    Callbacks run inside the logger's lock and must not call back into
    a different logger that may be waiting on this one.
    """

    def __init__(self, callback: Callable[[LogEntry], bool]):
        """
        Initialize callback filter.

        Args:
            callback: Function that takes LogEntry and returns bool.
                     Should return True to log the entry, False to discard it.

        Example:
            # Only messages logged from the main thread
            filter = CallbackFilter(lambda e: e.thread_name == "MainThread")

            # Drop heartbeat chatter on the NETWORK tag
            def no_heartbeats(entry):
                return not (entry.tag == "NETWORK" and "heartbeat" in entry.message)

            filter = CallbackFilter(no_heartbeats)
        """
        if not callable(callback):
            raise TypeError("callback must be callable")

        self.callback = callback

    def should_log(self, entry: LogEntry) -> bool:
        """
        Use callback to determine if entry should be logged.

        A callback that raises lets the entry through, so a broken
        predicate never hides messages.
        """
        try:
            return bool(self.callback(entry))
        except Exception:
            return True

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, '__name__', repr(self.callback))
        return f"CallbackFilter(callback={callback_name})"
