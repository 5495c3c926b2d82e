"""Base class for logs."""

from abc import ABC, abstractmethod

from ..stopwatch import StopWatch


def parse_enable(value: str) -> bool:
    """
    Parse an enable flag forgivingly.

    Only the exact string "false" disables. Anything else, including
    "False", "" or a non-string, enables. Never raises.
    """
    return value != "false"


class Log(ABC):
    """
    Base class for stopwatch logs.

    A log receives finished stopwatches through record(). Whether a disabled
    log should be skipped is up to the caller; record() itself does not check.
    """

    name: str = "base"
    _enabled: bool = True

    def set_enable(self, value: str):
        """Enable or disable from a string flag; see parse_enable()."""
        self._enabled = parse_enable(value)

    def is_enabled(self) -> bool:
        return self._enabled

    @abstractmethod
    def record(self, stopwatch: StopWatch):
        """
        Record a finished stopwatch.

        Args:
            stopwatch: The watch to record. Implementations should not keep a
                reference to it beyond this call unless they freeze() it.
        """
        pass

    def shutdown(self):
        """Shut the log down and free its resources. Default does nothing."""
