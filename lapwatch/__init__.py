"""Lightweight stopwatches with pluggable logs."""

from .stopwatch import StopWatch
from .logs import Log, get_log
from .factory import StopWatchFactory


__all__ = ["StopWatch", "Log", "get_log", "StopWatchFactory"]
