"""Log that forwards stopwatches to the standard logging module."""

import logging

from .base import Log
from ..stopwatch import StopWatch


class LoggingLog(Log):
    """Emits each stopwatch as a record on a named logger."""
    
    name = "logging"
    
    def __init__(self, logger_name: str = "lapwatch.timings", level: str | int = "INFO"):
        self.logger = logging.getLogger(logger_name)
        self.level = _resolve_level(level)
    
    def record(self, stopwatch: StopWatch):
        self.logger.log(
            self.level,
            str(stopwatch),
            extra={"tag": stopwatch.tag, "elapsed_ns": stopwatch.elapsed_nanos()},
        )


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown logging level: {level}")
    return value
