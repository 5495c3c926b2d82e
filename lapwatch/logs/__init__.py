"""Log implementations for recording stopwatches."""

from .base import Log, parse_enable
from .console import ConsoleLog
from .file import FileLog
from .logging_log import LoggingLog
from .http_log import HttpLog


LOGS: dict[str, type[Log]] = {
    "console": ConsoleLog,
    "file": FileLog,
    "logging": LoggingLog,
    "http": HttpLog,
}


def get_log(kind: str, **options) -> Log:
    """Build a log by kind name, passing options to its constructor."""
    if kind not in LOGS:
        raise ValueError(f"Unknown log: {kind}. Available: {list(LOGS.keys())}")
    
    return LOGS[kind](**options)


__all__ = [
    "Log",
    "ConsoleLog",
    "FileLog",
    "LoggingLog",
    "HttpLog",
    "get_log",
    "parse_enable",
]
