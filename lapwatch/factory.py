"""Stopwatch factory that dispatches finished watches to logs."""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .stopwatch import StopWatch
from .logs import Log


logger = logging.getLogger(__name__)


class StopWatchFactory:
    """
    Creates stopwatches and records them to a set of logs.

    Usage:
        factory = StopWatchFactory([ConsoleLog()])
        with factory.timed("db-query"):
            run_query()
        factory.shutdown()
    """
    
    def __init__(self, logs: Optional[list[Log]] = None):
        self._logs: list[Log] = list(logs or [])
        self._shut_down = False
    
    @classmethod
    def from_config(cls, path: str | Path) -> "StopWatchFactory":
        """Build a factory whose logs come from a YAML config file."""
        from .config import FactoryConfig, build_logs
        
        return cls(build_logs(FactoryConfig.load(path)))
    
    @property
    def logs(self) -> tuple[Log, ...]:
        return tuple(self._logs)
    
    def add_log(self, log: Log):
        self._logs.append(log)
    
    def get_stopwatch(self, tag: str = "?", message: Optional[str] = None) -> StopWatch:
        """Return a new, already running stopwatch."""
        return StopWatch(tag, message)
    
    def record(self, stopwatch: StopWatch) -> StopWatch:
        """
        Freeze the watch and pass the copy to every enabled log.
        
        The live watch is left alone, so the caller can keep lapping it.
        Returns the frozen copy. A log that raises does not stop the others;
        once all have run, the first error is re-raised.
        """
        frozen = stopwatch.freeze()
        errors = []
        for log in self._logs:
            if not log.is_enabled():
                logger.debug("Skipping disabled log %s", log.name)
                continue
            try:
                log.record(frozen)
            except Exception as e:
                logger.warning("Log %s failed to record %s: %s", log.name, frozen.tag, e)
                errors.append(e)
        
        # Every enabled log has had its turn; surface the first failure
        if errors:
            raise errors[0]
        return frozen
    
    @contextmanager
    def timed(self, tag: str, message: Optional[str] = None) -> Iterator[StopWatch]:
        """Time the body of a with-block and record it, even if it raises."""
        stopwatch = self.get_stopwatch(tag, message)
        try:
            yield stopwatch
        except BaseException:
            stopwatch.stop()
            # The body's exception wins over a failing log
            try:
                self.record(stopwatch)
            except Exception as e:
                logger.warning("Dropped recording of %s after body failed: %s", tag, e)
            raise
        stopwatch.stop()
        self.record(stopwatch)
    
    def shutdown(self):
        """Shut down every log. Later calls do nothing."""
        if self._shut_down:
            return
        self._shut_down = True
        for log in self._logs:
            log.shutdown()
