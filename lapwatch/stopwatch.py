"""Nanosecond stopwatch for timing code sections."""

import time
from typing import Any, Optional


NANOS_IN_SECOND = 1000 * 1000 * 1000

# Marks an argument that was not passed, so None can still be set explicitly
_UNSET: Any = object()


class StopWatch:
    """
    A stopwatch with nanosecond precision (though not necessarily accuracy).

    The tag is a grouping identifier. The message can be anything; it travels
    with the stopwatch and is appended to the rendered string.

    The watch starts as soon as it is created. Every operation is allowed in
    every state: stopping twice just takes a later reading.
    """

    def __init__(self, tag: str = "?", message: Optional[str] = None):
        self._tag = tag
        self._message = message
        self._start_ns: int = 0
        self._stop_ns: Optional[int] = None
        self.start()

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def message(self) -> Optional[str]:
        return self._message

    def is_running(self) -> bool:
        return self._stop_ns is None

    def start(self) -> "StopWatch":
        """(Re)start the watch. Tag and message are kept."""
        self._start_ns = time.monotonic_ns()
        self._stop_ns = None
        return self

    def stop(self, tag: str = _UNSET, message: Optional[str] = _UNSET) -> "StopWatch":
        """
        Stop the watch, optionally replacing the tag and message first.

        Passing message=None clears the message.
        """
        if tag is not _UNSET:
            self._tag = tag
        if message is not _UNSET:
            self._message = message
        self._stop_ns = time.monotonic_ns()
        return self

    def lap(self) -> "StopWatch":
        """
        Stop and immediately restart.

        The interval that just ended is gone once this returns; freeze()
        first if it is still needed.
        """
        self.stop()
        self.start()
        return self

    def elapsed_nanos(self) -> int:
        """Elapsed nanoseconds; a running watch reports live time."""
        if self._stop_ns is not None:
            return self._stop_ns - self._start_ns
        return time.monotonic_ns() - self._start_ns

    def freeze(self) -> "StopWatch":
        """Return an independent, stopped copy of this watch."""
        frozen = StopWatch(self._tag, self._message)
        frozen._start_ns = self._start_ns
        frozen._stop_ns = self._stop_ns if self._stop_ns is not None else time.monotonic_ns()
        return frozen

    def render(self, iterations: Optional[int] = None) -> str:
        """
        Human-readable form, e.g. "db-query: 120 us".

        With iterations, the throughput is appended:
        "test: 14520 ms (68 iterations/second)". A zero elapsed time renders
        the throughput as "inf".

        Do not parse this; the format is for people.
        """
        elapsed = self.elapsed_nanos()
        text = f"{self._tag}: {readable_time(elapsed)}"

        if iterations is None:
            return text + (self._message if self._message is not None else "")

        if self._message is not None:
            text += " " + self._message

        if elapsed == 0:
            rate = "inf"
        else:
            rate = str(iterations * NANOS_IN_SECOND // elapsed)
        return f"{text} ({rate} iterations/second)"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        state = "running" if self.is_running() else "stopped"
        return f"StopWatch(tag={self._tag!r}, elapsed_ns={self.elapsed_nanos()}, {state})"


def readable_time(ns: int) -> str:
    """Scale a nanosecond count so the number shown stays below 50 of its unit."""
    if ns < 50 * 1000:
        return f"{ns} ns"

    if ns < 50 * 1000 * 1000:
        return f"{ns // 1000} us"

    if ns < 50 * 1000 * 1000 * 1000:
        return f"{ns // (1000 * 1000)} ms"

    return f"{ns // NANOS_IN_SECOND} s"
