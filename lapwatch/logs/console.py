"""Console log."""

import sys
from typing import Optional, TextIO

from .base import Log
from ..stopwatch import StopWatch


class ConsoleLog(Log):
    """Writes each stopwatch as one line to a stream (stdout by default)."""
    
    name = "console"
    
    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
    
    def record(self, stopwatch: StopWatch):
        # Resolve stdout late so redirection after construction still works
        stream = self._stream or sys.stdout
        stream.write(str(stopwatch) + "\n")
        stream.flush()
