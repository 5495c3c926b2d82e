"""File log."""

import threading
from pathlib import Path
from typing import Optional, TextIO

from .base import Log
from ..stopwatch import StopWatch


class FileLog(Log):
    """Appends one rendered line per stopwatch to a file."""
    
    name = "file"
    
    def __init__(self, path: str | Path, mode: str = "a"):
        if mode not in ("a", "w"):
            raise ValueError(f"Unsupported file mode: {mode}. Use 'a' or 'w'")
        self.path = Path(path)
        self.mode = mode
        self._file: Optional[TextIO] = None
        self._lock = threading.Lock()
    
    def record(self, stopwatch: StopWatch):
        line = str(stopwatch) + "\n"
        with self._lock:
            if self._file is None:
                self._open()
            self._file.write(line)
            self._file.flush()
    
    def _open(self):
        """Open the file, creating parent directories. Caller holds the lock."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.path, self.mode, encoding="utf-8")
        # A later reopen (record after shutdown) must not truncate again
        self.mode = "a"
    
    def shutdown(self):
        """Close the file. Safe to call more than once."""
        with self._lock:
            if self._file:
                self._file.close()
                self._file = None
