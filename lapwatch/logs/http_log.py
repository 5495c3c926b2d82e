"""HTTP log for posting timings to a collector."""

from typing import Optional

import httpx

from .base import Log
from ..stopwatch import StopWatch


class HttpLog(Log):
    """
    POSTs each stopwatch as JSON to a collector endpoint.

    Body:
        {"tag": ..., "message": ..., "elapsed_ns": ..., "rendered": ...}

    Transport and status errors propagate as httpx.HTTPError; nothing is
    retried.
    """
    
    name = "http"
    
    def __init__(
        self,
        url: str,
        timeout_sec: float = 5.0,
        client: Optional[httpx.Client] = None,
    ):
        self.url = url
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout_sec)
    
    def record(self, stopwatch: StopWatch):
        resp = self._client.post(self.url, json=to_payload(stopwatch))
        resp.raise_for_status()
    
    def shutdown(self):
        """Close the HTTP client if this log created it."""
        if self._owns_client:
            self._client.close()


def to_payload(stopwatch: StopWatch) -> dict:
    return {
        "tag": stopwatch.tag,
        "message": stopwatch.message,
        "elapsed_ns": stopwatch.elapsed_nanos(),
        "rendered": str(stopwatch),
    }
