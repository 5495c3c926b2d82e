"""Shared fixtures for lapwatch tests."""

import pytest
from unittest.mock import patch


class FakeClock:
    """Stands in for time.monotonic_ns; advance it by hand."""
    
    def __init__(self, now: int = 1_000):
        self.now = now
    
    def __call__(self) -> int:
        return self.now
    
    def advance(self, ns: int):
        self.now += ns


@pytest.fixture
def clock():
    fake = FakeClock()
    with patch("lapwatch.stopwatch.time.monotonic_ns", fake):
        yield fake
