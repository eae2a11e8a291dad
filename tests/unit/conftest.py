"""Unit test configuration.

Shared fixtures for cache and catalog tests. Unit tests never touch the
network: HTTP goes through httpx.MockTransport.
"""

import pytest


class FakeClock:
    """Controllable epoch-millisecond clock for TTL tests."""

    def __init__(self, start_ms: float = 1_700_000_000_000) -> None:
        self.now_ms = start_ms

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms


@pytest.fixture
def clock() -> FakeClock:
    """Fixture providing a fake clock."""
    return FakeClock()
