"""Shared test fixtures for dbug test suite."""

import io

import pytest

from dbug import registry as _registry_mod
from dbug.matcher import is_enabled


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------
class FakeClock:
    """Manually advanced monotonic clock (seconds)."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    """A FakeClock starting at t=1000s."""
    return FakeClock()


@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


# ---------------------------------------------------------------------------
# Process-wide state
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_registry(monkeypatch):
    """Reset the registry singletons and a clean environment per test."""
    for name in ("DEBUG", "DEBUG_COLORS", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(_registry_mod, "_config", None)
    monkeypatch.setattr(_registry_mod, "_patterns", None)
    is_enabled.cache_clear()
    yield
