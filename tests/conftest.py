"""Shared test fixtures and configuration."""

import threading
import time

import pytest

from pattern_kit.config import reset_config
from pattern_kit.core.patterns import registry


# =============================================================================
# Environment Variable Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear PATTERN_KIT_ environment variables."""
    for key in (
        "PATTERN_KIT_LOG_LEVEL",
        "PATTERN_KIT_DEFAULT_STRATEGY",
        "PATTERN_KIT_STRESS_THREADS",
        "PATTERN_KIT_CONSTRUCTION_DELAY_MS",
        "PATTERN_KIT_PAYMENT_AMOUNT",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def fast_demo_env(monkeypatch):
    """Keep the singleton demo small and quick."""
    monkeypatch.setenv("PATTERN_KIT_STRESS_THREADS", "8")
    monkeypatch.setenv("PATTERN_KIT_CONSTRUCTION_DELAY_MS", "0")
    reset_config()


# =============================================================================
# Singleton Reset
# =============================================================================

@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset every singleton accessor before and after each test."""
    registry.reset_all()
    reset_config()

    yield

    registry.reset_all()
    reset_config()


# =============================================================================
# Factory Helpers
# =============================================================================

class Widget:
    """Payload whose constructor is slow enough to expose partial visibility."""

    def __init__(self, delay: float = 0.0):
        self.ready = False
        if delay:
            time.sleep(delay)
        self.parts = ["frame", "motor"]
        self.ready = True


class CountingFactory:
    """Zero-argument factory that counts calls and can fail the first N."""

    def __init__(self, delay: float = 0.0, fail_times: int = 0):
        self.delay = delay
        self.fail_times = fail_times
        self.calls = 0
        self.successes = 0
        self._lock = threading.Lock()

    def __call__(self):
        with self._lock:
            self.calls += 1
            call = self.calls
        if call <= self.fail_times:
            raise RuntimeError(f"boom on call {call}")
        instance = Widget(self.delay)
        with self._lock:
            self.successes += 1
        return instance


@pytest.fixture
def counting_factory():
    """A CountingFactory with a short construction delay."""
    return CountingFactory(delay=0.01)


@pytest.fixture
def make_factory():
    """Build CountingFactory instances with custom settings."""
    return CountingFactory
