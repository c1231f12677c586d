"""Singleton variants raced against each other."""

import threading
import time
from typing import List, Optional

from ..core.concurrency import hammer
from ..core.patterns.accessor import STRATEGIES, create_accessor
from ..core.patterns.singleton import ThreadSafeSingleton


class AppLogger(ThreadSafeSingleton):
    """Process-wide message sink used to show the base class in action."""

    def _initialize(self) -> None:
        self._lock = threading.Lock()
        self.messages: List[str] = []

    def log(self, message: str) -> None:
        with self._lock:
            self.messages.append(message)


class CountingFactory:
    """Factory that counts its calls and sleeps to widen the race window."""

    def __init__(self, delay_ms: int = 0):
        self.delay_ms = delay_ms
        self.calls = 0
        self._lock = threading.Lock()

    def __call__(self) -> object:
        with self._lock:
            self.calls += 1
        if self.delay_ms:
            time.sleep(self.delay_ms / 1000)
        return object()


def run_demo(threads: Optional[int] = None) -> List[str]:
    from ..config import get_config
    config = get_config()
    if threads is None:
        threads = config.stress_threads

    lines = []
    for strategy in STRATEGIES:
        factory = CountingFactory(delay_ms=config.construction_delay_ms)
        accessor = create_accessor(factory, strategy=strategy, name=f"demo-{strategy}")
        report = hammer(accessor.get_instance, threads=threads)
        lines.append(f"{strategy}: {report.summary()}, constructions={factory.calls}")

    first = AppLogger.get_instance()
    first.log("hello")
    second = AppLogger.get_instance()
    lines.append(f"AppLogger instances identical: {first is second}")
    return lines
