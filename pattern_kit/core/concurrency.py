"""Concurrency harness for singleton accessors.

Releases a batch of threads through a barrier so their calls race, then
reports how many distinct objects came back. A correct accessor always
yields exactly one.
"""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from ..constants import DEFAULT_BARRIER_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


@dataclass
class StressReport:
    """Outcome of one :func:`hammer` run.

    Attributes:
        threads: Number of racing threads
        results: Objects returned by successful calls, in submission order
        errors: Exceptions raised by failed calls
        elapsed_ms: Wall time of the whole run
    """

    threads: int
    results: List[Any] = field(default_factory=list)
    errors: List[BaseException] = field(default_factory=list)
    elapsed_ms: float = 0.0

    @property
    def distinct_instances(self) -> int:
        return len({id(result) for result in self.results})

    @property
    def failures(self) -> int:
        return len(self.errors)

    @property
    def unique(self) -> bool:
        """True if every successful call returned the same object."""
        return self.distinct_instances <= 1

    def summary(self) -> str:
        return (
            f"{self.threads} threads -> {self.distinct_instances} instance(s), "
            f"{self.failures} failure(s) in {self.elapsed_ms:.2f}ms"
        )


def hammer(
    get_instance: Callable[[], Any],
    threads: Optional[int] = None,
    timeout: float = DEFAULT_BARRIER_TIMEOUT_SECONDS,
) -> StressReport:
    """
    Call ``get_instance`` from many threads at once.

    Args:
        get_instance: Zero-argument accessor to race
        threads: Number of threads (default: configured stress_threads)
        timeout: Seconds a thread waits at the start barrier

    Returns:
        StressReport with every result and error collected
    """
    if threads is None:
        from ..config import get_config
        threads = get_config().stress_threads
    if threads < 1:
        raise ValueError(f"threads must be >= 1, got {threads}")

    barrier = threading.Barrier(threads, timeout=timeout)

    def worker() -> Any:
        barrier.wait()
        return get_instance()

    report = StressReport(threads=threads)
    start = time.perf_counter()
    with ThreadPoolExecutor(max_workers=threads, thread_name_prefix="stress-") as pool:
        futures = [pool.submit(worker) for _ in range(threads)]
        for future in futures:
            try:
                report.results.append(future.result())
            except Exception as e:
                report.errors.append(e)
    report.elapsed_ms = (time.perf_counter() - start) * 1000

    logger.debug(f"Stress run complete: {report.summary()}")
    return report
