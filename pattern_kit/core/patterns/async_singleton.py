"""Lazy singleton accessor for coroutine factories.

Same contract and bookkeeping as :class:`~.accessor.DoubleCheckedSingleton`,
with an ``asyncio.Lock`` guarding construction. The lock binds to the event
loop that first contends for it, so one accessor serves one loop.
"""

import asyncio
import time
from typing import Awaitable, Callable, Optional, TypeVar

from .accessor import _UNSET, AccessorState

T = TypeVar("T")


class AsyncLazySingleton(AccessorState[T]):
    """
    Async accessor with double-checked locking.

    Example:
        >>> engine = AsyncLazySingleton(create_engine_async, name="engine")
        >>> first = await engine.get_instance()
        >>> first is await engine.get_instance()
        True
    """

    strategy = "async_double_checked"

    def __init__(self, factory: Callable[[], Awaitable[T]], name: Optional[str] = None):
        super().__init__(factory, name=name)
        self._lock = asyncio.Lock()

    async def get_instance(self) -> T:
        """Return the shared instance, awaiting construction if needed.

        Raises:
            ConstructionError: The factory failed, in this call or in an
                attempt that finished while this call was waiting
        """
        instance = self._instance
        if instance is not _UNSET:
            return instance

        observed = self._failures
        async with self._lock:
            instance = self._instance
            if instance is not _UNSET:
                return instance

            self._raise_if_failed_while_waiting(observed)
            attempt = self._start_attempt()
            started = time.perf_counter()
            try:
                instance = await self._factory()
            except Exception as e:
                error = self._record_failure(attempt, e)
                if error is e:
                    raise
                raise error from e
            return self._publish(instance, attempt, started)

    def reset(self) -> Optional[T]:
        """Discard the instance (for testing)."""
        return self._clear()
