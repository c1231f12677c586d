"""Lazy singleton accessors.

An accessor owns one lazily-constructed instance and hands the same object
to every caller on every thread. Three interchangeable strategies share one
construction routine:

- ``double_checked``: lock-free fast path, lock only around first construction
- ``locked``: take the lock on every call
- ``eager``: construct when the accessor is created

If the factory raises, the caller that triggered construction gets a
:class:`ConstructionError`, so does every caller already waiting on the lock
during that attempt, and the accessor stays uninitialized so the next call
retries.
"""

import logging
import threading
import time
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Generic, Optional, Type, TypeVar

from . import registry
from .exceptions import ConstructionError, UnknownVariantError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Marks an empty slot; None is a legal payload
_UNSET: Any = object()


class GuardState(str, Enum):
    """Initialization state of an accessor."""

    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"


class AccessorState(Generic[T]):
    """
    Guard and failure bookkeeping shared by thread and async accessors.

    Subclasses own the lock and call the ``_*`` helpers while holding it:
    ``_raise_if_failed_while_waiting`` before building, ``_start_attempt``
    and then either ``_publish`` or ``_record_failure``.

    Attributes:
        name: Label used in logs and errors
        strategy: Strategy key the accessor is registered under
    """

    strategy: ClassVar[str]

    def __init__(self, factory: Callable[[], Any], name: Optional[str] = None):
        """
        Initialize the accessor.

        Args:
            factory: Zero-argument callable that builds the instance
            name: Label for logs and errors (default: factory's qualname)
        """
        self._factory = factory
        self.name = name or getattr(factory, "__qualname__", repr(factory))
        self._instance: Any = _UNSET
        self._attempts = 0
        # Bumped after each failed attempt; waiters compare against it
        self._failures = 0
        # Text of the latest failure; the exception itself is not kept
        self._last_failure: Optional[str] = None
        registry.register(self)

    @property
    def state(self) -> GuardState:
        if self._instance is _UNSET:
            return GuardState.UNINITIALIZED
        return GuardState.INITIALIZED

    @property
    def is_initialized(self) -> bool:
        return self._instance is not _UNSET

    def _raise_if_failed_while_waiting(self, observed_failures: int) -> None:
        """Raise if an attempt failed after the caller read ``observed_failures``."""
        if self._failures != observed_failures and self._last_failure is not None:
            raise ConstructionError(
                self.name,
                f"concurrent attempt failed: {self._last_failure}",
                attempt=self._attempts,
            )

    def _start_attempt(self) -> int:
        self._attempts += 1
        return self._attempts

    def _record_failure(self, attempt: int, error: Exception) -> ConstructionError:
        """Record a failed attempt and return the error for the caller.

        A ConstructionError raised by the factory is returned unchanged.
        """
        self._last_failure = f"{type(error).__name__}: {error}"
        self._failures += 1
        logger.warning(f"Singleton '{self.name}' construction attempt {attempt} failed: {error}")
        if isinstance(error, ConstructionError):
            return error
        return ConstructionError(self.name, str(error) or type(error).__name__, attempt=attempt)

    def _publish(self, instance: T, attempt: int, started: float) -> T:
        # Single reference store, made only after the factory returned
        self._instance = instance
        self._last_failure = None
        logger.info(
            f"Singleton '{self.name}' constructed ({self.strategy}, attempt {attempt}) "
            f"in {(time.perf_counter() - started) * 1000:.2f}ms"
        )
        return instance

    def _clear(self) -> Optional[T]:
        instance = self._instance
        self._instance = _UNSET
        self._last_failure = None
        if instance is _UNSET:
            return None
        logger.debug(f"Singleton '{self.name}' reset")
        return instance

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"state={self.state.value}, attempts={self._attempts})"
        )


class LazySingleton(AccessorState[T], ABC):
    """
    Base class for thread-safe singleton accessors.

    Subclasses decide when the construction lock is taken; the construction
    itself always runs through :meth:`_construct_locked`.
    """

    def __init__(self, factory: Callable[[], T], name: Optional[str] = None):
        super().__init__(factory, name=name)
        self._lock = threading.Lock()

    @abstractmethod
    def get_instance(self) -> T:
        """Return the shared instance, constructing it if needed."""

    def _construct_locked(self, observed_failures: int) -> T:
        """Construct and publish the instance. Caller must hold ``self._lock``.

        Args:
            observed_failures: Value of ``self._failures`` the caller read
                before it started waiting for the lock

        Raises:
            ConstructionError: The factory failed, in this call or in an
                attempt that finished while the caller was waiting
        """
        instance = self._instance
        if instance is not _UNSET:
            return instance

        self._raise_if_failed_while_waiting(observed_failures)
        attempt = self._start_attempt()
        started = time.perf_counter()
        try:
            instance = self._factory()
        except Exception as e:
            error = self._record_failure(attempt, e)
            if error is e:
                raise
            raise error from e
        return self._publish(instance, attempt, started)

    def reset(self) -> Optional[T]:
        """Discard the instance (for testing).

        Warning:
            Normal code never resets a singleton. Callers still holding the
            old instance keep it; the next ``get_instance()`` builds a new one.

        Returns:
            The discarded instance, or None if there was none.
        """
        with self._lock:
            return self._clear()


class DoubleCheckedSingleton(LazySingleton[T]):
    """Accessor using double-checked locking.

    Example:
        >>> settings = DoubleCheckedSingleton(load_settings)
        >>> settings.get_instance() is settings.get_instance()
        True
    """

    strategy = "double_checked"

    def get_instance(self) -> T:
        instance = self._instance
        if instance is not _UNSET:
            return instance

        observed = self._failures
        with self._lock:
            # Double-check after acquiring lock
            return self._construct_locked(observed)


class LockedSingleton(LazySingleton[T]):
    """Accessor that takes the lock on every call."""

    strategy = "locked"

    def get_instance(self) -> T:
        observed = self._failures
        with self._lock:
            return self._construct_locked(observed)


class EagerSingleton(DoubleCheckedSingleton[T]):
    """Accessor that constructs its instance up front.

    Creating the accessor raises :class:`ConstructionError` if the factory
    fails. After a ``reset()`` it falls back to double-checked construction.
    """

    strategy = "eager"

    def __init__(self, factory: Callable[[], T], name: Optional[str] = None):
        super().__init__(factory, name=name)
        with self._lock:
            self._construct_locked(self._failures)


STRATEGIES: Dict[str, Type[LazySingleton]] = {
    cls.strategy: cls
    for cls in (DoubleCheckedSingleton, LockedSingleton, EagerSingleton)
}


def create_accessor(
    factory: Callable[[], T],
    strategy: Optional[str] = None,
    name: Optional[str] = None,
) -> LazySingleton[T]:
    """
    Create a singleton accessor for the given factory.

    Args:
        factory: Zero-argument callable that builds the instance
        strategy: One of ``STRATEGIES`` (default: configured default strategy)
        name: Label for logs and errors

    Returns:
        A new accessor

    Raises:
        UnknownVariantError: If the strategy key is not known
        ConstructionError: If the strategy is eager and the factory fails
    """
    if strategy is None:
        from ...config import get_config
        strategy = get_config().default_strategy

    accessor_cls = STRATEGIES.get(strategy)
    if accessor_cls is None:
        raise UnknownVariantError("singleton strategy", strategy, STRATEGIES)
    return accessor_cls(factory, name=name)
