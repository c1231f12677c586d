"""Thread-safe singleton base class.

This module provides a reusable base class for declaring a type as a
singleton. Each concrete subclass owns a lazy accessor from
:mod:`.accessor`; calling the class directly is refused, so the accessor is
the only way to obtain an instance.
"""

import inspect
import logging
from abc import ABCMeta
from typing import Any, ClassVar, Optional, TypeVar

from ...constants import DEFAULT_SINGLETON_STRATEGY
from .accessor import LazySingleton, create_accessor
from .exceptions import DirectConstructionError

logger = logging.getLogger(__name__)

T = TypeVar('T', bound='ThreadSafeSingleton')


class SingletonMeta(ABCMeta):
    """Metaclass that attaches an accessor to every concrete singleton class.

    The accessor strategy is a class keyword, ``double_checked`` when omitted::

        class Settings(ThreadSafeSingleton, strategy="locked"):
            ...
    """

    def __new__(mcls, name, bases, namespace, strategy: Optional[str] = None, **kwargs):
        cls = super().__new__(mcls, name, bases, namespace, **kwargs)
        cls._accessor = None
        is_root = not any(isinstance(base, SingletonMeta) for base in bases)
        if not is_root and not inspect.isabstract(cls):
            # Class bodies run at import time, before any .env is loaded,
            # so the default is fixed rather than read from config
            cls._accessor = create_accessor(
                cls._build,
                strategy=strategy or DEFAULT_SINGLETON_STRATEGY,
                name=cls.__qualname__,
            )
        return cls

    def __init__(cls, name, bases, namespace, strategy: Optional[str] = None, **kwargs):
        super().__init__(name, bases, namespace, **kwargs)

    def __call__(cls, *args: Any, **kwargs: Any):
        raise DirectConstructionError(cls.__qualname__)


class ThreadSafeSingleton(metaclass=SingletonMeta):
    """Base class for thread-safe singletons.

    Usage:
        class SearchIndex(ThreadSafeSingleton, strategy="locked"):
            def _initialize(self):
                self.entries = load_entries()

        index = SearchIndex.get_instance()   # built on first call
        SearchIndex()                        # DirectConstructionError

    Note:
        Subclasses do their setup in `_initialize()`, never `__init__`. It
        runs before the instance is handed to any caller. If it raises,
        callers get a ConstructionError and the next `get_instance()` retries.
        Abstract subclasses get no accessor.
    """

    _accessor: ClassVar[Optional[LazySingleton]] = None

    @classmethod
    def _build(cls: type[T]) -> T:
        instance = object.__new__(cls)
        instance._initialize()
        return instance

    def _initialize(self) -> None:
        """Override in subclasses for one-time initialization.

        This method is called exactly once per constructed instance, before
        the instance is published. Use this instead of __init__.
        """
        pass

    @classmethod
    def get_instance(cls: type[T]) -> T:
        """Get the singleton instance.

        Returns:
            The singleton instance.

        Raises:
            ConstructionError: If `_initialize()` failed.
            TypeError: If called on an abstract singleton class.
        """
        if cls._accessor is None:
            raise TypeError(f"{cls.__qualname__} is abstract and has no instance")
        return cls._accessor.get_instance()

    @classmethod
    def has_instance(cls) -> bool:
        """Return True if the instance has been constructed."""
        return cls._accessor is not None and cls._accessor.is_initialized

    @classmethod
    def reset_instance(cls) -> None:
        """Empty the class's accessor, then run `_cleanup()` on the old instance.

        Test harness hook. Holders of the old instance keep it, and the next
        `get_instance()` builds a fresh one through the accessor. A failing
        `_cleanup()` is logged and does not stop the reset.
        """
        if cls._accessor is None:
            return
        instance = cls._accessor.reset()
        if instance is None:
            return
        try:
            instance._cleanup()
        except Exception as e:
            logger.warning(f"Cleanup of {cls.__qualname__} failed during reset: {e}")

    def _cleanup(self) -> None:
        """Hook run on the discarded instance by `reset_instance()`."""
        pass
