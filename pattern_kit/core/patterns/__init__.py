"""Core patterns module.

Provides thread-safe singleton accessors and the base class built on them.
"""

from .accessor import (
    STRATEGIES,
    AccessorState,
    DoubleCheckedSingleton,
    EagerSingleton,
    GuardState,
    LazySingleton,
    LockedSingleton,
    create_accessor,
)
from .async_singleton import AsyncLazySingleton
from .decorators import lazy_singleton
from .exceptions import (
    ConstructionError,
    DirectConstructionError,
    PatternError,
    UnknownVariantError,
)
from .singleton import ThreadSafeSingleton

__all__ = [
    # Accessors
    "AccessorState",
    "LazySingleton",
    "DoubleCheckedSingleton",
    "LockedSingleton",
    "EagerSingleton",
    "AsyncLazySingleton",
    "GuardState",
    "STRATEGIES",
    "create_accessor",
    "lazy_singleton",
    # Base class
    "ThreadSafeSingleton",
    # Exceptions
    "PatternError",
    "ConstructionError",
    "DirectConstructionError",
    "UnknownVariantError",
]
