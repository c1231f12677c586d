"""Design pattern toolkit built around a thread-safe lazy singleton accessor."""

from .core.patterns import (
    ConstructionError,
    ThreadSafeSingleton,
    create_accessor,
    lazy_singleton,
)

__version__ = "1.0.0"

__all__ = [
    "ConstructionError",
    "ThreadSafeSingleton",
    "create_accessor",
    "lazy_singleton",
    "__version__",
]
