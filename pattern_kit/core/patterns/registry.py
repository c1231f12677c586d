"""Registry of live singleton accessors.

Accessors register themselves on creation. The registry holds them weakly,
so an accessor that nothing references anymore drops out on its own.
Test harnesses call :func:`reset_all` to isolate runs from each other.
"""

import logging
import threading
import weakref
from typing import Any, List

logger = logging.getLogger(__name__)

_accessors: "weakref.WeakSet[Any]" = weakref.WeakSet()
_lock = threading.Lock()


def register(accessor: Any) -> None:
    """Track an accessor so :func:`reset_all` can reach it."""
    with _lock:
        _accessors.add(accessor)


def registered() -> List[Any]:
    """Return the accessors that are still alive."""
    with _lock:
        return list(_accessors)


def reset_all() -> int:
    """Reset every live accessor (for testing).

    Returns:
        Number of accessors that held an instance before the reset.
    """
    cleared = 0
    for accessor in registered():
        if accessor.is_initialized:
            cleared += 1
        accessor.reset()
    logger.debug(f"Reset {cleared} initialized singleton(s)")
    return cleared
