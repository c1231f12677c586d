"""Lazy singleton decorator for expensive initializations."""

import functools
from typing import Callable, Optional, TypeVar, overload

from ...constants import DEFAULT_SINGLETON_STRATEGY
from .accessor import create_accessor

T = TypeVar("T")


@overload
def lazy_singleton(func: Callable[[], T]) -> Callable[[], T]: ...


@overload
def lazy_singleton(
    *, strategy: Optional[str] = None, name: Optional[str] = None
) -> Callable[[Callable[[], T]], Callable[[], T]]: ...


def lazy_singleton(func=None, *, strategy=None, name=None):
    """Decorator to lazily evaluate and cache a function result (singleton).

    Works bare or with arguments::

        @lazy_singleton
        def get_client(): ...

        @lazy_singleton(strategy="locked")
        def get_registry(): ...

    The strategy defaults to ``double_checked``. The wrapper exposes
    ``reset()``, ``is_initialized()`` and ``accessor``.
    """

    def decorate(factory: Callable[[], T]) -> Callable[[], T]:
        accessor = create_accessor(
            factory, strategy=strategy or DEFAULT_SINGLETON_STRATEGY, name=name
        )

        @functools.wraps(factory)
        def wrapper() -> T:
            return accessor.get_instance()

        wrapper.accessor = accessor
        wrapper.reset = accessor.reset
        wrapper.is_initialized = lambda: accessor.is_initialized
        return wrapper

    if func is not None:
        return decorate(func)
    return decorate
