"""async-lru integration for memoized async functions.

Example:
    ```python
    @memoize_async(maxsize=128)
    async def fetch_rate(currency: str) -> Result[float, str]:
        ...

    # First call awaits, second call uses the cache
    rate1 = await fetch_rate("EUR")
    rate2 = await fetch_rate("EUR")
    ```
"""

from __future__ import annotations

import functools
from collections.abc import Awaitable, Callable
from typing import Any, overload

from async_lru import alru_cache

from monadkit._logging import get_logger

__all__ = ['memoize_async']

logger = get_logger(__name__)


@overload
def memoize_async[**P, T](fn: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]: ...


@overload
def memoize_async[**P, T](
    *,
    maxsize: int | None = None,
    ttl: float | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]: ...


def memoize_async(
    fn: Callable[..., Awaitable[Any]] | None = None,
    *,
    maxsize: int | None = None,
    ttl: float | None = None,
) -> Any:
    """Cache the results of an async function with async-lru.

    Concurrent calls with the same arguments share one in-flight await.
    Exceptions are not cached; combine with ``safe_async`` to cache
    failures as values.

    Can be used with or without arguments:
        @memoize_async
        async def fetch(id: int) -> Data: ...

        @memoize_async(maxsize=256, ttl=60.0)
        async def fetch(id: int) -> Data: ...

    Args:
        fn: The async function to wrap (when used without parens).
        maxsize: Maximum cache size. None means unlimited.
        ttl: Time-to-live in seconds. None means no expiration.

    Returns:
        The cached coroutine function, exposing ``cache_clear()`` and
        ``cache_info()``.
    """

    def decorator(func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
        @alru_cache(maxsize=maxsize, ttl=ttl)
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            logger.debug('memo_miss', func=func.__qualname__)
            return await func(*args, **kwargs)

        return wrapper

    if fn is not None:
        return decorator(fn)

    return decorator
