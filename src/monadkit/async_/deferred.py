"""Deferred type: a future of an Option, Result or Writer.

Deferred wraps an ``Awaitable[M]`` and lifts the synchronous operations of
the wrapped monad generically through ``then``, so chains can be built before
anything is awaited.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User, str]:
        ...

    result = await (
        Deferred(fetch_user(1))
        .bind(validate_user)
        .map(format_response)
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Generator
from typing import Any

import anyio

__all__ = ['Deferred']


class Deferred[M]:
    """Async-aware wrapper for composing operations on a future monad value.

    Every transformation returns a new Deferred; nothing runs until the
    chain is awaited. The wrapped value may be any of Option, Result,
    Writer or LogWriter, since operations delegate to the value's own
    methods.

    Note:
        Deferred is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once; awaiting the same Deferred
        twice raises RuntimeError. Wrap a Task/Future for multi-await use.

    Example:
        ```python
        async def main():
            result = await Deferred.of(Some(5)).map(lambda x: x * 2)
            assert result == Some(10)
        ```
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[M]) -> None:
        """Create a Deferred from an awaitable producing a monad value."""
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, M]:
        """Support await syntax to get the underlying monad value."""
        return self._awaitable.__await__()

    @classmethod
    def of(cls, value: M) -> Deferred[M]:
        """Lift an existing monad value into a Deferred."""

        async def _value() -> M:
            return value

        return cls(_value())

    def then[N](self, op: Callable[[M], N]) -> Deferred[N]:
        """Await the value, then apply a synchronous operation to it."""

        async def _then() -> N:
            return op(await self._awaitable)

        return Deferred(_then())

    def then_async[N](self, op: Callable[[M], Awaitable[N]]) -> Deferred[N]:
        """Await the value, then await an async operation on it."""

        async def _then() -> N:
            return await op(await self._awaitable)

        return Deferred(_then())

    def map(self, f: Callable[[Any], Any]) -> Deferred[Any]:
        """Lift ``map`` over the future value."""
        return self.then(lambda m: m.map(f))

    def bind(self, f: Callable[[Any], Any], *args: Any) -> Deferred[Any]:
        """Lift ``bind`` over the future value.

        Extra arguments are forwarded, e.g. ``combine`` for a generic Writer.
        """
        return self.then(lambda m: m.bind(f, *args))

    def map_error(self, f: Callable[[Any], Any]) -> Deferred[Any]:
        """Lift ``map_error`` over a future Result."""
        return self.then(lambda m: m.map_error(f))

    def or_else(self, recovery: Callable[..., Any]) -> Deferred[Any]:
        """Lift ``or_else`` over a future Option or Result."""
        return self.then(lambda m: m.or_else(recovery))

    def filter(self, predicate: Callable[[Any], bool], *args: Any) -> Deferred[Any]:
        """Lift ``filter`` over the future value.

        Pass ``error_factory`` as the extra argument for a Result.
        """
        return self.then(lambda m: m.filter(predicate, *args))

    def inspect(self, action: Callable[[Any], object]) -> Deferred[M]:
        """Lift ``inspect`` over the future Option, Result or Writer."""
        return self.then(lambda m: m.inspect(action))

    def map_async(self, f: Callable[[Any], Awaitable[Any]]) -> Deferred[Any]:
        """Await the value, then its ``map_async`` with an async mapper."""
        return self.then_async(lambda m: m.map_async(f))

    def bind_async(self, f: Callable[[Any], Awaitable[Any]], *args: Any) -> Deferred[Any]:
        """Await the value, then its ``bind_async`` with an async binder."""
        return self.then_async(lambda m: m.bind_async(f, *args))

    async def match[R](self, on_present: Callable[[Any], R], on_absent: Callable[..., R]) -> R:
        """Await the value and eliminate it with ``match``."""
        value: Any = await self._awaitable
        return value.match(on_present, on_absent)

    async def unwrap_or(self, default: Any) -> Any:
        """Await the value and extract it, or return default."""
        value: Any = await self._awaitable
        return value.unwrap_or(default)

    def zip_with[N](self, other: Deferred[N], combiner: Callable[[Any, Any], Any]) -> Deferred[Any]:
        """Combine two future Options or Results with a function.

        Both awaitables run concurrently in an anyio task group. If either is
        absent or failed, the first one by position wins (self, then other).
        """

        async def _zipped() -> Any:
            left: Any = None
            right: Any = None

            async with anyio.create_task_group() as tg:

                async def run_self() -> None:
                    nonlocal left
                    left = await self._awaitable

                async def run_other() -> None:
                    nonlocal right
                    right = await other._awaitable

                tg.start_soon(run_self)
                tg.start_soon(run_other)

            return left.zip_with(right, combiner)

        return Deferred(_zipped())

    def __repr__(self) -> str:
        return f'Deferred({self._awaitable!r})'
