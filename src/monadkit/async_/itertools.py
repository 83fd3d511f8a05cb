"""Async collection combinators for Option and Result.

Every function here is strictly sequential: each element is awaited before
the next one is started, and nothing after the first absent or failed
element is awaited. When the input is a list or tuple, the awaitables left
unawaited are closed; an awaitable that is already running as a task is
left for the caller to cancel.

Example:
    ```python
    async def fetch(id: int) -> Result[dict, str]:
        ...

    async def example():
        users = await traverse_result_async([1, 2, 3], fetch)
    ```
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Callable, Iterable, Iterator

from monadkit.option import Nothing, NothingType, Option, Some
from monadkit.result import Failure, Result, Success

__all__ = [
    'choose_async',
    'sequence_option_async',
    'sequence_result_async',
    'traverse_option_async',
    'traverse_result_async',
]


def _close_remaining(awaitables: object, remaining: Iterator[Awaitable[object]]) -> None:
    """Close unawaited coroutines left in a materialized list or tuple.

    Generator sources are not drained, so their items are never created.
    """
    if not isinstance(awaitables, list | tuple):
        return
    for aw in remaining:
        if hasattr(aw, 'close'):
            aw.close()


async def sequence_option_async[T](awaitables: Iterable[Awaitable[Option[T]]]) -> Option[list[T]]:
    """Await Options one by one and collect them into an Option of list.

    Returns Nothing at the first absent element without awaiting the rest.
    """
    values: list[T] = []
    iterator = iter(awaitables)
    for aw in iterator:
        option = await aw
        if isinstance(option, NothingType):
            _close_remaining(awaitables, iterator)
            return Nothing
        values.append(option.value)
    return Some(values)


async def sequence_result_async[T, E](awaitables: Iterable[Awaitable[Result[T, E]]]) -> Result[list[T], E]:
    """Await Results one by one and collect them into a Result of list.

    Returns the first Failure unchanged without awaiting the rest.

    Example:
        ```python
        async def value(n: int) -> Result[int, str]:
            return Success(n * 2)

        async def example():
            assert await sequence_result_async([value(1), value(2)]) == Success([2, 4])
        ```
    """
    values: list[T] = []
    iterator = iter(awaitables)
    for aw in iterator:
        result = await aw
        if isinstance(result, Failure):
            _close_remaining(awaitables, iterator)
            return result
        values.append(result.value)
    return Success(values)


async def traverse_option_async[T, U](
    source: Iterable[T],
    f: Callable[[T], Awaitable[Option[U]]],
) -> Option[list[U]]:
    """Apply an async Option-returning function to each item in order.

    f is not called after the first Nothing.
    """
    return await sequence_option_async(f(item) for item in source)


async def traverse_result_async[T, U, E](
    source: Iterable[T],
    f: Callable[[T], Awaitable[Result[U, E]]],
) -> Result[list[U], E]:
    """Apply an async Result-returning function to each item in order.

    f is not called after the first Failure.
    """
    return await sequence_result_async(f(item) for item in source)


async def choose_async[T, U](
    source: Iterable[T] | AsyncIterable[T],
    chooser: Callable[[T], Awaitable[Option[U]]],
) -> AsyncIterator[U]:
    """Yield the present values of an async chooser, in source order.

    Accepts both sync and async iterables.

    Example:
        ```python
        async def example():
            values = [v async for v in choose_async(["1", "x", "2"], parse_async)]
            assert values == [1, 2]
        ```
    """
    if isinstance(source, AsyncIterable):
        async for item in source:
            chosen = await chooser(item)
            if isinstance(chosen, Some):
                yield chosen.value
    else:
        for item in source:
            chosen = await chooser(item)
            if isinstance(chosen, Some):
                yield chosen.value
