"""@safe and @safe_async decorators for capturing faults as Failure."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from monadkit.result import Failure, Success, capture_fault

__all__ = ['safe', 'safe_async']


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Success[T] | Failure[str]]: ...


@overload
def safe[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[Exception], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Success[T] | Failure[str]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[Exception], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Failure.

    Wraps a function so that it returns Success(value) on success and
    Failure(description) if an exception is raised. The description is the
    exception message, or its class name when the message is empty.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).
            Anything else propagates.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Success(value=5.0)
        divide(10, 0)
        # Failure(error='division by zero')
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[Any] | Failure[str]:
        try:
            return Success(wrapped(*args, **kwargs))
        except catch as e:
            return capture_fault(e)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Success[T] | Failure[str]]]: ...


@overload
def safe_async[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[Exception], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Success[T] | Failure[str]]]]: ...


def safe_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    *,
    exceptions: tuple[type[Exception], ...] | None = None,
) -> Any:
    """Async decorator that catches exceptions and returns Failure.

    Same contract as ``safe`` for coroutine functions. Cancellation is a
    ``BaseException`` and always propagates.

    Example:
        ```python
        @safe_async
        async def fetch(url: str) -> str:
            return await http_get(url)
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[Any] | Failure[str]:
        try:
            return Success(await wrapped(*args, **kwargs))
        except catch as e:
            return capture_fault(e)

    if func is not None:
        return wrapper(func)
    return wrapper
