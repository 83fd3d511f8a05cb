"""Result type: Success[T] | Failure[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from monadkit._logging import get_logger
from monadkit.errors import UnwrapError, describe_fault

if TYPE_CHECKING:
    from monadkit.option import NothingType, Some

__all__ = ['Failure', 'Result', 'Success', 'capture_fault', 'try_catch', 'try_catch_async']

logger = get_logger(__name__)


class Success[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Success represents the successful outcome of an operation. It wraps a
    value that can be extracted, transformed, or propagated through a chain
    of Result-returning operations.

    Examples:
        >>> ok = Success(42)
        >>> ok.unwrap_or(0)
        42
        >>> ok.map(lambda x: x * 2)
        Success(value=84)
    """

    value: T

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True if the result is Success.

        This method provides type narrowing - after checking is_success(),
        the type checker knows the result is Success[T].
        """
        return True

    def is_failure(self) -> TypeIs[Failure[object]]:
        """Return False since this is Success."""
        return False

    def unwrap(self) -> T:
        """Return the contained Success value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Success value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _factory: Callable[[object], T]) -> T:
        """Return the contained Success value without calling the factory."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Success value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Success value.

        Returns:
            Success containing the result of applying f to the value.
        """
        return Success(f(self.value))

    def map_error[F](self, _f: Callable[[object], F]) -> Success[T]:
        """Return self unchanged since this is Success."""
        return self

    def bind[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or and_then.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def match[R](
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[object], R],  # noqa: ARG002
    ) -> R:
        """Eliminate the Result, running on_success with the value."""
        return on_success(self.value)

    def inspect(self, action: Callable[[T], object]) -> Success[T]:
        """Run a side-effecting action on the value and return self."""
        action(self.value)
        return self

    def inspect_error(self, _action: Callable[[object], object]) -> Success[T]:
        """Return self without running the action."""
        return self

    def or_else[F](self, _recovery: Callable[[object], Result[T, F]]) -> Success[T]:
        """Return self unchanged since this is Success."""
        return self

    def filter[E](
        self,
        predicate: Callable[[T], bool],
        error_factory: Callable[[T], E],
    ) -> Result[T, E]:
        """Keep the value if the predicate holds, else fail with error_factory(value)."""
        if predicate(self.value):
            return self
        return Failure(error_factory(self.value))

    def to_option(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        from monadkit.option import Some

        return Some(self.value)

    def select_many[U, R, E](
        self,
        selector: Callable[[T], Result[U, E]],
        projector: Callable[[T, U], R],
    ) -> Result[R, E]:
        """Bind then project, keeping access to both values.

        Equivalent to ``bind(lambda x: selector(x).map(lambda y: projector(x, y)))``;
        selector is called exactly once.
        """
        return self.bind(lambda x: selector(x).map(lambda y: projector(x, y)))

    def zip_with[U, R, E](self, other: Result[U, E], combiner: Callable[[T, U], R]) -> Result[R, E]:
        """Combine two Results with a function.

        If either is Failure, returns the first Failure (self before other).
        """
        return self.bind(lambda a: other.map(lambda b: combiner(a, b)))

    def flatten[U, E](self: Success[Result[U, E]]) -> Result[U, E]:
        """Flatten a nested Result.

        Converts Result[Result[T, E], E] into Result[T, E].
        """
        return self.value

    async def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> Success[U]:
        """Await an async mapper on the contained value."""
        return Success(await f(self.value))

    async def bind_async[U, E](self, f: Callable[[T], Awaitable[Result[U, E]]]) -> Result[U, E]:
        """Await an async binder on the contained value."""
        return await f(self.value)


class Failure[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result containing an error of type E.

    Failure represents the failed outcome of an operation. It wraps an error
    value that can be transformed, recovered from, or propagated; success-path
    functions are never called on it.

    Examples:
        >>> err = Failure("something went wrong")
        >>> err.is_failure()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_success(self) -> TypeIs[Success[object]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure[E]]:
        """Return True if the result is Failure.

        This method provides type narrowing - after checking is_failure(),
        the type checker knows the result is Failure[E].
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Failure.

        Raises:
            UnwrapError: Always, since Failure has no value to unwrap.
        """
        raise UnwrapError(f'Called unwrap on Failure: {self.error!r}')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Failure."""
        return default

    def unwrap_or_else[T](self, factory: Callable[[E], T]) -> T:
        """Compute a default value from the error."""
        return factory(self.error)

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        raise UnwrapError(f'{msg}: {self.error!r}')

    def map[T, U](self, _f: Callable[[T], U]) -> Failure[E]:
        """Return self unchanged since this is Failure."""
        return self

    def map_error[F](self, f: Callable[[E], F]) -> Failure[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Failure containing the transformed error.
        """
        return Failure(f(self.error))

    def bind[T, U](self, _f: Callable[[T], Result[U, E]]) -> Failure[E]:
        """Return self unchanged since this is Failure."""
        return self

    def match[R](
        self,
        on_success: Callable[[object], R],  # noqa: ARG002
        on_failure: Callable[[E], R],
    ) -> R:
        """Eliminate the Result, running on_failure with the error."""
        return on_failure(self.error)

    def inspect(self, _action: Callable[[object], object]) -> Failure[E]:
        """Return self without running the action."""
        return self

    def inspect_error(self, action: Callable[[E], object]) -> Failure[E]:
        """Run a side-effecting action on the error and return self."""
        action(self.error)
        return self

    def or_else[T, F](self, recovery: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Apply a recovery function to the error.

        Args:
            recovery: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by recovery.
        """
        return recovery(self.error)

    def filter(
        self,
        _predicate: Callable[[object], bool],
        _error_factory: Callable[[object], E],
    ) -> Failure[E]:
        """Return self since there's no value to test."""
        return self

    def to_option(self) -> NothingType:
        """Convert to Option, returning Nothing (the error is discarded)."""
        from monadkit.option import Nothing

        return Nothing

    def select_many[T, U, R](
        self,
        _selector: Callable[[T], Result[U, E]],
        _projector: Callable[[T, U], R],
    ) -> Failure[E]:
        """Return self without calling the selector."""
        return self

    def zip_with[U, R](self, _other: Result[U, E], _combiner: Callable[..., R]) -> Failure[E]:
        """Return self since this is Failure."""
        return self

    def flatten(self) -> Failure[E]:
        """Return self since this is Failure (nothing to flatten)."""
        return self

    async def map_async[T, U](self, _f: Callable[[T], Awaitable[U]]) -> Failure[E]:
        """Return self without awaiting the mapper."""
        return self

    async def bind_async[T, U](self, _f: Callable[[T], Awaitable[Result[U, E]]]) -> Failure[E]:
        """Return self without awaiting the binder."""
        return self


type Result[T, E = str] = Success[T] | Failure[E]


def capture_fault(exc: Exception) -> Failure[str]:
    """Convert a raised exception into a Failure carrying its description.

    Each captured fault is logged at debug level.
    """
    description = describe_fault(exc)
    logger.debug('fault_captured', exc_type=type(exc).__name__, error=description)
    return Failure(description)


def try_catch[T](operation: Callable[[], T]) -> Result[T, str]:
    """Run an operation, converting a raised exception into a Failure.

    This is the boundary where exception-style faults become data. Only
    ``Exception`` subclasses are caught.

    Args:
        operation: Zero-argument callable that may raise.

    Returns:
        Success(operation()) or Failure(description of the exception).

    Examples:
        >>> try_catch(lambda: int("123"))
        Success(value=123)
        >>> try_catch(lambda: int("x"))
        Failure(error="invalid literal for int() with base 10: 'x'")
    """
    try:
        return Success(operation())
    except Exception as e:
        return capture_fault(e)


async def try_catch_async[T](operation: Callable[[], Awaitable[T]]) -> Result[T, str]:
    """Async analog of try_catch: await the operation and capture faults.

    Args:
        operation: Zero-argument coroutine function that may raise.

    Returns:
        Success(value) or Failure(description of the exception).
    """
    try:
        return Success(await operation())
    except Exception as e:
        return capture_fault(e)
