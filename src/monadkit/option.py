"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from monadkit.errors import UnwrapError

if TYPE_CHECKING:
    from monadkit.result import Failure, Success

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'from_optional']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. It wraps a value that can be
    extracted, transformed, or propagated through a chain of Option-returning
    operations.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap_or(0)
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> some.match(lambda v: f"got {v}", lambda: "empty")
        'got 42'
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained Some value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, factory: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Some value without calling the factory."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def bind[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or and_then.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def apply[U](self, f_opt: Option[Callable[[T], U]]) -> Option[U]:
        """Apply an optional function to the contained value.

        Returns Nothing if the function is absent.
        """
        return f_opt.map(lambda f: f(self.value))

    def match[R](self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:  # noqa: ARG002
        """Eliminate the Option, running on_some with the value."""
        return on_some(self.value)

    def inspect(self, action: Callable[[T], object]) -> Some[T]:
        """Run a side-effecting action on the value and return self."""
        action(self.value)
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return Some if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            Some(value) if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def or_else(self, _factory: Callable[[], Option[T]]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def select_many[U, R](
        self,
        selector: Callable[[T], Option[U]],
        projector: Callable[[T, U], R],
    ) -> Option[R]:
        """Bind then project, keeping access to both values.

        Equivalent to ``bind(lambda x: selector(x).map(lambda y: projector(x, y)))``;
        selector is called exactly once.
        """
        return self.bind(lambda x: selector(x).map(lambda y: projector(x, y)))

    def zip_with[U, R](self, other: Option[U], combiner: Callable[[T, U], R]) -> Option[R]:
        """Combine two Options with a function, Nothing if either is absent."""
        return self.bind(lambda a: other.map(lambda b: combiner(a, b)))

    def flatten[U](self: Some[Option[U]]) -> Option[U]:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T].
        """
        return self.value

    def ok_or[E](self, _error: E) -> Success[T]:
        """Convert to Result, returning Success(value).

        Args:
            _error: Ignored error value.
        """
        from monadkit.result import Success

        return Success(self.value)

    def to_optional(self) -> T:
        """Return the value (the native nullable form of Some)."""
        return self.value

    def __iter__(self) -> Iterator[T]:
        """Iterate over the single contained value."""
        yield self.value

    async def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> Some[U]:
        """Await an async mapper on the contained value."""
        return Some(await f(self.value))

    async def bind_async[U](self, f: Callable[[T], Awaitable[Option[U]]]) -> Option[U]:
        """Await an async binder on the contained value."""
        return await f(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Operations on Nothing return Nothing or a default value, and never
    call the function they are given.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Nothing.

        Raises:
            UnwrapError: Always, since Nothing has no value to unwrap.
        """
        raise UnwrapError('Called unwrap on Nothing')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, factory: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return factory()

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        raise UnwrapError(msg)

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def bind[T, U](self, _f: Callable[[T], Option[U]]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def apply[T, U](self, _f_opt: Option[Callable[[T], U]]) -> NothingType:
        """Return Nothing since there's no value to apply to."""
        return self

    def match[T, R](self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:  # noqa: ARG002
        """Eliminate the Option, running on_none."""
        return on_none()

    def inspect[T](self, _action: Callable[[T], object]) -> NothingType:
        """Return Nothing without running the action."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def or_else[T](self, factory: Callable[[], Option[T]]) -> Option[T]:
        """Apply a recovery function since this is Nothing.

        Args:
            factory: Function that returns a new Option.

        Returns:
            The Option returned by factory.
        """
        return factory()

    def select_many[T, U, R](
        self,
        _selector: Callable[[T], Option[U]],
        _projector: Callable[[T, U], R],
    ) -> NothingType:
        """Return Nothing without calling the selector."""
        return self

    def zip_with[U, R](self, _other: Option[U], _combiner: Callable[..., R]) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def ok_or[E](self, error: E) -> Failure[E]:
        """Convert to Result, returning Failure(error).

        Args:
            error: The error value to wrap.
        """
        from monadkit.result import Failure

        return Failure(error)

    def to_optional(self) -> None:
        """Return None (the native nullable form of Nothing)."""
        return None

    def __iter__(self) -> Iterator[NoReturn]:
        """Iterate over nothing."""
        return iter(())

    async def map_async[T, U](self, _f: Callable[[T], Awaitable[U]]) -> NothingType:
        """Return Nothing without awaiting the mapper."""
        return self

    async def bind_async[T, U](self, _f: Callable[[T], Awaitable[Option[U]]]) -> NothingType:
        """Return Nothing without awaiting the binder."""
        return self


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def from_optional[T](value: T | None) -> Option[T]:
    """Convert a nullable value to an Option.

    Examples:
        >>> from_optional(None)
        NothingType()
        >>> from_optional("x")
        Some(value='x')
    """
    if value is None:
        return Nothing
    return Some(value)
