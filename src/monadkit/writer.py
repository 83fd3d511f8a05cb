"""Writer type: a value paired with an accumulated log.

The log type is any monoid. Since Python has no typeclass for it, the
combining function is passed explicitly to ``bind``; it must be associative
and treat the empty log given to ``pure`` as its identity, otherwise the
right-identity and associativity laws no longer hold.

``LogWriter`` is the text-log specialization: the log is a tuple of lines and
combination is ordered concatenation, so callers never pass ``combine``.

Example:
    ```python
    from monadkit import LogWriter

    result = (
        LogWriter.pure(5)
        .bind(lambda x: LogWriter.create(x + 1, f"Added 1 to {x}"))
        .bind(lambda x: LogWriter.create(x * 2, f"Multiplied {x} by 2"))
    )
    result.value  # 12
    result.log    # ('Added 1 to 5', 'Multiplied 6 by 2')
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Iterator

import msgspec

__all__ = ['LogWriter', 'Writer', 'concat_lines']


def concat_lines(left: tuple[str, ...], right: tuple[str, ...]) -> tuple[str, ...]:
    """Combine two text logs, keeping left entries before right entries."""
    return (*left, *right)


def _entries(items: tuple[str | Iterable[str], ...]) -> tuple[str, ...]:
    """Flatten log lines given one by one or as iterables of lines."""
    lines: list[str] = []
    for item in items:
        if isinstance(item, str):
            lines.append(item)
            continue
        for line in item:
            if not isinstance(line, str):
                msg = f'log entries must be str, got {type(line).__name__}'
                raise TypeError(msg)
            lines.append(line)
    return tuple(lines)


class Writer[T, L](msgspec.Struct, frozen=True, gc=False):
    """Generic Writer holding a value and a log of any monoid type.

    Attributes:
        value: The wrapped value.
        log: The accumulated log.

    Examples:
        >>> w = Writer.pure(2, [])
        >>> w.bind(lambda x: Writer(x * 10, ["scaled"]), lambda a, b: a + b)
        Writer(value=20, log=['scaled'])
    """

    value: T
    log: L

    @classmethod
    def pure(cls, value: T, empty_log: L) -> Writer[T, L]:
        """Create a Writer with a value and the empty log (return/unit)."""
        return cls(value, empty_log)

    @classmethod
    def create(cls, value: T, log: L) -> Writer[T, L]:
        """Create a Writer with a value and an initial log."""
        return cls(value, log)

    def map[U](self, f: Callable[[T], U]) -> Writer[U, L]:
        """Transform the value; the log object is reused as-is."""
        return Writer(f(self.value), self.log)

    def bind[U](
        self,
        f: Callable[[T], Writer[U, L]],
        combine: Callable[[L, L], L],
    ) -> Writer[U, L]:
        """Chain a Writer-returning function and combine the logs.

        The current log comes first, then the log produced by f.

        Args:
            f: Function that takes T and returns Writer[U, L].
            combine: Associative log combination with the empty log as identity.
        """
        result = f(self.value)
        return Writer(result.value, combine(self.log, result.log))

    def select_many[U, R](
        self,
        selector: Callable[[T], Writer[U, L]],
        projector: Callable[[T, U], R],
        combine: Callable[[L, L], L],
    ) -> Writer[R, L]:
        """Bind then project, keeping access to both values."""
        intermediate = selector(self.value)
        return Writer(projector(self.value, intermediate.value), combine(self.log, intermediate.log))

    def inspect(self, action: Callable[[T], object]) -> Writer[T, L]:
        """Run a side-effecting action on the value and return self."""
        action(self.value)
        return self

    def tell(self, log: L, combine: Callable[[L, L], L]) -> Writer[T, L]:
        """Append to the log without changing the value."""
        return Writer(self.value, combine(self.log, log))

    def listen(self) -> Writer[tuple[T, L], L]:
        """Expose the log alongside the value."""
        return Writer((self.value, self.log), self.log)

    def __iter__(self) -> Iterator[object]:
        """Deconstruct into value and log: ``value, log = writer``."""
        yield self.value
        yield self.log

    async def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> Writer[U, L]:
        """Await an async mapper on the value, keeping the log."""
        return Writer(await f(self.value), self.log)

    async def bind_async[U](
        self,
        f: Callable[[T], Awaitable[Writer[U, L]]],
        combine: Callable[[L, L], L],
    ) -> Writer[U, L]:
        """Await an async binder and combine the logs in order."""
        result = await f(self.value)
        return Writer(result.value, combine(self.log, result.log))


class LogWriter[T](msgspec.Struct, frozen=True, gc=False):
    """Writer specialized to a tuple of text lines.

    Attributes:
        value: The wrapped value.
        log: Log lines in the order they were written.
    """

    value: T
    log: tuple[str, ...] = ()

    @classmethod
    def pure(cls, value: T) -> LogWriter[T]:
        """Create a LogWriter with an empty log."""
        return cls(value, ())

    @classmethod
    def create(cls, value: T, *entries: str | Iterable[str]) -> LogWriter[T]:
        """Create a LogWriter with log entries.

        Entries may be passed one by one or as iterables of lines, so
        ``create(1, "a", "b")`` and ``create(1, ["a", "b"])`` are equal.

        Raises:
            TypeError: If an iterable yields something other than a str.
        """
        return cls(value, _entries(entries))

    def map[U](self, f: Callable[[T], U]) -> LogWriter[U]:
        """Transform the value; the log is reused as-is."""
        return LogWriter(f(self.value), self.log)

    def bind[U](self, f: Callable[[T], LogWriter[U]]) -> LogWriter[U]:
        """Chain a LogWriter-returning function, appending its log lines."""
        result = f(self.value)
        return LogWriter(result.value, concat_lines(self.log, result.log))

    def select_many[U, R](
        self,
        selector: Callable[[T], LogWriter[U]],
        projector: Callable[[T, U], R],
    ) -> LogWriter[R]:
        """Bind then project, keeping access to both values."""
        intermediate = selector(self.value)
        return LogWriter(projector(self.value, intermediate.value), concat_lines(self.log, intermediate.log))

    def inspect(self, action: Callable[[T], object]) -> LogWriter[T]:
        """Run a side-effecting action on the value and return self."""
        action(self.value)
        return self

    def tell(self, *entries: str | Iterable[str]) -> LogWriter[T]:
        """Append log lines without changing the value."""
        return LogWriter(self.value, concat_lines(self.log, _entries(entries)))

    def listen(self) -> LogWriter[tuple[T, tuple[str, ...]]]:
        """Expose the log alongside the value."""
        return LogWriter((self.value, self.log), self.log)

    def to_writer(self) -> Writer[T, tuple[str, ...]]:
        """Convert to a generic Writer combined with ``concat_lines``."""
        return Writer(self.value, self.log)

    def __iter__(self) -> Iterator[object]:
        """Deconstruct into value and log: ``value, log = writer``."""
        yield self.value
        yield self.log

    async def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> LogWriter[U]:
        """Await an async mapper on the value, keeping the log."""
        return LogWriter(await f(self.value), self.log)

    async def bind_async[U](self, f: Callable[[T], Awaitable[LogWriter[U]]]) -> LogWriter[U]:
        """Await an async binder and append its log lines."""
        result = await f(self.value)
        return LogWriter(result.value, concat_lines(self.log, result.log))
