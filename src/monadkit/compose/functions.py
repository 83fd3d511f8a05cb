"""Plain function combinators: composition, arity changes, taps and memoization."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Awaitable, Callable, Hashable
from typing import Any, overload

import aiologic

from monadkit._logging import get_logger

__all__ = [
    'compose',
    'const',
    'curry',
    'identity',
    'memoize',
    'partial',
    'pipe',
    'tap',
    'tap_async',
    'trace',
    'uncurry',
]

logger = get_logger(__name__)

_KWARGS_MARK = object()


def identity[T](value: T) -> T:
    """Return the value unchanged."""
    return value


def const[T](value: T) -> Callable[..., T]:
    """Build a function that ignores its arguments and returns value.

    Examples:
        >>> always_five = const(5)
        >>> always_five("ignored")
        5
    """

    def _const(*_args: Any, **_kwargs: Any) -> T:
        return value

    return _const


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions right to left.

    ``compose(f, g)(x) == f(g(x))``. With no functions, returns identity.

    Examples:
        >>> add_then_double = compose(lambda x: x * 2, lambda x: x + 1)
        >>> add_then_double(3)
        8
    """
    if not fns:
        return identity

    def _composed(value: Any) -> Any:
        return functools.reduce(lambda acc, fn: fn(acc), reversed(fns), value)

    return _composed


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Thread a value left to right through plain functions.

    No wrapping or short-circuiting happens here; see ``chain`` for the
    railway form over Option and Result.

    Examples:
        >>> pipe(3, lambda x: x + 1, str)
        '4'
    """
    for fn in fns:
        value = fn(value)
    return value


def _positional_arity(func: Callable[..., Any]) -> int:
    params = inspect.signature(func).parameters.values()
    return sum(
        1
        for p in params
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
    )


def _accumulate(func: Callable[..., Any], arity: int, collected: tuple[Any, ...]) -> Callable[[Any], Any]:
    def step(arg: Any) -> Any:
        args = (*collected, arg)
        if len(args) >= arity:
            return func(*args)
        return _accumulate(func, arity, args)

    return step


def curry(func: Callable[..., Any], arity: int | None = None) -> Callable[[Any], Any]:
    """Turn an n-argument function into a chain of one-argument functions.

    Arguments keep their original order. The arity defaults to the number of
    required positional parameters; pass it explicitly for builtins or
    variadic functions.

    Examples:
        >>> add3 = curry(lambda a, b, c: a + b + c)
        >>> add3(1)(2)(3)
        6
    """
    n = arity if arity is not None else _positional_arity(func)
    if n <= 1:
        return func
    return _accumulate(func, n, ())


def uncurry(func: Callable[[Any], Any]) -> Callable[..., Any]:
    """Inverse of ``curry``: feed the arguments one at a time.

    Examples:
        >>> uncurry(curry(lambda a, b: a - b))(10, 3)
        7
    """

    def _uncurried(*args: Any) -> Any:
        return functools.reduce(lambda fn, arg: fn(arg), args, func)

    return _uncurried


def partial(func: Callable[..., Any], *args: Any) -> Callable[..., Any]:
    """Fix the leading positional arguments of func."""
    return functools.partial(func, *args)


def tap[T](value: T, action: Callable[[T], object]) -> T:
    """Run a side effect on value and return value unchanged."""
    action(value)
    return value


async def tap_async[T](value: T, action: Callable[[T], Awaitable[object]]) -> T:
    """Await a side effect on value and return value unchanged."""
    await action(value)
    return value


def trace[T](label: str) -> Callable[[T], T]:
    """Build a tap that logs the value it sees at debug level.

    Examples:
        >>> pipe(5, trace("start"), lambda x: x + 1)
        6
    """

    def _trace(value: T) -> T:
        logger.debug('trace', label=label, value=repr(value))
        return value

    return _trace


def _make_key(args: tuple[Any, ...], kwargs: dict[str, Any]) -> Hashable:
    if not kwargs:
        return args
    return (*args, _KWARGS_MARK, *sorted(kwargs.items()))


@overload
def memoize[**P, T](func: Callable[P, T], *, synchronized: bool = False) -> Callable[P, T]: ...


@overload
def memoize[**P, T](
    func: None = None, *, synchronized: bool = False
) -> Callable[[Callable[P, T]], Callable[P, T]]: ...


def memoize(func: Callable[..., Any] | None = None, *, synchronized: bool = False) -> Any:
    """Cache a function's results keyed by its arguments.

    The cache is unbounded and keyed by argument equality, so arguments must
    be hashable. Without ``synchronized`` concurrent callers may compute the
    same key twice; with it, population is guarded by an ``aiologic.RLock``
    that works from threads and green/async contexts alike. The lock is
    reentrant, so a recursive function may call itself while computing.

    The wrapper exposes ``cache`` (the underlying dict) and ``cache_clear()``.

    Can be used with or without arguments:
        @memoize
        def fib(n): ...

        @memoize(synchronized=True)
        def load(key): ...

    Examples:
        >>> calls = []
        >>> @memoize
        ... def square(x):
        ...     calls.append(x)
        ...     return x * x
        >>> square(4), square(4), calls
        (16, 16, [4])
    """

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        cache: dict[Hashable, Any] = {}
        lock = aiologic.RLock() if synchronized else None

        def compute(key: Hashable, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
            logger.debug('memo_miss', func=fn.__qualname__)
            value = fn(*args, **kwargs)
            cache[key] = value
            return value

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            key = _make_key(args, kwargs)
            if key in cache:
                return cache[key]
            if lock is None:
                return compute(key, args, kwargs)
            with lock:
                if key in cache:
                    return cache[key]
                return compute(key, args, kwargs)

        wrapper.cache = cache  # type: ignore[attr-defined]
        wrapper.cache_clear = cache.clear  # type: ignore[attr-defined]
        return wrapper

    if func is not None:
        return decorator(func)
    return decorator
