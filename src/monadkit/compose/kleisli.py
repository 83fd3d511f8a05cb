"""Kleisli composition of monad-returning functions.

Works for any value with a ``bind`` method: Option, Result, LogWriter, and
the generic Writer when ``combine`` is supplied.

Example:
    ```python
    parse_then_check = compose_kleisli(check_positive, parse_int)
    parse_then_check("42")  # Success(value=42)
    parse_then_check("-1")  # Failure(error='not positive')
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

__all__ = ['compose_kleisli', 'pipe_kleisli']


def _bind(monad: Any, f: Callable[[Any], Any], combine: Callable[[Any, Any], Any] | None) -> Any:
    if combine is None:
        return monad.bind(f)
    return monad.bind(f, combine)


def compose_kleisli(
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    *,
    combine: Callable[[Any, Any], Any] | None = None,
) -> Callable[[Any], Any]:
    """Compose two monad-returning functions right to left: ``x -> g(x).bind(f)``.

    Args:
        f: Second step, applied to the value inside g's result.
        g: First step.
        combine: Log combination, required only for the generic Writer.
    """

    def _composed(value: Any) -> Any:
        return _bind(g(value), f, combine)

    return _composed


def pipe_kleisli(
    *fns: Callable[[Any], Any],
    combine: Callable[[Any, Any], Any] | None = None,
) -> Callable[[Any], Any]:
    """Chain monad-returning functions left to right.

    ``pipe_kleisli(f, g, h)(x) == f(x).bind(g).bind(h)``.

    Raises:
        ValueError: If no functions are given.
    """
    if not fns:
        msg = 'pipe_kleisli requires at least one function'
        raise ValueError(msg)
    first, *rest = fns

    def _piped(value: Any) -> Any:
        current = first(value)
        for fn in rest:
            current = _bind(current, fn, combine)
        return current

    return _piped
