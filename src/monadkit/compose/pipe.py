"""chain() function for threading a value through Result/Option steps."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from monadkit.option import NothingType, Some
from monadkit.result import Failure, Success

__all__ = ['chain']


def _is_result_or_option(value: object) -> bool:
    """Check if a value is already a Result or Option type."""
    return isinstance(value, Success | Failure | Some | NothingType)


def _wrap_value(value: Any) -> Any:
    """Wrap a value in Success if it's not already a Result/Option."""
    if _is_result_or_option(value):
        return value
    return Success(value)


def _apply_fn(value: Any, fn: Callable[[Any], Any]) -> Any:
    """Apply a function to a value and wrap the result appropriately.

    If value is Failure or Nothing, returns it unchanged (short-circuit).
    Otherwise value is Success or Some, and fn is applied to the unwrapped value.
    If fn returns a Result/Option, returns it directly (no double-wrapping).
    Otherwise, wraps the result in the same container type as input.
    """
    match value:
        case Failure() | NothingType():
            return value
        case Success(inner):
            result = fn(inner)
            return result if _is_result_or_option(result) else Success(result)
        case Some(inner):
            result = fn(inner)
            return result if _is_result_or_option(result) else Some(result)


def chain(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Thread a value through functions on the success track.

    The initial value is wrapped in Success() if not already a Result/Option.
    Each function is applied to the unwrapped value from the previous step.
    Short-circuits on Failure or Nothing.

    Args:
        value: The initial value to thread through the functions.
        *fns: Functions to apply in sequence.

    Returns:
        The final Result/Option after applying all functions.

    Example:
        ```python
        chain(5, lambda x: x + 1, lambda x: x * 2)
        # Success(value=12)

        chain(5, lambda x: Failure("fail"), lambda x: x + 1)
        # Failure(error='fail')

        chain(Some(3), lambda x: x * 2)
        # Some(value=6)
        ```
    """
    current: Any = _wrap_value(value)
    for fn in fns:
        current = _apply_fn(current, fn)
        if isinstance(current, Failure | NothingType):
            return current
    return current
