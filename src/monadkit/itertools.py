"""Collection combinators over Option and Result.

All functions consume their source lazily and stop at the first absent or
failed element, so ``f`` is never called past it.

Example:
    ```python
    from monadkit import Some, Nothing, sequence_option, choose

    sequence_option([Some(1), Some(2), Some(3)])  # Some(value=[1, 2, 3])
    sequence_option([Some(1), Nothing, Some(3)])  # NothingType()

    list(choose(["1", "2", "x", "4"], parse_int))  # [1, 2, 4]
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from monadkit.option import Nothing, NothingType, Option, Some
from monadkit.result import Failure, Result, Success

__all__ = [
    'choose',
    'partition_results',
    'sequence_option',
    'sequence_result',
    'traverse_option',
    'traverse_result',
    'validate_all',
]


def sequence_option[T](options: Iterable[Option[T]]) -> Option[list[T]]:
    """Collect an iterable of Options into an Option of list.

    Short-circuits on the first Nothing encountered.

    Examples:
        >>> sequence_option([Some(1), Some(2)])
        Some(value=[1, 2])
        >>> sequence_option([])
        Some(value=[])
    """
    values: list[T] = []
    for option in options:
        if isinstance(option, NothingType):
            return Nothing
        values.append(option.value)
    return Some(values)


def sequence_result[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Failure encountered, which is returned
    unchanged.

    Examples:
        >>> sequence_result([Success(1), Success(2), Success(3)])
        Success(value=[1, 2, 3])
        >>> sequence_result([Success(1), Failure("fail"), Success(3)])
        Failure(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Failure):
            return result
        values.append(result.value)
    return Success(values)


def traverse_option[T, U](source: Iterable[T], f: Callable[[T], Option[U]]) -> Option[list[U]]:
    """Map each item to an Option and sequence the results.

    f is not called after the first Nothing.
    """
    return sequence_option(f(item) for item in source)


def traverse_result[T, U, E](source: Iterable[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map each item to a Result and sequence the results.

    f is not called after the first Failure.
    """
    return sequence_result(f(item) for item in source)


def choose[T, U](source: Iterable[T], chooser: Callable[[T], Option[U]]) -> Iterator[U]:
    """Yield the present values of chooser(item), in source order.

    Lazy, so it is safe on infinite sources.
    """
    for item in source:
        chosen = chooser(item)
        if isinstance(chosen, Some):
            yield chosen.value


def partition_results[T, E](results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Split Results into success values and errors, keeping order.

    Examples:
        >>> partition_results([Success(1), Failure("a"), Success(2)])
        ([1, 2], ['a'])
    """
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        if isinstance(result, Success):
            values.append(result.value)
        else:
            errors.append(result.error)
    return values, errors


def validate_all[T, E](value: T, *validations: Callable[[T], Result[object, E]]) -> Result[T, list[E]]:
    """Run every validation against value and accumulate all errors.

    Unlike a bind chain, validation does not stop at the first failure.

    Args:
        value: The value to validate.
        *validations: Functions returning Success (any payload) or Failure(error).

    Returns:
        Success(value) if every validation passed, else Failure(list of errors)
        in validation order.

    Examples:
        >>> validate_all(5, lambda x: Success(x) if x > 0 else Failure("not positive"))
        Success(value=5)
    """
    _, errors = partition_results(validation(value) for validation in validations)
    if errors:
        return Failure(errors)
    return Success(value)
