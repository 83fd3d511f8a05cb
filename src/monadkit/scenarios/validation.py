"""Validation walkthrough: run every check and report all errors at once."""

from __future__ import annotations

from collections.abc import Callable

from monadkit.itertools import validate_all
from monadkit.result import Failure, Result, Success

__all__ = ['is_even', 'is_negative', 'is_positive', 'less_than', 'max_length', 'not_empty', 'run']

TITLE = 'Validation - input validation'


def is_positive(x: int) -> Result[int]:
    return Success(x) if x > 0 else Failure(f'{x} is not positive.')


def is_negative(x: int) -> Result[int]:
    return Success(x) if x < 0 else Failure(f'{x} is not negative.')


def is_even(x: int) -> Result[int]:
    return Success(x) if x % 2 == 0 else Failure(f'{x} is not even.')


def less_than(maximum: int) -> Callable[[int], Result[int]]:
    def check(x: int) -> Result[int]:
        return Success(x) if x < maximum else Failure(f'{x} is not less than {maximum}.')

    return check


def not_empty(text: str) -> Result[str]:
    return Success(text) if text else Failure('String is empty.')


def max_length(limit: int) -> Callable[[str], Result[str]]:
    def check(text: str) -> Result[str]:
        return Success(text) if len(text) <= limit else Failure(f'String length exceeds {limit} characters.')

    return check


def _report[T](value: T, result: Result[T, list[str]]) -> list[str]:
    return [f'Input: {value}'] + result.match(
        lambda _: ['Validation passed.'],
        lambda errors: ['Validation failed with errors:', *(f'- {e}' for e in errors)],
    )


def run() -> list[str]:
    lines = _report(41, validate_all(41, is_negative, is_even, less_than(10)))
    lines.append('')
    lines += _report(15, validate_all(15, is_positive, less_than(20)))
    lines.append('')
    lines += _report('Hello', validate_all('Hello', not_empty, max_length(10)))
    return lines
