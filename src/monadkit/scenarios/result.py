"""Result walkthrough: error handling without exceptions."""

from __future__ import annotations

from monadkit.itertools import sequence_result
from monadkit.option import Some
from monadkit.result import Failure, Result, Success, try_catch

__all__ = ['create_user', 'divide', 'run', 'validate_age', 'validate_email']

TITLE = 'Result - error handling without exceptions'

MINIMUM_AGE = 18


def divide(numerator: int, denominator: int) -> Result[int]:
    if denominator == 0:
        return Failure('Cannot divide by zero')
    return Success(numerator // denominator)


def validate_age(age: int) -> Result[int]:
    if age >= MINIMUM_AGE:
        return Success(age)
    return Failure(f'Age {age} is below minimum ({MINIMUM_AGE})')


def validate_email(email: str) -> Result[str]:
    if '@' in email:
        return Success(email)
    return Failure(f'Invalid email: {email}')


def create_user(email: str) -> Result[str]:
    return Success(f'User created with email: {email}')


def _signup(age: int, email: str) -> str:
    return (
        validate_age(age)
        .bind(lambda _: validate_email(email))
        .bind(create_user)
        .match(lambda user: f'Created user: {user}', lambda error: f'Validation failed: {error}')
    )


def _show(label: str, result: Result[object]) -> str:
    return result.match(lambda value: f'{label}: {value}', lambda error: f'Error: {error}')


def run() -> list[str]:
    success: Result[int] = Success(42)
    failure: Result[int] = Failure('Something went wrong')
    lines = [
        '1. Basic usage',
        f'Success value: {success.unwrap_or(-1)}',
        f'Failure value: {failure.unwrap_or(-1)}',
        '',
        '2. Map',
        _show('Mapped value', success.map(lambda x: x * 2)),
        '',
        '3. Railway-oriented programming',
        _signup(25, 'user@example.com'),
        '',
        '4. Failed validation chain',
        _signup(15, 'user@example.com'),
        '',
        '5. select_many',
        _show('10/2 + 20/4', divide(10, 2).select_many(lambda _: divide(20, 4), lambda x, y: x + y)),
        '',
        '6. Error recovery with or_else',
        _show('Recovered value', divide(10, 0).or_else(lambda _: Success(0))),
        '',
        '7. try_catch',
    ]

    for text in ('123', 'not a number'):
        lines.append(
            try_catch(lambda text=text: int(text)).match(
                lambda value: f'Parsed: {value}', lambda error: f'Parse error: {error}'
            )
        )

    lines += ['', '8. Converting between Option and Result']
    lines.append(_show('From Option', Some(42).ok_or('Value was Nothing')))
    lines.append(success.to_option().match(lambda value: f'To Option: {value}', lambda: 'Nothing'))

    lines += ['', '9. Combining results from collections']
    lines.append(
        sequence_result(divide(n, 2) for n in (10, 20, 30)).match(
            lambda values: f'All divisions succeeded: {", ".join(map(str, values))}',
            lambda error: f'At least one division failed: {error}',
        )
    )
    return lines
