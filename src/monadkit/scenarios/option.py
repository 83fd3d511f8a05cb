"""Option walkthrough: safe null handling."""

from __future__ import annotations

from monadkit.itertools import choose
from monadkit.option import Nothing, Option, Some, from_optional

__all__ = ['parse_int', 'run', 'safe_divide']

TITLE = 'Option - safe null handling'


def safe_divide(numerator: int, denominator: int) -> Option[int]:
    if denominator == 0:
        return Nothing
    return Some(numerator // denominator)


def parse_int(text: str) -> Option[int]:
    """Parse an integer, Nothing when the text is not one."""
    try:
        return Some(int(text))
    except ValueError:
        return Nothing


def _division_line(numerator: int, denominator: int) -> str:
    return safe_divide(numerator, denominator).match(
        lambda value: f'{numerator} / {denominator} = {value}',
        lambda: f'{numerator} / {denominator} = cannot divide by zero',
    )


def run() -> list[str]:
    some_value: Option[int] = Some(42)
    none_value: Option[int] = Nothing
    lines = [
        '1. Basic usage',
        f'Some value: {some_value.unwrap_or(-1)}',
        f'Nothing value: {none_value.unwrap_or(-1)}',
        '',
        '2. Map',
        f'42 doubled: {some_value.map(lambda x: x * 2).unwrap_or(0)}',
        '',
        '3. Bind (chaining)',
    ]

    chained = some_value.bind(lambda x: Some(x + 10)).bind(lambda x: Some(x * 2))
    lines.append(f'42 -> add 10 -> multiply by 2 = {chained.unwrap_or(0)}')

    lines += ['', '4. select_many']
    summed = Some(5).select_many(lambda _: Some(10), lambda x, y: x + y)
    lines.append(f'5 + 10 = {summed.unwrap_or(0)}')

    lines += ['', '5. Converting nullable values']
    for raw in (None, 'Hello, World!'):
        lines.append(from_optional(raw).match(lambda s: f'Value: {s}', lambda: 'No value (from None)'))

    lines += ['', '6. Safe division', _division_line(10, 2), _division_line(10, 0)]

    lines += ['', '7. Filtering']
    lines.append(f'15 > 10? {Some(15).filter(lambda x: x > 10).is_some()}')
    lines.append(f'5 > 10? {Some(5).filter(lambda x: x > 10).is_some()}')

    lines += ['', '8. Working with collections']
    parsed = list(choose(['1', '2', 'not a number', '4', '5'], parse_int))
    lines.append(f'Parsed numbers: {", ".join(map(str, parsed))}')
    return lines
