"""Writer walkthrough: computations that carry their own log."""

from __future__ import annotations

import operator
from datetime import datetime, timedelta

from monadkit.writer import LogWriter, Writer

__all__ = ['apply_discount', 'apply_shipping', 'apply_tax', 'calculate_price', 'evaluate_expression', 'run']

TITLE = 'Writer - computation with logging'


def apply_discount(price: float, rate: float) -> LogWriter[float]:
    discounted = price * (1 - rate)
    return LogWriter.create(discounted, f'Applied {rate * 100:g}% discount: ${price:.2f} -> ${discounted:.2f}')


def apply_tax(price: float, rate: float) -> LogWriter[float]:
    with_tax = price * (1 + rate)
    return LogWriter.create(with_tax, f'Applied {rate * 100:g}% tax: ${price:.2f} -> ${with_tax:.2f}')


def apply_shipping(price: float, cost: float) -> LogWriter[float]:
    total = price + cost
    return LogWriter.create(total, f'Added shipping ${cost:.2f}: ${price:.2f} -> ${total:.2f}')


def calculate_price(base_price: float) -> LogWriter[float]:
    """Base price, then 10% discount, 8% tax and flat shipping, each step logged."""
    return (
        LogWriter.create(base_price, f'Base price: ${base_price:.2f}')
        .bind(lambda p: apply_discount(p, 0.1))
        .bind(lambda p: apply_tax(p, 0.08))
        .bind(lambda p: apply_shipping(p, 5.0))
    )


def evaluate_expression() -> LogWriter[int]:
    """Evaluate (5 + 3) * 2 - 4, logging every intermediate step."""
    return (
        LogWriter.create(5, 'Value: 5')
        .bind(lambda x: LogWriter.create(x + 3, f'{x} + 3 = {x + 3}'))
        .bind(lambda x: LogWriter.create(x * 2, f'{x} * 2 = {x * 2}'))
        .bind(lambda x: LogWriter.create(x - 4, f'{x} - 4 = {x - 4}'))
    )


def _describe(title: str, writer: LogWriter[object], value_label: str = 'Value') -> list[str]:
    value, log = writer
    lines = [f'{title}:', f'  {value_label}: {value}']
    if log:
        lines += [f'    * {entry}' for entry in log]
    else:
        lines.append('  (no logs)')
    return lines


def run() -> list[str]:
    lines = ['1. Basic usage']
    created = LogWriter.create(10, 'Created with value 10')
    lines += _describe('Initial value', LogWriter.pure(5))
    lines += _describe('Value with log', created)

    lines += ['', '2. Map']
    lines += _describe('After mapping (*2)', created.map(lambda x: x * 2))

    lines += ['', '3. Bind (log accumulation)']
    accumulated = (
        LogWriter.pure(5)
        .bind(lambda x: LogWriter.create(x + 1, f'Added 1 to {x}'))
        .bind(lambda x: LogWriter.create(x * 2, f'Multiplied {x} by 2'))
        .bind(lambda x: LogWriter.create(x - 3, f'Subtracted 3 from {x}'))
    )
    lines += _describe('Computation with logs', accumulated)

    lines += ['', '4. select_many']
    summed = LogWriter.create(5, 'Started with 5').select_many(
        lambda _: LogWriter.create(10, 'Added 10'), operator.add
    )
    lines += _describe('Combined computation', summed)

    lines += ['', '5. Price calculator']
    price = calculate_price(100.0).map(lambda p: f'${p:.2f}')
    lines += _describe('Price calculation', price, value_label='Final price')

    lines += ['', '6. Generic Writer (timestamped log)']
    started = datetime.now()
    stamped = Writer.create('Result', [(started, 'Operation 1')]).tell(
        [(started + timedelta(seconds=1), 'Operation 2')], operator.add
    )
    lines.append(f'Value: {stamped.value}')
    lines += [f'  [{at:%H:%M:%S}] {message}' for at, message in stamped.log]

    lines += ['', '7. Expression evaluation']
    lines += _describe('Expression: (5 + 3) * 2 - 4', evaluate_expression())
    return lines
