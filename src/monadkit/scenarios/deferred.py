"""Deferred walkthrough: the same pipelines over awaitable values."""

from __future__ import annotations

import anyio

from monadkit.async_ import Deferred, choose_async, memoize_async, sequence_result_async, traverse_option_async
from monadkit.option import Nothing, Option, Some
from monadkit.result import Failure, Result, Success, try_catch_async

__all__ = ['fetch_price', 'lookup_stock', 'run']

TITLE = 'Deferred - async pipelines'

_PRICES = {'apple': 120, 'pear': 95, 'plum': 60}
_STOCK = {'apple': 3, 'pear': 0}


async def fetch_price(item: str) -> Result[int]:
    await anyio.sleep(0)
    if item in _PRICES:
        return Success(_PRICES[item])
    return Failure(f'No price for {item}')


async def lookup_stock(item: str) -> Option[int]:
    await anyio.sleep(0)
    count = _STOCK.get(item)
    return Some(count) if count else Nothing


async def _parse_async(text: str) -> Option[int]:
    await anyio.sleep(0)
    return Some(int(text)) if text.isdigit() else Nothing


async def _run_async() -> list[str]:
    # one cache per event loop
    fetch = memoize_async(fetch_price)
    lines = ['1. Chaining a deferred Result']
    total = await (
        Deferred(fetch('apple'))
        .map(lambda cents: cents * 3)
        .filter(lambda cents: cents < 1000, lambda cents: f'{cents} is over budget')
        .match(lambda cents: f'3 apples cost {cents} cents', lambda error: f'Error: {error}')
    )
    lines.append(total)

    lines += ['', '2. Failure short-circuits']
    lines.append(
        await Deferred(fetch('kiwi'))
        .map(lambda cents: cents * 3)
        .match(lambda cents: f'3 kiwis cost {cents} cents', lambda error: f'Error: {error}')
    )

    lines += ['', '3. Concurrent zip']
    basket = Deferred(fetch('apple')).zip_with(Deferred(fetch('pear')), lambda a, b: a + b)
    lines.append(await basket.match(lambda cents: f'apple + pear = {cents} cents', lambda e: f'Error: {e}'))

    lines += ['', '4. Sequencing awaitables']
    prices = await sequence_result_async(fetch(item) for item in ('apple', 'pear', 'plum'))
    lines.append(prices.match(lambda values: f'All prices: {values}', lambda error: f'Error: {error}'))

    lines += ['', '5. Traversing with an async Option function']
    for items in (['apple'], ['apple', 'pear']):
        stock = await traverse_option_async(items, lookup_stock)
        lines.append(stock.match(lambda counts: f'{items} in stock: {counts}', lambda: f'{items}: something is sold out'))

    lines += ['', '6. Choosing from async results']
    chosen = [value async for value in choose_async(['1', 'x', '3'], _parse_async)]
    lines.append(f'Parsed numbers: {chosen}')

    lines += ['', '7. try_catch_async']

    async def explode() -> int:
        await anyio.sleep(0)
        raise ValueError('sensor offline')

    lines.append((await try_catch_async(explode)).match(lambda v: f'Read: {v}', lambda e: f'Captured fault: {e}'))
    return lines


def run() -> list[str]:
    return anyio.run(_run_async)
