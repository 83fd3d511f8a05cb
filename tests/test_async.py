"""Tests for async utilities: Deferred, sequential combinators, memoize_async."""

import gc
import inspect
import warnings

import anyio
import pytest

from monadkit import Failure, LogWriter, Nothing, Some, Success, Writer
from monadkit.async_ import (
    Deferred,
    choose_async,
    memoize_async,
    sequence_option_async,
    sequence_result_async,
    traverse_option_async,
    traverse_result_async,
)


async def value_of(m):
    return m


class TestDeferred:
    """Tests for the Deferred wrapper."""

    @pytest.mark.asyncio
    async def test_await(self):
        assert await Deferred(value_of(Success(42))) == Success(42)

    @pytest.mark.asyncio
    async def test_of(self):
        assert await Deferred.of(Some(1)) == Some(1)

    @pytest.mark.asyncio
    async def test_map_and_bind_result(self):
        result = await (
            Deferred(value_of(Success(5)))
            .map(lambda x: x * 2)
            .bind(lambda x: Success(x + 1) if x > 0 else Failure('negative'))
        )
        assert result == Success(11)

    @pytest.mark.asyncio
    async def test_failure_short_circuits(self):
        calls = []
        result = await Deferred.of(Failure('e')).map(calls.append).inspect(calls.append)
        assert result == Failure('e')
        assert calls == []

    @pytest.mark.asyncio
    async def test_inspect_writer(self):
        seen = []
        result = await Deferred.of(LogWriter.create(1, 'one')).inspect(seen.append)
        assert result == LogWriter(1, ('one',))
        assert seen == [1]

    @pytest.mark.asyncio
    async def test_map_error_and_or_else(self):
        assert await Deferred.of(Failure('e')).map_error(str.upper) == Failure('E')
        assert await Deferred.of(Failure('e')).or_else(lambda _: Success(0)) == Success(0)
        assert await Deferred.of(Nothing).or_else(lambda: Some(1)) == Some(1)

    @pytest.mark.asyncio
    async def test_filter(self):
        assert await Deferred.of(Some(5)).filter(lambda x: x > 10) is Nothing
        result = await Deferred.of(Success(5)).filter(lambda x: x > 10, lambda x: f'{x} too small')
        assert result == Failure('5 too small')

    @pytest.mark.asyncio
    async def test_option(self):
        assert await Deferred.of(Some(2)).map(lambda x: x + 1) == Some(3)
        assert await Deferred.of(Nothing).map(lambda x: x + 1) is Nothing

    @pytest.mark.asyncio
    async def test_writer(self):
        result = await Deferred.of(LogWriter.create(1, 'a')).bind(lambda x: LogWriter.create(x + 1, 'b'))
        assert result == LogWriter(2, ('a', 'b'))

        generic = await Deferred.of(Writer(1, ['a'])).bind(lambda x: Writer(x, ['b']), lambda a, b: a + b)
        assert generic == Writer(1, ['a', 'b'])

    @pytest.mark.asyncio
    async def test_async_mappers(self):
        async def double(x):
            return x * 2

        async def check(x):
            return Success(x) if x < 10 else Failure('too big')

        assert await Deferred.of(Success(2)).map_async(double).bind_async(check) == Success(4)
        assert await Deferred.of(Success(6)).map_async(double).bind_async(check) == Failure('too big')

    @pytest.mark.asyncio
    async def test_match_and_unwrap_or(self):
        assert await Deferred.of(Some(1)).match(lambda v: v + 1, lambda: 0) == 2
        assert await Deferred.of(Failure('e')).unwrap_or(-1) == -1

    @pytest.mark.asyncio
    async def test_zip_with_runs_concurrently(self):
        started = []

        async def slow(name, value):
            started.append(name)
            await anyio.sleep(0.01)
            return Success(value)

        result = await Deferred(slow('a', 1)).zip_with(Deferred(slow('b', 2)), lambda a, b: a + b)
        assert result == Success(3)
        assert sorted(started) == ['a', 'b']

    @pytest.mark.asyncio
    async def test_zip_with_first_failure_wins(self):
        result = await Deferred.of(Failure('first')).zip_with(Deferred.of(Failure('second')), lambda a, b: a)
        assert result == Failure('first')

    @pytest.mark.asyncio
    async def test_single_shot(self):
        deferred = Deferred(value_of(Some(1)))
        await deferred
        with pytest.raises(RuntimeError):
            await deferred


class TestSequenceAsync:
    """Tests for sequence_*_async and traverse_*_async."""

    @pytest.mark.asyncio
    async def test_sequence_result_all_success(self):
        result = await sequence_result_async([value_of(Success(1)), value_of(Success(2))])
        assert result == Success([1, 2])

    @pytest.mark.asyncio
    async def test_sequence_result_does_not_await_after_failure(self):
        third = value_of(Success(3))
        result = await sequence_result_async([value_of(Success(1)), value_of(Failure('second')), third])

        assert result == Failure('second')
        assert inspect.getcoroutinestate(third) == inspect.CORO_CLOSED

    @pytest.mark.asyncio
    async def test_sequence_option_closes_leftovers(self):
        rest = (value_of(Some(3)), value_of(Some(4)))
        result = await sequence_option_async((value_of(Nothing), *rest))

        assert result is Nothing
        assert [inspect.getcoroutinestate(aw) for aw in rest] == [inspect.CORO_CLOSED] * 2

    @pytest.mark.asyncio
    async def test_no_unawaited_warning_after_failure(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            await sequence_result_async([value_of(Failure('first')), value_of(Success(2))])
            gc.collect()

        assert not [w for w in caught if 'never awaited' in str(w.message)]

    @pytest.mark.asyncio
    async def test_generator_source_is_not_drained(self):
        created = []

        def awaitables():
            for m in (Success(1), Failure('stop'), Success(3)):
                created.append(m)
                yield value_of(m)

        assert await sequence_result_async(awaitables()) == Failure('stop')
        assert created == [Success(1), Failure('stop')]

    @pytest.mark.asyncio
    async def test_sequence_option(self):
        assert await sequence_option_async([value_of(Some(1)), value_of(Some(2))]) == Some([1, 2])
        assert await sequence_option_async([]) == Some([])

    @pytest.mark.asyncio
    async def test_traverse_is_sequential(self):
        order = []

        async def visit(x):
            order.append(f'start {x}')
            await anyio.sleep(0)
            order.append(f'end {x}')
            return Success(x)

        assert await traverse_result_async([1, 2], visit) == Success([1, 2])
        assert order == ['start 1', 'end 1', 'start 2', 'end 2']

    @pytest.mark.asyncio
    async def test_traverse_option_stops(self):
        calls = []

        async def lookup(x):
            calls.append(x)
            return Some(x) if x != 'b' else Nothing

        assert await traverse_option_async(['a', 'b', 'c'], lookup) is Nothing
        assert calls == ['a', 'b']


class TestChooseAsync:
    """Tests for choose_async."""

    @staticmethod
    async def parse(text):
        return Some(int(text)) if text.isdigit() else Nothing

    @pytest.mark.asyncio
    async def test_sync_source(self):
        assert [v async for v in choose_async(['1', 'x', '3'], self.parse)] == [1, 3]

    @pytest.mark.asyncio
    async def test_async_source(self):
        async def source():
            for text in ('4', 'y', '6'):
                yield text

        assert [v async for v in choose_async(source(), self.parse)] == [4, 6]


class TestMemoizeAsync:
    """Tests for memoize_async."""

    @pytest.mark.asyncio
    async def test_caches(self):
        calls = []

        @memoize_async
        async def fetch(x):
            calls.append(x)
            return Success(x * 2)

        assert await fetch(1) == Success(2)
        assert await fetch(1) == Success(2)
        assert calls == [1]

    @pytest.mark.asyncio
    async def test_with_options_and_clear(self):
        calls = []

        @memoize_async(maxsize=1, ttl=60.0)
        async def fetch(x):
            calls.append(x)
            return x

        await fetch(1)
        await fetch(2)
        await fetch(1)
        assert calls == [1, 2, 1]

        fetch.cache_clear()
        await fetch(1)
        assert calls == [1, 2, 1, 1]
