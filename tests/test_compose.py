"""Tests for composition utilities: compose, pipe, chain, curry, tap, memoize, Kleisli."""

import threading

import pytest

from monadkit import (
    Failure,
    LogWriter,
    Nothing,
    Some,
    Success,
    Writer,
    chain,
    compose,
    compose_kleisli,
    const,
    curry,
    identity,
    memoize,
    partial,
    pipe,
    pipe_kleisli,
    tap,
    tap_async,
    trace,
    uncurry,
)


class TestBasics:
    """Tests for identity, const, compose and pipe."""

    def test_identity(self):
        assert identity(5) == 5

    def test_const(self):
        assert const(5)('ignored', key='ignored') == 5

    def test_compose_right_to_left(self):
        assert compose(lambda x: x * 2, lambda x: x + 1)(3) == 8

    def test_compose_empty_is_identity(self):
        assert compose()(7) == 7

    def test_pipe_left_to_right(self):
        assert pipe(3, lambda x: x + 1, str) == '4'
        assert pipe(3) == 3


class TestChain:
    """Tests for railway chain()."""

    def test_plain_value_wrapped_in_success(self):
        assert chain(5, lambda x: x + 1, lambda x: x * 2) == Success(12)

    def test_no_functions(self):
        assert chain(5) == Success(5)
        assert chain(Some(5)) == Some(5)

    def test_failure_short_circuits(self):
        calls = []
        result = chain(5, lambda x: Failure('fail'), calls.append)
        assert result == Failure('fail')
        assert calls == []

    def test_option_container_kept(self):
        assert chain(Some(3), lambda x: x * 2) == Some(6)
        assert chain(Some(3), lambda x: Nothing, lambda x: x + 1) is Nothing

    def test_no_double_wrapping(self):
        assert chain(Success(1), lambda x: Success(x + 1)) == Success(2)


class TestCurry:
    """Tests for curry, uncurry and partial."""

    def test_curry(self):
        add3 = curry(lambda a, b, c: a + b + c)
        assert add3(1)(2)(3) == 6

    def test_argument_order_preserved(self):
        assert curry(lambda a, b: a - b)(10)(3) == 7

    def test_explicit_arity(self):
        assert curry(max, arity=3)(1)(5)(2) == 5

    def test_single_argument_unchanged(self):
        def inc(x):
            return x + 1

        assert curry(inc) is inc

    def test_defaults_not_counted(self):
        def scale(x, y, factor=10):
            return (x + y) * factor

        assert curry(scale)(1)(2) == 30

    def test_uncurry(self):
        assert uncurry(curry(lambda a, b, c: a * b + c))(2, 3, 4) == 10

    def test_partial(self):
        assert partial(lambda a, b, c: (a, b, c), 1, 2)(3) == (1, 2, 3)


class TestTap:
    """Tests for tap, tap_async and trace."""

    def test_tap(self):
        seen = []
        assert tap(5, seen.append) == 5
        assert seen == [5]

    @pytest.mark.asyncio
    async def test_tap_async(self):
        seen = []

        async def record(x):
            seen.append(x)

        assert await tap_async('v', record) == 'v'
        assert seen == ['v']

    def test_trace_returns_value(self):
        assert pipe(5, trace('start'), lambda x: x + 1) == 6


class TestMemoize:
    """Tests for memoize."""

    def test_caches_by_arguments(self):
        calls = []

        @memoize
        def square(x):
            calls.append(x)
            return x * x

        assert square(4) == 16
        assert square(4) == 16
        assert square(5) == 25
        assert calls == [4, 5]

    def test_kwargs_are_part_of_key(self):
        calls = []

        @memoize
        def power(base, exp=2):
            calls.append((base, exp))
            return base**exp

        assert power(2, exp=3) == 8
        assert power(2, exp=3) == 8
        assert power(2) == 4
        assert calls == [(2, 3), (2, 2)]

    def test_cache_clear(self):
        calls = []

        @memoize()
        def ident(x):
            calls.append(x)
            return x

        ident(1)
        assert ident.cache == {(1,): 1}
        ident.cache_clear()
        ident(1)
        assert calls == [1, 1]

    def test_synchronized_computes_once_across_threads(self):
        calls = []
        barrier = threading.Barrier(4)

        @memoize(synchronized=True)
        def slow(x):
            calls.append(x)
            return x + 1

        def worker():
            barrier.wait()
            slow(1)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert calls == [1]
        assert slow(1) == 2

    @pytest.mark.parametrize('synchronized', [False, True])
    def test_recursive_function(self, synchronized):
        calls = []

        @memoize(synchronized=synchronized)
        def fib(n):
            calls.append(n)
            return n if n < 2 else fib(n - 1) + fib(n - 2)

        assert fib(30) == 832040
        assert sorted(calls) == list(range(31))
        assert fib.cache[(30,)] == 832040

    def test_preserves_metadata(self):
        @memoize
        def documented(x):
            """Docs."""
            return x

        assert documented.__name__ == 'documented'
        assert documented.__doc__ == 'Docs.'


def parse_int(text: str):
    try:
        return Success(int(text))
    except ValueError:
        return Failure(f'{text!r} is not a number')


def check_positive(x: int):
    return Success(x) if x > 0 else Failure('not positive')


class TestKleisli:
    """Tests for compose_kleisli and pipe_kleisli."""

    def test_compose_kleisli(self):
        parse_then_check = compose_kleisli(check_positive, parse_int)
        assert parse_then_check('42') == Success(42)
        assert parse_then_check('-1') == Failure('not positive')
        assert parse_then_check('x') == Failure("'x' is not a number")

    def test_pipe_kleisli(self):
        pipeline = pipe_kleisli(parse_int, check_positive, lambda x: Success(x * 2))
        assert pipeline('21') == Success(42)

    def test_kleisli_option(self):
        half = lambda x: Some(x // 2) if x % 2 == 0 else Nothing  # noqa: E731
        quarter = compose_kleisli(half, half)
        assert quarter(8) == Some(2)
        assert quarter(6) is Nothing

    def test_kleisli_log_writer(self):
        inc = lambda x: LogWriter.create(x + 1, 'inc')  # noqa: E731
        dbl = lambda x: LogWriter.create(x * 2, 'dbl')  # noqa: E731
        assert compose_kleisli(dbl, inc)(1) == LogWriter(4, ('inc', 'dbl'))

    def test_kleisli_generic_writer(self):
        inc = lambda x: Writer(x + 1, ['inc'])  # noqa: E731
        dbl = lambda x: Writer(x * 2, ['dbl'])  # noqa: E731
        piped = pipe_kleisli(inc, dbl, combine=lambda a, b: a + b)
        assert piped(1) == Writer(4, ['inc', 'dbl'])

    def test_pipe_kleisli_requires_functions(self):
        with pytest.raises(ValueError):
            pipe_kleisli()
