"""Property-based tests for the monad and functor laws."""

import operator

from hypothesis import given

from monadkit import Failure, LogWriter, Nothing, Some, Success, Writer
from tests.strategies import integers, list_writers, log_writers, options, results, sum_writers


def _option_f(x: int):
    return Some(x * 2) if x % 3 else Nothing


def _option_g(x: int):
    return Some(str(x)) if x >= 0 else Nothing


def _result_f(x: int):
    return Success(x + 1) if x % 2 else Failure(f'{x} is even')


def _result_g(x: int):
    return Success(x * 3) if x < 100 else Failure('too big')


def _log_f(x: int):
    return LogWriter.create(x + 1, f'inc {x}')


def _log_g(x: int):
    return LogWriter.create(x * 2, f'double {x}')


class TestOptionMonadLaws:
    """Monad laws for Option."""

    @given(integers)
    def test_left_identity(self, value: int):
        """Left identity: Some(a).bind(f) == f(a)."""
        assert Some(value).bind(_option_f) == _option_f(value)

    @given(options)
    def test_right_identity(self, m):
        """Right identity: m.bind(Some) == m."""
        assert m.bind(Some) == m

    @given(options)
    def test_associativity(self, m):
        """Associativity: m.bind(f).bind(g) == m.bind(x => f(x).bind(g))."""
        assert m.bind(_option_f).bind(_option_g) == m.bind(lambda x: _option_f(x).bind(_option_g))


class TestResultMonadLaws:
    """Monad laws for Result."""

    @given(integers)
    def test_left_identity(self, value: int):
        assert Success(value).bind(_result_f) == _result_f(value)

    @given(results)
    def test_right_identity(self, m):
        assert m.bind(Success) == m

    @given(results)
    def test_associativity(self, m):
        assert m.bind(_result_f).bind(_result_g) == m.bind(lambda x: _result_f(x).bind(_result_g))


class TestLogWriterMonadLaws:
    """Monad laws for LogWriter, including equal logs."""

    @given(integers)
    def test_left_identity(self, value: int):
        assert LogWriter.pure(value).bind(_log_f) == _log_f(value)

    @given(log_writers)
    def test_right_identity(self, m):
        assert m.bind(LogWriter.pure) == m

    @given(log_writers)
    def test_associativity(self, m):
        assert m.bind(_log_f).bind(_log_g) == m.bind(lambda x: _log_f(x).bind(_log_g))


class TestWriterMonadLaws:
    """Monad laws for the generic Writer over lawful monoids."""

    @given(integers)
    def test_left_identity_list(self, value: int):
        def f(x: int):
            return Writer(x - 1, [x])

        assert Writer.pure(value, []).bind(f, operator.add) == f(value)

    @given(list_writers)
    def test_right_identity_list(self, m):
        assert m.bind(lambda x: Writer.pure(x, []), operator.add) == m

    @given(sum_writers)
    def test_right_identity_sum(self, m):
        assert m.bind(lambda x: Writer.pure(x, 0), operator.add) == m

    @given(list_writers)
    def test_associativity_list(self, m):
        def f(x: int):
            return Writer(x + 1, ['f'])

        def g(x: int):
            return Writer(x * 2, ['g', 'g'])

        left = m.bind(f, operator.add).bind(g, operator.add)
        right = m.bind(lambda x: f(x).bind(g, operator.add), operator.add)
        assert left == right


class TestFunctorLaws:
    """Functor laws across the three types."""

    @given(options)
    def test_option_identity(self, m):
        assert m.map(lambda x: x) == m

    @given(results)
    def test_result_composition(self, m):
        def f(x: int) -> int:
            return x + 1

        def g(x: int) -> str:
            return str(x)

        assert m.map(f).map(g) == m.map(lambda x: g(f(x)))

    @given(log_writers)
    def test_log_writer_composition(self, m):
        assert m.map(abs).map(str) == m.map(lambda x: str(abs(x)))
