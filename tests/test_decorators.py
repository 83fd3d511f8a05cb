"""Tests for @safe and @safe_async decorators."""

import pytest

from monadkit import Failure, Success, safe, safe_async


class TestSafe:
    """Tests for @safe."""

    def test_success(self):
        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(10, 2) == Success(5.0)

    def test_exception_becomes_failure(self):
        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(10, 0) == Failure('division by zero')

    def test_empty_message_uses_class_name(self):
        @safe
        def lookup():
            raise LookupError

        assert lookup() == Failure('LookupError')

    def test_specific_exceptions(self):
        @safe(exceptions=(ValueError,))
        def parse(text: str) -> int:
            return int(text)

        assert parse('7') == Success(7)
        assert parse('x').is_failure()

    def test_uncaught_exception_propagates(self):
        @safe(exceptions=(ValueError,))
        def broken():
            raise TypeError('wrong type')

        with pytest.raises(TypeError):
            broken()

    def test_preserves_metadata(self):
        @safe
        def documented():
            """Docs."""

        assert documented.__name__ == 'documented'
        assert documented.__doc__ == 'Docs.'

    def test_method(self):
        class Parser:
            base = 10

            @safe
            def parse(self, text: str) -> int:
                return int(text, self.base)

        assert Parser().parse('12') == Success(12)


class TestSafeAsync:
    """Tests for @safe_async."""

    @pytest.mark.asyncio
    async def test_success(self):
        @safe_async
        async def fetch(x: int) -> int:
            return x * 2

        assert await fetch(2) == Success(4)

    @pytest.mark.asyncio
    async def test_exception_becomes_failure(self):
        @safe_async
        async def fetch() -> int:
            raise ConnectionError('host unreachable')

        assert await fetch() == Failure('host unreachable')

    @pytest.mark.asyncio
    async def test_specific_exceptions(self):
        @safe_async(exceptions=(KeyError,))
        async def fetch() -> int:
            raise ValueError('nope')

        with pytest.raises(ValueError):
            await fetch()
