"""Decorators: @safe and @safe_async."""

from monadkit.decorators.safe import safe, safe_async

__all__ = [
    'safe',
    'safe_async',
]
