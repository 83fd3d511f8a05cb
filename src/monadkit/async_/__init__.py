"""Async utilities: Deferred and async-aware combinators.

This module provides the deferred side of the library:
- Deferred: Wrapper for composing operations on a future monad value
- traverse/sequence: Sequential async collection combinators
- memoize_async: Cached async functions

Examples:
    >>> from monadkit.async_ import Deferred, sequence_result_async
    >>>
    >>> async def fetch(id: int) -> Result[dict, str]:
    ...     return Success({"id": id})
    >>>
    >>> async def main():
    ...     # Use Deferred for chaining
    ...     result = await Deferred(fetch(1)).map(lambda d: d["id"])
    ...
    ...     # Collect multiple async results
    ...     results = await sequence_result_async([fetch(1), fetch(2), fetch(3)])
"""

from monadkit.async_.cache import memoize_async
from monadkit.async_.deferred import Deferred
from monadkit.async_.itertools import (
    choose_async,
    sequence_option_async,
    sequence_result_async,
    traverse_option_async,
    traverse_result_async,
)

__all__ = [
    'Deferred',
    'choose_async',
    'memoize_async',
    'sequence_option_async',
    'sequence_result_async',
    'traverse_option_async',
    'traverse_result_async',
]
