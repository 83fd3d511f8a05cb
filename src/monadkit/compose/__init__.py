"""Composition utilities: function combinators, chain() and Kleisli composition."""

# Import the ``pipe`` submodule first so the ``pipe`` function below is not
# shadowed by the submodule attribute set on this package.
from monadkit.compose.pipe import chain
from monadkit.compose.functions import (
    compose,
    const,
    curry,
    identity,
    memoize,
    partial,
    pipe,
    tap,
    tap_async,
    trace,
    uncurry,
)
from monadkit.compose.kleisli import compose_kleisli, pipe_kleisli

__all__ = [
    'chain',
    'compose',
    'compose_kleisli',
    'const',
    'curry',
    'identity',
    'memoize',
    'partial',
    'pipe',
    'pipe_kleisli',
    'tap',
    'tap_async',
    'trace',
    'uncurry',
]
