"""monadkit: Option, Result and Writer monads for Python 3.13+.

Flat imports (preferred):
    from monadkit import Option, Some, Nothing, Result, Success, Failure
    from monadkit import LogWriter, Writer, sequence_result, safe, Deferred

Submodule imports (for organization):
    from monadkit.itertools import traverse_option, choose
    from monadkit.compose import curry, memoize, compose_kleisli
    from monadkit.async_ import Deferred, sequence_result_async
"""

# Types
from monadkit.option import Nothing, NothingType, Option, Some, from_optional
from monadkit.result import Failure, Result, Success, try_catch, try_catch_async
from monadkit.writer import LogWriter, Writer, concat_lines

# Collections
from monadkit.itertools import (
    choose,
    partition_results,
    sequence_option,
    sequence_result,
    traverse_option,
    traverse_result,
    validate_all,
)

# Composition
from monadkit.compose import (
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

# Decorators
from monadkit.decorators import safe, safe_async

# Async
from monadkit.async_ import (
    Deferred,
    choose_async,
    memoize_async,
    sequence_option_async,
    sequence_result_async,
    traverse_option_async,
    traverse_result_async,
)

# Errors
from monadkit.errors import ConfigError, MonadError, UnwrapError

# Runtime
from monadkit._config import MonadkitConfig, get_config, init
from monadkit._logging import add_log_hook, clear_log_hooks, configure_logging, get_logger, remove_log_hook

__all__ = [
    'ConfigError',
    'Deferred',
    'Failure',
    'LogWriter',
    'MonadError',
    'MonadkitConfig',
    'Nothing',
    'NothingType',
    'Option',
    'Result',
    'Some',
    'Success',
    'UnwrapError',
    'Writer',
    'add_log_hook',
    'chain',
    'choose',
    'choose_async',
    'clear_log_hooks',
    'compose',
    'compose_kleisli',
    'concat_lines',
    'configure_logging',
    'const',
    'curry',
    'from_optional',
    'get_config',
    'get_logger',
    'identity',
    'init',
    'memoize',
    'memoize_async',
    'partial',
    'partition_results',
    'pipe',
    'pipe_kleisli',
    'remove_log_hook',
    'safe',
    'safe_async',
    'sequence_option',
    'sequence_option_async',
    'sequence_result',
    'sequence_result_async',
    'tap',
    'tap_async',
    'trace',
    'traverse_option',
    'traverse_result',
    'try_catch',
    'try_catch_async',
    'uncurry',
    'validate_all',
]
