"""Scenario walkthroughs used by the CLI.

Each scenario module exposes ``TITLE`` and ``run() -> list[str]``; the lines
are built from the public API only and printed by the caller.
"""

from types import ModuleType

from monadkit.scenarios import deferred, option, result, validation, writer

__all__ = ['SCENARIOS', 'deferred', 'option', 'result', 'validation', 'writer']

SCENARIOS: dict[str, ModuleType] = {
    'option': option,
    'result': result,
    'writer': writer,
    'validation': validation,
    'deferred': deferred,
}
