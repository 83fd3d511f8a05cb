"""Structured logging configuration for monadkit.

Uses structlog's ProcessorFormatter to unify structlog and stdlib logging
output, so the library's debug events and the host application's own logs
render through the same pipeline.

The core only ever logs at debug level (captured faults, ``trace`` taps,
memoization misses); nothing is emitted until the host configures logging.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable
from typing import Any

import structlog

from monadkit.errors import describe_fault

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _dispatch_to_hooks,
    ]


def _get_structlog_processors() -> list[Any]:
    """Get the full processor chain for structlog loggers."""
    return [
        structlog.stdlib.filter_by_level,
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    """Get the appropriate renderer based on output format."""
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Configure structlog with ProcessorFormatter for unified output.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use colored console output.
    """
    structlog.configure(
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger backed by a stdlib logger.

    The logger is wrapped directly instead of going through the global
    structlog configuration, so library events stay silent (the stdlib
    default level is WARNING) until the host calls ``configure_logging``
    or installs its own handlers.

    Args:
        name: Logger name. Defaults to "monadkit".

    Returns:
        A structlog BoundLogger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or 'monadkit'),
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


# --- Event hooks ---

_log_hooks: dict[Callable[[dict[str, Any]], None], frozenset[str] | None] = {}


def add_log_hook(hook: Callable[[dict[str, Any]], None], *, events: Iterable[str] | None = None) -> None:
    """Subscribe ``hook`` to log entries that pass the level filter.

    ``events`` narrows the subscription to named events such as
    ``fault_captured``, ``trace`` or ``memo_miss``; by default every entry
    is delivered. The hook gets its own copy of the entry. Registering the
    same hook again replaces its event filter.

    Example:
        ```python
        faults = []
        add_log_hook(faults.append, events=['fault_captured'])
        try_catch(lambda: 1 / 0)
        ```
    """
    _log_hooks[hook] = frozenset(events) if events is not None else None


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Unsubscribe a hook; unknown hooks are ignored."""
    _log_hooks.pop(hook, None)


def clear_log_hooks() -> None:
    _log_hooks.clear()


def _dispatch_to_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event = event_dict.get('event')
    for hook, events in list(_log_hooks.items()):
        if events is not None and event not in events:
            continue
        try:
            hook(dict(event_dict))
        except Exception as e:
            # subscriber errors are reported, never raised
            sys.stderr.write(f'monadkit log hook {hook!r} failed: {describe_fault(e)}\n')
    return event_dict
