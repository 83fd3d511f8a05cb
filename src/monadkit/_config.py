"""Runtime configuration: MonadkitConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from monadkit._logging import configure_logging
from monadkit.errors import ConfigError

__all__ = [
    'MonadkitConfig',
    'get_config',
    'init',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class MonadkitConfig:
    """Configuration for monadkit's ambient services.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON log lines instead of console-rendered ones.
    """

    log_level: str | None = None
    json_logs: bool = False


# Global configuration (set by init())
_config: MonadkitConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from MONADKIT_LOG_LEVEL, if set."""
    env_level = os.environ.get('MONADKIT_LOG_LEVEL', '').strip()
    return env_level or None


def _detect_json_logs() -> bool:
    """Read the log format from MONADKIT_LOG_FORMAT ("json" or "console").

    Unknown values fall back to console output with a warning.
    """
    env_format = os.environ.get('MONADKIT_LOG_FORMAT', '').lower()
    if env_format == 'json':
        return True
    if env_format and env_format != 'console':
        logging.warning("Unknown MONADKIT_LOG_FORMAT value '%s', defaulting to console", env_format)
    return False


def _validate_level(level: str) -> str:
    normalized = level.upper()
    if normalized not in _LEVELS:
        msg = f"Unknown log level '{level}', expected one of {', '.join(_LEVELS)}"
        raise ConfigError(msg)
    return normalized


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> MonadkitConfig:
    """Initialize monadkit's configuration.

    Unset arguments are resolved from the environment
    (MONADKIT_LOG_LEVEL, MONADKIT_LOG_FORMAT).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: Emit JSON logs. Defaults to console output.

    Returns:
        The MonadkitConfig that was set.

    Raises:
        ConfigError: If the log level is not a known level name.

    Example:
        ```python
        from monadkit import init

        init(log_level="DEBUG")
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    if resolved_level is not None:
        resolved_level = _validate_level(resolved_level)
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = MonadkitConfig(log_level=resolved_level, json_logs=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> MonadkitConfig:
    """Get the current configuration.

    Raises:
        ConfigError: If init() has not been called.
    """
    if _config is None:
        msg = 'monadkit not initialized. Call monadkit.init() first.'
        raise ConfigError(msg)
    return _config
