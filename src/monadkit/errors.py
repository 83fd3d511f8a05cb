"""Error types for monadkit.

The monadic core is total: absence and domain failures travel as data. The
exceptions here cover the few explicit escape hatches (``unwrap``/``expect``)
and configuration mistakes.
"""

from __future__ import annotations

__all__ = ['ConfigError', 'MonadError', 'UnwrapError', 'describe_fault']


class MonadError(Exception):
    """Base exception class for monadkit errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.

    Example:
        ```python
        from monadkit import Nothing
        from monadkit.errors import MonadError

        try:
            Nothing.unwrap()
        except MonadError as e:
            print(f"monadkit error occurred: {e}")
        ```
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        """Initialize a MonadError.

        Args:
            message (str): A human-readable description of the error.
            code (str | None): An optional error code for programmatic error handling.
        """
        super().__init__(message)
        self.message: str = message
        self.code: str | None = code

    def __str__(self) -> str:
        """Return a string representation of the error."""
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


class UnwrapError(MonadError):
    """Raised by ``unwrap``/``expect`` on ``Nothing`` or ``Failure``."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code='unwrap')


class ConfigError(MonadError):
    """Raised for invalid or missing runtime configuration."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code='config')


def describe_fault(exc: BaseException) -> str:
    """Return the textual description carried by a captured fault.

    Uses ``str(exc)``, falling back to the exception class name so the
    description is never empty.

    Example:
        ```python
        describe_fault(ValueError("bad input"))
        # 'bad input'
        describe_fault(KeyError())
        # 'KeyError'
        ```
    """
    return str(exc) or type(exc).__name__
