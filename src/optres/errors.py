"""Exceptions raised by optres.

``UnwrapError`` is the control-flow signal raised by ``unwrap()`` and caught
by the ``run()``/``safe()`` boundaries. ``RunError`` wraps any other failure
that ``safe()`` captures.
"""

from __future__ import annotations


class OptresError(Exception):
    """Base class for all optres exceptions."""


class UnwrapError(OptresError):
    """Raised when unwrap() is called on an Err or on Nothing.

    Attributes:
        original_error: The payload of the unwrapped Err, or None for Nothing.
    """

    def __init__(self, original_error: object = None, message: str = "unwrap error") -> None:
        super().__init__(message)
        self.original_error = original_error


class RunError(OptresError):
    """An exception raised by user code and captured by ``safe()``.

    Attributes:
        original_error: The exception raised by the sandboxed function.
    """

    def __init__(self, original_error: object) -> None:
        super().__init__(f"uncontrolled failure: {original_error!r}")
        self.original_error = original_error
        if isinstance(original_error, BaseException):
            self.__cause__ = original_error


UncontrolledFailure = RunError


class ConfigurationError(OptresError):
    """Raised when a configuration value cannot be parsed."""
