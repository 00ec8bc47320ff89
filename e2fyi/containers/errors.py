"""Errors raised when a container is unwrapped in the wrong state."""
from typing import Any


class ContainerError(Exception):
    """Base class for all errors raised by `e2fyi.containers`."""


class EmptyContainerError(ContainerError):
    """Raised by `Maybe.unwrap` when called on an `Absent` value."""

    def __init__(self, message: str = "Called `unwrap` on an `Absent` value."):
        super().__init__(message)


class UnwrapFailureError(ContainerError):
    """
    Raised by `Outcome.unwrap` when called on a `Failure`. The stored error is
    available as `error`.
    """

    def __init__(self, error: Any):
        super().__init__("Called `unwrap` on a `Failure`: %r" % (error,))
        self.error = error


class UnwrapSuccessError(ContainerError):
    """
    Raised by `Outcome.unwrap_err` when called on a `Success`. The stored value
    is available as `value`.
    """

    def __init__(self, value: Any):
        super().__init__("Called `unwrap_err` on a `Success`: %r" % (value,))
        self.value = value
