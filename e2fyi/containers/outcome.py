"""
This module provides `Outcome`, a generic container for the result of an operation
that either succeeded with a value or failed with an error.
"""
# pylint: disable=redefined-outer-name
from abc import ABC, abstractmethod
from typing import (
    Any,
    List,
    Type,
    Tuple,
    Generic,
    TypeVar,
    Callable,
    Iterable,
)

from e2fyi.containers.maybe import Maybe, Absent, Present
from e2fyi.containers.errors import UnwrapFailureError, UnwrapSuccessError

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
R = TypeVar("R")


class Outcome(ABC, Generic[T, E]):
    """
    `Outcome` is either a `Success` holding a value or a `Failure` holding an
    error. It is immutable: once created, its state and payload never change.

    Example::

        import json

        from e2fyi.containers import Outcome


        def parse_config(raw: str) -> Outcome[dict, str]:
            return (
                Outcome.from_throwable(lambda: json.loads(raw))
                .map_err(lambda err: "JSON parse error: %s" % err)
                .flat_map(
                    lambda obj: Outcome.success(obj)
                    if isinstance(obj.get("port"), int)
                    else Outcome.failure("missing port")
                )
            )

        config = parse_config('{"port": 3000}')
        print(config.unwrap())                  # prints {'port': 3000}
        print(parse_config("{}").unwrap_err())  # prints "missing port"

    Chaining with `flat_map` keeps the error type fixed; use `map_err` to convert
    errors into a common type before chaining operations with different errors.
    """

    __slots__ = ()

    @staticmethod
    def success(value: T) -> "Outcome[T, Any]":
        """Creates a successful `Outcome` holding `value`."""
        return Success(value)

    @staticmethod
    def failure(error: E) -> "Outcome[Any, E]":
        """Creates a failed `Outcome` holding `error`."""
        return Failure(error)

    @staticmethod
    def from_throwable(
        func: Callable[[], T],
        exceptions: Tuple[Type[BaseException], ...] = (Exception,),
    ) -> "Outcome[T, BaseException]":
        """
        Calls `func` once and wraps its return value in a `Success`. If `func`
        raises one of `exceptions`, the exception itself is wrapped in a `Failure`
        instead. Any other exception propagates.

        Only the call to `func` is guarded: lazy objects it returns (e.g.
        generators) are wrapped as they are, and errors raised while consuming
        them later are not captured.

        Args:
            func (Callable[[], T]): zero-argument function to call.
            exceptions (Tuple[Type[BaseException], ...], optional): exception types
                to capture. Defaults to (Exception,).

        Returns:
            Outcome[T, BaseException]: `Success` with the return value or `Failure`
                with the raised exception.
        """
        try:
            value = func()
        except exceptions as err:  # pylint: disable=catching-non-exception
            return Failure(err)
        return Success(value)

    @staticmethod
    def combine(outcomes: Iterable["Outcome[T, E]"]) -> "Outcome[List[T], E]":
        """
        Combines a sequence of `Outcome`s into a single `Outcome` holding the list
        of values in their original order. Stops at the first `Failure` and returns
        it; later outcomes are not inspected.
        """
        values: List[T] = []
        for outcome in outcomes:
            if outcome.is_failure():
                return outcome  # type: ignore
            values.append(outcome.unwrap())
        return Success(values)

    @abstractmethod
    def is_success(self) -> bool:
        """whether the operation succeeded."""

    def is_failure(self) -> bool:
        """whether the operation failed."""
        return not self.is_success()

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the value of a `Success`.

        Raises:
            UnwrapFailureError: if the `Outcome` is a `Failure`.
        """

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Returns the value of a `Success`, or `default` for a `Failure`."""

    @abstractmethod
    def unwrap_or_else(self, func: Callable[[E], T]) -> T:
        """Returns the value of a `Success`, or `func(error)` for a `Failure`."""

    @abstractmethod
    def unwrap_err(self) -> E:
        """
        Returns the error of a `Failure`.

        Raises:
            UnwrapSuccessError: if the `Outcome` is a `Success`.
        """

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> "Outcome[U, E]":
        """Applies `func` to the value of a `Success`."""

    @abstractmethod
    def map_err(self, func: Callable[[E], F]) -> "Outcome[T, F]":
        """Applies `func` to the error of a `Failure`."""

    @abstractmethod
    def flat_map(self, func: Callable[[T], "Outcome[U, E]"]) -> "Outcome[U, E]":
        """Chains `func`, which returns an `Outcome`, on the value of a `Success`."""

    @abstractmethod
    def match(self, success: Callable[[T], R], failure: Callable[[E], R]) -> R:
        """
        Calls `success(value)` or `failure(error)` depending on the state, and
        returns the result of whichever handler was called.
        """

    @abstractmethod
    def to_maybe(self) -> Maybe[T]:
        """Converts into a `Maybe`, discarding the error of a `Failure`."""

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("%s is immutable." % type(self).__name__)

    def __delattr__(self, name: str) -> None:
        raise AttributeError("%s is immutable." % type(self).__name__)


class Success(Outcome[T, E]):
    """A successful `Outcome`."""

    __slots__ = ("_value",)

    def __init__(self, value: T):
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> T:
        """the value of the successful operation."""
        return self._value

    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:
        return self._value

    def unwrap_or_else(self, func: Callable[[E], T]) -> T:
        return self._value

    def unwrap_err(self) -> E:
        raise UnwrapSuccessError(self._value)

    def map(self, func: Callable[[T], U]) -> Outcome[U, E]:
        return Success(func(self._value))

    def map_err(self, func: Callable[[E], F]) -> Outcome[T, F]:
        return self  # type: ignore

    def flat_map(self, func: Callable[[T], Outcome[U, E]]) -> Outcome[U, E]:
        return func(self._value)

    def match(self, success: Callable[[T], R], failure: Callable[[E], R]) -> R:
        return success(self._value)

    def to_maybe(self) -> Maybe[T]:
        return Present(self._value)

    def __bool__(self) -> bool:
        return True

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Success):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Success, self._value))

    def __repr__(self) -> str:
        return "Success(%r)" % (self._value,)

    def __reduce__(self) -> Tuple[Any, ...]:
        return (Success, (self._value,))


class Failure(Outcome[T, E]):
    """A failed `Outcome`."""

    __slots__ = ("_error",)

    def __init__(self, error: E):
        object.__setattr__(self, "_error", error)

    @property
    def error(self) -> E:
        """the error of the failed operation."""
        return self._error

    def is_success(self) -> bool:
        return False

    def unwrap(self) -> T:
        if isinstance(self._error, BaseException):
            raise UnwrapFailureError(self._error) from self._error
        raise UnwrapFailureError(self._error)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, func: Callable[[E], T]) -> T:
        return func(self._error)

    def unwrap_err(self) -> E:
        return self._error

    def map(self, func: Callable[[T], U]) -> Outcome[U, E]:
        return self  # type: ignore

    def map_err(self, func: Callable[[E], F]) -> Outcome[T, F]:
        return Failure(func(self._error))

    def flat_map(self, func: Callable[[T], Outcome[U, E]]) -> Outcome[U, E]:
        return self  # type: ignore

    def match(self, success: Callable[[T], R], failure: Callable[[E], R]) -> R:
        return failure(self._error)

    def to_maybe(self) -> Maybe[T]:
        return Absent()

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Failure):
            return NotImplemented
        return self._error == other._error

    def __hash__(self) -> int:
        return hash((Failure, self._error))

    def __repr__(self) -> str:
        return "Failure(%r)" % (self._error,)

    def __reduce__(self) -> Tuple[Any, ...]:
        return (Failure, (self._error,))


def success(value: T) -> Outcome[T, Any]:
    """Creates a successful `Outcome` holding `value`."""
    return Success(value)


def failure(error: E) -> Outcome[Any, E]:
    """Creates a failed `Outcome` holding `error`."""
    return Failure(error)
