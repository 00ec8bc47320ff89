"""
This module provides `Maybe`, a generic container for a value that may or may not
be present.
"""
# pylint: disable=redefined-outer-name
from abc import ABC, abstractmethod
from typing import Any, Tuple, Generic, TypeVar, Callable, Iterator, Optional, Union

from e2fyi.containers.errors import EmptyContainerError

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class Undefined:
    """
    Sentinel for a value that does not exist, as opposed to `None` which is a
    value explicitly set to nothing. Use the `UNDEFINED` singleton.
    """

    _instance: Optional["Undefined"] = None

    def __new__(cls) -> "Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = Undefined()


class Maybe(ABC, Generic[T]):
    """
    `Maybe` is either `Present` (holding exactly one value) or `Absent`. It is
    immutable: once created, its state and value never change.

    Example::

        from e2fyi.containers import Maybe

        name = Maybe.present("alice")
        nothing = Maybe.absent()

        print(name.map(str.upper).unwrap())     # prints "ALICE"
        print(nothing.unwrap_or("anonymous"))   # prints "anonymous"

        # None (and UNDEFINED) become Absent
        email = Maybe.from_nullable(user.get("email"))
        print(email.match(present=lambda e: "<%s>" % e, absent=lambda: "no email"))
    """

    __slots__ = ()

    @staticmethod
    def present(value: T) -> "Maybe[T]":
        """Creates a `Maybe` holding `value`."""
        return Present(value)

    @staticmethod
    def absent() -> "Maybe[Any]":
        """Creates an empty `Maybe`."""
        return Absent()

    @staticmethod
    def from_nullable(value: Union[T, None, Undefined]) -> "Maybe[T]":
        """
        Converts a nullable value into a `Maybe`. Both `None` and `UNDEFINED` are
        mapped to `Absent`, anything else to `Present`.
        """
        if value is None or value is UNDEFINED:
            return Absent()
        return Present(value)  # type: ignore

    @abstractmethod
    def is_present(self) -> bool:
        """whether a value is present."""

    def is_absent(self) -> bool:
        """whether no value is present."""
        return not self.is_present()

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained value.

        Raises:
            EmptyContainerError: if the `Maybe` is `Absent`.
        """

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Returns the contained value, or `default` if absent."""

    @abstractmethod
    def unwrap_or_else(self, supplier: Callable[[], T]) -> T:
        """
        Returns the contained value, or the result of `supplier()` if absent.
        `supplier` is only called when absent.
        """

    @abstractmethod
    def map(self, func: Callable[[T], U]) -> "Maybe[U]":
        """Applies `func` to the contained value, if any."""

    @abstractmethod
    def flat_map(self, func: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        """Applies `func`, which returns a `Maybe`, to the contained value, if any."""

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> "Maybe[T]":
        """Keeps the value only if `predicate(value)` is truthy."""

    @abstractmethod
    def zip(self, other: "Maybe[U]") -> "Maybe[Tuple[T, U]]":
        """Pairs the values of both `Maybe`s if both are present."""

    @abstractmethod
    def or_else(self, supplier: Callable[[], "Maybe[T]"]) -> "Maybe[T]":
        """Returns itself if present, otherwise the `Maybe` from `supplier()`."""

    @abstractmethod
    def match(self, present: Callable[[T], R], absent: Callable[[], R]) -> R:
        """
        Calls `present(value)` if a value is present, otherwise `absent()`, and
        returns the result of whichever handler was called.
        """

    def to_none(self) -> Optional[T]:
        """Returns the contained value, or `None` if absent."""
        return self.unwrap_or(None)  # type: ignore

    to_null = to_none

    def to_undefined(self) -> Union[T, Undefined]:
        """Returns the contained value, or `UNDEFINED` if absent."""
        return self.unwrap_or(UNDEFINED)  # type: ignore

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("%s is immutable." % type(self).__name__)

    def __delattr__(self, name: str) -> None:
        raise AttributeError("%s is immutable." % type(self).__name__)


class Present(Maybe[T]):
    """A `Maybe` holding a value."""

    __slots__ = ("_value",)

    def __init__(self, value: T):
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> T:
        """the contained value."""
        return self._value

    def is_present(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:
        return self._value

    def unwrap_or_else(self, supplier: Callable[[], T]) -> T:
        return self._value

    def map(self, func: Callable[[T], U]) -> Maybe[U]:
        return Present(func(self._value))

    def flat_map(self, func: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return func(self._value)

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        if predicate(self._value):
            return self
        return Absent()

    def zip(self, other: Maybe[U]) -> Maybe[Tuple[T, U]]:
        return other.map(lambda value: (self._value, value))

    def or_else(self, supplier: Callable[[], Maybe[T]]) -> Maybe[T]:
        return self

    def match(self, present: Callable[[T], R], absent: Callable[[], R]) -> R:
        return present(self._value)

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Present):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Present, self._value))

    def __repr__(self) -> str:
        return "Present(%r)" % (self._value,)

    def __reduce__(self) -> Tuple[Any, ...]:
        return (Present, (self._value,))


class Absent(Maybe[T]):
    """A `Maybe` without a value."""

    __slots__ = ()

    def is_present(self) -> bool:
        return False

    def unwrap(self) -> T:
        raise EmptyContainerError()

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, supplier: Callable[[], T]) -> T:
        return supplier()

    def map(self, func: Callable[[T], U]) -> Maybe[U]:
        return Absent()

    def flat_map(self, func: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return Absent()

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        return self

    def zip(self, other: Maybe[U]) -> Maybe[Tuple[T, U]]:
        return Absent()

    def or_else(self, supplier: Callable[[], Maybe[T]]) -> Maybe[T]:
        return supplier()

    def match(self, present: Callable[[T], R], absent: Callable[[], R]) -> R:
        return absent()

    def __bool__(self) -> bool:
        return False

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Absent):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(Absent)

    def __repr__(self) -> str:
        return "Absent()"

    def __reduce__(self) -> Tuple[Any, ...]:
        return (Absent, ())


def present(value: T) -> Maybe[T]:
    """Creates a `Maybe` holding `value`."""
    return Present(value)


def absent() -> Maybe[Any]:
    """Creates an empty `Maybe`."""
    return Absent()
