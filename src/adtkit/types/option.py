"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from adtkit.errors import UnwrapError
from adtkit.types.pair import Pair

if TYPE_CHECKING:
    from adtkit.types.result import Done, Fail

__all__ = ["Nothing", "NothingType", "Option", "Some"]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. The raw constructor accepts
    any payload, ``None`` included; use ``option.new`` or
    ``option.from_nullable`` when ``None`` should mean absence.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(3).filter(lambda x: x > 5)
        NothingType()
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def get_or_else(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def get_or_none(self) -> T:
        """Return the contained value."""
        return self.value

    def get_or_throw(self, _err: BaseException) -> T:
        """Return the contained value; the exception is never raised."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Exceptions raised by ``f`` propagate to the caller.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def flat_map[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as and_then or bind.
        """
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate holds for the value, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def match[U](self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:  # noqa: ARG002
        """Exhaustive case analysis: call ``some`` with the value."""
        return some(self.value)

    def zip[U](self, other: Some[U] | NothingType) -> Some[Pair[T, U]] | NothingType:
        """Combine two Some values into a Pair.

        If either side is Nothing, returns Nothing.
        """
        if isinstance(other, Some):
            return Some(Pair(self.value, other.value))
        return Nothing

    def or_else(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self since this is Some."""
        return self

    def to_result[E](self, _error: E) -> Done[T]:
        """Convert to Result, returning Done(value)."""
        from adtkit.types.result import Done

        return Done(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton in practice: use the ``Nothing`` constant instead of
    instantiating directly. All NothingType instances compare equal.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.get_or_else(0)
        0
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Nothing holds no value.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(self, "Called unwrap on Nothing")

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        raise UnwrapError(self, msg)

    def get_or_else[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def get_or_none(self) -> None:
        """Return None since this is Nothing."""
        return None

    def get_or_throw(self, err: BaseException) -> NoReturn:
        """Raise the supplied exception since this is Nothing."""
        raise err

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def flat_map[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing without calling the function."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def match[T, U](self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:  # noqa: ARG002
        """Exhaustive case analysis: call ``none``."""
        return none()

    def zip[U](self, _other: Some[U] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def or_else[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since self is Nothing."""
        return other

    def to_result[E](self, error: E) -> Fail[E]:
        """Convert to Result, returning Fail(error)."""
        from adtkit.types.result import Fail

        return Fail(error)


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType
