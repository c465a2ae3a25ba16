"""Result type: Done[T] | Fail[E] for explicit error handling.

Either is the same sum type read with a different vocabulary:
``Right`` is ``Done`` and ``Left`` is ``Fail``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from adtkit.errors import UnwrapError
from adtkit.types.pair import Pair

if TYPE_CHECKING:
    from adtkit.types.option import NothingType, Some

__all__ = ["Done", "Either", "Fail", "Left", "Result", "Right"]


class Done[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Done(3).map(lambda x: x + 1)
        Done(value=4)
        >>> Done(3).match(done=lambda x: x + 1, fail=lambda e: 0)
        4
    """

    value: T

    def is_done(self) -> TypeIs[Done[T]]:
        """Return True since this is Done."""
        return True

    def is_fail(self) -> TypeIs[Fail[object]]:
        """Return False since this is Done."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_error(self) -> NoReturn:
        """Raise since Done holds no error.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(self, f"Called unwrap_error on Done: {self.value!r}")

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def get_or_else(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def get_or_throw(self, _on_error: Callable[[Any], NoReturn]) -> T:
        """Return the contained value; the handler is never called."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Done[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Done value.

        Returns:
            Done containing the result of applying f to the value.
        """
        return Done(f(self.value))

    def map_error[F](self, _f: Callable[[Any], F]) -> Done[T]:
        """Return self unchanged since this is Done."""
        return self

    def bimap[U, F](self, _on_fail: Callable[[Any], F], on_done: Callable[[T], U]) -> Done[U]:
        """Apply ``on_done`` to the value. The failure handler comes first."""
        return Done(on_done(self.value))

    def flat_map[U, E](self, f: Callable[[T], Done[U] | Fail[E]]) -> Done[U] | Fail[E]:
        """Chain a Result-returning function onto the value.

        Also known as and_then, bind or chain.
        """
        return f(self.value)

    def match[U](self, *, done: Callable[[T], U], fail: Callable[[Any], U]) -> U:  # noqa: ARG002
        """Exhaustive case analysis: call ``done`` with the value."""
        return done(self.value)

    def fold[U](self, _on_fail: Callable[[Any], U], on_done: Callable[[T], U]) -> U:
        """Collapse to a single value. The failure handler comes first."""
        return on_done(self.value)

    def recover(self, _f: Callable[[Any], T]) -> Done[T]:
        """Return self unchanged since there is nothing to recover."""
        return self

    def zip[U, E](self, other: Done[U] | Fail[E]) -> Done[Pair[T, U]] | Fail[E]:
        """Combine two Done values into a Pair.

        If other is Fail, returns it.
        """
        if isinstance(other, Done):
            return Done(Pair(self.value, other.value))
        return other

    def or_else[E](self, _other: Done[T] | Fail[E]) -> Done[T]:
        """Return self since this is Done."""
        return self

    def filter[E](self, predicate: Callable[[T], bool], on_false: E) -> Done[T] | Fail[E]:
        """Keep the value if the predicate holds, else fail with ``on_false``."""
        if predicate(self.value):
            return self
        return Fail(on_false)

    def tap(self, f: Callable[[T], object]) -> Done[T]:
        """Call ``f`` with the value for its side effect and return self."""
        f(self.value)
        return self

    def tap_error(self, _f: Callable[[Any], object]) -> Done[T]:
        """Return self without calling ``f`` since this is Done."""
        return self

    def to_option(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        from adtkit.types.option import Some

        return Some(self.value)

    def swap(self) -> Fail[T]:
        """Move the value to the failure side."""
        return Fail(self.value)


class Fail[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result containing an error of type E.

    The error may be any value, not only an exception.

    Examples:
        >>> Fail("boom").map(lambda x: x + 1)
        Fail(error='boom')
        >>> Fail("boom").recover(len)
        Done(value=4)
    """

    error: E

    def is_done(self) -> TypeIs[Done[object]]:
        """Return False since this is Fail."""
        return False

    def is_fail(self) -> TypeIs[Fail[E]]:
        """Return True since this is Fail."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Fail holds no value.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(self, f"Called unwrap on Fail: {self.error!r}")

    def unwrap_error(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        raise UnwrapError(self, f"{msg}: {self.error!r}")

    def get_or_else[T](self, default: T) -> T:
        """Return the default value since this is Fail."""
        return default

    def get_or_throw(self, on_error: Callable[[E], NoReturn]) -> NoReturn:
        """Hand the error to ``on_error``, which is expected to raise.

        Raises:
            UnwrapError: If ``on_error`` returns normally.
        """
        on_error(self.error)
        raise UnwrapError(self, "get_or_throw handler returned instead of raising")

    def map[T, U](self, _f: Callable[[T], U]) -> Fail[E]:
        """Return self unchanged since this is Fail."""
        return self

    def map_error[F](self, f: Callable[[E], F]) -> Fail[F]:
        """Apply a function to the contained error."""
        return Fail(f(self.error))

    def bimap[U, F](self, on_fail: Callable[[E], F], _on_done: Callable[[Any], U]) -> Fail[F]:
        """Apply ``on_fail`` to the error. The failure handler comes first."""
        return Fail(on_fail(self.error))

    def flat_map[T, U](self, _f: Callable[[T], Done[U] | Fail[E]]) -> Fail[E]:
        """Return self without calling the function."""
        return self

    def match[U](self, *, done: Callable[[Any], U], fail: Callable[[E], U]) -> U:  # noqa: ARG002
        """Exhaustive case analysis: call ``fail`` with the error."""
        return fail(self.error)

    def fold[U](self, on_fail: Callable[[E], U], _on_done: Callable[[Any], U]) -> U:
        """Collapse to a single value. The failure handler comes first."""
        return on_fail(self.error)

    def recover[T](self, f: Callable[[E], T]) -> Done[T]:
        """Turn the failure into a success by applying ``f`` to the error."""
        return Done(f(self.error))

    def zip[U](self, _other: Done[U] | Fail[E]) -> Fail[E]:
        """Return self; the left operand's failure wins."""
        return self

    def or_else[T, F](self, other: Done[T] | Fail[F]) -> Done[T] | Fail[F]:
        """Return other since this is Fail."""
        return other

    def filter[T](self, _predicate: Callable[[T], bool], _on_false: object) -> Fail[E]:
        """Return self unchanged since this is Fail."""
        return self

    def tap(self, _f: Callable[[Any], object]) -> Fail[E]:
        """Return self without calling ``f`` since this is Fail."""
        return self

    def tap_error(self, f: Callable[[E], object]) -> Fail[E]:
        """Call ``f`` with the error for its side effect and return self."""
        f(self.error)
        return self

    def to_option(self) -> NothingType:
        """Convert to Option, discarding the error."""
        from adtkit.types.option import Nothing

        return Nothing

    def swap(self) -> Done[E]:
        """Move the error to the success side."""
        return Done(self.error)


type Result[T, E = Exception] = Done[T] | Fail[E]

Left = Fail
"""Either vocabulary: the left (failure) variant."""

Right = Done
"""Either vocabulary: the right (success) variant."""

type Either[L, R] = Fail[L] | Done[R]
