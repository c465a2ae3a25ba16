"""Option namespace: free functions over ``Some[T] | Nothing``.

Every function takes the Option as its first argument, so the module reads
like a namespace:

    >>> from adtkit import option
    >>> option.get_or_else(option.map(option.from_nullable(2), lambda x: x * 10), 0)
    20
    >>> option.zip(option.some(1), option.none())
    NothingType()

Functions delegate to the methods on ``Some``/``NothingType``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import TypeIs

from adtkit._boundary import capture, capture_async
from adtkit.types.option import Nothing, NothingType, Option, Some
from adtkit.types.pair import Pair
from adtkit.types.result import Result

__all__ = [
    "apply",
    "collect",
    "filter",
    "first",
    "flat_map",
    "from_async",
    "from_nullable",
    "from_predicate",
    "from_throwable",
    "get_or_else",
    "get_or_none",
    "get_or_throw",
    "is_none",
    "is_some",
    "map",
    "match",
    "new",
    "none",
    "or_else",
    "some",
    "to_result",
    "zip",
]


# Constructors


def none() -> NothingType:
    """Return the absent value."""
    return Nothing


def some[T](value: T) -> Some[T]:
    """Wrap ``value`` in Some. ``None`` is wrapped as is."""
    return Some(value)


def new[T](value: T | None) -> Option[T]:
    """Smart constructor: Nothing for ``None``, Some otherwise."""
    return from_nullable(value)


# Guards


def is_some[T](opt: Option[T]) -> TypeIs[Some[T]]:
    """Check if an Option holds a value.

    Args:
        opt: The Option to check.

    Returns:
        bool: True if ``opt`` is Some, False if Nothing.
    """
    return isinstance(opt, Some)


def is_none[T](opt: Option[T]) -> TypeIs[NothingType]:
    """Check if an Option is empty.

    Args:
        opt: The Option to check.

    Returns:
        bool: True if ``opt`` is Nothing, False if Some.
    """
    return isinstance(opt, NothingType)


# Conversions


def from_nullable[T](value: T | None) -> Option[T]:
    """Convert a nullable value to Option.

    Args:
        value: The value that may be None.

    Returns:
        Option[T]: Some(value) if value is not None, otherwise Nothing.
    """
    if value is None:
        return Nothing
    return Some(value)


def from_predicate[T](value: T, predicate: Callable[[T], bool]) -> Option[T]:
    """Some(value) if ``predicate(value)`` holds, else Nothing."""
    if predicate(value):
        return Some(value)
    return Nothing


def from_throwable[T](
    fn: Callable[[], T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Option[T]:
    """Call ``fn``; Some(result) on return, Nothing if it raises.

    The exception is discarded. Use ``result.from_throwable`` to keep it.

    Args:
        fn: Zero-argument callable to evaluate.
        exceptions: Exception types turned into Nothing. Defaults to
            (Exception,); anything else propagates.

    Returns:
        Option[T]: Some with the return value, or Nothing.
    """
    return capture(fn, "option.from_throwable", exceptions).to_option()


async def from_async[T](
    awaitable: Awaitable[T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Option[T]:
    """Await ``awaitable``; Some(result) on completion, Nothing if it raises.

    ``asyncio.CancelledError`` always propagates.

    Raises:
        TypeError: If ``awaitable`` is not awaitable.
    """
    outcome = await capture_async(awaitable, "option.from_async", exceptions)
    return outcome.to_option()


def first[T](items: Iterable[T | None]) -> Option[T]:
    """Option of the first item of ``items``.

    Nothing for an empty iterable or a leading ``None``.
    """
    for item in items:
        return from_nullable(item)
    return Nothing


# Ops


def map[T, U](opt: Option[T], fn: Callable[[T], U]) -> Option[U]:  # noqa: A001
    """Transform the value inside an Option if present.

    Args:
        opt: The Option to transform.
        fn: Function to apply to the value if present.

    Returns:
        Option[U]: Some with the transformed value if opt was Some, otherwise Nothing.
    """
    return opt.map(fn)


def flat_map[T, U](opt: Option[T], fn: Callable[[T], Option[U]]) -> Option[U]:
    """Chain a computation that may return Nothing.

    Args:
        opt: The Option to chain from.
        fn: Function that takes the value and returns an Option.

    Returns:
        Option[U]: The result of applying fn if opt was Some, otherwise Nothing.
    """
    return opt.flat_map(fn)


def filter[T](opt: Option[T], predicate: Callable[[T], bool]) -> Option[T]:  # noqa: A001
    """Filter an Option based on a predicate.

    Args:
        opt: The Option to filter.
        predicate: Predicate function to test the value.

    Returns:
        Option[T]: opt if it contains a value that satisfies predicate, otherwise Nothing.
    """
    return opt.filter(predicate)


def match[T, U](opt: Option[T], *, some: Callable[[T], U], none: Callable[[], U]) -> U:
    """Exhaustive case analysis.

    Examples:
        >>> match(Some(2), some=lambda x: x + 1, none=lambda: 0)
        3
    """
    return opt.match(some=some, none=none)


# Extract


def get_or_else[T](opt: Option[T], default: T) -> T:
    """Return the payload, or ``default`` if absent.

    Args:
        opt: The Option to unwrap.
        default: Value returned for Nothing.

    Returns:
        T: The contained value or the default.
    """
    return opt.get_or_else(default)


def get_or_none[T](opt: Option[T]) -> T | None:
    """Return the payload, or None if absent."""
    return opt.get_or_none()


def get_or_throw[T](opt: Option[T], err: BaseException) -> T:
    """Return the payload, or raise ``err`` if absent."""
    return opt.get_or_throw(err)


# Combine


def zip[T, U](a: Option[T], b: Option[U]) -> Option[Pair[T, U]]:  # noqa: A001
    """Combine two Options into an Option of Pair if both have values.

    Args:
        a: The first Option.
        b: The second Option.

    Returns:
        Option[Pair[T, U]]: Some(Pair(a, b)) if both are Some, otherwise Nothing.
    """
    return a.zip(b)


def apply[T, U](fn: Option[Callable[[T], U]], arg: Option[T]) -> Option[U]:
    """Apply a wrapped function to a wrapped argument."""
    if isinstance(fn, Some) and isinstance(arg, Some):
        return Some(fn.value(arg.value))
    return Nothing


def or_else[T](opt: Option[T], other: Option[T]) -> Option[T]:
    """Return opt if it has a value, otherwise return other.

    Args:
        opt: The primary Option.
        other: The fallback Option, already evaluated.

    Returns:
        Option[T]: opt if it has a value, otherwise other.
    """
    return opt.or_else(other)


def collect[T](options: Iterable[Option[T]]) -> Option[list[T]]:
    """Some(list) if every option is present, else Nothing.

    Stops consuming ``options`` at the first Nothing.
    """
    values: list[T] = []
    for opt in options:
        if isinstance(opt, NothingType):
            return Nothing
        values.append(opt.value)
    return Some(values)


# Convert


def to_result[T, E](opt: Option[T], error: E) -> Result[T, E]:
    """Done(value) if present, else Fail(error)."""
    return opt.to_result(error)
