"""Result namespace: free functions over ``Done[T] | Fail[E]``.

    >>> from adtkit import result
    >>> result.zip(result.done(1), result.fail("bad"))
    Fail(error='bad')
    >>> result.fold(result.fail("bad"), len, str)
    3

Handler order: ``fold`` and ``bimap`` always take the failure handler
first, then the success handler.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import NoReturn, TypeIs

from adtkit._boundary import capture, capture_async
from adtkit.types.option import Option
from adtkit.types.pair import Pair
from adtkit.types.result import Done, Fail, Result

__all__ = [
    "apply",
    "bimap",
    "collect",
    "done",
    "fail",
    "filter",
    "flat_map",
    "fold",
    "from_async",
    "from_nullable",
    "from_throwable",
    "get_or_else",
    "get_or_throw",
    "is_done",
    "is_fail",
    "map",
    "map_error",
    "match",
    "new",
    "or_else",
    "recover",
    "swap",
    "tap",
    "tap_error",
    "to_option",
    "zip",
]


def done[T](value: T) -> Done[T]:
    """Wrap ``value`` as a success."""
    return Done(value)


def fail[E](error: E) -> Fail[E]:
    """Wrap ``error`` as a failure."""
    return Fail(error)


def new[T, E](value: T | None, error: E) -> Result[T, E]:
    """Smart constructor: Fail(error) for a ``None`` value, Done otherwise."""
    return from_nullable(value, error)


def is_done[T, E](r: Result[T, E]) -> TypeIs[Done[T]]:
    """Check if a Result is Done.

    Args:
        r: The Result to check.

    Returns:
        bool: True if the Result is Done, False if Fail.
    """
    return isinstance(r, Done)


def is_fail[T, E](r: Result[T, E]) -> TypeIs[Fail[E]]:
    """Check if a Result is Fail.

    Args:
        r: The Result to check.

    Returns:
        bool: True if the Result is Fail, False if Done.
    """
    return isinstance(r, Fail)


def from_nullable[T, E](value: T | None, error: E) -> Result[T, E]:
    """Done(value) unless ``value is None``, in which case Fail(error)."""
    if value is None:
        return Fail(error)
    return Done(value)


def from_throwable[T, E](
    fn: Callable[[], T],
    on_error: Callable[[BaseException], E],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Result[T, E]:
    """Call ``fn``; Done(result) on return, Fail(on_error(exc)) if it raises.

    Exceptions raised by ``on_error`` itself propagate.

    Args:
        fn: Zero-argument callable to evaluate.
        on_error: Maps the caught exception to the error payload.
        exceptions: Exception types to catch. Defaults to (Exception,);
            anything else propagates.

    Returns:
        Result[T, E]: Done with the return value, or Fail with the mapped exception.

    Examples:
        >>> from_throwable(lambda: int("x"), lambda e: type(e).__name__)
        Fail(error='ValueError')
    """
    return capture(fn, "result.from_throwable", exceptions).map_error(on_error)


async def from_async[T, E](
    awaitable: Awaitable[T],
    on_error: Callable[[BaseException], E],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Result[T, E]:
    """Await ``awaitable``; Done on completion, Fail(on_error(exc)) if it raises.

    ``asyncio.CancelledError`` always propagates.

    Raises:
        TypeError: If ``awaitable`` is not awaitable.
    """
    outcome = await capture_async(awaitable, "result.from_async", exceptions)
    return outcome.map_error(on_error)


def map[T, U, E](r: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:  # noqa: A001
    """Transform the value of a Result if Done.

    Args:
        r: The Result to transform.
        fn: Function to apply to the value if Done.

    Returns:
        Result[U, E]: A new Result with the transformed value if Done, otherwise the original Fail.
    """
    return r.map(fn)


def map_error[T, E, F](r: Result[T, E], fn: Callable[[E], F]) -> Result[T, F]:
    """Transform the error of a Result if Fail.

    Args:
        r: The Result to transform.
        fn: Function to apply to the error if Fail.

    Returns:
        Result[T, F]: A new Result with the transformed error if Fail, otherwise the original Done.
    """
    return r.map_error(fn)


def bimap[T, E, U, F](
    r: Result[T, E], on_fail: Callable[[E], F], on_done: Callable[[T], U]
) -> Result[U, F]:
    """Transform whichever side is populated. Failure handler first."""
    return r.bimap(on_fail, on_done)


def flat_map[T, U, E](r: Result[T, E], fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Chain a Result-returning function; a Fail short-circuits.

    All links of a chain share one error type; widening it is up to the
    caller (see ``map_error``).
    """
    return r.flat_map(fn)


def match[T, E, U](r: Result[T, E], *, done: Callable[[T], U], fail: Callable[[E], U]) -> U:
    """Exhaustive case analysis.

    Args:
        r: The Result to inspect.
        done: Called with the value of a Done.
        fail: Called with the error of a Fail.

    Returns:
        U: Whatever the selected handler returns.
    """
    return r.match(done=done, fail=fail)


def fold[T, E, U](r: Result[T, E], on_fail: Callable[[E], U], on_done: Callable[[T], U]) -> U:
    """Collapse a Result to one value. Failure handler first."""
    return r.fold(on_fail, on_done)


def recover[T, E](r: Result[T, E], fn: Callable[[E], T]) -> Done[T]:
    """Turn a Fail into Done(fn(error)); a Done comes back unchanged."""
    return r.recover(fn)


def get_or_else[T, E](r: Result[T, E], default: T) -> T:
    """Return the value of a Done, or ``default`` for a Fail.

    Args:
        r: The Result to unwrap.
        default: Value returned for Fail.

    Returns:
        T: The contained value or the default.
    """
    return r.get_or_else(default)


def get_or_throw[T, E](r: Result[T, E], on_error: Callable[[E], NoReturn]) -> T:
    """Return the success value, or hand the error to ``on_error``.

    ``on_error`` must raise. If it returns, ``UnwrapError`` is raised.
    """
    return r.get_or_throw(on_error)


def zip[A, B, E](a: Result[A, E], b: Result[B, E]) -> Result[Pair[A, B], E]:  # noqa: A001
    """Done(Pair(a, b)) if both succeed, else the first Fail (``a`` first)."""
    return a.zip(b)


def apply[T, U, E](fn: Result[Callable[[T], U], E], arg: Result[T, E]) -> Result[U, E]:
    """Apply a wrapped function to a wrapped argument.

    The first Fail wins, checking ``fn`` before ``arg``.
    """
    if isinstance(fn, Fail):
        return fn
    if isinstance(arg, Fail):
        return arg
    return Done(fn.value(arg.value))


def or_else[T, E](a: Result[T, E], b: Result[T, E]) -> Result[T, E]:
    """``a`` if it succeeded, else ``b``. Both are already evaluated."""
    return a.or_else(b)


def filter[T, E](  # noqa: A001
    r: Result[T, E], predicate: Callable[[T], bool], on_false: E
) -> Result[T, E]:
    """Fail(on_false) when a Done value fails ``predicate``."""
    return r.filter(predicate, on_false)


def tap[T, E](r: Result[T, E], fn: Callable[[T], object]) -> Result[T, E]:
    """Observe the success value; returns ``r`` itself."""
    return r.tap(fn)


def tap_error[T, E](r: Result[T, E], fn: Callable[[E], object]) -> Result[T, E]:
    """Observe the error; returns ``r`` itself."""
    return r.tap_error(fn)


def swap[T, E](r: Result[T, E]) -> Result[E, T]:
    """Exchange the variants: Done(v) becomes Fail(v) and vice versa."""
    return r.swap()


def to_option[T, E](r: Result[T, E]) -> Option[T]:
    """Some(value) for Done, Nothing for Fail. The error is dropped."""
    return r.to_option()


def collect[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Fail encountered.

    Examples:
        >>> collect([Done(1), Done(2)])
        Done(value=[1, 2])
        >>> collect([Done(1), Fail("x"), Fail("y")])
        Fail(error='x')
    """
    values: list[T] = []
    for r in results:
        if isinstance(r, Fail):
            return r
        values.append(r.value)
    return Done(values)
