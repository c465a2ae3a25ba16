"""@safe, @safe_async, @optional and @optional_async decorators.

Decorator forms of ``result.from_throwable``/``result.from_async`` and
their Option counterparts.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import partial
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from adtkit._boundary import capture, capture_async
from adtkit.types.option import Option
from adtkit.types.result import Done, Fail

__all__ = ["optional", "optional_async", "safe", "safe_async"]

P = ParamSpec("P")
T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


def _label(kind: str, wrapped: Callable[..., Any]) -> str:
    return f"{kind}:{getattr(wrapped, '__qualname__', repr(wrapped))}"


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Done[T] | Fail[Exception]]: ...


@overload
def safe[F](
    *,
    on_error: Callable[[BaseException], F],
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Done[T] | Fail[F]]]: ...


@overload
def safe[E: BaseException](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, T]], Callable[P, Done[T] | Fail[E]]]: ...


@overload
def safe[E: BaseException](
    func: None = None,
    *,
    on_error: None = None,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Done[T] | Fail[E]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    on_error: Callable[[BaseException], Any] | None = None,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator that returns Done(value) or Fail(mapped exception).

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(on_error=str, exceptions=(ValueError,))
        def described(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        on_error: Maps the caught exception to the error payload. Without
            it the exception itself is the payload.
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)
        # Done(value=5.0)
        divide(10, 0)
        # Fail(error=ZeroDivisionError('division by zero'))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,  # noqa: ARG001
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Done[T] | Fail[Any]:
        outcome = capture(partial(wrapped, *args, **kwargs), _label("safe", wrapped), exceptions)
        if on_error is None:
            return outcome
        return outcome.map_error(on_error)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Done[T] | Fail[Exception]]]: ...


@overload
def safe_async[F](
    *,
    on_error: Callable[[BaseException], F],
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Done[T] | Fail[F]]]]: ...


@overload
def safe_async[E: BaseException](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Done[T] | Fail[E]]]]: ...


@overload
def safe_async[E: BaseException](
    func: None = None,
    *,
    on_error: None = None,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Done[T] | Fail[E]]]]: ...


def safe_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    on_error: Callable[[BaseException], Any] | None = None,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Async variant of ``safe``: the wrapped coroutine resolves to a Result.

    Cancellation is never caught.
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,  # noqa: ARG001
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Done[T] | Fail[Any]:
        outcome = await capture_async(
            wrapped(*args, **kwargs), _label("safe_async", wrapped), exceptions
        )
        if on_error is None:
            return outcome
        return outcome.map_error(on_error)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def optional[**P, T](
    func: Callable[P, T],
) -> Callable[P, Option[T]]: ...


@overload
def optional(
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Option[T]]]: ...


def optional[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator that returns Some(value), or Nothing if the call raises.

    A ``None`` return value is kept as ``Some(None)``.

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types turned into Nothing. Defaults
            to (Exception,).
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,  # noqa: ARG001
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Option[T]:
        outcome = capture(
            partial(wrapped, *args, **kwargs), _label("optional", wrapped), exceptions
        )
        return outcome.to_option()

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def optional_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Option[T]]]: ...


@overload
def optional_async(
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Option[T]]]]: ...


def optional_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Async variant of ``optional``."""

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,  # noqa: ARG001
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Option[T]:
        outcome = await capture_async(
            wrapped(*args, **kwargs), _label("optional_async", wrapped), exceptions
        )
        return outcome.to_option()

    if func is not None:
        return wrapper(func)
    return wrapper
