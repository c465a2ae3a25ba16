"""Shared exception boundary for the from_throwable/from_async conversions.

These are the only places in adtkit where exceptions are caught. Each
helper returns ``Done(value)`` or ``Fail(exception)``; callers decide what
to keep of the exception.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable

from adtkit._config import get_config
from adtkit._logging import get_logger
from adtkit.types.result import Done, Fail

__all__ = ["DEFAULT_EXCEPTIONS", "capture", "capture_async"]

DEFAULT_EXCEPTIONS: tuple[type[BaseException], ...] = (Exception,)

_log = get_logger(__name__)


def _caught(conversion: str, exc: BaseException) -> Fail[BaseException]:
    if get_config().log_level is not None:
        _log.debug(
            "exception caught at conversion boundary",
            conversion=conversion,
            exc_type=type(exc).__name__,
            exc_message=str(exc),
        )
    return Fail(exc)


def capture[T](
    fn: Callable[[], T],
    conversion: str,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Done[T] | Fail[BaseException]:
    """Call ``fn`` and tag its outcome.

    Args:
        fn: Zero-argument callable to evaluate.
        conversion: Name of the calling conversion, used in log entries.
        exceptions: Exception types to capture. Defaults to (Exception,).
            Anything else propagates.
    """
    catch = exceptions if exceptions is not None else DEFAULT_EXCEPTIONS
    try:
        return Done(fn())
    except catch as exc:
        return _caught(conversion, exc)


async def capture_async[T](
    awaitable: Awaitable[T],
    conversion: str,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Done[T] | Fail[BaseException]:
    """Await ``awaitable`` and tag its outcome.

    No timeout is applied and cancellation is never captured, even when
    ``exceptions`` is widened to ``BaseException``.

    Raises:
        TypeError: If ``awaitable`` cannot be awaited.
    """
    if not inspect.isawaitable(awaitable):
        msg = f"{conversion} expects an awaitable, got {type(awaitable).__name__}"
        raise TypeError(msg)
    catch = exceptions if exceptions is not None else DEFAULT_EXCEPTIONS
    try:
        return Done(await awaitable)
    except asyncio.CancelledError:
        raise
    except catch as exc:
        return _caught(conversion, exc)
