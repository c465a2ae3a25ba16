"""Library error types."""

from __future__ import annotations

from typing import Any

__all__ = [
    "AdtError",
    "ArityError",
    "UnwrapError",
]


class AdtError(Exception):
    """Base class for errors raised by adtkit itself."""


class UnwrapError(AdtError, RuntimeError):
    """A container was unwrapped on the variant that holds no value.

    Raised by ``unwrap``/``expect`` on ``Nothing`` or ``Fail``, and by
    ``get_or_throw`` when the supplied error handler returns normally.
    """

    def __init__(self, container: Any, message: str) -> None:
        self.container = container
        super().__init__(message)


class ArityError(AdtError, ValueError):
    """A fixed-arity tuple was built from a sequence of the wrong length."""

    def __init__(self, expected: int, got: int) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"Expected {expected} items, got {got}")
