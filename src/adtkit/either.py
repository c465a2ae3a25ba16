"""Either namespace: the Result functions in Left/Right vocabulary.

Either is not a separate type. ``Left`` is ``Fail`` and ``Right`` is
``Done``, so every value built here is a Result and every function in
``adtkit.result`` accepts it:

    >>> from adtkit import either, result
    >>> either.right(1) == result.done(1)
    True
    >>> either.fold(either.left("e"), str.upper, str)
    'E'
"""

from __future__ import annotations

from collections.abc import Callable

from adtkit.result import (
    apply,
    bimap,
    collect,
    filter,
    flat_map,
    fold,
    from_async,
    from_nullable,
    from_throwable,
    get_or_else,
    get_or_throw,
    map,
    or_else,
    recover,
    swap,
    tap,
    to_option,
    zip,
)
from adtkit.result import done as right
from adtkit.result import fail as left
from adtkit.result import flat_map as chain
from adtkit.result import is_done as is_right
from adtkit.result import is_fail as is_left
from adtkit.result import map_error as map_left
from adtkit.result import new as _new_result
from adtkit.result import tap_error as tap_left
from adtkit.types.result import Either, Left, Right

__all__ = [
    "Either",
    "Left",
    "Right",
    "apply",
    "bimap",
    "chain",
    "collect",
    "filter",
    "flat_map",
    "fold",
    "from_async",
    "from_nullable",
    "from_throwable",
    "get_or_else",
    "get_or_throw",
    "is_left",
    "is_right",
    "left",
    "map",
    "map_left",
    "match",
    "new",
    "or_else",
    "recover",
    "right",
    "swap",
    "tap",
    "tap_left",
    "to_option",
    "zip",
]


def new[L, R](right_value: R | None, left_value: L) -> Either[L, R]:
    """Smart constructor: Left(left_value) when ``right_value`` is None."""
    return _new_result(right_value, left_value)


def match[L, R, U](e: Either[L, R], *, right: Callable[[R], U], left: Callable[[L], U]) -> U:
    """Exhaustive case analysis with Left/Right handler names."""
    return e.match(done=right, fail=left)

