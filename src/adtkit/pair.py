"""Pair namespace: free functions over ``Pair[A, B]``."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from adtkit.errors import ArityError
from adtkit.types.option import Nothing, Option, Some
from adtkit.types.pair import Pair
from adtkit.types.result import Done, Fail, Result

__all__ = [
    "Pair",
    "apply",
    "apply2",
    "curry",
    "eq",
    "equals",
    "from_dict",
    "from_sequence",
    "fst",
    "map",
    "map_first",
    "map_second",
    "new",
    "pair",
    "reduce",
    "snd",
    "swap",
    "to_dict",
    "to_list",
    "traverse_option",
    "traverse_result",
    "zip",
]


def new[A, B](fst: A, snd: B) -> Pair[A, B]:
    """Build a Pair from its two slots."""
    return Pair(fst, snd)


pair = new


def fst[A, B](p: Pair[A, B]) -> A:
    """Return the first slot."""
    return p.fst


def snd[A, B](p: Pair[A, B]) -> B:
    """Return the second slot."""
    return p.snd


def from_sequence[A, B](items: Sequence[Any]) -> Pair[A, B]:
    """Build a Pair from a two-item sequence.

    Raises:
        ArityError: If ``items`` does not hold exactly two items.
    """
    if len(items) != 2:
        raise ArityError(2, len(items))
    return Pair(items[0], items[1])


def from_dict[A, B](obj: Mapping[str, Any]) -> Pair[A, B]:
    """Build a Pair from a mapping with ``fst`` and ``snd`` keys."""
    return Pair(obj["fst"], obj["snd"])


def curry[A, B](first: A) -> Callable[[B], Pair[A, B]]:
    """``curry(a)(b) == Pair(a, b)``."""

    def finish(second: B) -> Pair[A, B]:
        return Pair(first, second)

    return finish


def map_first[A, B, C](p: Pair[A, B], fn: Callable[[A], C]) -> Pair[C, B]:
    """Transform the first slot, keeping the second.

    Args:
        p: The Pair to transform.
        fn: Function applied to the first slot.

    Returns:
        Pair[C, B]: A new Pair with the transformed first slot.
    """
    return Pair(fn(p.fst), p.snd)


def map_second[A, B, C](p: Pair[A, B], fn: Callable[[B], C]) -> Pair[A, C]:
    """Transform the second slot, keeping the first.

    Args:
        p: The Pair to transform.
        fn: Function applied to the second slot.

    Returns:
        Pair[A, C]: A new Pair with the transformed second slot.
    """
    return Pair(p.fst, fn(p.snd))


def map[A, B, C, D](  # noqa: A001
    p: Pair[A, B], fn_a: Callable[[A], C], fn_b: Callable[[B], D]
) -> Pair[C, D]:
    """Transform both slots, each with its own function."""
    return Pair(fn_a(p.fst), fn_b(p.snd))


def swap[A, B](p: Pair[A, B]) -> Pair[B, A]:
    """Exchange the two slots."""
    return Pair(p.snd, p.fst)


def apply[A, B, C](p: Pair[Callable[[A], B], C], value: A) -> Pair[B, C]:
    """Apply the function in the first slot to ``value``."""
    return Pair(p.fst(value), p.snd)


def apply2[A, B, C](
    fns: Pair[Callable[[A], B], Callable[[B], C]], values: Pair[A, B]
) -> Pair[A, C]:
    """Apply the second function to the second value; keep the first value."""
    return Pair(values.fst, fns.snd(values.snd))


def reduce[A, B, C](p: Pair[A, B], fn: Callable[[A, B], C]) -> C:
    """Collapse the Pair with a two-argument function.

    Args:
        p: The Pair to reduce.
        fn: Called as ``fn(fst, snd)``.

    Returns:
        C: Whatever ``fn`` returns.
    """
    return fn(p.fst, p.snd)


def to_list[A, B](p: Pair[A, B]) -> list[A | B]:
    """Return ``[fst, snd]``."""
    return [p.fst, p.snd]


def to_dict[A, B](p: Pair[A, B]) -> dict[str, A | B]:
    """Return ``{"fst": fst, "snd": snd}``, the inverse of ``from_dict``."""
    return {"fst": p.fst, "snd": p.snd}


def eq[A, B](p1: Pair[A, B], p2: Pair[A, B]) -> bool:
    """Slot-wise ``==``."""
    return p1.fst == p2.fst and p1.snd == p2.snd


def equals[A, B](
    p1: Pair[A, B],
    p2: Pair[A, B],
    eq_a: Callable[[A, A], bool],
    eq_b: Callable[[B, B], bool],
) -> bool:
    """Slot-wise comparison with caller-supplied equality functions."""
    return eq_a(p1.fst, p2.fst) and eq_b(p1.snd, p2.snd)


def traverse_option[A, B, C](
    p: Pair[A, Option[B]], fn: Callable[[A, B], C]
) -> Option[Pair[A, C]]:
    """Some(Pair(a, fn(a, b))) when the second slot is Some(b), else Nothing."""
    if isinstance(p.snd, Some):
        return Some(Pair(p.fst, fn(p.fst, p.snd.value)))
    return Nothing


def traverse_result[A, B, C, E](
    p: Pair[A, Result[B, E]], fn: Callable[[A, B], C]
) -> Result[Pair[A, C], E]:
    """Done(Pair(a, fn(a, b))) when the second slot is Done(b), else its Fail."""
    if isinstance(p.snd, Done):
        return Done(Pair(p.fst, fn(p.fst, p.snd.value)))
    return Fail(p.snd.error)


def zip[B, D](  # noqa: A001
    p1: Pair[Mapping[str, Any], B], p2: Pair[Mapping[str, Any], D]
) -> Pair[dict[str, Any], Pair[B, D]]:
    """Merge the first slots as mappings (``p2`` wins) and pair the second slots."""
    return Pair({**p1.fst, **p2.fst}, Pair(p1.snd, p2.snd))
