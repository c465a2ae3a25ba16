"""Triple namespace: free functions over ``Triple[A, B, C]``."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from adtkit.errors import ArityError
from adtkit.types.triple import Triple

__all__ = [
    "Triple",
    "apply",
    "curry",
    "equals",
    "from_dict",
    "from_sequence",
    "fst",
    "map",
    "new",
    "snd",
    "thd",
    "to_list",
    "triple",
    "zip",
]


def new[A, B, C](fst: A, snd: B, thd: C) -> Triple[A, B, C]:
    """Build a Triple from its three slots."""
    return Triple(fst, snd, thd)


triple = new


def fst[A, B, C](t: Triple[A, B, C]) -> A:
    """Return the first slot."""
    return t.fst


def snd[A, B, C](t: Triple[A, B, C]) -> B:
    """Return the second slot."""
    return t.snd


def thd[A, B, C](t: Triple[A, B, C]) -> C:
    """Return the third slot."""
    return t.thd


def from_sequence[A, B, C](items: Sequence[Any]) -> Triple[A, B, C]:
    """Build a Triple from a three-item sequence.

    Raises:
        ArityError: If ``items`` does not hold exactly three items.
    """
    if len(items) != 3:
        raise ArityError(3, len(items))
    return Triple(items[0], items[1], items[2])


def to_list[A, B, C](t: Triple[A, B, C]) -> list[A | B | C]:
    """Return ``[fst, snd, thd]``."""
    return [t.fst, t.snd, t.thd]


def from_dict[A, B, C](obj: Mapping[str, Any]) -> Triple[A, B, C]:
    """Build a Triple from a mapping with ``fst``, ``snd`` and ``thd`` keys."""
    return Triple(obj["fst"], obj["snd"], obj["thd"])


def curry[A](first: A) -> Callable[[Any], Callable[[Any], Triple[A, Any, Any]]]:
    """``curry(a)(b)(c) == Triple(a, b, c)``."""

    def take_second(second: Any) -> Callable[[Any], Triple[A, Any, Any]]:
        def take_third(third: Any) -> Triple[A, Any, Any]:
            return Triple(first, second, third)

        return take_third

    return take_second


def equals[A, B, C](
    t1: Triple[A, B, C],
    t2: Triple[A, B, C],
    eq_a: Callable[[A, A], bool],
    eq_b: Callable[[B, B], bool],
    eq_c: Callable[[C, C], bool],
) -> bool:
    """Slot-wise comparison with caller-supplied equality functions."""
    return eq_a(t1.fst, t2.fst) and eq_b(t1.snd, t2.snd) and eq_c(t1.thd, t2.thd)


def map[A, B, C, D, E, F](  # noqa: A001
    t: Triple[A, B, C],
    fn_a: Callable[[A], D],
    fn_b: Callable[[B], E],
    fn_c: Callable[[C], F],
) -> Triple[D, E, F]:
    """Transform each slot with its own function.

    Args:
        t: The Triple to transform.
        fn_a: Applied to the first slot.
        fn_b: Applied to the second slot.
        fn_c: Applied to the third slot.

    Returns:
        Triple[D, E, F]: A new Triple of the transformed slots.
    """
    return Triple(fn_a(t.fst), fn_b(t.snd), fn_c(t.thd))


def zip(  # noqa: A001
    t1: Triple[Mapping[str, Any], Mapping[str, Any], Mapping[str, Any]],
    t2: Triple[Mapping[str, Any], Mapping[str, Any], Mapping[str, Any]],
) -> Triple[dict[str, Any], dict[str, Any], dict[str, Any]]:
    """Merge each slot pairwise as mappings; keys from ``t2`` win."""
    return Triple({**t1.fst, **t2.fst}, {**t1.snd, **t2.snd}, {**t1.thd, **t2.thd})


def apply[A, B, C, D](
    t: Triple[Callable[[A], B], Callable[[B], C], Callable[[C], D]], value: A
) -> Triple[B, C, D]:
    """Run ``value`` through the three functions, keeping every stage.

    Examples:
        >>> apply(Triple(lambda x: x + 1, lambda x: x * 2, str), 1)
        Triple(fst=2, snd=4, thd='4')
    """
    first = t.fst(value)
    second = t.snd(first)
    return Triple(first, second, t.thd(second))
