"""Pair[A, B] fixed-arity tuple."""

from __future__ import annotations

from typing import NamedTuple

__all__ = ["Pair"]


class Pair[A, B](NamedTuple):
    """Immutable ordered pair.

    A Pair is a plain tuple underneath, so it unpacks, indexes and compares
    equal to ``(fst, snd)``.

    Examples:
        >>> p = Pair(1, "a")
        >>> p.fst, p.snd
        (1, 'a')
        >>> p == (1, "a")
        True
    """

    fst: A
    snd: B
