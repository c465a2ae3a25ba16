"""Triple[A, B, C] fixed-arity tuple."""

from __future__ import annotations

from typing import NamedTuple

__all__ = ["Triple"]


class Triple[A, B, C](NamedTuple):
    """Immutable ordered triple, equal to ``(fst, snd, thd)``."""

    fst: A
    snd: B
    thd: C
