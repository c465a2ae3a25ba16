"""Core types: Option, Result/Either, Pair, Triple."""

from adtkit.types.option import Nothing, NothingType, Option, Some
from adtkit.types.pair import Pair
from adtkit.types.result import Done, Either, Fail, Left, Result, Right
from adtkit.types.triple import Triple

__all__ = [
    "Done",
    "Either",
    "Fail",
    "Left",
    "Nothing",
    "NothingType",
    "Option",
    "Pair",
    "Result",
    "Right",
    "Some",
    "Triple",
]
