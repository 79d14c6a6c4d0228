"""Kernel container types — public re-export surface.

Modules:
  maybe.py     — Just, Nothing, Maybe, of, just, nothing
  sequences.py — maybe_first, maybe_last, maybe_single
  either.py    — Left, Right, Either
  result.py    — Result, TypedResult, ValidationResult
"""

from mp_maybe.kernel.types.either import Either, Left, Right, left, right
from mp_maybe.kernel.types.maybe import Just, Maybe, Nothing, just, nothing, of, to_maybe
from mp_maybe.kernel.types.result import Result, TypedResult, ValidationResult
from mp_maybe.kernel.types.sequences import maybe_first, maybe_last, maybe_single

__all__ = [
    "Either",
    "Just",
    "Left",
    "Maybe",
    "Nothing",
    "Result",
    "Right",
    "TypedResult",
    "ValidationResult",
    "just",
    "left",
    "maybe_first",
    "maybe_last",
    "maybe_single",
    "nothing",
    "of",
    "right",
    "to_maybe",
]
