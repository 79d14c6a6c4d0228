"""
mp_maybe – explicit absence handling for Python.

Import path convention::

    from mp_maybe import of, nothing
    from mp_maybe.kernel.types import Just, Nothing, Maybe
    from mp_maybe.kernel.errors import InvalidArgumentError
"""

from mp_maybe.kernel.types import (
    Either,
    Just,
    Left,
    Maybe,
    Nothing,
    Result,
    Right,
    TypedResult,
    ValidationResult,
    just,
    left,
    maybe_first,
    maybe_last,
    maybe_single,
    nothing,
    of,
    right,
    to_maybe,
)

__version__ = "0.1.0"
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
    "__version__",
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
