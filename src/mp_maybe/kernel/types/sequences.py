"""Sequence search helpers that answer with a Maybe instead of ``None``."""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from mp_maybe.kernel.types.maybe import Maybe, Nothing, _type_name, of
from mp_maybe.observability.logging import get_logger

T = TypeVar("T")

_log = get_logger(__name__)


def _matching(
    iterable: Iterable[T],
    predicate: Callable[[T], bool] | None,
) -> Iterable[T]:
    if predicate is None:
        return iterable
    return (item for item in iterable if predicate(item))


def maybe_first(
    iterable: Iterable[T],
    predicate: Callable[[T], bool] | None = None,
    type_: Any = object,
) -> Maybe[T]:
    """First element (satisfying *predicate*, if given), or ``Nothing(type_)``."""
    for item in _matching(iterable, predicate):
        return of(item, type_)
    return Nothing(type_)


def maybe_last(
    iterable: Iterable[T],
    predicate: Callable[[T], bool] | None = None,
    type_: Any = object,
) -> Maybe[T]:
    """Last element (satisfying *predicate*, if given), or ``Nothing(type_)``."""
    last: T | None = None
    for item in _matching(iterable, predicate):
        last = item
    return of(last, type_)


def maybe_single(
    iterable: Iterable[T],
    predicate: Callable[[T], bool] | None = None,
    type_: Any = object,
) -> Maybe[T]:
    """The only element (satisfying *predicate*, if given).

    Zero matches and more than one match both give ``Nothing(type_)``;
    iteration stops at the second match.
    """
    found: list[T] = []
    for item in _matching(iterable, predicate):
        found.append(item)
        if len(found) > 1:
            _log.debug("maybe.single_ambiguous", type=_type_name(type_))
            return Nothing(type_)
    if not found:
        return Nothing(type_)
    return of(found[0], type_)


__all__ = ["maybe_first", "maybe_last", "maybe_single"]
