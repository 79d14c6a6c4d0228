"""Either[L, R] — Left and Right variants of a disjoint union."""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, TypeVar, final

L = TypeVar("L")
R = TypeVar("R")


@final
@dataclasses.dataclass(frozen=True, slots=True)
class Left(Generic[L]):
    """Left variant; ``bind`` passes it through untouched."""

    value: L

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def bind(self, func: Callable[[Any], "Either[L, Any]"]) -> "Left[L]":  # noqa: ARG002
        return self


@final
@dataclasses.dataclass(frozen=True, slots=True)
class Right(Generic[R]):
    """Right variant; ``bind`` hands its value to the next step."""

    value: R

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def bind(self, func: Callable[[R], "Either[Any, Any]"]) -> "Either[Any, Any]":
        return func(self.value)


type Either[L, R] = Left[L] | Right[R]


def left(value: L) -> Left[L]:
    return Left(value)


def right(value: R) -> Right[R]:
    return Right(value)


__all__ = ["Either", "Left", "Right", "left", "right"]
