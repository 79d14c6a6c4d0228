"""Result[T] — an Either with an exception on the left.

``Result.bind`` only threads explicit failures: an exception raised by the
bound function is not captured and reaches the caller unchanged.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from mp_maybe.kernel.types.either import Either, Left, Right

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Result(Generic[T]):
    """Success value or failure exception, backed by ``Either[Exception, T]``."""

    __slots__ = ("_either",)

    def __init__(self, either: Either[Exception, T]) -> None:
        self._either = either

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(Right(value))

    @classmethod
    def failure(cls, error: Exception) -> "Result[T]":
        return cls(Left(error))

    @property
    def either(self) -> Either[Exception, T]:
        return self._either

    def is_success(self) -> bool:
        return self._either.is_right()

    def is_failure(self) -> bool:
        return self._either.is_left()

    def bind(self, func: Callable[[T], U]) -> "Result[U]":
        """Apply *func* to the success value and wrap its return as success."""
        return Result(self._either.bind(lambda value: Right(func(value))))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._either == other._either

    def __hash__(self) -> int:
        return hash((Result, self._either))

    def __repr__(self) -> str:
        return f"Result({self._either!r})"


class TypedResult(Generic[E]):
    """Factories for an ``Either`` whose error channel has type *E*."""

    @classmethod
    def success(cls, value: T) -> Either[E, T]:
        return Right(value)

    @classmethod
    def failure(cls, error: E) -> Either[E, Any]:
        return Left(error)


class ValidationResult(TypedResult[list[str]]):
    """Either a validated value or the list of validation messages."""


__all__ = ["Result", "TypedResult", "ValidationResult"]
