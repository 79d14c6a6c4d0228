"""Domain errors — misuse of the container contracts."""

from __future__ import annotations

from typing import Any

from mp_maybe.kernel.errors.base import BaseError


class DomainError(BaseError):
    """A container contract was broken by the caller."""

    default_code = "domain_error"


class InvalidArgumentError(DomainError, ValueError):
    """An argument violates a construction contract.

    Raised when a ``Just`` is built around ``None``; callers that do not know
    whether a value is present should go through ``of()`` instead.
    """

    default_code = "invalid_argument"

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.argument = argument

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.argument is not None:
            base["argument"] = self.argument
        return base


__all__ = ["DomainError", "InvalidArgumentError"]
