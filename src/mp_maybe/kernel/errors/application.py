"""Application-layer errors — failures outside the container contracts."""

from __future__ import annotations

from mp_maybe.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting concern such as configuration or wiring."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
