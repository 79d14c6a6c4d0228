"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── InvalidArgumentError
    └── ApplicationError     (application.py)
        └── ConfigError      (mp_maybe.config.validation)
"""

from mp_maybe.kernel.errors.application import ApplicationError
from mp_maybe.kernel.errors.base import BaseError
from mp_maybe.kernel.errors.domain import DomainError, InvalidArgumentError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidArgumentError",
]
