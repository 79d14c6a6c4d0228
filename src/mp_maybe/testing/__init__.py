"""Testing support – fakes, fixtures and generators.

Import in your ``conftest.py``::

    pytest_plugins = ["mp_maybe.testing.fixtures"]
"""

from mp_maybe.testing.fakes import CallSentry
from mp_maybe.testing.generators import (
    either_strategy,
    just_strategy,
    maybe_strategy,
    nothing_strategy,
    payload_strategy,
)

__all__ = [
    "CallSentry",
    "either_strategy",
    "just_strategy",
    "maybe_strategy",
    "nothing_strategy",
    "payload_strategy",
]
