"""Testing generators – Hypothesis strategies for containers."""
from mp_maybe.testing.generators.strategies import (
    either_strategy,
    just_strategy,
    maybe_strategy,
    nothing_strategy,
    payload_strategy,
)

__all__ = [
    "either_strategy",
    "just_strategy",
    "maybe_strategy",
    "nothing_strategy",
    "payload_strategy",
]
