"""Testing generators – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package::

    pip install "mp-maybe[test]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

    from mp_maybe.kernel.types import Either, Just, Maybe, Nothing


_DEFAULT_TYPES: tuple[Any, ...] = (object, int, str, bytes, float, list[int])


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


def payload_strategy() -> "SearchStrategy[Any]":
    """Non-``None`` payloads: ints, text, tuples and identity-only objects."""
    st = _require_hypothesis()
    return st.one_of(
        st.integers(),
        st.text(max_size=20),
        st.tuples(st.integers(), st.text(max_size=5)),
        st.builds(object),
    )


def just_strategy(values: "SearchStrategy[Any] | None" = None) -> "SearchStrategy[Just[Any]]":
    """Hypothesis strategy for :class:`Just` around *values* (default: payloads).

    Example::

        @given(just_strategy())
        def test_extract_returns_payload(m):
            assert m.extract() is m.value
    """
    from mp_maybe.kernel.types.maybe import Just

    return (values if values is not None else payload_strategy()).map(Just)


def nothing_strategy(types: Sequence[Any] | None = None) -> "SearchStrategy[Nothing[Any]]":
    """Hypothesis strategy for the ``Nothing`` singletons of *types*."""
    from mp_maybe.kernel.types.maybe import Nothing

    st = _require_hypothesis()
    return st.sampled_from(list(types) if types is not None else list(_DEFAULT_TYPES)).map(Nothing)


def maybe_strategy(
    values: "SearchStrategy[Any] | None" = None,
    types: Sequence[Any] | None = None,
) -> "SearchStrategy[Maybe[Any]]":
    """Either variant, mixing :func:`just_strategy` and :func:`nothing_strategy`."""
    st = _require_hypothesis()
    return st.one_of(just_strategy(values), nothing_strategy(types))


def either_strategy(
    lefts: "SearchStrategy[Any] | None" = None,
    rights: "SearchStrategy[Any] | None" = None,
) -> "SearchStrategy[Either[Any, Any]]":
    """Hypothesis strategy for :class:`Left` / :class:`Right` values."""
    from mp_maybe.kernel.types.either import Left, Right

    st = _require_hypothesis()
    lefts = lefts if lefts is not None else st.text(max_size=10)
    rights = rights if rights is not None else st.integers()
    return st.one_of(lefts.map(Left), rights.map(Right))


__all__ = [
    "either_strategy",
    "just_strategy",
    "maybe_strategy",
    "nothing_strategy",
    "payload_strategy",
]
