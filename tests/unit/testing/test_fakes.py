"""Unit tests for testing fakes and fixtures."""

from __future__ import annotations

import pytest

from mp_maybe.kernel.types import nothing, of
from mp_maybe.testing import CallSentry


class TestCallSentry:
    def test_starts_clean(self) -> None:
        sentry: CallSentry[str] = CallSentry()
        assert not sentry.just_called
        assert not sentry.nothing_called
        sentry.assert_not_called()

    def test_on_just_echoes_value(self) -> None:
        sentry: CallSentry[str] = CallSentry()
        assert sentry.on_just("x") == "x"
        assert sentry.just_calls == ["x"]

    def test_on_just_returns_configured_result(self) -> None:
        sentry: CallSentry[str] = CallSentry(just_result=of("other"))
        assert sentry.on_just("x") == of("other")

    def test_on_nothing_returns_configured_result(self) -> None:
        sentry: CallSentry[str] = CallSentry(nothing_result=nothing(str))
        assert sentry.on_nothing() is nothing(str)
        assert sentry.nothing_calls == 1

    def test_assert_just_called_once_with_checks_identity(self) -> None:
        sentry: CallSentry[list[int]] = CallSentry()
        value = [1]
        sentry.on_just(value)
        sentry.assert_just_called_once_with(value)
        with pytest.raises(AssertionError):
            sentry.assert_just_called_once_with([1])

    def test_assert_just_called_once_rejects_repeats(self) -> None:
        sentry: CallSentry[int] = CallSentry()
        sentry.on_just(1)
        sentry.on_just(1)
        with pytest.raises(AssertionError):
            sentry.assert_just_called_once_with(1)

    def test_assert_nothing_called_once(self) -> None:
        sentry: CallSentry[int] = CallSentry()
        with pytest.raises(AssertionError):
            sentry.assert_nothing_called_once()
        sentry.nothing_action()
        sentry.assert_nothing_called_once()

    def test_assert_not_called_fails_after_call(self) -> None:
        sentry: CallSentry[int] = CallSentry()
        sentry.just_action(1)
        with pytest.raises(AssertionError):
            sentry.assert_not_called()

    def test_reset(self) -> None:
        sentry: CallSentry[int] = CallSentry()
        sentry.on_just(1)
        sentry.on_nothing()
        sentry.reset()
        sentry.assert_not_called()


class TestCallSentryFixture:
    def test_fixture_provides_fresh_sentry(self, call_sentry: CallSentry[int]) -> None:
        assert isinstance(call_sentry, CallSentry)
        call_sentry.assert_not_called()
