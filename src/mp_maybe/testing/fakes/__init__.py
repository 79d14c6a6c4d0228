"""Testing fakes – in-memory doubles for tests."""
from mp_maybe.testing.fakes.sentry import CallSentry

__all__ = ["CallSentry"]
