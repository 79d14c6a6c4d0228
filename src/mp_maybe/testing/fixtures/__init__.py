"""Testing fixtures – pytest fixtures for fake doubles.

Register in ``conftest.py``::

    pytest_plugins = ["mp_maybe.testing.fixtures"]
"""
from mp_maybe.testing.fixtures.sentry import call_sentry

__all__ = ["call_sentry"]
