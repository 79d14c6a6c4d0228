"""Shared pytest configuration."""

pytest_plugins = ["mp_maybe.testing.fixtures"]
