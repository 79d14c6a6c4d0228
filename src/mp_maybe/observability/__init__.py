"""Observability – logging for the mp_maybe package."""
from mp_maybe.observability.logging import LoggerFactory, LoggingSettings, get_logger

__all__ = ["LoggerFactory", "LoggingSettings", "get_logger"]
