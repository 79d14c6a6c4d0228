"""Observability – structured logging helpers."""
from mp_maybe.observability.logging.factory import LoggerFactory
from mp_maybe.observability.logging.processors import SHARED_PROCESSORS, get_logger
from mp_maybe.observability.logging.settings import LoggingSettings

__all__ = ["SHARED_PROCESSORS", "LoggerFactory", "LoggingSettings", "get_logger"]
