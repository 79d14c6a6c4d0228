"""Observability – LoggingSettings."""
from __future__ import annotations

import dataclasses
import logging

from mp_maybe.config.settings import Settings
from mp_maybe.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Logging configuration read from ``MP_MAYBE_LOG_*`` variables.

    ``MP_MAYBE_LOG_LEVEL``        standard level name (``DEBUG`` … ``CRITICAL``)
    ``MP_MAYBE_LOG_JSON``         render JSON lines instead of console output
    ``MP_MAYBE_LOG_LOGGER_NAME``  stdlib logger that receives the handler
    """

    _prefix = "MP_MAYBE_LOG"

    level: str = "INFO"
    json: bool = False
    logger_name: str = "mp_maybe"

    def _validate(self) -> None:
        self.level = self.level.upper()
        if self.level not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError("level", self.level, "unknown log level")
        if not self.logger_name:
            raise InvalidSettingValueError("logger_name", self.logger_name, "must not be empty")

    @property
    def numeric_level(self) -> int:
        return logging.getLevelNamesMapping()[self.level]


__all__ = ["LoggingSettings"]
