"""Observability – LoggerFactory."""
from __future__ import annotations

import logging

import structlog

from mp_maybe.config.settings import EnvSettingsLoader
from mp_maybe.observability.logging.processors import SHARED_PROCESSORS
from mp_maybe.observability.logging.settings import LoggingSettings


class LoggerFactory:
    """Attach a structlog-rendering handler to the library's stdlib logger."""

    @staticmethod
    def configure(
        settings: LoggingSettings | None = None,
        handler: logging.Handler | None = None,
    ) -> LoggingSettings:
        """Install the handler and level described by *settings*.

        When *settings* is omitted they are loaded from the environment.
        Calling this again replaces the previously installed handler.
        Returns the settings that were applied.
        """
        if settings is None:
            settings = EnvSettingsLoader().load(LoggingSettings)

        renderer = (
            structlog.processors.JSONRenderer()
            if settings.json
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = handler or logging.StreamHandler()
        handler.setFormatter(formatter)

        logger = logging.getLogger(settings.logger_name)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.setLevel(settings.numeric_level)
        logger.propagate = False
        return settings


__all__ = ["LoggerFactory"]
