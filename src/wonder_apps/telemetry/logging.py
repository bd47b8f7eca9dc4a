"""Contract for runtime telemetry and the logging setup shared by the CLI."""

from __future__ import annotations

import logging
from typing import Protocol

from rich.logging import RichHandler

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Telemetry(Protocol):
    """Reports operational events such as flow transitions."""

    def emit(self, event_name: str, payload: dict) -> None:
        """Publish telemetry event to the configured sink."""


class LoggingTelemetry:
    """Telemetry sink that forwards events to a standard logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("wonder_apps.telemetry")

    def emit(self, event_name: str, payload: dict) -> None:
        self._logger.info(event_name, extra={"telemetry": payload})


def configure_logging(level: str = "INFO") -> None:
    """Route ``wonder_apps`` loggers through a rich console handler."""
    normalized = level.strip().upper()
    if normalized not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of: {', '.join(LOG_LEVELS)}")

    root = logging.getLogger("wonder_apps")
    root.setLevel(normalized)
    if not any(isinstance(handler, RichHandler) for handler in root.handlers):
        root.addHandler(RichHandler(show_path=False, rich_tracebacks=True))
    root.propagate = False
