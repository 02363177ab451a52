"""Structured event recording for skill handlers."""

import logging
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Observer(Protocol):
    """Receives structured records: a log level, an event name and fields."""

    def record(self, level: int, event: str, **fields: Any) -> None:
        ...


class LoggingObserver:
    """Observer that forwards records to a standard logger."""

    def __init__(self, log: logging.Logger | None = None):
        self._log = log or logging.getLogger("caster_service.events")

    def record(self, level: int, event: str, **fields: Any) -> None:
        rendered = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
        self._log.log(level, f"{event} {rendered}".rstrip(), extra={"event_fields": fields})


def safe_record(observer: Observer, level: int, event: str, **fields: Any) -> None:
    """Record an event, ignoring observer failures."""
    try:
        observer.record(level, event, **fields)
    except Exception:
        logger.debug(f"Observer failed to record {event}", exc_info=True)
