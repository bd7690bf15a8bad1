"""Logging setup and in-process log capture.

``configure_logging`` installs the console handler used by the launcher.
``LoggingService`` keeps the most recent records in a ring buffer and
announces each one as ``GUIEvent.LOG_RECORD_ADDED`` on the registered
EventBus, so a diagnostics panel (or a test) can follow what the gallery
is doing without parsing stderr.
"""

from __future__ import annotations

import logging
import sys
from collections import deque
from dataclasses import dataclass
from threading import RLock
from typing import Deque, List, Optional

from config import settings

from .event_bus import EventBus, GUIEvent
from .service_locator import services

__all__ = [
    "LogEntry",
    "LoggingService",
    "configure_logging",
    "get_logging_service",
]

_CONSOLE_HANDLER_NAME = "car_gallery_console"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a single console handler to the root logger and set its level.

    Calling it again only updates the level.
    """
    root = logging.getLogger()
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    if not any(h.get_name() == _CONSOLE_HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_CONSOLE_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)
    return root


@dataclass(frozen=True)
class LogEntry:
    level: str
    name: str
    message: str
    created: float
    lineno: int


class _RingBufferHandler(logging.Handler):
    def __init__(self, svc: "LoggingService") -> None:
        super().__init__()
        self._svc = svc

    def emit(self, record: logging.LogRecord) -> None:  # noqa: D401
        self._svc._ingest_record(record)


class LoggingService:
    def __init__(self, capacity: int = 500) -> None:
        self._lock = RLock()
        self._entries: Deque[LogEntry] = deque(maxlen=capacity)
        self._handler = _RingBufferHandler(self)
        self._handler.setLevel(logging.DEBUG)
        self._attached = False

    # Lifecycle --------------------------------------------------------
    def attach_root(self) -> None:
        if self._attached:
            return
        logging.getLogger().addHandler(self._handler)
        self._attached = True

    def detach_root(self) -> None:
        if not self._attached:
            return
        logging.getLogger().removeHandler(self._handler)
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    # Ingestion --------------------------------------------------------
    def _ingest_record(self, record: logging.LogRecord) -> None:
        entry = LogEntry(
            level=record.levelname,
            name=record.name,
            message=record.getMessage(),
            created=record.created,
            lineno=record.lineno,
        )
        with self._lock:
            self._entries.append(entry)
        bus = services.try_get("event_bus")
        if isinstance(bus, EventBus):
            bus.publish(
                GUIEvent.LOG_RECORD_ADDED,
                {"level": entry.level, "name": entry.name, "message": entry.message[:120]},
            )

    # Query ------------------------------------------------------------
    def recent(self, limit: Optional[int] = None) -> List[LogEntry]:
        with self._lock:
            data = list(self._entries)
        return data[-limit:] if limit is not None else data

    def filter(
        self, *, level: str | None = None, name_contains: str | None = None
    ) -> List[LogEntry]:
        out: List[LogEntry] = []
        for e in self.recent():
            if level and e.level != level:
                continue
            if name_contains and name_contains not in e.name:
                continue
            out.append(e)
        return out

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


def get_logging_service() -> LoggingService:
    return services.get_typed("logging_service", LoggingService)
