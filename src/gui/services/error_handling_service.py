"""Uncaught exception capture for the gallery application.

The gallery core itself never raises once the collection is built; this
service only catches what escapes to ``sys.excepthook`` (a Qt slot raising
inside the event loop, typically), logs it, keeps a bounded history and
announces it on the EventBus as ``GUIEvent.UNCAUGHT_EXCEPTION``.
"""

from __future__ import annotations

import logging
import sys
import threading
import traceback
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Deque, List, Optional

from .event_bus import GUIEvent

__all__ = ["ErrorRecord", "ErrorHandlingService"]

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ErrorRecord:
    """Structured capture of an uncaught exception."""

    exc_type: type
    exc_value: BaseException
    traceback_str: str
    iso_time: str
    thread_name: str

    def summary(self, max_len: int = 120) -> str:
        msg = f"{self.exc_type.__name__}: {self.exc_value}"
        return msg if len(msg) <= max_len else msg[: max_len - 3] + "..."


class ErrorHandlingService:
    """Installable ``sys.excepthook`` replacement.

    svc = ErrorHandlingService(event_bus=bus)
    svc.install()
    ...
    svc.uninstall()
    """

    def __init__(self, *, capacity: int = 20, event_bus: Any | None = None) -> None:
        self._errors: Deque[ErrorRecord] = deque(maxlen=max(1, capacity))
        self._event_bus = event_bus
        self._installed = False
        self._prev_hook = None

    # Installation -----------------------------------------------------
    def install(self) -> None:
        if self._installed:
            return
        self._prev_hook = sys.excepthook
        sys.excepthook = self._sys_hook
        self._installed = True

    def uninstall(self) -> None:
        if not self._installed:
            return
        sys.excepthook = self._prev_hook or sys.__excepthook__
        self._prev_hook = None
        self._installed = False

    @property
    def installed(self) -> bool:
        return self._installed

    def _sys_hook(self, exc_type, exc_value, tb) -> None:  # pragma: no cover - delegate
        if issubclass(exc_type, KeyboardInterrupt) and self._prev_hook:
            self._prev_hook(exc_type, exc_value, tb)
            return
        self.handle_exception(exc_type, exc_value, tb)

    # Core -------------------------------------------------------------
    def handle_exception(
        self, exc_type, exc_value, tb, *, thread: Optional[threading.Thread] = None
    ) -> ErrorRecord:
        """Record, log and publish one uncaught exception."""
        record = ErrorRecord(
            exc_type=exc_type,
            exc_value=exc_value,
            traceback_str="".join(traceback.format_exception(exc_type, exc_value, tb)),
            iso_time=datetime.now(timezone.utc).isoformat(),
            thread_name=(thread or threading.current_thread()).name,
        )
        self._errors.append(record)
        _log.error(
            "Uncaught exception (%s) %s\n%s",
            record.thread_name,
            record.summary(),
            record.traceback_str,
        )
        if self._event_bus is not None:
            self._event_bus.publish(
                GUIEvent.UNCAUGHT_EXCEPTION,
                {
                    "type": exc_type.__name__,
                    "message": str(exc_value),
                    "thread": record.thread_name,
                    "iso_time": record.iso_time,
                },
            )
        return record

    def recent_errors(self) -> List[ErrorRecord]:
        return list(self._errors)

    def clear(self) -> None:
        self._errors.clear()
