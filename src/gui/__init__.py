"""Car gallery GUI layer.

Small public surface for the launcher and tests: the service locator and
the event bus. Importing this package never creates a QApplication.
"""

from __future__ import annotations

from .services.service_locator import (  # noqa: F401
    services,
    ServiceLocator,
    ServiceAlreadyRegisteredError,
    ServiceNotFoundError,
)
from .services.event_bus import EventBus, GUIEvent, Event  # noqa: F401

__all__ = [
    "services",
    "ServiceLocator",
    "ServiceAlreadyRegisteredError",
    "ServiceNotFoundError",
    "EventBus",
    "GUIEvent",
    "Event",
]
