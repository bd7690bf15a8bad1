"""Service layer exports: service locator, event bus, logging and error capture."""

from .service_locator import services, ServiceLocator  # noqa: F401
from .event_bus import EventBus, GUIEvent  # noqa: F401
from .logging_service import LoggingService, configure_logging  # noqa: F401
from .error_handling_service import ErrorHandlingService  # noqa: F401

__all__ = [
    "services",
    "ServiceLocator",
    "EventBus",
    "GUIEvent",
    "LoggingService",
    "configure_logging",
    "ErrorHandlingService",
]
