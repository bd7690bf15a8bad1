"""Application bootstrap for the car gallery.

Responsibilities:
 - Optional headless bootstrap (tests, ``--dump``) without a QApplication
 - Logging setup and the in-process LoggingService
 - Uncaught exception capture (ErrorHandlingService)
 - Registering the session's shared services on the service locator
 - Building the gallery collection and asset resolver once per process

PyQt6 is imported lazily so test collection and headless runs never need a
display.
"""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from config import settings
from domain.catalog import default_collection
from domain.models import GalleryCollection
from gui.app.config_store import WindowConfig, load_config
from gui.services.error_handling_service import ErrorHandlingService
from gui.services.event_bus import EventBus, GUIEvent
from gui.services.logging_service import LoggingService, configure_logging
from gui.services.service_locator import ServiceLocator, services
from gui.state.gallery_store import GalleryStore

__all__ = ["AppContext", "create_app"]

_log = logging.getLogger(__name__)


@dataclass
class AppContext:
    """References created during bootstrap.

    Attributes
    ----------
    qt_app: The QApplication (None when headless)
    headless: Whether headless bootstrap was used
    collection: The read-only gallery collection for this process
    asset_dir: Directory the asset resolver reads images from
    config_dir: Directory holding the window config (None means CWD)
    window_config: Window geometry loaded at startup
    event_bus, logging_service, error_service: Shared services
    services: Global service locator (post-initialization state)
    duration_s: Elapsed bootstrap time in seconds
    """

    qt_app: Optional[Any]
    headless: bool
    collection: GalleryCollection
    asset_dir: Path
    config_dir: Optional[str]
    window_config: WindowConfig
    event_bus: EventBus
    logging_service: LoggingService
    error_service: ErrorHandlingService
    services: ServiceLocator
    duration_s: float
    metadata: dict[str, Any] = field(default_factory=dict)

    def create_store(self) -> GalleryStore:
        """Fresh viewing session: index 0, description hidden."""
        return GalleryStore(self.collection, event_bus=self.event_bus)

    def log_traces(self) -> int:
        """Log the traced bus events at INFO; returns how many were logged."""
        traces = self.event_bus.recent_traces()
        for entry in traces:
            _log.info("event %s at %.3f: %s", entry.name, entry.timestamp, entry.summary)
        return len(traces)

    def shutdown(self) -> None:
        if self.event_bus.tracing_enabled:
            self.log_traces()
        self.error_service.uninstall()
        self.logging_service.detach_root()


def create_app(
    *,
    headless: bool = False,
    collection: GalleryCollection | None = None,
    asset_dir: str | Path | None = None,
    config_dir: str | None = None,
    log_level: str | None = None,
    install_excepthook: bool | None = None,
    trace_events: bool = False,
) -> AppContext:
    """Create and initialize the gallery application context.

    Parameters
    ----------
    headless: Skip QApplication creation.
    collection: Gallery content; the built-in catalog when None.
    asset_dir / config_dir: Override settings.ASSET_DIR / settings.CONFIG_DIR.
    install_excepthook: Replace sys.excepthook; defaults to ``not headless``.
    trace_events: Record bus traffic from startup on; logged by ``shutdown``.
    """
    started = time.perf_counter()
    configure_logging(log_level)

    qt_app = None
    if not headless:
        from PyQt6.QtWidgets import QApplication

        qt_app = QApplication.instance() or QApplication(sys.argv[:1])
        qt_app.setApplicationName(settings.APP_TITLE)
        qt_app.setOrganizationName(settings.APP_ORGANIZATION)

    bus = EventBus()
    if trace_events:
        bus.enable_tracing()
    logging_service = LoggingService()
    error_service = ErrorHandlingService(event_bus=bus)
    if collection is None:
        collection = default_collection()
    resolved_asset_dir = Path(asset_dir or settings.ASSET_DIR)
    resolved_config_dir = config_dir or settings.CONFIG_DIR
    window_config = load_config(resolved_config_dir)

    # Fresh registrations each bootstrap so tests stay isolated
    for key, value in [
        ("event_bus", bus),
        ("logging_service", logging_service),
        ("error_service", error_service),
    ]:
        services.register(key, value, allow_override=True, origin=__name__)

    logging_service.attach_root()
    if install_excepthook is None:
        install_excepthook = not headless
    if install_excepthook:
        error_service.install()

    duration = time.perf_counter() - started
    _log.info(
        "Gallery ready: %d items, assets in %s (%.3fs)",
        len(collection),
        resolved_asset_dir,
        duration,
    )
    bus.publish(GUIEvent.STARTUP_COMPLETE, {"items": len(collection), "headless": headless})
    return AppContext(
        qt_app=qt_app,
        headless=headless,
        collection=collection,
        asset_dir=resolved_asset_dir,
        config_dir=resolved_config_dir,
        window_config=window_config,
        event_bus=bus,
        logging_service=logging_service,
        error_service=error_service,
        services=services,
        duration_s=duration,
        metadata={"qt_available": qt_app is not None},
    )
