"""Main window hosting the gallery screen."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QMainWindow

from config import settings
from gui.app.config_store import WindowConfig, save_config
from gui.assets import AssetResolver
from gui.state.gallery_store import GalleryStore
from gui.views.gallery_view import GalleryView

_log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(
        self,
        store: GalleryStore,
        assets: AssetResolver,
        *,
        window_config: Optional[WindowConfig] = None,
        config_dir: str | Path | None = None,
    ):
        super().__init__()
        self.window_config = window_config or WindowConfig()
        self.config_dir = config_dir
        self.gallery_view = GalleryView(store, assets)
        self.setCentralWidget(self.gallery_view)
        self.setWindowTitle(self.gallery_view.labels.banner)
        self._restore_geometry()

    def _restore_geometry(self):
        cfg = self.window_config
        if cfg.has_geometry():
            self.setGeometry(cfg.x, cfg.y, cfg.width, cfg.height)  # type: ignore[arg-type]
        else:
            self.resize(*settings.DEFAULT_WINDOW_SIZE)
        if cfg.maximized:
            self.setWindowState(self.windowState() | Qt.WindowState.WindowMaximized)

    def snapshot_geometry(self) -> WindowConfig:
        geo = self.normalGeometry() if self.isMaximized() else self.geometry()
        self.window_config = WindowConfig(
            x=geo.x(),
            y=geo.y(),
            width=geo.width(),
            height=geo.height(),
            maximized=self.isMaximized(),
        )
        return self.window_config

    def closeEvent(self, event):  # type: ignore[override]
        try:
            path = save_config(self.snapshot_geometry(), self.config_dir)
            _log.debug("Window geometry saved to %s", path)
        except OSError:
            _log.exception("Could not save window geometry")
        finally:
            self.gallery_view.detach()
            super().closeEvent(event)


__all__ = ["MainWindow"]
