"""GalleryView: the single gallery screen.

Layout, top to bottom: image wall, info panel (title, maker/year line,
description toggle and text), navigation row (previous, position, next).

The view holds no gallery state of its own. It subscribes to the
GalleryStore, re-runs ``project_gallery`` on every notification and copies
the render model into its widgets. Buttons and shortcuts call the store.
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QKeySequence, QPixmap, QShortcut
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from gui.assets import AssetResolver
from gui.services.event_bus import Event, Subscription
from gui.state.gallery_store import GalleryStore
from gui.viewmodels.gallery_viewmodel import (
    DEFAULT_LABELS,
    GalleryLabels,
    GalleryRenderModel,
    project_gallery,
)

__all__ = ["ImageWall", "GalleryView"]

_log = logging.getLogger(__name__)


class ImageWall(QLabel):
    """Label that keeps its pixmap fitted to the available space, aspect preserved."""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._source: Optional[QPixmap] = None
        self.setObjectName("galleryImageWall")
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setMinimumSize(120, 120)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

    def set_image(self, pixmap: Optional[QPixmap], alt_text: str) -> None:
        self._source = pixmap
        if pixmap is None:
            self.clear()
        else:
            self._refit()
        self.set_alt_text(alt_text)

    def set_alt_text(self, alt_text: str) -> None:
        """Accessible name and tooltip; also the visible text while no image is loaded."""
        self.setAccessibleName(alt_text)
        self.setToolTip(alt_text)
        if self._source is None:
            self.setText(alt_text)

    def has_image(self) -> bool:
        return self._source is not None

    def resizeEvent(self, event):  # noqa: N802 - Qt override
        super().resizeEvent(event)
        if self._source is not None:
            self._refit()

    def _refit(self) -> None:
        if self._source is None:
            return
        scaled = self._source.scaled(
            self.contentsRect().size(),
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self.setPixmap(scaled)


class GalleryView(QWidget):
    def __init__(
        self,
        store: GalleryStore,
        assets: AssetResolver,
        labels: GalleryLabels = DEFAULT_LABELS,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.store = store
        self.assets = assets
        self.labels = labels
        self._model: Optional[GalleryRenderModel] = None
        self._build_ui()
        self._install_shortcuts()
        self._subscription: Optional[Subscription] = store.subscribe(self._on_state_changed)
        self.render(project_gallery(store.collection, store.state, labels))

    def _build_ui(self):
        root = QVBoxLayout(self)
        root.setContentsMargins(16, 16, 16, 16)

        self.banner_label = QLabel(self.labels.banner)
        self.banner_label.setObjectName("galleryBanner")
        self.banner_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self.banner_label)

        self.image_wall = ImageWall()
        root.addWidget(self.image_wall, 1)

        info = QFrame()
        info.setObjectName("galleryInfoPanel")
        info_layout = QVBoxLayout(info)
        self.title_label = QLabel()
        self.title_label.setObjectName("galleryItemTitle")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        info_layout.addWidget(self.title_label)
        self.subtitle_label = QLabel()
        self.subtitle_label.setObjectName("galleryItemSubtitle")
        self.subtitle_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        info_layout.addWidget(self.subtitle_label)
        self.toggle_button = QPushButton()
        self.toggle_button.setObjectName("galleryDescriptionToggle")
        self.toggle_button.setFlat(True)
        self.toggle_button.clicked.connect(lambda: self.store.toggle_description())  # type: ignore
        info_layout.addWidget(self.toggle_button, 0, Qt.AlignmentFlag.AlignHCenter)
        self.description_label = QLabel()
        self.description_label.setObjectName("galleryDescription")
        self.description_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.description_label.setWordWrap(True)
        info_layout.addWidget(self.description_label)
        root.addWidget(info)

        nav = QHBoxLayout()
        self.previous_button = QPushButton(self.labels.previous)
        self.previous_button.setObjectName("galleryPrevious")
        self.previous_button.clicked.connect(lambda: self.store.previous())  # type: ignore
        nav.addWidget(self.previous_button, 1)
        self.position_label = QLabel()
        self.position_label.setObjectName("galleryPosition")
        self.position_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        nav.addWidget(self.position_label)
        self.next_button = QPushButton(self.labels.next)
        self.next_button.setObjectName("galleryNext")
        self.next_button.clicked.connect(lambda: self.store.next())  # type: ignore
        nav.addWidget(self.next_button, 1)
        root.addLayout(nav)

    def _install_shortcuts(self):
        self._shortcuts = []
        for key, slot in (
            (Qt.Key.Key_Left, lambda: self.store.previous()),
            (Qt.Key.Key_Right, lambda: self.store.next()),
            (Qt.Key.Key_D, self._toggle_if_available),
        ):
            shortcut = QShortcut(QKeySequence(key), self)
            shortcut.activated.connect(slot)  # type: ignore
            self._shortcuts.append(shortcut)

    def _toggle_if_available(self):
        if self._model is not None and self._model.toggle_visible:
            self.store.toggle_description()

    # Rendering --------------------------------------------------------
    def _on_state_changed(self, event: Event) -> None:
        self.render(project_gallery(self.store.collection, self.store.state, self.labels))

    def render(self, model: GalleryRenderModel) -> None:
        previous = self._model
        self._model = model
        if previous is None or previous.image_ref != model.image_ref:
            self.image_wall.set_image(self.assets.load_pixmap(model.image_ref), model.image_alt)
        else:
            self.image_wall.set_alt_text(model.image_alt)
        self.banner_label.setText(model.banner)
        self.title_label.setText(model.title)
        self.subtitle_label.setText(model.subtitle_line)
        self.toggle_button.setVisible(model.toggle_visible)
        self.toggle_button.setText(model.toggle_label or "")
        self.description_label.setVisible(model.description_text is not None)
        self.description_label.setText(model.description_text or "")
        self.previous_button.setText(model.previous_label)
        self.next_button.setText(model.next_label)
        self.position_label.setText(model.position_text)

    def current_model(self) -> Optional[GalleryRenderModel]:
        return self._model

    # Lifecycle --------------------------------------------------------
    def detach(self) -> None:
        if self._subscription is not None:
            self.store.unsubscribe(self._subscription)
            self._subscription = None
            _log.debug("GalleryView detached from store")

    def closeEvent(self, event):  # noqa: N802 - Qt override
        self.detach()
        super().closeEvent(event)
