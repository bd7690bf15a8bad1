"""Image asset resolution for gallery items.

An item's ``image_ref`` is an opaque handle; the resolver maps it to a file
``<asset_dir>/<image_ref><ext>`` and loads it as a ``QPixmap``. Pixmaps are
cached per ref. A missing or unreadable file yields ``None`` and a single
warning per ref; the gallery view falls back to showing the item title.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Set

from PyQt6.QtGui import QPixmap

from config import settings

__all__ = ["AssetResolver"]

_log = logging.getLogger(__name__)


class AssetResolver:
    def __init__(
        self,
        asset_dir: str | Path,
        extensions: Iterable[str] = settings.ASSET_EXTENSIONS,
    ) -> None:
        self._asset_dir = Path(asset_dir)
        self._extensions = tuple(extensions)
        self._pixmaps: Dict[str, QPixmap] = {}
        self._reported: Set[str] = set()

    @property
    def asset_dir(self) -> Path:
        return self._asset_dir

    def resolve_path(self, image_ref: str) -> Optional[Path]:
        for ext in self._extensions:
            candidate = self._asset_dir / f"{image_ref}{ext}"
            if candidate.is_file():
                return candidate
        return None

    def load_pixmap(self, image_ref: str) -> Optional[QPixmap]:
        """Return the (cached) pixmap for ``image_ref``; requires a QGuiApplication."""
        cached = self._pixmaps.get(image_ref)
        if cached is not None:
            return cached
        path = self.resolve_path(image_ref)
        if path is None:
            self._report(image_ref, "no file in %s", self._asset_dir)
            return None
        pixmap = QPixmap(str(path))
        if pixmap.isNull():
            self._report(image_ref, "unreadable image %s", path)
            return None
        self._pixmaps[image_ref] = pixmap
        return pixmap

    def missing_refs(self, image_refs: Iterable[str]) -> list[str]:
        return [ref for ref in image_refs if self.resolve_path(ref) is None]

    def clear_cache(self) -> None:
        self._pixmaps.clear()
        self._reported.clear()

    def _report(self, image_ref: str, reason: str, *args: object) -> None:
        if image_ref in self._reported:
            return
        self._reported.add(image_ref)
        _log.warning("Asset '%s' unavailable: " + reason, image_ref, *args)
