"""Global configuration and constants for the car gallery."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

APP_TITLE: Final = "Car Gallery"
APP_ORGANIZATION: Final = "CarGallery"

_SRC_ROOT: Final = Path(__file__).resolve().parent.parent

# Image files named after each item's image_ref (e.g. gls_600.png)
ASSET_DIR: Final = os.environ.get("CAR_GALLERY_ASSET_DIR", str(_SRC_ROOT / "assets"))
ASSET_EXTENSIONS: Final = (".png", ".jpg", ".jpeg", ".webp", ".bmp")

# Directory holding window_state.json; defaults to the working directory
CONFIG_DIR: Final = os.environ.get("CAR_GALLERY_CONFIG_DIR") or None

LOG_LEVEL: Final = os.environ.get("CAR_GALLERY_LOG_LEVEL", "INFO").upper()
LOG_FORMAT: Final = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

DEFAULT_WINDOW_SIZE: Final = (480, 800)
