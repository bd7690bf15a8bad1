"""Window configuration persistence.

Only the main window's geometry survives a restart; the gallery position
and description visibility always start fresh.

- Pure logic (no Qt import) so it is testable headless.
- Versioned schema; a file written by another version is ignored.
- Corrupt files produce defaults instead of raising.
- Writes go through a temporary file and an atomic replace.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

__all__ = ["WindowConfig", "load_config", "save_config", "CONFIG_VERSION", "DEFAULT_FILENAME"]

CONFIG_VERSION = 1

DEFAULT_FILENAME = "window_state.json"

_log = logging.getLogger(__name__)


@dataclass(slots=True)
class WindowConfig:
    """Serializable main window state.

    Attributes
    ----------
    version: Schema version.
    x, y: Last top-left window coordinates (None if unknown).
    width, height: Last window size.
    maximized: Whether the window was maximized at shutdown.
    """

    version: int = CONFIG_VERSION
    x: Optional[int] = None
    y: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    maximized: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WindowConfig":
        def _opt_int(key: str) -> Optional[int]:
            value = data.get(key)
            return None if value is None else int(value)

        return cls(
            version=int(data.get("version", CONFIG_VERSION)),
            x=_opt_int("x"),
            y=_opt_int("y"),
            width=_opt_int("width"),
            height=_opt_int("height"),
            maximized=bool(data.get("maximized", False)),
        )

    def has_geometry(self) -> bool:
        return None not in (self.x, self.y, self.width, self.height)


def _resolve_path(base_dir: str | Path | None) -> Path:
    base = Path(base_dir) if base_dir else Path.cwd()
    return base / DEFAULT_FILENAME


def load_config(base_dir: str | Path | None = None) -> WindowConfig:
    """Load the window config from ``base_dir`` (defaults to CWD)."""
    path = _resolve_path(base_dir)
    if not path.exists():
        return WindowConfig()
    try:
        cfg = WindowConfig.from_dict(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        _log.warning("Ignoring unreadable window config %s: %s", path, exc)
        return WindowConfig()
    if cfg.version != CONFIG_VERSION:
        _log.info("Window config version %s != %s; using defaults", cfg.version, CONFIG_VERSION)
        return WindowConfig()
    return cfg


def save_config(cfg: WindowConfig, base_dir: str | Path | None = None) -> Path:
    """Persist the window config; returns the written path."""
    path = _resolve_path(base_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(cfg.to_dict(), indent=2), encoding="utf-8")
    tmp.replace(path)
    return path
