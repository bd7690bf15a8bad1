"""Application layer: bootstrap and window config persistence."""

from .bootstrap import create_app, AppContext  # noqa: F401
from .config_store import (  # noqa: F401
    WindowConfig,
    load_config,
    save_config,
    CONFIG_VERSION,
)

__all__ = [
    "create_app",
    "AppContext",
    "WindowConfig",
    "load_config",
    "save_config",
    "CONFIG_VERSION",
]
