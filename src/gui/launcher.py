"""Command line launcher for ``python -m gui`` and the ``car-gallery`` script."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from config import settings
from gui.app.bootstrap import AppContext, create_app
from gui.viewmodels.gallery_viewmodel import project_gallery

_log = logging.getLogger(__name__)


def _log_level(value: str) -> str:
    level = value.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise argparse.ArgumentTypeError(f"unknown log level: {value}")
    return level


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="car-gallery", description=settings.APP_TITLE)
    p.add_argument("--assets", default=None, help="Directory holding the gallery images")
    p.add_argument("--config-dir", default=None, help="Directory for window_state.json")
    p.add_argument(
        "--log-level", default=None, type=_log_level, help="Logging level (DEBUG, INFO, ...)"
    )
    p.add_argument(
        "--trace",
        action="store_true",
        help="Record event bus traffic and log it at INFO on exit",
    )
    p.add_argument(
        "--dump",
        action="store_true",
        help="Print the initial screen as JSON and exit without opening a window",
    )
    return p


def dump_initial_screen(ctx: AppContext) -> str:
    store = ctx.create_store()
    model = project_gallery(store.collection, store.state)
    return json.dumps(model.as_dict(), indent=2, ensure_ascii=False)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    ctx = create_app(
        headless=args.dump,
        asset_dir=args.assets,
        config_dir=args.config_dir,
        log_level=args.log_level,
        trace_events=args.trace,
    )
    try:
        if args.dump:
            print(dump_initial_screen(ctx))  # noqa: T201
            return 0
        return _run_window(ctx)  # pragma: no cover - GUI runtime
    finally:
        ctx.shutdown()


def _run_window(ctx: AppContext) -> int:  # pragma: no cover - GUI runtime
    from gui.assets import AssetResolver
    from gui.main_window import MainWindow

    assets = AssetResolver(ctx.asset_dir)
    missing = assets.missing_refs(item.image_ref for item in ctx.collection)
    if missing:
        _log.warning("Missing gallery images: %s", ", ".join(missing))
    win = MainWindow(
        ctx.create_store(),
        assets,
        window_config=ctx.window_config,
        config_dir=ctx.config_dir,
    )
    win.show()
    return ctx.qt_app.exec()


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
