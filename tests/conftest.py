# Shared fixtures. Qt runs on the offscreen platform; a minimal 'qtbot'
# fallback is provided when pytest-qt is not installed (its fixture wins
# otherwise).

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from domain.models import GalleryCollection  # noqa: E402
from factories import make_collection, make_item  # noqa: E402
from gui.services.service_locator import services  # noqa: E402

try:  # If pytest-qt present, do nothing (its fixture will be used)
    import pytestqt  # type: ignore  # noqa: F401
except Exception:  # pragma: no cover
    try:
        from PyQt6.QtWidgets import QApplication
    except Exception:  # pragma: no cover
        QApplication = None  # type: ignore

    @pytest.fixture
    def qtbot():  # type: ignore
        if QApplication is None:
            pytest.skip("PyQt6 not available")
        QApplication.instance() or QApplication(sys.argv)  # type: ignore
        widgets = []

        class Bot:
            def addWidget(self, w):  # mimic pytest-qt API subset
                widgets.append(w)

        yield Bot()
        for w in widgets:
            w.close()
            w.deleteLater()


@pytest.fixture
def four_items() -> GalleryCollection:
    return make_collection(4)


@pytest.fixture
def mixed_items() -> GalleryCollection:
    """Items 1 and 3 have descriptions, item 2 has none."""
    return GalleryCollection([make_item(1), make_item(2, description=None), make_item(3)])


@pytest.fixture
def headless_ctx(tmp_path):
    from gui.app.bootstrap import create_app

    ctx = create_app(headless=True, config_dir=str(tmp_path), asset_dir=tmp_path)
    yield ctx
    ctx.shutdown()
    services.clear()
