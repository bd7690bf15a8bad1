from pathlib import Path

from PyQt6.QtGui import QColor, QPixmap

from gui.assets import AssetResolver


def _write_png(path: Path, w: int = 40, h: int = 20) -> None:
    pm = QPixmap(w, h)
    pm.fill(QColor("red"))
    assert pm.save(str(path), "PNG")


def test_resolve_path_by_extension_order(tmp_path):
    (tmp_path / "gtr_35.jpg").write_bytes(b"x")
    (tmp_path / "gtr_35.png").write_bytes(b"x")
    resolver = AssetResolver(tmp_path)
    assert resolver.resolve_path("gtr_35") == tmp_path / "gtr_35.png"
    assert resolver.resolve_path("missing") is None
    assert resolver.missing_refs(["gtr_35", "missing"]) == ["missing"]


def test_load_pixmap_cached(qtbot, tmp_path):
    _write_png(tmp_path / "gls_600.png")
    resolver = AssetResolver(tmp_path)
    first = resolver.load_pixmap("gls_600")
    assert first is not None and first.width() == 40
    assert resolver.load_pixmap("gls_600") is first


def test_missing_asset_warns_once(qtbot, tmp_path, caplog):
    resolver = AssetResolver(tmp_path)
    with caplog.at_level("WARNING", logger="gui.assets"):
        assert resolver.load_pixmap("nope") is None
        assert resolver.load_pixmap("nope") is None
    assert len([r for r in caplog.records if "nope" in r.getMessage()]) == 1


def test_unreadable_asset_returns_none(qtbot, tmp_path):
    (tmp_path / "broken.png").write_bytes(b"not an image")
    assert AssetResolver(tmp_path).load_pixmap("broken") is None
