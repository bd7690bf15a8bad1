from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QKeySequence, QPixmap, QShortcut

from domain.catalog import default_collection
from domain.models import GalleryCollection, GalleryItem
from gui.services.event_bus import EventBus
from gui.assets import AssetResolver
from gui.state.gallery_store import GalleryStore
from gui.views.gallery_view import GalleryView


def _view(qtbot, collection, asset_dir):
    store = GalleryStore(collection)
    view = GalleryView(store, AssetResolver(asset_dir))
    qtbot.addWidget(view)
    return store, view


def _shortcut(view, key):
    for shortcut in view.findChildren(QShortcut):
        if shortcut.key() == QKeySequence(key):
            return shortcut
    raise AssertionError(f"no shortcut for {key!r}")


def test_initial_render(qtbot, tmp_path):
    _, view = _view(qtbot, default_collection(), tmp_path)
    assert view.banner_label.text() == "Car Gallery"
    assert view.title_label.text() == "Mercedes-Maybach GLS"
    assert view.subtitle_label.text() == "Mercedes-Benz (2024)"
    assert view.position_label.text() == "1/4"
    assert view.previous_button.text() == "Précédent"
    assert view.next_button.text() == "Suivant"
    assert not view.toggle_button.isHidden()
    assert view.toggle_button.text() == "Voir la description"
    assert view.description_label.isHidden()


def test_buttons_drive_the_store(qtbot, tmp_path):
    store, view = _view(qtbot, default_collection(), tmp_path)
    view.previous_button.click()
    assert store.state.current_index == 3
    assert view.position_label.text() == "4/4"
    assert view.title_label.text() == "Lexus NX"
    view.next_button.click()
    assert store.state.current_index == 0
    assert view.position_label.text() == "1/4"


def test_toggle_shows_and_navigation_hides_description(qtbot, tmp_path):
    store, view = _view(qtbot, default_collection(), tmp_path)
    view.toggle_button.click()
    assert store.state.description_visible is True
    assert not view.description_label.isHidden()
    assert view.description_label.text() == store.current_item().description
    assert view.toggle_button.text() == "Masquer la description"
    view.next_button.click()
    assert store.state.current_index == 1
    assert view.description_label.isHidden()
    assert view.toggle_button.text() == "Voir la description"


def test_item_without_description_hides_toggle(qtbot, tmp_path, mixed_items):
    store, view = _view(qtbot, mixed_items, tmp_path)
    view.next_button.click()
    assert store.current_item().description is None
    assert view.toggle_button.isHidden()
    assert view.description_label.isHidden()
    view.next_button.click()
    assert not view.toggle_button.isHidden()


def test_view_follows_external_store_changes(qtbot, tmp_path, four_items):
    store, view = _view(qtbot, four_items, tmp_path)
    store.next()
    store.next()
    assert view.current_model().position_text == "3/4"
    assert view.title_label.text() == "Car 3"


def test_missing_image_falls_back_to_title(qtbot, tmp_path, four_items):
    _, view = _view(qtbot, four_items, tmp_path)
    assert not view.image_wall.has_image()
    assert view.image_wall.text() == "Car 1"


def test_image_is_fitted_with_aspect_ratio(qtbot, tmp_path, four_items):
    pm = QPixmap(400, 200)
    pm.fill(QColor("blue"))
    assert pm.save(str(tmp_path / "car_1.png"), "PNG")
    _, view = _view(qtbot, four_items, tmp_path)
    assert view.image_wall.has_image()
    view.show()
    view.image_wall.resize(200, 200)
    shown = view.image_wall.pixmap()
    assert shown is not None and not shown.isNull()
    assert abs(shown.width() - 2 * shown.height()) <= 1
    assert shown.width() <= 200


def test_detach_stops_rendering(qtbot, tmp_path, four_items):
    store, view = _view(qtbot, four_items, tmp_path)
    view.detach()
    store.next()
    assert view.position_label.text() == "1/4"
    assert store.event_bus.subscriber_count("gallery_state_changed") == 0


def test_arrow_shortcuts_navigate_with_wraparound(qtbot, tmp_path, four_items):
    store, view = _view(qtbot, four_items, tmp_path)
    _shortcut(view, Qt.Key.Key_Left).activated.emit()
    assert store.state.current_index == 3
    assert view.position_label.text() == "4/4"
    _shortcut(view, Qt.Key.Key_Right).activated.emit()
    assert store.state.current_index == 0
    _shortcut(view, Qt.Key.Key_Right).activated.emit()
    assert view.title_label.text() == "Car 2"


def test_d_shortcut_toggles_description(qtbot, tmp_path, four_items):
    store, view = _view(qtbot, four_items, tmp_path)
    toggle = _shortcut(view, Qt.Key.Key_D)
    toggle.activated.emit()
    assert store.state.description_visible is True
    assert view.description_label.text() == "desc 1"
    toggle.activated.emit()
    assert store.state.description_visible is False
    assert view.description_label.isHidden()


def test_d_shortcut_ignored_without_description(qtbot, tmp_path, mixed_items):
    store, view = _view(qtbot, mixed_items, tmp_path)
    _shortcut(view, Qt.Key.Key_Right).activated.emit()
    assert store.current_item().description is None
    seen = []
    store.subscribe(lambda evt: seen.append(evt.payload))
    _shortcut(view, Qt.Key.Key_D).activated.emit()
    assert seen == []
    assert store.state.description_visible is False
    assert view.toggle_button.isHidden()


def test_alt_text_follows_items_sharing_an_image(qtbot, tmp_path):
    pm = QPixmap(40, 20)
    pm.fill(QColor("red"))
    assert pm.save(str(tmp_path / "shared.png"), "PNG")
    items = GalleryCollection(
        [
            GalleryItem(id=1, image_ref="shared", title="Coupe", subtitle="Maker", year="2024"),
            GalleryItem(id=2, image_ref="shared", title="Cabriolet", subtitle="Maker", year="2024"),
        ]
    )
    store, view = _view(qtbot, items, tmp_path)
    assert view.image_wall.toolTip() == "Coupe"
    store.next()
    assert view.image_wall.has_image()
    assert view.image_wall.toolTip() == "Cabriolet"
    assert view.image_wall.accessibleName() == "Cabriolet"


def test_missing_shared_image_fallback_text_follows_title(qtbot, tmp_path):
    items = GalleryCollection(
        [
            GalleryItem(id=1, image_ref="shared", title="Coupe", subtitle="Maker", year="2024"),
            GalleryItem(id=2, image_ref="shared", title="Cabriolet", subtitle="Maker", year="2024"),
        ]
    )
    store, view = _view(qtbot, items, tmp_path)
    store.next()
    assert view.image_wall.text() == "Cabriolet"


def test_views_on_a_shared_bus_render_their_own_store(qtbot, tmp_path, four_items, mixed_items):
    bus = EventBus()
    first = GalleryStore(four_items, event_bus=bus)
    second = GalleryStore(mixed_items, event_bus=bus)
    first_view = GalleryView(first, AssetResolver(tmp_path))
    second_view = GalleryView(second, AssetResolver(tmp_path))
    qtbot.addWidget(first_view)
    qtbot.addWidget(second_view)
    first.previous()
    assert first_view.position_label.text() == "4/4"
    assert second_view.position_label.text() == "1/3"
    assert second_view.title_label.text() == mixed_items[0].title
    assert bus.errors == []
