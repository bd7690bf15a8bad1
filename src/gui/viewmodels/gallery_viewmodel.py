"""Gallery projection: what the screen shows for a given ViewState.

``project_gallery`` is a pure function of the collection and the state. The
widget layer only copies the resulting ``GalleryRenderModel`` into labels
and buttons, so everything visible can be checked without a QApplication.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from config import settings
from domain.models import GalleryCollection, ViewState


@dataclass(frozen=True)
class GalleryLabels:
    banner: str = settings.APP_TITLE
    show_description: str = "Voir la description"
    hide_description: str = "Masquer la description"
    previous: str = "Précédent"
    next: str = "Suivant"


DEFAULT_LABELS = GalleryLabels()


@dataclass(frozen=True)
class GalleryRenderModel:
    banner: str
    image_ref: str
    image_alt: str
    title: str
    subtitle_line: str
    toggle_visible: bool
    toggle_label: Optional[str]
    description_text: Optional[str]
    previous_label: str
    next_label: str
    position_text: str

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def format_subtitle(subtitle: str, year: str) -> str:
    return f"{subtitle} ({year})"


def format_position(index: int, total: int) -> str:
    return f"{index + 1}/{total}"


def project_gallery(
    collection: GalleryCollection,
    state: ViewState,
    labels: GalleryLabels = DEFAULT_LABELS,
) -> GalleryRenderModel:
    item = collection[state.current_index]
    has_description = item.description is not None
    toggle_label: Optional[str] = None
    description_text: Optional[str] = None
    if has_description:
        toggle_label = (
            labels.hide_description if state.description_visible else labels.show_description
        )
        if state.description_visible:
            description_text = item.description
    return GalleryRenderModel(
        banner=labels.banner,
        image_ref=item.image_ref,
        image_alt=item.title,
        title=item.title,
        subtitle_line=format_subtitle(item.subtitle, item.year),
        toggle_visible=has_description,
        toggle_label=toggle_label,
        description_text=description_text,
        previous_label=labels.previous,
        next_label=labels.next,
        position_text=format_position(state.current_index, len(collection)),
    )


__all__ = [
    "GalleryLabels",
    "DEFAULT_LABELS",
    "GalleryRenderModel",
    "format_subtitle",
    "format_position",
    "project_gallery",
]
