"""Domain models for the car gallery."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

__all__ = [
    "GalleryItem",
    "GalleryCollection",
    "ViewState",
    "GalleryError",
    "EmptyCollectionError",
    "DuplicateItemError",
]


class GalleryError(ValueError):
    """Base class for invalid gallery data."""


class EmptyCollectionError(GalleryError):
    """Raised when a collection is built without any item."""


class DuplicateItemError(GalleryError):
    """Raised when two items of a collection share the same id."""


@dataclass(frozen=True, slots=True)
class GalleryItem:
    id: int
    image_ref: str  # opaque handle resolved by gui.assets
    title: str
    subtitle: str  # maker name
    year: str
    description: Optional[str] = None

    @property
    def has_description(self) -> bool:
        return self.description is not None


class GalleryCollection:
    """Fixed, ordered, non-empty sequence of gallery items.

    Built once at startup and never mutated afterwards: there is no insert,
    remove or update operation.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[GalleryItem]):
        data: Tuple[GalleryItem, ...] = tuple(items)
        if not data:
            raise EmptyCollectionError("A gallery collection needs at least one item")
        seen: set[int] = set()
        for item in data:
            if item.id in seen:
                raise DuplicateItemError(f"Duplicate gallery item id: {item.id}")
            seen.add(item.id)
        self._items = data

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> GalleryItem:
        return self._items[index]

    def __iter__(self) -> Iterator[GalleryItem]:
        return iter(self._items)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"GalleryCollection({len(self._items)} items)"

    def index_of(self, item_id: int) -> int:
        for i, item in enumerate(self._items):
            if item.id == item_id:
                return i
        raise KeyError(item_id)

    @property
    def items(self) -> Tuple[GalleryItem, ...]:
        return self._items


@dataclass(frozen=True, slots=True)
class ViewState:
    """Snapshot of one viewing session's position and description visibility."""

    current_index: int = 0
    description_visible: bool = False
