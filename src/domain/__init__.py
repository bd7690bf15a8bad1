"""Gallery domain: items, the fixed collection and view state snapshots."""

from .models import (  # noqa: F401
    GalleryItem,
    GalleryCollection,
    ViewState,
    GalleryError,
    EmptyCollectionError,
    DuplicateItemError,
)
from .catalog import default_collection, default_items  # noqa: F401
