"""GUI view layer: the gallery screen widgets."""

from .gallery_view import GalleryView, ImageWall  # noqa: F401
