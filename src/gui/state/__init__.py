"""Authoritative gallery session state."""

from .gallery_store import GalleryStore, StateChange  # noqa: F401

__all__ = ["GalleryStore", "StateChange"]
