"""Built-in gallery content shipped with the application."""

from __future__ import annotations

from typing import List

from .models import GalleryCollection, GalleryItem

__all__ = ["default_items", "default_collection"]


def default_items() -> List[GalleryItem]:
    return [
        GalleryItem(
            id=1,
            image_ref="gls_600",
            title="Mercedes-Maybach GLS",
            subtitle="Mercedes-Benz",
            year="2024",
            description=(
                "SUV de luxe ultime combinant élégance et performance dans un design imposant"
            ),
        ),
        GalleryItem(
            id=2,
            image_ref="gtr_35",
            title="Nissan GT-R",
            subtitle="Nissan",
            year="2024",
            description=(
                "Supercar japonaise légendaire, symbole de performance et "
                "d'innovation technologique"
            ),
        ),
        GalleryItem(
            id=3,
            image_ref="urus_performante2",
            title="Lamborghini Urus",
            subtitle="Lamborghini",
            year="2024",
            description=(
                "Le super SUV italien qui redéfinit les codes du luxe sportif automobile"
            ),
        ),
        GalleryItem(
            id=4,
            image_ref="lexus_rx_350",
            title="Lexus NX",
            subtitle="Lexus",
            year="2024",
            description=(
                "SUV compact premium alliant raffinement japonais et design contemporain"
            ),
        ),
    ]


def default_collection() -> GalleryCollection:
    return GalleryCollection(default_items())
