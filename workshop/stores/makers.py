"""
Store Variants.

Each maker pairs a product family with the material catalog that selects
between its variants. Catalogs are keyed by ``MaterialTag``; UNKNOWN is never
a key, so unrecognized materials fall through to None.
"""

from __future__ import annotations

from typing import Mapping

from ..products import (
    Furniture,
    MaterialTag,
    PlasticChair,
    PlasticTable,
    WoodenChair,
    WoodenTable,
)
from .store import FurnitureStore

_CHAIR_CATALOG: Mapping[MaterialTag, type[Furniture]] = {
    MaterialTag.WOOD: WoodenChair,
    MaterialTag.PLASTIC: PlasticChair,
}

_TABLE_CATALOG: Mapping[MaterialTag, type[Furniture]] = {
    MaterialTag.WOOD: WoodenTable,
    MaterialTag.PLASTIC: PlasticTable,
}


def _build_from_catalog(
    catalog: Mapping[MaterialTag, type[Furniture]], tag: str
) -> Furniture | None:
    material = MaterialTag.parse(tag)
    if not material.is_known:
        return None
    return catalog[material]()


def create_chair(tag: str) -> Furniture | None:
    """Wood -> WoodenChair, plastic -> PlasticChair, anything else -> None."""
    return _build_from_catalog(_CHAIR_CATALOG, tag)


def create_table(tag: str) -> Furniture | None:
    """Wood -> WoodenTable, plastic -> PlasticTable, anything else -> None."""
    return _build_from_catalog(_TABLE_CATALOG, tag)


def build_chair_maker() -> FurnitureStore:
    """Store that builds chairs."""
    return FurnitureStore("chair", create_chair)


def build_table_maker() -> FurnitureStore:
    """Store that builds tables."""
    return FurnitureStore("table", create_table)
