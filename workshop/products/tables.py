"""Table products built by the table store."""

from __future__ import annotations

from .base import Furniture


class WoodenTable(Furniture):
    """Table built from wood."""

    def pack(self) -> None:
        pass

    def deliver(self) -> None:
        pass


class PlasticTable(Furniture):
    """Table built from plastic."""

    def pack(self) -> None:
        pass

    def deliver(self) -> None:
        pass
