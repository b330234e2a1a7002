"""Chair products built by the chair store."""

from __future__ import annotations

from .base import Furniture


class WoodenChair(Furniture):
    """Chair built from wood."""

    def pack(self) -> None:
        pass

    def deliver(self) -> None:
        pass


class PlasticChair(Furniture):
    """Chair built from plastic."""

    def pack(self) -> None:
        pass

    def deliver(self) -> None:
        pass
