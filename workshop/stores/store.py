"""
Furniture Store Workflow.

``FurnitureStore`` owns the fixed ordering skeleton (create, pack, deliver)
and delegates the single varying step, choosing which product to build, to
a creation callable injected at construction time. Store variants are
therefore plain configurations of this class rather than subclasses.

An order for a material the store cannot build is a silent no-op: nothing
is created, nothing is packed or delivered, nothing is logged.
"""

from __future__ import annotations

import logging
from typing import Callable

from ..core.paths import LOGGER_NAME
from ..products import Furniture

logger = logging.getLogger(LOGGER_NAME)

FurnitureCreator = Callable[[str], "Furniture | None"]


class FurnitureStore:
    """
    Store running the order workflow around an injected product selector.

    Attributes:
        name: Registry name of the store (e.g. ``"chair"``).

    Example:
        >>> store = FurnitureStore("chair", create_chair)
        >>> store.order_furniture("wood")  # builds, packs and delivers a WoodenChair
    """

    def __init__(self, name: str, create_furniture: FurnitureCreator) -> None:
        self.name = name
        self._create_furniture = create_furniture

    def create_furniture(self, tag: str) -> Furniture | None:
        """
        Select and build the product for a material tag.

        Args:
            tag: Raw material name.

        Returns:
            A fresh product, or None when the material is not recognized.
        """
        return self._create_furniture(tag)

    def order_furniture(self, tag: str) -> None:
        """
        Build the product for *tag*, then pack and deliver it.

        Args:
            tag: Raw material name.
        """
        furniture = self.create_furniture(tag)
        if furniture is None:
            return

        furniture.pack()
        furniture.deliver()
        logger.debug(f"[{self.name}] delivered {type(furniture).__name__}")

    def __repr__(self) -> str:
        return f"FurnitureStore(name={self.name!r})"
