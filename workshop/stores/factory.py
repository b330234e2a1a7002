"""
Store Factory Module.

Registry-based resolution of store names to store builders, so callers
(the CLI, the order pipeline, recipe validation) never import a concrete
maker directly.

Key Components:

- ``get_store``: Factory function for store resolution and instantiation
- ``available_stores``: Registered store names, for validation and help text
- ``_STORE_REGISTRY``: Internal mapping of store names to builders

Example:
    >>> from workshop.stores.factory import get_store
    >>> get_store("Chair").order_furniture("wood")
"""

from __future__ import annotations

import logging
from typing import Callable

from ..core.logger import LogStyle
from ..core.paths import LOGGER_NAME
from ..exceptions import WorkshopConfigError
from .makers import build_chair_maker, build_table_maker
from .store import FurnitureStore

logger = logging.getLogger(LOGGER_NAME)


_BuilderFn = Callable[[], FurnitureStore]

_STORE_REGISTRY: dict[str, _BuilderFn] = {
    "chair": build_chair_maker,
    "table": build_table_maker,
}


def available_stores() -> list[str]:
    """Registered store names, in registration order."""
    return list(_STORE_REGISTRY)


def get_store(name: str) -> FurnitureStore:
    """
    Resolve and instantiate a store by name.

    Args:
        name: Store identifier, matched case-insensitively.

    Returns:
        A fresh FurnitureStore.

    Raises:
        WorkshopConfigError: If the store is not found in the registry.
    """
    builder = _STORE_REGISTRY.get(name.strip().lower())
    if builder is None:
        error_msg = f"Store '{name}' is not registered in the Factory."
        logger.error(f"{LogStyle.FAILURE} {error_msg}")
        raise WorkshopConfigError(error_msg)

    return builder()
