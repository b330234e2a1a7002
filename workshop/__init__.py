"""
Workshop: the Factory Method pattern, applied to a furniture store.

Top-level convenience API re-exporting the most commonly used components
from subpackages:

    from workshop import get_store, build_chair_maker, run_order_phase
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("workshop-furniture")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from .core import LOGGER_NAME, Logger, LogStyle
from .exceptions import WorkshopConfigError, WorkshopError
from .pipeline import OrderPhaseResult, run_order_phase
from .products import (
    Furniture,
    MaterialTag,
    PlasticChair,
    PlasticTable,
    WoodenChair,
    WoodenTable,
)
from .stores import (
    FurnitureStore,
    available_stores,
    build_chair_maker,
    build_table_maker,
    get_store,
)

__all__ = [
    "__version__",
    # Core
    "LOGGER_NAME",
    "Logger",
    "LogStyle",
    # Errors
    "WorkshopError",
    "WorkshopConfigError",
    # Products
    "Furniture",
    "MaterialTag",
    "WoodenChair",
    "PlasticChair",
    "WoodenTable",
    "PlasticTable",
    # Stores
    "FurnitureStore",
    "build_chair_maker",
    "build_table_maker",
    "get_store",
    "available_stores",
    # Pipeline
    "OrderPhaseResult",
    "run_order_phase",
]
