"""
Furniture Stores Package.

Provides the order workflow, the chair and table store variants, and the
registry that resolves store names to stores.
"""

from .factory import available_stores, get_store
from .makers import build_chair_maker, build_table_maker, create_chair, create_table
from .store import FurnitureCreator, FurnitureStore

__all__ = [
    "FurnitureStore",
    "FurnitureCreator",
    "create_chair",
    "create_table",
    "build_chair_maker",
    "build_table_maker",
    "get_store",
    "available_stores",
]
