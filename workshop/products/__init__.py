"""
Furniture Products Package.

Exposes the product interface, the four concrete furniture variants, and
the material tag used by stores to choose between them.
"""

from .base import Furniture
from .chairs import PlasticChair, WoodenChair
from .materials import MaterialTag
from .tables import PlasticTable, WoodenTable

__all__ = [
    "Furniture",
    "MaterialTag",
    "WoodenChair",
    "PlasticChair",
    "WoodenTable",
    "PlasticTable",
]
