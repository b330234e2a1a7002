"""
Order Manifest.

One entry of a recipe's ``orders`` list: which store to visit and which
material to ask it for.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .types import MaterialName, StoreName


class OrderConfig(BaseModel):
    """
    A single furniture order.

    Attributes:
        store: Registered store name (case-insensitive, normalized to lower case).
        material: Raw material tag, passed to the store untouched.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    store: StoreName
    material: MaterialName = Field(default="wood")
