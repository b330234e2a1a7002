"""
Root Configuration Manifest.

Aggregates the order list and telemetry settings into a single frozen
``Config`` and provides the recipe loading entry point used by the CLI.

Example:
    >>> cfg = Config.from_recipe(Path("recipe.yaml"), overrides={"telemetry.log_level": "DEBUG"})
    >>> [o.store for o in cfg.orders]
    ['chair', 'table']
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ...exceptions import WorkshopConfigError
from ...stores import available_stores
from ..io import load_config_from_yaml
from ..paths import LOGGER_NAME
from .order_config import OrderConfig
from .telemetry_config import TelemetryConfig

logger = logging.getLogger(LOGGER_NAME)

_SECTIONS = ("orders", "telemetry")


def _default_orders() -> list[OrderConfig]:
    """The demo run: a wooden chair and a plastic table."""
    return [
        OrderConfig(store="chair", material="wood"),
        OrderConfig(store="table", material="plastic"),
    ]


class Config(BaseModel):
    """
    Top-level workshop configuration.

    Attributes:
        orders: Orders to place, in sequence.
        telemetry: Logging policy.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    orders: list[OrderConfig] = Field(default_factory=_default_orders)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    @model_validator(mode="before")
    @classmethod
    def handle_empty_config(cls, data: Any) -> Any:
        """Map empty YAML sections (parsed as None) to their defaults."""
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None or k not in _SECTIONS}
        return data

    @model_validator(mode="after")
    def check_stores_registered(self) -> Config:
        """Reject orders addressed to stores the registry does not know."""
        known = available_stores()
        for order in self.orders:
            if order.store not in known:
                raise ValueError(
                    f"Unknown store '{order.store}'. Available: {', '.join(known)}"
                )
        return self

    @classmethod
    def from_recipe(cls, recipe_path: Path, overrides: dict[str, Any] | None = None) -> Config:
        """
        Build a Config from a YAML recipe, applying dotted-path overrides.

        Args:
            recipe_path: Path to the YAML recipe.
            overrides: Mapping like ``{"orders.0.material": "plastic"}``.

        Returns:
            Validated, frozen Config.

        Raises:
            FileNotFoundError: If the recipe does not exist.
            WorkshopConfigError: If the recipe is not valid YAML, its root is not a mapping, or an
                override addresses a path that does not exist.
            pydantic.ValidationError: If the resulting values are invalid.
        """
        try:
            raw = load_config_from_yaml(recipe_path)
        except yaml.YAMLError as e:
            logger.error(f"Malformed recipe {recipe_path}: {e}")
            raise WorkshopConfigError(f"Recipe is not valid YAML: {recipe_path}") from e
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise WorkshopConfigError(
                f"Recipe root must be a mapping, got {type(raw).__name__}: {recipe_path}"
            )

        if overrides:
            raw = _apply_overrides(raw, overrides)

        cfg = cls.model_validate(raw)
        logger.debug(f"Recipe loaded: {recipe_path.name} ({len(cfg.orders)} orders)")
        return cfg


# OVERRIDES
def _apply_overrides(data: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """
    Return a deep copy of *data* with each dotted-path override applied.

    Integer segments index into lists (``orders.1.store``). Intermediate
    sections missing from the recipe are created as mappings, so
    ``telemetry.log_level`` works on a recipe without a telemetry block.

    Raises:
        WorkshopConfigError: On a list index that is not an integer or is out
            of range, or when traversal hits a scalar.
    """
    result = copy.deepcopy(data)
    for dotted, value in overrides.items():
        parts = dotted.split(".")
        node: Any = result
        for part in parts[:-1]:
            node = _descend(node, part, dotted)
        _assign(node, parts[-1], value, dotted)
    return result


def _descend(node: Any, part: str, dotted: str) -> Any:
    if isinstance(node, list):
        idx = _list_index(node, part, dotted)
        return node[idx]
    if isinstance(node, dict):
        child = node.get(part)
        if child is None:
            child = {}
            node[part] = child
        return child
    raise WorkshopConfigError(f"Cannot apply override '{dotted}': '{part}' is not a section")


def _assign(node: Any, part: str, value: Any, dotted: str) -> None:
    if isinstance(node, list):
        node[_list_index(node, part, dotted)] = value
    elif isinstance(node, dict):
        node[part] = value
    else:
        raise WorkshopConfigError(f"Cannot apply override '{dotted}': '{part}' is not a section")


def _list_index(node: list, part: str, dotted: str) -> int:
    try:
        idx = int(part)
    except ValueError:
        raise WorkshopConfigError(
            f"Cannot apply override '{dotted}': expected a list index, got '{part}'"
        ) from None
    if not -len(node) <= idx < len(node):
        raise WorkshopConfigError(
            f"Cannot apply override '{dotted}': index {idx} out of range ({len(node)} items)"
        )
    return idx
