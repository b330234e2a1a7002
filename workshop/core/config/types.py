"""
Semantic type Definitions & Validation Primitives.

Annotated types shared by the configuration schemas. Store names are
normalized here so every later lookup sees the same lower-case key; material
names are deliberately left raw because unrecognized materials are a valid,
silent outcome rather than a configuration error.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import AfterValidator, BeforeValidator, Field, PlainSerializer


# VALIDATORS
def _sanitize_path(v: Path) -> Path:
    """
    Resolve path to absolute form without disk side-effects.

    Args:
        v: Path object to sanitize

    Returns:
        Absolute Path with home directory expanded
    """
    return Path(v).expanduser().resolve()


def _stringify_material(v: object) -> object:
    """Render scalar materials (YAML numbers and booleans, auto-cast CLI values) as text."""
    if isinstance(v, (bool, int, float)):
        return str(v)
    return v


def _normalize_store_name(v: object) -> object:
    """Lower-case and strip store names; non-strings are left for Pydantic to reject."""
    if isinstance(v, str):
        return v.strip().lower()
    return v


# FILESYSTEM
ValidatedPath = Annotated[
    Path,
    AfterValidator(_sanitize_path),
    PlainSerializer(lambda v: str(v), when_used="json", return_type=str),
]

# ORDERS
StoreName = Annotated[str, BeforeValidator(_normalize_store_name), Field(min_length=1)]
MaterialName = Annotated[str, BeforeValidator(_stringify_material)]

# SYSTEM
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
