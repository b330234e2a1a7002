"""
Configuration Package Initialization.

Provides a flat public API for configuration components. Uses PEP 562 lazy
loading so that importing ``workshop.core`` does not pull in the store
registry (which the root ``Config`` validates against) until a config class
is actually requested.

Example:
    >>> from workshop.core.config import Config
    >>> cfg = Config()
    >>> [(o.store, o.material) for o in cfg.orders]
    [('chair', 'wood'), ('table', 'plastic')]
"""

from importlib import import_module
from typing import Any

__all__ = [
    "Config",
    "OrderConfig",
    "TelemetryConfig",
    "ValidatedPath",
]

# LAZY IMPORTS MAPPING
_PKG = "workshop.core.config"

_LAZY_IMPORTS: dict[str, str] = {
    "Config": f"{_PKG}.manifest",
    "OrderConfig": f"{_PKG}.order_config",
    "TelemetryConfig": f"{_PKG}.telemetry_config",
    "ValidatedPath": f"{_PKG}.types",
}


# LAZY LOADER FUNCTION
def __getattr__(name: str) -> Any:
    """
    Lazily import configuration components on first access.

    Raises:
        AttributeError: If name is not in the public API (__all__).
    """
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module = import_module(_LAZY_IMPORTS[name])
    attr = getattr(module, name)

    # Cache on module for future access
    globals()[name] = attr
    return attr


def __dir__() -> list[str]:
    return sorted(__all__)
