"""
Input/Output & Persistence Utilities.

Recipe serialization (YAML) for the configuration layer and the CLI.
"""

from .serialization import load_config_from_yaml, save_config_as_yaml

__all__ = [
    "save_config_as_yaml",
    "load_config_from_yaml",
]
