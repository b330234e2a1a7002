"""
Core Utilities Package

Exposes logging, constants, and YAML I/O. Configuration classes live in
``workshop.core.config`` and are loaded lazily from there.
"""

# Input/Output Utilities
from .io import load_config_from_yaml, save_config_as_yaml

# Logging
from .logger import Logger, LogStyle

# Constants
from .paths import DEFAULT_RECIPE_NAME, LOGGER_NAME

__all__ = [
    # Constants
    "LOGGER_NAME",
    "DEFAULT_RECIPE_NAME",
    # Logging
    "Logger",
    "LogStyle",
    # I/O
    "save_config_as_yaml",
    "load_config_from_yaml",
]
