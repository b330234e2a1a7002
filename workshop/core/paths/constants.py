"""
Project-wide Constants.

Module Attributes:
    LOGGER_NAME: Global logger identity used by all modules for log synchronization.
    DEFAULT_RECIPE_NAME: File name written by ``workshop init`` when none is given.
"""

from typing import Final

# Global logger identity used by all modules to ensure log synchronization
LOGGER_NAME: Final[str] = "Workshop"

# Starter recipe written by the CLI
DEFAULT_RECIPE_NAME: Final[str] = "recipe.yaml"
