"""
Static Constants Package.

Single source of truth for the logger identity and default file names.

Example:
    >>> from workshop.core.paths import LOGGER_NAME
    >>> logging.getLogger(LOGGER_NAME)
"""

from .constants import DEFAULT_RECIPE_NAME, LOGGER_NAME

__all__ = [
    "LOGGER_NAME",
    "DEFAULT_RECIPE_NAME",
]
