"""
Logging Package.

Available Components:

- Logger: Static utility for stream and file logging initialization.
- LogStyle: Unified logging style constants.
"""

from .logger import Logger
from .styles import LogStyle

__all__ = [
    "Logger",
    "LogStyle",
]
