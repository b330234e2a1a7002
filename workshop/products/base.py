"""
Furniture Product Base.

Every buildable piece of furniture exposes the same two hooks, ``pack`` and
``deliver``. Both are intentionally empty: they are the extension points the
order workflow drives, and concrete products currently carry no behavior or
data beyond their type.
"""

from __future__ import annotations


class Furniture:
    """Common interface for all furniture products."""

    def pack(self) -> None:
        """Prepare the piece for shipping."""

    def deliver(self) -> None:
        """Hand the packed piece over to the customer."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
