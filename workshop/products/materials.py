"""
Material Tag Resolution.

Maps free-form material strings onto the closed set of materials the stores
know how to build with. Matching is case-insensitive and exact: no trimming,
no prefix matching. Anything unrecognized resolves to ``MaterialTag.UNKNOWN``.

Example:
    >>> MaterialTag.parse("Wood")
    <MaterialTag.WOOD: 'wood'>
    >>> MaterialTag.parse("WOOD123")
    <MaterialTag.UNKNOWN: 'unknown'>
"""

from __future__ import annotations

from enum import Enum


class MaterialTag(str, Enum):
    """Closed set of materials a store can be asked for."""

    WOOD = "wood"
    PLASTIC = "plastic"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, tag: str) -> MaterialTag:
        """
        Resolve a raw material string to a tag.

        Args:
            tag: Material name as typed by the caller.

        Returns:
            WOOD or PLASTIC on a case-insensitive match, UNKNOWN otherwise.
        """
        return _RECOGNIZED.get(tag.lower(), cls.UNKNOWN)

    @property
    def is_known(self) -> bool:
        return self is not MaterialTag.UNKNOWN


# "unknown" is deliberately absent: typing it yields UNKNOWN through the fallback
_RECOGNIZED: dict[str, MaterialTag] = {
    MaterialTag.WOOD.value: MaterialTag.WOOD,
    MaterialTag.PLASTIC.value: MaterialTag.PLASTIC,
}
