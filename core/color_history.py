"""
Color History
Bounded most-recently-used list of brush colors
"""

from typing import List, Set

from .data_structures import Color, pack_rgba

HISTORY_SIZE = 4


class ColorHistory:
    """Ordered, duplicate-free list of recently picked colors (newest first)"""

    def __init__(self, capacity: int = HISTORY_SIZE):
        self.capacity = max(1, capacity)
        self._colors: List[Color] = []
        self._members: Set[int] = set()

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, color: Color) -> bool:
        return pack_rgba(color) in self._members

    def add(self, color: Color) -> bool:
        """
        Record a picked color

        A color that is already present keeps its position. A new color goes
        to the front; when the history is full the oldest entry is evicted
        first.

        Args:
            color: RGBA color that was just picked

        Returns:
            True if the history changed
        """
        key = pack_rgba(color)
        if key in self._members:
            return False
        if len(self._colors) >= self.capacity:
            evicted = self._colors.pop()
            self._members.discard(pack_rgba(evicted))
        self._colors.insert(0, tuple(color))
        self._members.add(key)
        return True

    def get(self, slot: int):
        """Return the color in a slot, or None when the slot is empty."""
        if 0 <= slot < len(self._colors):
            return self._colors[slot]
        return None

    def colors(self) -> List[Color]:
        return list(self._colors)

    def members(self) -> Set[int]:
        return set(self._members)
