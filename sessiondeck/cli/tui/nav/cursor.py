"""Selection cursor over an ordered list."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Cursor:
    """Bounded index into a list of ``count`` items.

    Movement clamps to ``[0, count - 1]`` and never wraps. An empty list pins
    the position at 0.
    """

    position: int = 0
    count: int = 0

    def __post_init__(self) -> None:
        self.position = self._clamp(self.position)

    def _clamp(self, index: int) -> int:
        if self.count <= 0:
            return 0
        return max(0, min(self.count - 1, index))

    @property
    def at_start(self) -> bool:
        return self.position == 0

    @property
    def at_end(self) -> bool:
        return self.count == 0 or self.position == self.count - 1

    def move(self, delta: int) -> bool:
        """Move by ``delta`` rows, clamping at both ends.

        Returns:
            True if the position changed
        """
        if self.count <= 0:
            return False
        previous = self.position
        self.position = self._clamp(self.position + delta)
        return self.position != previous

    def move_to(self, index: int) -> bool:
        """Jump to ``index`` (clamped)."""
        previous = self.position
        self.position = self._clamp(index)
        return self.position != previous

    def set_count(self, count: int) -> None:
        """Replace the list length and re-clamp the position into it."""
        self.count = max(0, count)
        self.position = self._clamp(self.position)
