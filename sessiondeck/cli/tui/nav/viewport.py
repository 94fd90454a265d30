"""Scroll window that keeps a cursor row visible.

The offset is derived state: it is only ever produced by ``recompute`` from the
cursor position, the visible capacity and the item count. Scrolling is
minimal. A cursor that is already visible leaves the offset alone, a cursor
above the window pulls the window up to it, and a cursor below the window
pulls the window down until it is the last visible row.
"""

from __future__ import annotations

from dataclasses import dataclass


def recompute_offset(position: int, capacity: int, total: int, offset: int = 0) -> int:
    """Return the scroll offset that keeps ``position`` visible.

    Args:
        position: Cursor row
        capacity: Number of rows the window can show
        total: Number of items in the list
        offset: Previous offset (kept when the cursor is still visible)

    Returns:
        New offset in ``[0, max(0, total - capacity)]``
    """
    max_offset = max(0, total - capacity)
    if total <= capacity:
        return 0

    offset = max(0, min(offset, max_offset))
    if position < offset:
        offset = position
    elif position >= offset + capacity:
        offset = position - capacity + 1
    return max(0, min(offset, max_offset))


@dataclass
class Viewport:
    """Cached scroll window for a list with a fixed visible capacity."""

    capacity: int
    offset: int = 0
    total: int = 0

    def recompute(self, position: int, total: int | None = None) -> int:
        """Recompute the offset for ``position`` and return it."""
        if total is not None:
            self.total = total
        self.offset = recompute_offset(position, self.capacity, self.total, self.offset)
        return self.offset

    def reset(self) -> None:
        self.offset = 0

    def visible_range(self) -> range:
        """Item indices currently inside the window."""
        end = min(self.total, self.offset + self.capacity)
        return range(self.offset, end)

    @property
    def has_more_above(self) -> bool:
        return self.offset > 0

    @property
    def has_more_below(self) -> bool:
        return self.offset + self.capacity < self.total
