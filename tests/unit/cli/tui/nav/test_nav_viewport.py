"""Unit tests for the scroll window."""

from __future__ import annotations

import pytest

from sessiondeck.cli.tui.nav import Cursor, Viewport, recompute_offset


def test_fifteen_items_capacity_ten_twelve_moves_down() -> None:
    """Test 12 downward moves over 15 items with 10 visible rows end at offset 3."""
    cursor = Cursor(count=15)
    viewport = Viewport(capacity=10, total=15)
    for _ in range(12):
        cursor.move(1)
        viewport.recompute(cursor.position)

    assert cursor.position == 12
    assert viewport.offset == 3
    assert list(viewport.visible_range()) == list(range(3, 13))


def test_up_moves_at_top_keep_offset_zero() -> None:
    """Test up moves at position 0 with everything visible keep offset 0."""
    cursor = Cursor(count=4)
    viewport = Viewport(capacity=10, total=4)
    for _ in range(5):
        cursor.move(-1)
        viewport.recompute(cursor.position)
    assert cursor.position == 0
    assert viewport.offset == 0


@pytest.mark.parametrize("capacity", [1, 3, 10])
@pytest.mark.parametrize("total", [1, 5, 12])
def test_recompute_keeps_position_visible(capacity: int, total: int) -> None:
    """Test every position stays visible and the tail stays full after recompute."""
    offset = 0
    for position in list(range(total)) + list(reversed(range(total))):
        offset = recompute_offset(position, capacity, total, offset)
        assert offset <= position < offset + capacity
        if total >= capacity:
            assert offset + capacity <= total
        else:
            assert offset == 0


def test_visible_cursor_leaves_offset_alone() -> None:
    """Test scrolling is minimal: a visible cursor never moves the window."""
    assert recompute_offset(position=6, capacity=5, total=20, offset=4) == 4
    assert recompute_offset(position=3, capacity=5, total=20, offset=4) == 3
    assert recompute_offset(position=9, capacity=5, total=20, offset=4) == 5


def test_stale_offset_is_clamped_after_list_shrinks() -> None:
    viewport = Viewport(capacity=5, offset=15, total=20)
    viewport.recompute(position=2, total=8)
    assert viewport.offset == 2
    assert viewport.has_more_below
    assert viewport.has_more_above


def test_more_indicators() -> None:
    viewport = Viewport(capacity=3, total=3)
    viewport.recompute(2)
    assert not viewport.has_more_above
    assert not viewport.has_more_below
