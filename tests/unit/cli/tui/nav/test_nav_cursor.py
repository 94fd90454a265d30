"""Unit tests for the selection cursor."""

from __future__ import annotations

import pytest

from sessiondeck.cli.tui.nav import Cursor


@pytest.mark.parametrize("delta", [-5, -1, 1, 3, 50])
def test_move_stays_in_bounds(delta: int) -> None:
    """Test moves in any step size clamp to [0, count - 1]."""
    cursor = Cursor(count=4)
    for _ in range(10):
        cursor.move(delta)
        assert 0 <= cursor.position < cursor.count


def test_move_up_from_top_is_noop() -> None:
    """Test moving up at position 0 keeps position 0."""
    cursor = Cursor(count=3)
    assert cursor.move(-1) is False
    assert cursor.position == 0


def test_move_down_stops_at_last_row() -> None:
    cursor = Cursor(count=3)
    cursor.move(1)
    cursor.move(1)
    assert cursor.move(1) is False
    assert cursor.position == 2
    assert cursor.at_end


def test_empty_list_pins_position_at_zero() -> None:
    """Test navigation on an empty list is a no-op."""
    cursor = Cursor(position=4, count=0)
    assert cursor.position == 0
    assert cursor.move(1) is False
    assert cursor.move(-1) is False
    assert cursor.position == 0
    assert cursor.at_start and cursor.at_end


def test_set_count_reclamps_position() -> None:
    """Test replacing the list with a shorter one pulls the cursor back in range."""
    cursor = Cursor(count=10)
    cursor.move_to(8)
    cursor.set_count(3)
    assert cursor.position == 2

    cursor.set_count(0)
    assert cursor.position == 0


def test_move_to_clamps() -> None:
    cursor = Cursor(count=5)
    cursor.move_to(99)
    assert cursor.position == 4
    cursor.move_to(-3)
    assert cursor.position == 0
