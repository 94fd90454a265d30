"""Unit tests for the two-policy enum cycle."""

from __future__ import annotations

import pytest

from sessiondeck.cli.tui.nav import EnumCycle
from sessiondeck.cli.tui.types import BulkAction


def test_four_variant_scenario() -> None:
    """Test clamped steps stop at the last variant and a wrapping step returns to the first."""
    cycle = EnumCycle(list(BulkAction))
    for _ in range(3):
        cycle.step_clamped(1)
    assert cycle.value is BulkAction.SEND_PROMPT

    assert cycle.step_clamped(1) is False
    assert cycle.value is BulkAction.SEND_PROMPT

    cycle.step_wrapping(1)
    assert cycle.value is BulkAction.DELETE


@pytest.mark.parametrize("direction", [1, -1])
def test_wrapping_n_times_returns_to_start(direction: int) -> None:
    cycle = EnumCycle(["a", "b", "c"], "b")
    for _ in range(3):
        cycle.step_wrapping(direction)
    assert cycle.value == "b"


def test_clamped_at_first_variant() -> None:
    cycle = EnumCycle(["a", "b", "c"])
    assert cycle.step_clamped(-1) is False
    assert cycle.value == "a"
    cycle.step_wrapping(-1)
    assert cycle.value == "c"


def test_on_change_runs_inside_the_transition() -> None:
    """Test the hook sees old and new values and runs only on real changes."""
    calls: list[tuple[str, str]] = []
    cycle = EnumCycle(["a", "b"], on_change=lambda old, new: calls.append((old, new)))

    cycle.step_clamped(1)
    cycle.step_clamped(1)
    cycle.step_wrapping(1)
    cycle.select("a")

    assert calls == [("a", "b"), ("b", "a")]


def test_empty_variants_rejected() -> None:
    with pytest.raises(ValueError):
        EnumCycle([])
