"""Rendering helpers shared by modals."""

from __future__ import annotations

from typing import Sequence

from rich.text import Text

from sessiondeck.cli.tui.nav import Viewport
from sessiondeck.cli.tui.theme import (
    FOCUS_BAR,
    FOCUS_BAR_STYLE,
    ITEM_STYLE,
    MUTED_ITALIC_STYLE,
    MUTED_STYLE,
    SELECTED_STYLE,
    UNFOCUSED_PAD,
)


def truncate_path(path: str, max_len: int) -> str:
    """Truncate a path from the beginning with an ellipsis."""
    if len(path) <= max_len or max_len <= 3:
        return path
    return "..." + path[len(path) - max_len + 3 :]


def truncate_string(text: str, max_len: int) -> str:
    """Truncate a string from the end with an ellipsis.

    Widths of 3 or less leave the text alone; there is no room for the
    ellipsis and anything useful at the same time.
    """
    if len(text) <= max_len or max_len <= 3:
        return text
    return text[: max_len - 3] + "..."


def checkbox(checked: bool) -> str:
    return "[x]" if checked else "[ ]"


def label(text: str) -> Text:
    return Text(text, style=MUTED_STYLE)


def note(text: str) -> Text:
    return Text(text, style=MUTED_ITALIC_STYLE)


def list_row(text: str, selected: bool) -> Text:
    """One list row with the ``> `` cursor marker."""
    if selected:
        return Text("> " + text, style=SELECTED_STYLE)
    return Text("  " + text, style=ITEM_STYLE)


def focus_block(content: Text | str, focused: bool) -> Text:
    """Prefix a field with the focus bar, or matching padding when unfocused."""
    body = content if isinstance(content, Text) else Text(content)
    lines = body.split("\n", allow_blank=True) or [Text()]
    out = []
    for line in lines:
        row = Text(FOCUS_BAR, style=FOCUS_BAR_STYLE) if focused else Text(UNFOCUSED_PAD)
        row.append_text(line)
        out.append(row)
    return Text("\n").join(out)


def render_selectable_list(items: Sequence[str], selected_index: int, focused: bool = True) -> Text:
    """Render options with the cursor row highlighted while the list has focus."""
    rows = [list_row(item, focused and i == selected_index) for i, item in enumerate(items)]
    if not focused and 0 <= selected_index < len(items):
        rows[selected_index] = Text("* " + items[selected_index], style=ITEM_STYLE)
    return Text("\n").join(rows)


def scroll_window(rows: Sequence[Text], viewport: Viewport) -> list[Text]:
    """Visible rows plus "more above/below" indicators."""
    window = [rows[i] for i in viewport.visible_range()]
    if viewport.has_more_above:
        window.insert(0, Text("  ↑ more above", style=MUTED_STYLE))
    if viewport.has_more_below:
        window.append(Text("  ↓ more below", style=MUTED_STYLE))
    return window
