"""Key names and translation from Textual key events.

Textual reports keys by name (``"up"``, ``"shift+tab"``, ``"escape"``) and
printable keys by their character. Everything a modal can react to is mapped
to a ``KeyEvent``; anything else becomes ``Key.UNKNOWN`` and is ignored.
"""

from __future__ import annotations

from textual import events

from sessiondeck.cli.tui.types import Key, KeyEvent

TEXTUAL_KEY_MAP: dict[str, Key] = {
    "up": Key.UP,
    "down": Key.DOWN,
    "left": Key.LEFT,
    "right": Key.RIGHT,
    "tab": Key.TAB,
    "shift+tab": Key.SHIFT_TAB,
    "space": Key.SPACE,
    "enter": Key.ENTER,
    "escape": Key.ESCAPE,
    "backspace": Key.BACKSPACE,
    "delete": Key.DELETE,
    "home": Key.HOME,
    "end": Key.END,
}

# Vim-style list movement accepted by list-driven modals.
VIM_UP = "k"
VIM_DOWN = "j"
VIM_LEFT = "h"
VIM_RIGHT = "l"


def translate_key(key: str, character: str | None = None) -> KeyEvent:
    """Map a Textual key name (and optional character) to a ``KeyEvent``."""
    mapped = TEXTUAL_KEY_MAP.get(key)
    if mapped is Key.SPACE:
        return KeyEvent(Key.SPACE, " ")
    if mapped is not None:
        return KeyEvent(mapped)
    if character and character.isprintable():
        return KeyEvent.char(character)
    return KeyEvent(Key.UNKNOWN)


def from_textual(event: events.Key) -> KeyEvent:
    return translate_key(event.key, event.character)
