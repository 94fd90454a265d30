"""Text editing fields embedded in modals.

Modals own the focus decision; these fields only edit text. An unfocused
field ignores every event so a modal can forward input unconditionally.
"""

from __future__ import annotations

from rich.style import Style
from rich.text import Text

from sessiondeck.cli.tui.theme import MUTED_STYLE
from sessiondeck.cli.tui.types import Key, KeyEvent

_CARET_STYLE = Style(reverse=True)


class TextField:
    """Single-line text input with a caret."""

    multiline = False

    def __init__(
        self,
        value: str = "",
        *,
        placeholder: str = "",
        char_limit: int = 0,
        width: int = 0,
        focused: bool = False,
    ) -> None:
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.width = width
        self.focused = focused
        self._value = ""
        self.caret = 0
        self.set_value(value)

    @property
    def value(self) -> str:
        return self._value

    def set_value(self, value: str) -> None:
        if self.char_limit:
            value = value[: self.char_limit]
        self._value = value
        self.caret = len(value)

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def _insert(self, text: str) -> bool:
        if not text:
            return False
        if self.char_limit:
            room = self.char_limit - len(self._value)
            if room <= 0:
                return False
            text = text[:room]
        self._value = self._value[: self.caret] + text + self._value[self.caret :]
        self.caret += len(text)
        return True

    def handle(self, event: KeyEvent) -> bool:
        """Apply an editing event.

        Returns:
            True if the event was consumed
        """
        if not self.focused:
            return False
        key = event.key
        if key in (Key.CHARACTER, Key.SPACE):
            return self._insert(event.text)
        if key is Key.BACKSPACE:
            if self.caret > 0:
                self._value = self._value[: self.caret - 1] + self._value[self.caret :]
                self.caret -= 1
            return True
        if key is Key.DELETE:
            self._value = self._value[: self.caret] + self._value[self.caret + 1 :]
            return True
        if key is Key.LEFT:
            self.caret = max(0, self.caret - 1)
            return True
        if key is Key.RIGHT:
            self.caret = min(len(self._value), self.caret + 1)
            return True
        if key is Key.HOME:
            self.caret = self._line_start()
            return True
        if key is Key.END:
            self.caret = self._line_end()
            return True
        return False

    def _line_start(self) -> int:
        return 0

    def _line_end(self) -> int:
        return len(self._value)

    def render(self) -> Text:
        if not self._value and not self.focused:
            return Text(self.placeholder, style=MUTED_STYLE)
        if not self._value:
            text = Text()
            text.append(" ", style=_CARET_STYLE)
            text.append(self.placeholder, style=MUTED_STYLE)
            return text
        text = Text(self._value)
        if self.focused:
            if self.caret >= len(self._value):
                text.append(" ", style=_CARET_STYLE)
            else:
                text.stylize(_CARET_STYLE, self.caret, self.caret + 1)
        return text


class TextArea(TextField):
    """Multi-line text input. Enter inserts a newline; up/down move between lines."""

    multiline = True

    def _line_start(self) -> int:
        return self._value.rfind("\n", 0, self.caret) + 1

    def _line_end(self) -> int:
        end = self._value.find("\n", self.caret)
        return len(self._value) if end == -1 else end

    def _move_vertical(self, direction: int) -> None:
        start = self._line_start()
        column = self.caret - start
        if direction < 0:
            if start == 0:
                return
            target_start = self._value.rfind("\n", 0, start - 1) + 1
            target_end = start - 1
        else:
            end = self._line_end()
            if end >= len(self._value):
                return
            target_start = end + 1
            next_break = self._value.find("\n", target_start)
            target_end = len(self._value) if next_break == -1 else next_break
        self.caret = min(target_start + column, target_end)

    def handle(self, event: KeyEvent) -> bool:
        if not self.focused:
            return False
        if event.key is Key.ENTER:
            return self._insert("\n")
        if event.key is Key.UP:
            self._move_vertical(-1)
            return True
        if event.key is Key.DOWN:
            self._move_vertical(1)
            return True
        return super().handle(event)
