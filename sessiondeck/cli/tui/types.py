"""Shared TUI types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Key(str, Enum):
    """Key identities a modal can receive."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TAB = "tab"
    SHIFT_TAB = "shift+tab"
    SPACE = "space"
    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    DELETE = "delete"
    HOME = "home"
    END = "end"
    CHARACTER = "character"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class KeyEvent:
    """One input event: a named key or literal text.

    ``text`` holds the characters typed for ``Key.CHARACTER`` events and a
    single space for ``Key.SPACE``; it is empty otherwise.
    """

    key: Key
    text: str = ""

    @classmethod
    def char(cls, text: str) -> KeyEvent:
        if text == " ":
            return cls(Key.SPACE, " ")
        return cls(Key.CHARACTER, text)

    @classmethod
    def from_name(cls, name: str) -> KeyEvent:
        """Build an event from a key name such as ``"up"`` or ``"shift+tab"``."""
        try:
            key = Key(name)
        except ValueError:
            if len(name) == 1:
                return cls.char(name)
            return cls(Key.UNKNOWN)
        if key is Key.SPACE:
            return cls(Key.SPACE, " ")
        return cls(key)

    def is_char(self, *chars: str) -> bool:
        """True for a character event whose text is one of ``chars``."""
        return self.key is Key.CHARACTER and self.text in chars



class BulkAction(str, Enum):
    """Operations applied to several selected sessions at once."""

    DELETE = "delete"
    MOVE_TO_WORKSPACE = "move_to_workspace"
    CREATE_PRS = "create_prs"
    SEND_PROMPT = "send_prompt"

    @property
    def label(self) -> str:
        return _BULK_ACTION_LABELS[self]


_BULK_ACTION_LABELS = {
    BulkAction.DELETE: "Delete",
    BulkAction.MOVE_TO_WORKSPACE: "Move to Workspace",
    BulkAction.CREATE_PRS: "Create PRs",
    BulkAction.SEND_PROMPT: "Send Prompt",
}


class BroadcastAction(str, Enum):
    """Operations on the sessions of a broadcast group."""

    SEND_PROMPT = "send_prompt"
    CREATE_PRS = "create_prs"

    @property
    def label(self) -> str:
        return "Send Prompt" if self is BroadcastAction.SEND_PROMPT else "Create PRs"
