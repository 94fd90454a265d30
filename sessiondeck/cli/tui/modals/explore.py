"""Explore options modal: fork a session once per chosen option."""

from __future__ import annotations

from typing import Sequence

from rich.text import Text

from sessiondeck.cli.models import OptionItem
from sessiondeck.cli.tui.keys import VIM_DOWN, VIM_UP
from sessiondeck.cli.tui.messages import ExploreOptionsRequest
from sessiondeck.cli.tui.modals.base import CommitCallback, ModalState
from sessiondeck.cli.tui.modals.helpers import checkbox, label, list_row, truncate_string
from sessiondeck.cli.tui.nav import Cursor
from sessiondeck.cli.tui.theme import MUTED_STYLE, SECONDARY_STYLE
from sessiondeck.cli.tui.types import Key, KeyEvent
from sessiondeck.config.schema import ModalSettings

_OPTION_TEXT_MAX = 50
_GROUP_SEPARATOR = "    " + "─" * 39


class ExploreOptionsModal(ModalState):
    """Pick options detected in the last reply; each becomes a parallel fork."""

    def __init__(
        self,
        parent_session_name: str,
        parent_session_id: str,
        options: Sequence[OptionItem],
        *,
        settings: ModalSettings | None = None,
        on_commit: CommitCallback | None = None,
    ) -> None:
        super().__init__(settings=settings, on_commit=on_commit)
        self.parent_session_name = parent_session_name
        self.parent_session_id = parent_session_id
        self.options = list(options)
        self.selected: set[int] = set()
        self.cursor = Cursor(count=len(self.options))

    def title(self) -> str:
        return "Fork Options"

    def help(self) -> str:
        if not self.selected:
            return "Select at least one option  up/down: navigate  Space: toggle  Esc: cancel"
        return "up/down: navigate  Space: toggle  Enter: create forks  Esc: cancel"

    def handle_key(self, event: KeyEvent) -> None:
        if event.key is Key.UP or event.is_char(VIM_UP):
            self.cursor.move(-1)
        elif event.key is Key.DOWN or event.is_char(VIM_DOWN):
            self.cursor.move(1)
        elif event.key is Key.SPACE and self.options:
            self.selected ^= {self.cursor.position}

    @property
    def selected_options(self) -> list[OptionItem]:
        return [opt for i, opt in enumerate(self.options) if i in self.selected]

    def is_valid(self) -> bool:
        return bool(self.selected)

    def build_request(self) -> ExploreOptionsRequest:
        return ExploreOptionsRequest(parent_session_id=self.parent_session_id, options=self.selected_options)

    def render_body(self) -> list[Text]:
        parts = [
            label("Forking from:"),
            Text("  " + self.parent_session_name, style=SECONDARY_STYLE),
            label("Select options to explore in parallel forks:"),
        ]
        last_group = None
        for i, opt in enumerate(self.options):
            if last_group is not None and opt.group_index != last_group:
                parts.append(Text(_GROUP_SEPARATOR, style=MUTED_STYLE))
            last_group = opt.group_index
            text = truncate_string(opt.text, _OPTION_TEXT_MAX)
            parts.append(list_row(f"{checkbox(i in self.selected)} {opt.label}. {text}", i == self.cursor.position))

        count = len(self.selected)
        count_text = f"{count} option(s) selected"
        if count:
            count_text += f" - will create {count} fork(s)"
        parts.append(Text(count_text, style=SECONDARY_STYLE))
        return parts
