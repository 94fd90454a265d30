"""Broadcast modals: one prompt sent to many repositories or sessions."""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Sequence

from rich.text import Text

from sessiondeck.cli.models import SessionItem
from sessiondeck.cli.tui.keys import VIM_DOWN, VIM_LEFT, VIM_RIGHT, VIM_UP
from sessiondeck.cli.tui.messages import BroadcastGroupRequest, BroadcastRequest
from sessiondeck.cli.tui.modals.base import CommitCallback, ModalState
from sessiondeck.cli.tui.modals.helpers import checkbox, focus_block, label, list_row, note, scroll_window
from sessiondeck.cli.tui.nav import Cursor, EnumCycle, FocusRing, Viewport
from sessiondeck.cli.tui.theme import ITEM_STYLE, MUTED_STYLE, SELECTED_STYLE, WARNING_STYLE
from sessiondeck.cli.tui.types import BroadcastAction, Key, KeyEvent
from sessiondeck.cli.tui.widgets.text_input import TextArea, TextField
from sessiondeck.config.schema import ModalSettings
from sessiondeck.constants import CONTAINER_AUTH_HELP

logger = logging.getLogger(__name__)

_SELECT_ALL = "a"
_SELECT_NONE = "n"


def _count_line(selected: int, total: int) -> Text:
    return Text(f"({selected}/{total} selected)", style=MUTED_STYLE)


class BroadcastField(str, Enum):
    REPO_LIST = "repo_list"
    NAME = "name"
    PROMPT = "prompt"
    CONTAINER = "container"


class BroadcastModal(ModalState):
    """Start a session in every selected repository with the same prompt.

    Tab moves forward through repo list, session name, prompt and (with
    container support) the container checkbox, wrapping back to the list.
    Shift+tab moves back and stops at the list.
    """

    def __init__(
        self,
        repos: Sequence[str],
        *,
        containers_supported: bool = False,
        container_auth_available: bool = False,
        settings: ModalSettings | None = None,
        on_commit: CommitCallback | None = None,
    ) -> None:
        super().__init__(settings=settings, on_commit=on_commit)
        self.repos = list(repos)
        self.containers_supported = containers_supported
        self.container_auth_available = container_auth_available
        self.use_containers = False
        self.selected: set[int] = set()

        self.cursor = Cursor(count=len(self.repos))
        self.viewport = Viewport(capacity=self.settings.broadcast_max_visible, total=len(self.repos))

        fields = list(BroadcastField)
        if not containers_supported:
            fields.remove(BroadcastField.CONTAINER)
        self.focus = FocusRing(fields)

        input_width = self.settings.modal_width - 6
        self.name_input = TextField(
            placeholder="Leave empty for auto-generated name",
            char_limit=self.settings.session_name_char_limit,
            width=input_width,
        )
        self.prompt_input = TextArea(
            placeholder="Enter prompt to send to all selected repos...",
            char_limit=self.settings.prompt_char_limit,
            width=input_width,
        )

    def _sync_input_focus(self) -> None:
        field = self.focus.current
        if field is BroadcastField.NAME:
            self.name_input.focus()
        else:
            self.name_input.blur()
        if field is BroadcastField.PROMPT:
            self.prompt_input.focus()
        else:
            self.prompt_input.blur()

    def title(self) -> str:
        return "Broadcast to Repositories"

    def help(self) -> str:
        field = self.focus.current
        if field is BroadcastField.REPO_LIST:
            keys = "Space: toggle  a: all  n: none  Tab: name"
        elif field is BroadcastField.NAME:
            keys = "Tab: prompt  Shift+Tab: repos"
        else:
            keys = "Tab: next  Shift+Tab: back"
        if not self.selected:
            return f"Select at least one repository  {keys}  Esc: cancel"
        if not self.prompt:
            return f"Enter a prompt  {keys}  Esc: cancel"
        return f"{keys}  Enter: send  Esc: cancel"

    def handle_key(self, event: KeyEvent) -> None:
        if event.key is Key.TAB:
            self.focus.next(wrap=True)
            self._sync_input_focus()
            return
        if event.key is Key.SHIFT_TAB:
            self.focus.prev(wrap=False)
            self._sync_input_focus()
            return

        field = self.focus.current
        if field is BroadcastField.NAME:
            self.name_input.handle(event)
        elif field is BroadcastField.PROMPT:
            self.prompt_input.handle(event)
        elif field is BroadcastField.CONTAINER:
            if event.key is Key.SPACE:
                self.use_containers = not self.use_containers
        elif event.key is Key.UP or event.is_char(VIM_UP):
            self._move_cursor(-1)
        elif event.key is Key.DOWN or event.is_char(VIM_DOWN):
            self._move_cursor(1)
        elif event.key is Key.SPACE:
            if self.repos:
                self.selected ^= {self.cursor.position}
        elif event.is_char(_SELECT_ALL):
            self.selected = set(range(len(self.repos)))
        elif event.is_char(_SELECT_NONE):
            self.selected = set()

    def _move_cursor(self, delta: int) -> None:
        self.cursor.move(delta)
        self.viewport.recompute(self.cursor.position)

    @property
    def selected_repos(self) -> list[str]:
        return [repo for i, repo in enumerate(self.repos) if i in self.selected]

    @property
    def prompt(self) -> str:
        return self.prompt_input.value.strip()

    @property
    def session_name(self) -> str:
        return self.name_input.value.strip()

    def is_valid(self) -> bool:
        return bool(self.selected) and bool(self.prompt)

    def build_request(self) -> BroadcastRequest:
        logger.info("Broadcasting to %d repositories", len(self.selected))
        return BroadcastRequest(
            repo_paths=self.selected_repos,
            prompt=self.prompt_input.value,
            session_name=self.session_name,
            use_containers=self.use_containers,
        )

    def render_body(self) -> list[Text]:
        focused = self.focus.current
        parts = [label("Select repositories:"), _count_line(len(self.selected), len(self.repos))]
        if not self.repos:
            parts.append(note("No repositories added. Add one first."))
        else:
            list_focused = focused is BroadcastField.REPO_LIST
            rows = [
                list_row(
                    f"{checkbox(i in self.selected)} {os.path.basename(repo.rstrip('/')) or repo}",
                    list_focused and i == self.cursor.position,
                )
                for i, repo in enumerate(self.repos)
            ]
            parts.extend(scroll_window(rows, self.viewport))

        parts.append(label("Session name (optional):"))
        parts.append(focus_block(self.name_input.render(), focused is BroadcastField.NAME))
        parts.append(label("Prompt:"))
        parts.append(focus_block(self.prompt_input.render(), focused is BroadcastField.PROMPT))

        if self.containers_supported:
            parts.append(label("Run in containers:"))
            parts.append(
                focus_block(
                    f"{checkbox(self.use_containers)} Run each agent inside a container with permissions skipped",
                    focused is BroadcastField.CONTAINER,
                )
            )
            if self.use_containers and not self.container_auth_available:
                parts.append(Text("  " + CONTAINER_AUTH_HELP, style=WARNING_STYLE))
        return parts


class BroadcastGroupField(str, Enum):
    ACTION = "action"
    SESSION_LIST = "session_list"
    PROMPT = "prompt"


class BroadcastGroupModal(ModalState):
    """Act on the sessions a broadcast started.

    Every session starts selected. The prompt field exists only for "Send
    Prompt", so it drops out of the tab order while "Create PRs" is chosen.
    """

    def __init__(
        self,
        group_id: str,
        sessions: Sequence[SessionItem],
        *,
        settings: ModalSettings | None = None,
        on_commit: CommitCallback | None = None,
    ) -> None:
        super().__init__(settings=settings, on_commit=on_commit)
        self.group_id = group_id
        self.sessions = list(sessions)
        self.selected = set(range(len(self.sessions)))

        self.action = EnumCycle(list(BroadcastAction), BroadcastAction.SEND_PROMPT)
        self.focus = FocusRing(list(BroadcastGroupField), self._is_field_enabled)
        self.cursor = Cursor(count=len(self.sessions))
        self.viewport = Viewport(capacity=self.settings.broadcast_max_visible, total=len(self.sessions))
        self.prompt_input = TextArea(
            placeholder="Enter prompt to send to selected sessions...",
            char_limit=self.settings.prompt_char_limit,
            width=self.settings.modal_width - 6,
        )

    def _is_field_enabled(self, field: BroadcastGroupField) -> bool:
        if field is BroadcastGroupField.PROMPT:
            return self.action.value is BroadcastAction.SEND_PROMPT
        return True

    def title(self) -> str:
        return "Broadcast Group"

    def help(self) -> str:
        field = self.focus.current
        if field is BroadcastGroupField.ACTION:
            keys = "left/right: action  Tab: sessions"
        elif field is BroadcastGroupField.SESSION_LIST:
            keys = "Space: toggle  a: all  n: none  Tab: next"
        else:
            keys = "Tab: action  Shift+Tab: sessions"
        if not self.selected:
            return f"Select at least one session  {keys}  Esc: cancel"
        if self.action.value is BroadcastAction.SEND_PROMPT and not self.prompt:
            return f"Enter a prompt  {keys}  Esc: cancel"
        return f"{keys}  Enter: execute  Esc: cancel"

    def handle_key(self, event: KeyEvent) -> None:
        if event.key is Key.TAB:
            self.focus.next(wrap=True)
        elif event.key is Key.SHIFT_TAB:
            self.focus.prev(wrap=False)
        else:
            self._handle_field_key(event)
            return
        if self.focus.is_focused(BroadcastGroupField.PROMPT):
            self.prompt_input.focus()
        else:
            self.prompt_input.blur()

    def _handle_field_key(self, event: KeyEvent) -> None:
        field = self.focus.current
        if field is BroadcastGroupField.PROMPT:
            self.prompt_input.handle(event)
        elif field is BroadcastGroupField.ACTION:
            if event.key is Key.LEFT or event.is_char(VIM_LEFT):
                self.action.step_clamped(-1)
            elif event.key is Key.RIGHT or event.is_char(VIM_RIGHT):
                self.action.step_clamped(1)
        elif event.key is Key.UP or event.is_char(VIM_UP):
            self.cursor.move(-1)
            self.viewport.recompute(self.cursor.position)
        elif event.key is Key.DOWN or event.is_char(VIM_DOWN):
            self.cursor.move(1)
            self.viewport.recompute(self.cursor.position)
        elif event.key is Key.SPACE:
            if self.sessions:
                self.selected ^= {self.cursor.position}
        elif event.is_char(_SELECT_ALL):
            self.selected = set(range(len(self.sessions)))
        elif event.is_char(_SELECT_NONE):
            self.selected = set()

    @property
    def selected_session_ids(self) -> list[str]:
        return [session.id for i, session in enumerate(self.sessions) if i in self.selected]

    @property
    def prompt(self) -> str:
        return self.prompt_input.value.strip()

    def is_valid(self) -> bool:
        if not self.selected:
            return False
        if self.action.value is BroadcastAction.SEND_PROMPT:
            return bool(self.prompt)
        return True

    def build_request(self) -> BroadcastGroupRequest:
        action = self.action.value
        return BroadcastGroupRequest(
            group_id=self.group_id,
            session_ids=self.selected_session_ids,
            action=action,
            prompt=self.prompt_input.value if action is BroadcastAction.SEND_PROMPT else None,
        )

    def _action_row(self) -> Text:
        row = Text("  ")
        for i, action in enumerate(self.action.variants):
            if i:
                row.append("  ")
            if action is not self.action.value:
                style = MUTED_STYLE
            elif self.focus.is_focused(BroadcastGroupField.ACTION):
                style = SELECTED_STYLE
            else:
                style = ITEM_STYLE
            row.append(f" {action.label} ", style=style)
        return row

    def render_body(self) -> list[Text]:
        focused = self.focus.current
        parts = [
            label("Action:"),
            self._action_row(),
            label("Sessions:"),
            _count_line(len(self.selected), len(self.sessions)),
        ]
        if not self.sessions:
            parts.append(note("No sessions in this broadcast group."))
        else:
            list_focused = focused is BroadcastGroupField.SESSION_LIST
            rows = [
                list_row(
                    f"{checkbox(i in self.selected)} {session.display_name}",
                    list_focused and i == self.cursor.position,
                )
                for i, session in enumerate(self.sessions)
            ]
            parts.extend(scroll_window(rows, self.viewport))

        if self.action.value is BroadcastAction.SEND_PROMPT:
            parts.append(label("Prompt:"))
            parts.append(focus_block(self.prompt_input.render(), focused is BroadcastGroupField.PROMPT))
        return parts
