"""Workspace modals: switch the active workspace, create or rename one."""

from __future__ import annotations

from typing import Mapping, Sequence

from rich.text import Text

from sessiondeck.cli.models import Workspace
from sessiondeck.cli.tui.keys import VIM_DOWN, VIM_UP
from sessiondeck.cli.tui.messages import SaveWorkspaceRequest, SwitchWorkspaceRequest
from sessiondeck.cli.tui.modals.base import CommitCallback, ModalState
from sessiondeck.cli.tui.modals.helpers import focus_block, label, list_row, note
from sessiondeck.cli.tui.nav import Cursor
from sessiondeck.cli.tui.types import Key, KeyEvent
from sessiondeck.cli.tui.widgets.text_input import TextField
from sessiondeck.config.schema import ModalSettings

ALL_SESSIONS_LABEL = "All Sessions"


class WorkspaceListModal(ModalState):
    """List workspaces with an "All Sessions" row on top.

    Row 0 is "All Sessions"; workspace ``i`` sits on row ``i + 1``. The cursor
    starts on the active workspace, or on row 0 when none is active or the
    active id is unknown.
    """

    def __init__(
        self,
        workspaces: Sequence[Workspace],
        session_counts: Mapping[str, int] | None = None,
        active_workspace_id: str | None = None,
        *,
        settings: ModalSettings | None = None,
        on_commit: CommitCallback | None = None,
    ) -> None:
        super().__init__(settings=settings, on_commit=on_commit)
        self.workspaces = list(workspaces)
        self.session_counts = dict(session_counts or {})
        self.active_workspace_id = active_workspace_id or None

        start = 0
        for i, ws in enumerate(self.workspaces):
            if ws.id == self.active_workspace_id:
                start = i + 1
                break
        self.cursor = Cursor(start, count=1 + len(self.workspaces))

    def title(self) -> str:
        return "Workspaces"

    def help(self) -> str:
        return "up/down: navigate  Enter: switch  Esc: close"

    def handle_key(self, event: KeyEvent) -> None:
        if event.key is Key.UP or event.is_char(VIM_UP):
            self.cursor.move(-1)
        elif event.key is Key.DOWN or event.is_char(VIM_DOWN):
            self.cursor.move(1)

    @property
    def all_sessions_selected(self) -> bool:
        return self.cursor.position == 0

    @property
    def selected_workspace(self) -> Workspace | None:
        if self.all_sessions_selected:
            return None
        return self.workspaces[self.cursor.position - 1]

    def build_request(self) -> SwitchWorkspaceRequest:
        workspace = self.selected_workspace
        return SwitchWorkspaceRequest(workspace.id if workspace else None)

    def render_body(self) -> list[Text]:
        suffix = " (active)" if self.active_workspace_id is None else ""
        rows = [list_row(ALL_SESSIONS_LABEL + suffix, self.cursor.position == 0)]
        for i, ws in enumerate(self.workspaces, start=1):
            count = self.session_counts.get(ws.id, 0)
            suffix = " (active)" if ws.id == self.active_workspace_id else ""
            rows.append(list_row(f"{ws.name}  {count} sessions{suffix}", i == self.cursor.position))
        if not self.workspaces:
            rows.append(note("  No workspaces yet."))
        return rows


class NewWorkspaceModal(ModalState):
    """Name a new workspace, or rename an existing one when ``workspace_id`` is given."""

    def __init__(
        self,
        workspace_id: str | None = None,
        current_name: str = "",
        *,
        settings: ModalSettings | None = None,
        on_commit: CommitCallback | None = None,
    ) -> None:
        super().__init__(settings=settings, on_commit=on_commit)
        self.workspace_id = workspace_id
        self.name_input = TextField(
            current_name,
            placeholder="New name" if self.is_rename else "e.g., Feature Work, Bug Fixes",
            char_limit=self.settings.session_name_char_limit,
            width=self.settings.input_width,
            focused=True,
        )

    @property
    def is_rename(self) -> bool:
        return self.workspace_id is not None

    def title(self) -> str:
        return "Rename Workspace" if self.is_rename else "New Workspace"

    def help(self) -> str:
        if not self.is_valid():
            return "Name cannot be empty  Esc: cancel"
        return "Enter: save  Esc: cancel"

    def handle_key(self, event: KeyEvent) -> None:
        self.name_input.handle(event)

    @property
    def name(self) -> str:
        return self.name_input.value.strip()

    def is_valid(self) -> bool:
        return bool(self.name)

    def build_request(self) -> SaveWorkspaceRequest:
        return SaveWorkspaceRequest(name=self.name, workspace_id=self.workspace_id)

    def render_body(self) -> list[Text]:
        return [label("Name:"), focus_block(self.name_input.render(), True)]
