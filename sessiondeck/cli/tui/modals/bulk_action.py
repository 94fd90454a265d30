"""Bulk action modal: one operation applied to every selected session."""

from __future__ import annotations

from typing import Sequence

from rich.text import Text

from sessiondeck.cli.models import Workspace
from sessiondeck.cli.tui.keys import VIM_DOWN, VIM_LEFT, VIM_RIGHT, VIM_UP
from sessiondeck.cli.tui.messages import BulkActionRequest
from sessiondeck.cli.tui.modals.base import CommitCallback, ModalState
from sessiondeck.cli.tui.modals.helpers import focus_block, label, list_row, note
from sessiondeck.cli.tui.nav import Cursor, EnumCycle
from sessiondeck.cli.tui.theme import ITEM_STYLE, SELECTED_STYLE
from sessiondeck.cli.tui.types import BulkAction, Key, KeyEvent
from sessiondeck.cli.tui.widgets.text_input import TextArea
from sessiondeck.config.schema import ModalSettings


class BulkActionModal(ModalState):
    """Choose what to do with several sessions at once.

    The action row is an ``EnumCycle`` driven by two policies:

    - arrows, ``h``/``l`` and tab/shift+tab step without wrapping while a
      non-prompt action is selected;
    - on "Send Prompt" the arrows belong to the prompt editor, so only
      tab/shift+tab move the action, and they wrap around both ends.

    Entering "Send Prompt" focuses the prompt editor and leaving it blurs the
    editor, inside the same transition.
    """

    def __init__(
        self,
        session_ids: Sequence[str],
        workspaces: Sequence[Workspace],
        *,
        settings: ModalSettings | None = None,
        on_commit: CommitCallback | None = None,
    ) -> None:
        super().__init__(settings=settings, on_commit=on_commit)
        self.session_ids = list(session_ids)
        self.workspaces = list(workspaces)
        self.workspace_cursor = Cursor(count=len(self.workspaces))
        self.prompt_input = TextArea(
            placeholder="Enter your prompt here...",
            char_limit=self.settings.prompt_char_limit,
            width=self.settings.modal_width - 6,
        )
        self.action = EnumCycle(list(BulkAction), BulkAction.DELETE, on_change=self._on_action_change)

    def _on_action_change(self, old: BulkAction, new: BulkAction) -> None:
        if new is BulkAction.SEND_PROMPT:
            self.prompt_input.focus()
        elif old is BulkAction.SEND_PROMPT:
            self.prompt_input.blur()

    @property
    def session_count(self) -> int:
        return len(self.session_ids)

    def title(self) -> str:
        return f"Bulk Action ({self.session_count} sessions)"

    def help(self) -> str:
        action = self.action.value
        if action is BulkAction.SEND_PROMPT:
            if not self.prompt:
                return "Type a prompt  tab/shift+tab: switch action  Esc: cancel"
            return "tab/shift+tab: switch action  Enter: send  Esc: cancel"
        if action is BulkAction.MOVE_TO_WORKSPACE and not self.workspaces:
            return "No workspace to move to  left/right: switch action  Esc: cancel"
        return "left/right: switch action  Enter: confirm  Esc: cancel"

    def handle_key(self, event: KeyEvent) -> None:
        if self.action.value is BulkAction.SEND_PROMPT:
            if event.key is Key.TAB:
                self.action.step_wrapping(1)
            elif event.key is Key.SHIFT_TAB:
                self.action.step_wrapping(-1)
            else:
                self.prompt_input.handle(event)
            return

        if event.key is Key.LEFT or event.key is Key.SHIFT_TAB or event.is_char(VIM_LEFT):
            self.action.step_clamped(-1)
        elif event.key is Key.RIGHT or event.key is Key.TAB or event.is_char(VIM_RIGHT):
            self.action.step_clamped(1)
        elif self.action.value is BulkAction.MOVE_TO_WORKSPACE:
            if event.key is Key.UP or event.is_char(VIM_UP):
                self.workspace_cursor.move(-1)
            elif event.key is Key.DOWN or event.is_char(VIM_DOWN):
                self.workspace_cursor.move(1)

    @property
    def selected_workspace(self) -> Workspace | None:
        if not self.workspaces:
            return None
        return self.workspaces[self.workspace_cursor.position]

    @property
    def prompt(self) -> str:
        return self.prompt_input.value.strip()

    def is_valid(self) -> bool:
        if not self.session_ids:
            return False
        action = self.action.value
        if action is BulkAction.MOVE_TO_WORKSPACE:
            return self.selected_workspace is not None
        if action is BulkAction.SEND_PROMPT:
            return bool(self.prompt)
        return True

    def build_request(self) -> BulkActionRequest:
        action = self.action.value
        workspace = self.selected_workspace
        return BulkActionRequest(
            session_ids=list(self.session_ids),
            action=action,
            workspace_id=workspace.id if action is BulkAction.MOVE_TO_WORKSPACE and workspace else None,
            prompt=self.prompt if action is BulkAction.SEND_PROMPT else None,
        )

    def _confirm_message(self) -> str:
        action = self.action.value
        count = self.session_count
        if action is BulkAction.DELETE:
            return f"This will delete {count} session(s) and their worktrees."
        if action is BulkAction.MOVE_TO_WORKSPACE:
            workspace = self.selected_workspace
            return f'Move {count} session(s) to "{workspace.name}".' if workspace else ""
        if action is BulkAction.CREATE_PRS:
            return (
                f"Create PRs for {count} session(s). "
                "Sessions with existing PRs or that are already merged will be skipped."
            )
        return f"Send prompt to {count} session(s)."

    def render_body(self) -> list[Text]:
        action_row = Text()
        for i, action in enumerate(self.action.variants):
            if i:
                action_row.append("  ")
            style = SELECTED_STYLE if action is self.action.value else ITEM_STYLE
            action_row.append(f" {action.label} ", style=style)
        parts = [Text(""), action_row]

        if self.action.value is BulkAction.MOVE_TO_WORKSPACE:
            parts.append(label("Select workspace:"))
            if not self.workspaces:
                parts.append(note("  No workspaces. Create one first."))
            else:
                parts.extend(
                    list_row(ws.name, i == self.workspace_cursor.position) for i, ws in enumerate(self.workspaces)
                )
        elif self.action.value is BulkAction.SEND_PROMPT:
            parts.append(label("Enter prompt:"))
            parts.append(focus_block(self.prompt_input.render(), True))

        confirm = self._confirm_message()
        if confirm:
            parts.append(note(confirm))
        return parts
