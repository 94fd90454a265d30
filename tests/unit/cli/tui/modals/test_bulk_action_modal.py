"""Unit tests for the bulk action modal."""

from __future__ import annotations

from sessiondeck.cli.models import Workspace
from sessiondeck.cli.tui.messages import BulkActionRequest
from sessiondeck.cli.tui.modals import BulkActionModal
from sessiondeck.cli.tui.types import BulkAction, KeyEvent

SESSIONS = ["s1", "s2", "s3"]


def _press(modal, *names: str):
    command = None
    for name in names:
        _, command = modal.update(KeyEvent.from_name(name))
    return command


def _type(modal, text: str) -> None:
    for ch in text:
        modal.update(KeyEvent.char(ch))


def test_right_clamps_at_send_prompt(workspaces: list[Workspace]) -> None:
    """Test three right moves reach Send Prompt; further arrows go to the prompt editor."""
    modal = BulkActionModal(SESSIONS, workspaces)
    _press(modal, "right", "l", "right")
    assert modal.action.value is BulkAction.SEND_PROMPT

    _press(modal, "right", "l")
    assert modal.action.value is BulkAction.SEND_PROMPT
    assert modal.prompt_input.value == "l"


def test_left_clamps_at_delete(workspaces: list[Workspace]) -> None:
    modal = BulkActionModal(SESSIONS, workspaces)
    _press(modal, "left", "h", "shift+tab")
    assert modal.action.value is BulkAction.DELETE


def test_tab_wraps_only_from_send_prompt(workspaces: list[Workspace]) -> None:
    """Test tab clamps on ordinary actions but wraps from Send Prompt to Delete."""
    modal = BulkActionModal(SESSIONS, workspaces)
    _press(modal, "tab", "tab", "tab")
    assert modal.action.value is BulkAction.SEND_PROMPT
    _press(modal, "tab")
    assert modal.action.value is BulkAction.DELETE

    _press(modal, "shift+tab")
    assert modal.action.value is BulkAction.DELETE


def test_shift_tab_wraps_backwards_from_send_prompt(workspaces: list[Workspace]) -> None:
    modal = BulkActionModal(SESSIONS, workspaces)
    modal.action.select(BulkAction.SEND_PROMPT)
    _press(modal, "shift+tab")
    assert modal.action.value is BulkAction.CREATE_PRS


def test_prompt_focus_follows_action(workspaces: list[Workspace]) -> None:
    """Test entering Send Prompt focuses the editor and leaving blurs it in the same step."""
    modal = BulkActionModal(SESSIONS, workspaces)
    assert not modal.prompt_input.focused
    _press(modal, "tab", "tab", "tab")
    assert modal.prompt_input.focused
    _press(modal, "tab")
    assert not modal.prompt_input.focused


def test_send_prompt_requires_text(workspaces: list[Workspace]) -> None:
    modal = BulkActionModal(SESSIONS, workspaces)
    _press(modal, "right", "right", "right")
    assert _press(modal, "enter") is None
    assert modal.help().startswith("Type a prompt")

    _type(modal, "run the tests")
    command = _press(modal, "enter")
    assert isinstance(command, BulkActionRequest)
    assert command.action is BulkAction.SEND_PROMPT
    assert command.prompt == "run the tests"
    assert command.workspace_id is None


def test_move_to_workspace(workspaces: list[Workspace]) -> None:
    """Test up/down pick the target workspace only while the move action is selected."""
    modal = BulkActionModal(SESSIONS, workspaces)
    _press(modal, "down")
    assert modal.workspace_cursor.position == 0

    _press(modal, "right", "j", "j")
    assert modal.workspace_cursor.position == 1
    assert 'Move 3 session(s) to "Bug Fixes".' in modal.render().plain

    command = _press(modal, "enter")
    assert command.action is BulkAction.MOVE_TO_WORKSPACE
    assert command.workspace_id == "ws-2"
    assert command.session_ids == SESSIONS


def test_move_without_workspaces_is_invalid() -> None:
    modal = BulkActionModal(SESSIONS, [])
    _press(modal, "right")
    assert _press(modal, "enter") is None
    assert "No workspaces" in modal.render().plain


def test_delete_confirmation() -> None:
    commits = []
    modal = BulkActionModal(SESSIONS, [], on_commit=commits.append)
    assert "This will delete 3 session(s) and their worktrees." in modal.render().plain
    command = _press(modal, "enter")
    assert command.action is BulkAction.DELETE
    assert commits == [command]
