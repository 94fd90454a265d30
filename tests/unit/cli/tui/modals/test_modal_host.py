"""Unit tests for the modal host."""

from __future__ import annotations

from sessiondeck.cli.tui.messages import ModalDismissed, RenameSessionRequest
from sessiondeck.cli.tui.modals import ImportIssuesModal, ModalHost, NewSessionModal, RenameSessionModal
from sessiondeck.cli.tui.types import Key, KeyEvent


def test_update_without_modal_is_noop() -> None:
    host = ModalHost()
    assert host.update(KeyEvent(Key.ENTER)) is None
    assert host.view(100, 40) is None


def test_commit_hides_modal() -> None:
    host = ModalHost()
    host.show(RenameSessionModal("sess-1", "old"))
    assert host.visible
    command = host.update(KeyEvent(Key.ENTER))
    assert isinstance(command, RenameSessionRequest)
    assert not host.visible


def test_invalid_commit_keeps_modal_open() -> None:
    host = ModalHost()
    host.show(NewSessionModal([]))
    assert host.update(KeyEvent(Key.ENTER)) is None
    assert host.visible


def test_escape_hides_modal() -> None:
    host = ModalHost()
    host.show(NewSessionModal(["/src/api"]))
    assert isinstance(host.update(KeyEvent(Key.ESCAPE)), ModalDismissed)
    assert not host.visible


def test_view_clamps_width_to_screen() -> None:
    """Test the granted width is the preferred width, reduced to fit the screen."""
    host = ModalHost()
    modal = ImportIssuesModal("/src/api")
    host.show(modal)
    host.view(200, 50)
    assert modal.available_width == 120

    host.view(70, 20)
    assert modal.available_width == 64
    assert modal.available_height == 20


def test_error_line_is_appended_and_cleared_on_show() -> None:
    host = ModalHost()
    host.show(RenameSessionModal("sess-1", "old"))
    host.set_error("rename failed")
    assert host.view(100, 40).plain.endswith("rename failed")

    host.show(RenameSessionModal("sess-1", "old"))
    assert "rename failed" not in host.view(100, 40).plain


def test_each_show_gets_fresh_state() -> None:
    """Test nothing carries over between two openings of the same dialog."""
    host = ModalHost()
    host.show(NewSessionModal(["/a", "/b"]))
    host.update(KeyEvent(Key.DOWN))
    host.update(KeyEvent(Key.ESCAPE))

    host.show(NewSessionModal(["/a", "/b"]))
    assert host.state.repo_cursor.position == 0


def test_loaded_items_ignored_by_modals_without_a_list() -> None:
    """Test a late fetch result leaves a modal that fetches nothing untouched."""
    modal = RenameSessionModal("sess-1", "old")
    before = modal.render().plain
    modal.replace_items(["stale"])
    modal.set_load_error("late failure")
    assert modal.render().plain == before
