"""Integration tests: modals driven through the Textual screen."""

from __future__ import annotations

import pytest

from sessiondeck.cli.tui.app import DeckApp
from sessiondeck.cli.models import IssueItem, ReviewComment
from sessiondeck.cli.tui.messages import BroadcastRequest, BulkActionRequest, RenameSessionRequest
from sessiondeck.cli.tui.modals import BulkActionModal, NewSessionField, RenameSessionModal
from sessiondeck.cli.tui.types import BulkAction
from sessiondeck.cli.tui.widgets.modal_screen import NavModalScreen
from sessiondeck.config import DeckConfig


class _RecordingApp(DeckApp):
    def __init__(self, config: DeckConfig | None = None) -> None:
        super().__init__(config)
        self.received: list[object] = []

    def on_rename_session_request(self, message: RenameSessionRequest) -> None:
        self.received.append(message)

    def on_bulk_action_request(self, message: BulkActionRequest) -> None:
        self.received.append(message)

    def on_broadcast_request(self, message: BroadcastRequest) -> None:
        self.received.append(message)


@pytest.mark.asyncio
async def test_commit_dismisses_screen_and_routes_request():
    """Typing and Enter go through the screen; the request reaches the app."""
    app = _RecordingApp()
    async with app.run_test() as pilot:
        app.open_modal(RenameSessionModal("sess-1", "old", settings=app.settings))
        await pilot.pause()
        assert isinstance(app.screen, NavModalScreen)

        await pilot.press("backspace", "backspace", "backspace", "n", "e", "w", "enter")
        await pilot.pause()

        assert not isinstance(app.screen, NavModalScreen)
        assert len(app.received) == 1
        assert app.received[0].new_name == "new"


@pytest.mark.asyncio
async def test_tab_cycles_bulk_action_instead_of_widget_focus():
    """Tab stays inside the modal and drives the action cycle."""
    app = _RecordingApp()
    async with app.run_test() as pilot:
        modal = BulkActionModal(["s1"], [])
        app.open_modal(modal)
        await pilot.pause()

        await pilot.press("tab", "tab")
        assert modal.action.value is BulkAction.CREATE_PRS

        await pilot.press("enter")
        await pilot.pause()
        assert app.received[0].action is BulkAction.CREATE_PRS


@pytest.mark.asyncio
async def test_escape_dismisses_without_request():
    app = _RecordingApp()
    async with app.run_test() as pilot:
        app.open_modal(RenameSessionModal("sess-1", "old"))
        await pilot.pause()
        await pilot.press("escape")
        await pilot.pause()
        assert not isinstance(app.screen, NavModalScreen)
        assert app.received == []


@pytest.mark.asyncio
async def test_loaded_issues_replace_loading_state_on_screen():
    """A fetch result delivered after the modal opened is applied and drawn."""
    app = _RecordingApp()
    async with app.run_test() as pilot:
        modal = app.open_import_issues("/src/api")
        await pilot.pause()
        assert "Fetching issues from GitHub..." in app.screen.view_text.plain

        app.deliver_items([IssueItem("1", "First issue"), IssueItem("2", "Second issue")])
        await pilot.pause()

        assert not modal.loading
        text = app.screen.view_text.plain
        assert "#1: First issue" in text
        assert "Loading issues..." not in text

        await pilot.press("down", "space", "enter")
        await pilot.pause()
        assert not isinstance(app.screen, NavModalScreen)


@pytest.mark.asyncio
async def test_load_error_is_drawn():
    app = _RecordingApp()
    async with app.run_test() as pilot:
        app.open_review_comments("sess-1", "feature/retry")
        await pilot.pause()

        app.deliver_items(error="gh: not authenticated")
        await pilot.pause()

        text = app.screen.view_text.plain
        assert "gh: not authenticated" in text
        assert text.rstrip().endswith("Esc: close")


@pytest.mark.asyncio
async def test_loaded_review_comments_are_selectable():
    app = _RecordingApp()
    async with app.run_test() as pilot:
        modal = app.open_review_comments("sess-1", "feature/retry")
        await pilot.pause()
        app.deliver_items([ReviewComment("octo", "Rename this", "api.py", 12)])
        await pilot.pause()

        assert "@octo  api.py:12" in app.screen.view_text.plain
        await pilot.press("space")
        assert modal.is_valid()


@pytest.mark.asyncio
async def test_factories_carry_container_support_from_config():
    """Modals opened through the app get container support from its config."""
    app = _RecordingApp(DeckConfig(containers_supported=True))
    async with app.run_test() as pilot:
        modal = app.open_new_session(["/src/api"])
        await pilot.pause()
        assert modal.containers_supported
        assert NewSessionField.AUTONOMOUS in modal.focus.targets
        assert "Run in container:" in app.screen.view_text.plain

    plain_app = _RecordingApp()
    async with plain_app.run_test() as pilot:
        modal = plain_app.open_broadcast(["/src/api"])
        await pilot.pause()
        assert not modal.containers_supported
        assert "Run in containers:" not in plain_app.screen.view_text.plain


@pytest.mark.asyncio
async def test_broadcast_through_screen():
    """Tab moves through the broadcast fields and Enter sends once valid."""
    app = _RecordingApp()
    async with app.run_test() as pilot:
        app.open_broadcast(["/src/api", "/src/web"])
        await pilot.pause()

        await pilot.press("a", "tab", "tab", "h", "i", "enter")
        await pilot.pause()

        request = app.received[0]
        assert request.repo_paths == ["/src/api", "/src/web"]
        assert request.prompt == "hi"
