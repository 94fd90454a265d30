"""Textual screen that hosts one modal state.

The screen owns no dialog logic. It translates key events, feeds them to a
``ModalHost`` and redraws the host's view. A commit dismisses the screen with
the request; Escape dismisses it with ``None``.

Lists fetched in the background reach the modal as an ``ItemsLoaded``
message posted to the screen.
"""

from __future__ import annotations

import logging

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Static

from sessiondeck.cli.tui.base import DeckMixin
from sessiondeck.cli.tui.keys import from_textual
from sessiondeck.cli.tui.messages import ItemsLoaded, ModalDismissed, ModalRequest
from sessiondeck.cli.tui.modals.base import ModalState
from sessiondeck.cli.tui.modals.host import ModalHost
from sessiondeck.constants import MODAL_HORIZONTAL_OVERHEAD

logger = logging.getLogger(__name__)


class ModalBody(DeckMixin, Static):
    """Rendered modal content."""


class NavModalScreen(ModalScreen[ModalRequest | None]):
    """Modal screen driven entirely by a ``ModalState``."""

    DEFAULT_CSS = """
    NavModalScreen {
        align: center middle;
    }
    NavModalScreen #modal-box {
        width: auto;
        height: auto;
        border: solid $primary;
        padding: 1 2;
    }
    """

    def __init__(self, state: ModalState, **kwargs: object) -> None:
        super().__init__(**kwargs)
        self.host = ModalHost()
        self.host.show(state)
        self.view_text: Text | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="modal-box"):
            yield ModalBody(id="modal-body")

    def on_mount(self) -> None:
        self._redraw()

    def on_resize(self, _event: events.Resize) -> None:
        self._redraw()

    def set_error(self, error: str) -> None:
        self.host.set_error(error)
        self._redraw()

    def on_items_loaded(self, message: ItemsLoaded) -> None:
        message.stop()
        state = self.host.state
        if state is None:
            return
        if message.error:
            state.set_load_error(message.error)
        else:
            state.replace_items(message.items)
        self._redraw()

    def _redraw(self) -> None:
        state = self.host.state
        content = self.host.view(self.app.size.width, self.app.size.height)
        if state is None or content is None:
            return
        self.query_one("#modal-box", Vertical).styles.width = state.available_width + MODAL_HORIZONTAL_OVERHEAD
        self.view_text = content
        self.query_one("#modal-body", ModalBody).update(content)

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        command = self.host.update(from_textual(event))
        if isinstance(command, ModalRequest):
            logger.debug("Modal committed: %s", type(command).__name__)
            self.dismiss(command)
        elif isinstance(command, ModalDismissed):
            self.dismiss(None)
        else:
            self._redraw()
