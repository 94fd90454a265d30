"""Holder for the one modal on screen."""

from __future__ import annotations

import logging

from rich.text import Text

from sessiondeck.cli.tui.messages import ModalDismissed, ModalRequest
from sessiondeck.cli.tui.modals.base import ModalCommand, ModalState
from sessiondeck.cli.tui.theme import ERROR_STYLE
from sessiondeck.cli.tui.types import KeyEvent
from sessiondeck.constants import MODAL_HORIZONTAL_OVERHEAD

logger = logging.getLogger(__name__)


class ModalHost:
    """Shows at most one modal state and routes key events to it.

    States are built fresh for every ``show``; nothing carries over between
    two openings of the same dialog. A commit or a dismissal closes the
    modal. The error line belongs to the host, so it survives state updates
    and is cleared by ``show``/``hide``.
    """

    def __init__(self) -> None:
        self.state: ModalState | None = None
        self.error = ""

    @property
    def visible(self) -> bool:
        return self.state is not None

    def show(self, state: ModalState) -> None:
        logger.debug("Showing modal %s", type(state).__name__)
        self.state = state
        self.error = ""

    def hide(self) -> None:
        if self.state is not None:
            logger.debug("Hiding modal %s", type(self.state).__name__)
        self.state = None
        self.error = ""

    def set_error(self, error: str) -> None:
        self.error = error

    def update(self, event: KeyEvent) -> ModalCommand:
        """Feed one event to the active modal and return its follow-up command."""
        if self.state is None:
            return None
        self.state, command = self.state.update(event)
        if isinstance(command, (ModalRequest, ModalDismissed)):
            self.hide()
        return command

    def view(self, screen_width: int, screen_height: int) -> Text | None:
        """Size the active modal for the screen and render it."""
        if self.state is None:
            return None
        width = min(self.state.preferred_width, max(1, screen_width - MODAL_HORIZONTAL_OVERHEAD))
        self.state.set_size(width, screen_height)
        content = self.state.render()
        if self.error:
            content.append("\n")
            content.append(self.error, style=ERROR_STYLE)
        return content
