"""Modal contract shared by every dialog.

A modal is a plain state object. The host feeds it one ``KeyEvent`` at a
time through ``update`` and draws whatever ``render`` returns. ``update`` is
the only mutation entry point and finishes every state change before it
returns; ``render`` and ``help`` only read.

Enter and Escape are handled here for every modal:
- Escape returns ``ModalDismissed``.
- Enter checks ``is_valid()``; a valid modal builds its request, hands it to
  the host's ``on_commit`` callback and returns it. An invalid one ignores
  the key and its ``help()`` says what is missing.

Every other event goes to ``handle_key``. Events a modal does not recognise
are no-ops.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence

from rich.text import Text

from sessiondeck.cli.tui.messages import ModalDismissed, ModalRequest
from sessiondeck.cli.tui.theme import HELP_STYLE, TITLE_STYLE
from sessiondeck.cli.tui.types import Key, KeyEvent
from sessiondeck.config.schema import ModalSettings

logger = logging.getLogger(__name__)

ModalCommand = ModalRequest | ModalDismissed | None
CommitCallback = Callable[[ModalRequest], None]


class ModalState(ABC):
    """Base class for modal dialogs."""

    wide = False

    def __init__(
        self,
        *,
        settings: ModalSettings | None = None,
        on_commit: CommitCallback | None = None,
    ) -> None:
        self.settings = settings or ModalSettings()
        self.on_commit = on_commit
        self.available_width = self.preferred_width
        self.available_height = 0

    @property
    def preferred_width(self) -> int:
        if self.wide:
            return self.settings.modal_width_wide
        return self.settings.modal_width

    def set_size(self, width: int, height: int) -> None:
        """Called by the host with the width actually granted before rendering."""
        self.available_width = width
        self.available_height = height

    @abstractmethod
    def title(self) -> str: ...

    @abstractmethod
    def help(self) -> str: ...

    @abstractmethod
    def render_body(self) -> list[Text]:
        """Content lines between the title and the help legend."""

    @abstractmethod
    def handle_key(self, event: KeyEvent) -> None:
        """Apply a non-Enter, non-Escape event."""

    @abstractmethod
    def build_request(self) -> ModalRequest:
        """Request describing the confirmed state."""

    def is_valid(self) -> bool:
        return True

    def replace_items(self, items: Sequence[Any]) -> None:
        """Take a freshly fetched list. Modals that fetch nothing ignore it."""
        logger.debug("%s: ignoring %d loaded items", type(self).__name__, len(items))

    def set_load_error(self, error: str) -> None:
        """Show why a fetch failed. Modals that fetch nothing ignore it."""
        logger.debug("%s: ignoring load error %r", type(self).__name__, error)

    def render(self) -> Text:
        parts = [Text(self.title(), style=TITLE_STYLE), *self.render_body(), Text(self.help(), style=HELP_STYLE)]
        return Text("\n").join(parts)

    def commit(self) -> ModalRequest | None:
        if not self.is_valid():
            logger.debug("%s: commit ignored, state not valid", type(self).__name__)
            return None
        request = self.build_request()
        logger.debug("%s: committed %s", type(self).__name__, type(request).__name__)
        if self.on_commit is not None:
            self.on_commit(request)
        return request

    def update(self, event: KeyEvent) -> tuple[ModalState, ModalCommand]:
        if event.key is Key.ESCAPE:
            logger.debug("%s: dismissed", type(self).__name__)
            return self, ModalDismissed()
        if event.key is Key.ENTER:
            return self, self.commit()
        self.handle_key(event)
        return self, None
