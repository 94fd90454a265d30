"""PR review comments modal: pick comments for the agent to address."""

from __future__ import annotations

import logging
from typing import Sequence

from rich.text import Text

from sessiondeck.cli.models import ReviewComment
from sessiondeck.cli.tui.keys import VIM_DOWN, VIM_UP
from sessiondeck.cli.tui.messages import AddressReviewCommentsRequest
from sessiondeck.cli.tui.modals.base import CommitCallback, ModalState
from sessiondeck.cli.tui.modals.helpers import checkbox, label, list_row, note, scroll_window, truncate_string
from sessiondeck.cli.tui.nav import Cursor, Viewport
from sessiondeck.cli.tui.theme import ERROR_STYLE, MUTED_STYLE, SECONDARY_STYLE
from sessiondeck.cli.tui.types import Key, KeyEvent
from sessiondeck.config.schema import ModalSettings

logger = logging.getLogger(__name__)

# Modal padding and borders inside the granted width
_CONTENT_PADDING = 4
# Cursor marker plus the indent under the checkbox
_BODY_INDENT = "      "


class ReviewCommentsModal(ModalState):
    """Review comments on a session's pull request.

    Opens in a loading state like ``ImportIssuesModal``; the fetched comments
    arrive through ``replace_items`` and a failure through ``set_load_error``.
    Each comment takes two rows, a header and the first line of its body, and
    the scroll window counts comments, not rows.
    """

    wide = True

    def __init__(
        self,
        session_id: str,
        branch: str,
        *,
        settings: ModalSettings | None = None,
        on_commit: CommitCallback | None = None,
    ) -> None:
        super().__init__(settings=settings, on_commit=on_commit)
        self.session_id = session_id
        self.branch = branch
        self.loading = True
        self.load_error = ""
        self.comments: list[ReviewComment] = []
        self.selected: set[int] = set()
        self.cursor = Cursor()
        self.viewport = Viewport(capacity=self.settings.issues_max_visible)

    def replace_items(self, items: Sequence[ReviewComment]) -> None:
        self.comments = list(items)
        self.selected = set()
        self.loading = False
        self.load_error = ""
        self.cursor.set_count(len(self.comments))
        self.viewport.recompute(self.cursor.position, len(self.comments))
        logger.debug("Loaded %d review comments for %s", len(self.comments), self.branch)

    def set_load_error(self, error: str) -> None:
        self.load_error = error
        self.loading = False

    def title(self) -> str:
        return "PR Review Comments"

    def help(self) -> str:
        if self.loading:
            return "Loading review comments..."
        if self.load_error or not self.comments:
            return "Esc: close"
        if not self.selected:
            return "Select at least one comment  up/down: navigate  Space: toggle  a: select all  Esc: cancel"
        return "up/down: navigate  Space: toggle  a: select all  Enter: send to agent  Esc: cancel"

    def handle_key(self, event: KeyEvent) -> None:
        if self.loading or self.load_error or not self.comments:
            return
        if event.key is Key.UP or event.is_char(VIM_UP):
            self.cursor.move(-1)
            self.viewport.recompute(self.cursor.position)
        elif event.key is Key.DOWN or event.is_char(VIM_DOWN):
            self.cursor.move(1)
            self.viewport.recompute(self.cursor.position)
        elif event.key is Key.SPACE:
            self.selected ^= {self.cursor.position}
        elif event.is_char("a"):
            # Toggle: all selected clears, anything else selects all
            everything = set(range(len(self.comments)))
            self.selected = set() if self.selected == everything else everything

    @property
    def selected_comments(self) -> list[ReviewComment]:
        return [comment for i, comment in enumerate(self.comments) if i in self.selected]

    def is_valid(self) -> bool:
        return not self.loading and not self.load_error and bool(self.selected)

    def build_request(self) -> AddressReviewCommentsRequest:
        return AddressReviewCommentsRequest(session_id=self.session_id, comments=self.selected_comments)

    def _comment_rows(self, index: int, comment: ReviewComment) -> Text:
        header = [f"@{comment.author}"] if comment.author else []
        if comment.location:
            header.append(comment.location)
        rows = [list_row(f"{checkbox(index in self.selected)} {'  '.join(header)}", index == self.cursor.position)]

        body = " ".join(comment.body.split())
        if body:
            max_len = max(self.available_width - _CONTENT_PADDING - 2 - len(_BODY_INDENT), 10)
            rows.append(Text("  " + _BODY_INDENT + truncate_string(body, max_len), style=MUTED_STYLE))
        return Text("\n").join(rows)

    def render_body(self) -> list[Text]:
        parts = [label("Branch:"), Text("  " + self.branch, style=SECONDARY_STYLE)]
        if self.loading:
            parts.append(note("Fetching review comments..."))
            return parts
        if self.load_error:
            parts.append(Text(self.load_error, style=ERROR_STYLE))
            return parts
        if not self.comments:
            parts.append(note("No review comments found"))
            return parts

        parts.append(label("Select comments to address:"))
        rows = [self._comment_rows(i, comment) for i, comment in enumerate(self.comments)]
        parts.extend(scroll_window(rows, self.viewport))
        parts.append(
            Text(f"{len(self.selected)} of {len(self.comments)} comment(s) selected", style=SECONDARY_STYLE)
        )
        return parts
