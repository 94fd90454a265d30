"""Search within the conversation of the focused session."""

from __future__ import annotations

import logging
import re
from typing import Sequence

from rich.text import Text

from sessiondeck.cli.models import ChatMessage, SearchResult
from sessiondeck.cli.tui.messages import JumpToMessageRequest
from sessiondeck.cli.tui.modals.base import CommitCallback, ModalState
from sessiondeck.cli.tui.modals.helpers import focus_block, label, note, scroll_window
from sessiondeck.cli.tui.nav import Cursor, Viewport
from sessiondeck.cli.tui.theme import (
    ASSISTANT_STYLE,
    ITEM_STYLE,
    MATCH_STYLE,
    SECONDARY_STYLE,
    SELECTED_STYLE,
    USER_STYLE,
)
from sessiondeck.cli.tui.types import Key, KeyEvent
from sessiondeck.cli.tui.widgets.text_input import TextField
from sessiondeck.config.schema import ModalSettings

logger = logging.getLogger(__name__)

SNIPPET_LENGTH = 60
_WHITESPACE_RE = re.compile(r"\s+")


def clean_content(content: str) -> str:
    """Collapse newlines, tabs and runs of spaces into single spaces."""
    return _WHITESPACE_RE.sub(" ", content).strip()


def find_matches(messages: Sequence[ChatMessage], query: str) -> list[SearchResult]:
    """Case-insensitive substring search over whitespace-collapsed message content.

    Match offsets index into ``SearchResult.content``, which holds the
    collapsed text, so snippets can be cut and highlighted without remapping.
    """
    if not query:
        return []
    needle = query.lower()
    results = []
    for index, message in enumerate(messages):
        content = clean_content(message.content)
        start = content.lower().find(needle)
        if start != -1:
            results.append(SearchResult(index, message.role, content, start, start + len(needle)))
    return results


def extract_snippet(result: SearchResult, max_len: int = SNIPPET_LENGTH) -> Text:
    """Cut a ``max_len`` window centred on the match and highlight it."""
    content = result.content
    start, end = 0, len(content)
    if len(content) > max_len:
        middle = (result.match_start + result.match_end) // 2
        start = max(0, middle - max_len // 2)
        end = start + max_len
        if end > len(content):
            end = len(content)
            start = max(0, end - max_len)

    snippet = Text()
    if start > 0:
        snippet.append("...")
    match_start = max(result.match_start, start)
    match_end = min(result.match_end, end)
    if match_start < match_end:
        snippet.append(content[start:match_start])
        snippet.append(content[match_start:match_end], style=MATCH_STYLE)
        snippet.append(content[match_end:end])
    else:
        snippet.append(content[start:end])
    if end < len(content):
        snippet.append("...")
    return snippet


class SearchMessagesModal(ModalState):
    """Filter the conversation as the user types and jump to a match.

    The query field always has focus. Up and down move through the results;
    every query change re-runs the search and puts the cursor and the scroll
    window back at the top.
    """

    def __init__(
        self,
        messages: Sequence[ChatMessage],
        *,
        settings: ModalSettings | None = None,
        on_commit: CommitCallback | None = None,
    ) -> None:
        super().__init__(settings=settings, on_commit=on_commit)
        self.messages = list(messages)
        self.results: list[SearchResult] = []
        self.cursor = Cursor()
        self.viewport = Viewport(capacity=self.settings.search_max_visible)
        self.query_input = TextField(
            placeholder="Type to search...",
            char_limit=self.settings.search_input_char_limit,
            width=self.settings.input_width,
            focused=True,
        )

    @property
    def query(self) -> str:
        return self.query_input.value

    def title(self) -> str:
        return "Search Messages"

    def help(self) -> str:
        if self.query and not self.results:
            return "No matches found. Esc: close"
        return "Type to search  up/down: navigate  Enter: go to message  Esc: close"

    def handle_key(self, event: KeyEvent) -> None:
        if event.key is Key.UP:
            self._move_cursor(-1)
        elif event.key is Key.DOWN:
            self._move_cursor(1)
        else:
            before = self.query
            self.query_input.handle(event)
            if self.query != before:
                self._refilter()

    def _move_cursor(self, delta: int) -> None:
        self.cursor.move(delta)
        self.viewport.recompute(self.cursor.position, len(self.results))

    def _refilter(self) -> None:
        self.results = find_matches(self.messages, self.query)
        self.cursor = Cursor(count=len(self.results))
        self.viewport.reset()
        self.viewport.recompute(0, len(self.results))
        logger.debug("Search %r matched %d message(s)", self.query, len(self.results))

    @property
    def selected_result(self) -> SearchResult | None:
        if not self.results:
            return None
        return self.results[self.cursor.position]

    def is_valid(self) -> bool:
        return self.selected_result is not None

    def build_request(self) -> JumpToMessageRequest:
        return JumpToMessageRequest(self.results[self.cursor.position].message_index)

    def _result_row(self, index: int, result: SearchResult) -> Text:
        selected = index == self.cursor.position
        row = Text("> " if selected else "  ", style=SELECTED_STYLE if selected else ITEM_STYLE)
        row.append(f" [{result.message_index + 1}] ")
        if result.role == "user":
            row.append("You", style=USER_STYLE)
        else:
            row.append("Assistant", style=ASSISTANT_STYLE)
        row.append(": ")
        row.append_text(extract_snippet(result))
        return row

    def render_body(self) -> list[Text]:
        parts = [label("Search:"), focus_block(self.query_input.render(), True)]
        if not self.query:
            parts.append(note("Start typing to search through messages..."))
            return parts
        if not self.results:
            parts.append(note("No matches found"))
            return parts
        parts.append(Text(f"{len(self.results)} match(es) found", style=SECONDARY_STYLE))
        rows = [self._result_row(i, result) for i, result in enumerate(self.results)]
        parts.extend(scroll_window(rows, self.viewport))
        return parts
