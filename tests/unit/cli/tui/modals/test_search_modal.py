"""Unit tests for the message search modal."""

from __future__ import annotations

from sessiondeck.cli.models import ChatMessage, SearchResult
from sessiondeck.cli.tui.messages import JumpToMessageRequest
from sessiondeck.cli.tui.modals import SearchMessagesModal
from sessiondeck.cli.tui.modals.search import clean_content, extract_snippet, find_matches
from sessiondeck.cli.tui.theme import MATCH_STYLE
from sessiondeck.cli.tui.types import KeyEvent


def _press(modal, *names: str):
    command = None
    for name in names:
        _, command = modal.update(KeyEvent.from_name(name))
    return command


def _type(modal, text: str) -> None:
    for ch in text:
        modal.update(KeyEvent.char(ch))


def test_clean_content_collapses_whitespace() -> None:
    assert clean_content("  a\n\tb   c ") == "a b c"


def test_find_matches_is_case_insensitive(conversation: list[ChatMessage]) -> None:
    """Test offsets point into the whitespace-collapsed content."""
    results = find_matches(conversation, "retry")
    assert [r.message_index for r in results] == [0, 1]
    second = results[1]
    assert second.content == "Added a Retry wrapper around fetch. It backs off exponentially."
    assert second.content[second.match_start : second.match_end] == "Retry"
    assert find_matches(conversation, "") == []


def test_snippet_centres_long_content() -> None:
    content = "x" * 100 + "needle" + "y" * 100
    result = SearchResult(0, "user", content, 100, 106)
    snippet = extract_snippet(result, max_len=20)
    assert snippet.plain.startswith("...")
    assert snippet.plain.endswith("...")
    assert "needle" in snippet.plain
    highlighted = [snippet.plain[span.start : span.end] for span in snippet.spans if span.style == MATCH_STYLE]
    assert highlighted == ["needle"]


def test_snippet_short_content_is_whole() -> None:
    result = SearchResult(0, "user", "short text", 6, 10)
    assert extract_snippet(result).plain == "short text"


def test_query_change_refilters_and_resets_cursor(conversation: list[ChatMessage]) -> None:
    """Test typing re-runs the search and moves the cursor back to the top."""
    modal = SearchMessagesModal(conversation)
    _type(modal, "the")
    assert [r.message_index for r in modal.results] == [0, 2]
    _press(modal, "down")
    assert modal.cursor.position == 1

    _type(modal, " ")
    assert modal.cursor.position == 0
    assert "2 match(es) found" in modal.render().plain


def test_jump_to_selected_message(conversation: list[ChatMessage]) -> None:
    commits = []
    modal = SearchMessagesModal(conversation, on_commit=commits.append)
    _type(modal, "FETCH")
    command = _press(modal, "down", "down", "enter")
    assert isinstance(command, JumpToMessageRequest)
    assert command.message_index == 1
    assert commits == [command]


def test_no_matches_blocks_commit(conversation: list[ChatMessage]) -> None:
    modal = SearchMessagesModal(conversation)
    assert "Start typing" in modal.render().plain
    _type(modal, "zzz")
    assert _press(modal, "enter") is None
    assert modal.help() == "No matches found. Esc: close"


def test_j_and_k_are_query_text(conversation: list[ChatMessage]) -> None:
    modal = SearchMessagesModal(conversation)
    _type(modal, "jk")
    assert modal.query == "jk"


def test_results_scroll(settings) -> None:
    messages = [ChatMessage("user", f"match {i}") for i in range(20)]
    modal = SearchMessagesModal(messages, settings=settings)
    _type(modal, "match")
    _press(modal, *["down"] * 10)
    assert modal.cursor.position == 10
    assert modal.viewport.offset == 10 - settings.search_max_visible + 1
    text = modal.render().plain
    assert "[11] You: match 10" in text
    assert "↑ more above" in text
