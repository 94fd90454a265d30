"""Issue import modals: pick a source, then pick issues to turn into sessions."""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Sequence

from rich.text import Text

from sessiondeck.cli.models import IssueItem, IssueSource
from sessiondeck.cli.tui.keys import VIM_DOWN, VIM_UP
from sessiondeck.cli.tui.messages import ImportIssuesRequest, IssueSourceSelected, RepoForIssuesSelected
from sessiondeck.cli.tui.modals.base import CommitCallback, ModalState
from sessiondeck.cli.tui.modals.helpers import (
    checkbox,
    focus_block,
    label,
    list_row,
    note,
    scroll_window,
    truncate_path,
    truncate_string,
)
from sessiondeck.cli.tui.nav import Cursor, FocusRing, Viewport
from sessiondeck.cli.tui.theme import ERROR_STYLE, SECONDARY_STYLE, WARNING_STYLE
from sessiondeck.cli.tui.types import Key, KeyEvent
from sessiondeck.config.schema import ModalSettings
from sessiondeck.constants import CONTAINER_AUTH_HELP

logger = logging.getLogger(__name__)

# Modal padding and borders inside the granted width
_CONTENT_PADDING = 4
# "> [x] #12345: "
_GITHUB_ROW_OVERHEAD = 15
# "> [x] "
_ASANA_ROW_OVERHEAD = 8


class IssuesField(str, Enum):
    ISSUE_LIST = "issue_list"
    AUTONOMOUS = "autonomous"
    CONTAINER = "container"


class ImportIssuesModal(ModalState):
    """Select issues (or tasks) to import as sessions.

    Opens in a loading state; the host delivers the fetched list with
    ``set_issues`` (``replace_items``) or a failure with ``set_load_error``.
    Either call replaces the previous content entirely and re-clamps the
    cursor and scroll window.

    With container support two checkboxes follow the list: autonomous mode
    and container mode. Autonomous mode forces containers, so the container
    checkbox is skipped while it is on.
    """

    wide = True

    def __init__(
        self,
        repo_path: str,
        *,
        source: str = "github",
        project_id: str = "",
        containers_supported: bool = False,
        container_auth_available: bool = False,
        settings: ModalSettings | None = None,
        on_commit: CommitCallback | None = None,
    ) -> None:
        super().__init__(settings=settings, on_commit=on_commit)
        self.repo_path = repo_path
        self.repo_name = os.path.basename(repo_path.rstrip("/")) or repo_path
        self.source = source
        self.project_id = project_id
        self.containers_supported = containers_supported
        self.container_auth_available = container_auth_available
        self.autonomous = False
        self.use_containers = False

        self.loading = True
        self.load_error = ""
        self.issues: list[IssueItem] = []
        self.selected: set[int] = set()
        self.cursor = Cursor()
        self.viewport = Viewport(capacity=self.settings.issues_max_visible)

        fields = [IssuesField.ISSUE_LIST]
        if containers_supported:
            fields += [IssuesField.AUTONOMOUS, IssuesField.CONTAINER]
        self.focus = FocusRing(fields, self._is_field_enabled)

    def _is_field_enabled(self, field: IssuesField) -> bool:
        if field is IssuesField.CONTAINER:
            return not self.autonomous
        return True

    @property
    def _is_asana(self) -> bool:
        return self.source == "asana"

    def set_issues(self, issues: Sequence[IssueItem]) -> None:
        """Replace the list with freshly fetched issues and leave the loading state."""
        self.issues = list(issues)
        self.selected = set()
        self.loading = False
        self.load_error = ""
        self.cursor.set_count(len(self.issues))
        self.viewport.recompute(self.cursor.position, len(self.issues))
        logger.debug("Loaded %d issues for %s", len(self.issues), self.repo_name)

    def replace_items(self, items: Sequence[IssueItem]) -> None:
        self.set_issues(items)

    def set_load_error(self, error: str) -> None:
        self.load_error = error
        self.loading = False

    def title(self) -> str:
        return "Import Asana Tasks" if self._is_asana else "Import GitHub Issues"

    def help(self) -> str:
        if self.loading:
            return "Loading issues..."
        if self.load_error or not self.issues:
            return "Esc: close"
        if not self.selected:
            return "Select at least one issue  up/down: navigate  Space: toggle  Tab: next field  Esc: cancel"
        return "up/down: navigate  Space: toggle  Tab: next field  Enter: import  Esc: cancel"

    def handle_key(self, event: KeyEvent) -> None:
        if self.loading or self.load_error:
            return
        field = self.focus.current
        if event.key is Key.TAB:
            self.focus.next()
        elif event.key is Key.SHIFT_TAB:
            self.focus.prev()
        elif event.key is Key.UP or event.is_char(VIM_UP):
            if field is IssuesField.ISSUE_LIST:
                self._move_cursor(-1)
            else:
                self.focus.prev(wrap=False)
        elif event.key is Key.DOWN or event.is_char(VIM_DOWN):
            if field is IssuesField.ISSUE_LIST:
                self._move_cursor(1)
            else:
                self.focus.next(wrap=True)
        elif event.key is Key.SPACE:
            self._toggle(field)

    def _move_cursor(self, delta: int) -> None:
        self.cursor.move(delta)
        self.viewport.recompute(self.cursor.position, len(self.issues))

    def _toggle(self, field: IssuesField | None) -> None:
        if field is IssuesField.ISSUE_LIST:
            if not self.issues:
                return
            index = self.cursor.position
            if index in self.selected:
                self.selected.discard(index)
            else:
                self.selected.add(index)
        elif field is IssuesField.AUTONOMOUS:
            self.autonomous = not self.autonomous
            if self.autonomous:
                self.use_containers = True
        elif field is IssuesField.CONTAINER:
            self.use_containers = not self.use_containers

    @property
    def selected_issues(self) -> list[IssueItem]:
        return [issue for i, issue in enumerate(self.issues) if i in self.selected]

    @property
    def effective_use_containers(self) -> bool:
        return self.use_containers or self.autonomous

    def is_valid(self) -> bool:
        return not self.loading and not self.load_error and bool(self.selected)

    def build_request(self) -> ImportIssuesRequest:
        return ImportIssuesRequest(
            repo_path=self.repo_path,
            source=self.source,
            issues=self.selected_issues,
            use_containers=self.effective_use_containers,
            autonomous=self.autonomous,
        )

    def _issue_row(self, index: int, issue: IssueItem) -> Text:
        content_width = self.available_width - _CONTENT_PADDING
        mark = checkbox(index in self.selected)
        if issue.source == "asana":
            title = truncate_string(issue.title, content_width - _ASANA_ROW_OVERHEAD)
            line = f"{mark} {title}"
        else:
            title = truncate_string(issue.title, content_width - _GITHUB_ROW_OVERHEAD)
            line = f"{mark} #{issue.id}: {title}"
        return list_row(line, index == self.cursor.position)

    def render_body(self) -> list[Text]:
        parts = [label("Repository:"), Text("  " + self.repo_name, style=SECONDARY_STYLE)]

        if self.loading:
            source = "Asana" if self._is_asana else "GitHub"
            parts.append(note(f"Fetching {'tasks' if self._is_asana else 'issues'} from {source}..."))
            return parts
        if self.load_error:
            parts.append(Text(self.load_error, style=ERROR_STYLE))
            return parts
        if not self.issues:
            parts.append(note("No incomplete tasks found" if self._is_asana else "No open issues found"))
            return parts

        kind = "tasks" if self._is_asana else "issues"
        parts.append(label(f"Select {kind} to import as sessions:"))
        rows = [self._issue_row(i, issue) for i, issue in enumerate(self.issues)]
        parts.extend(scroll_window(rows, self.viewport))

        count = len(self.selected)
        count_text = f"{count} issue(s) selected"
        if count:
            count_text += f" - will create {count} session(s)"
        parts.append(Text(count_text, style=SECONDARY_STYLE))

        if self.containers_supported:
            focused = self.focus.current
            parts.append(label("Autonomous mode:"))
            parts.append(
                focus_block(
                    f"{checkbox(self.autonomous)} Orchestrator: delegates to children, can create PRs",
                    focused is IssuesField.AUTONOMOUS,
                )
            )
            parts.append(label("Container mode:"))
            desc = "(required for autonomous mode)" if self.autonomous else "Sandbox: isolated environment"
            parts.append(
                focus_block(
                    f"{checkbox(self.effective_use_containers)} {desc}",
                    focused is IssuesField.CONTAINER and not self.autonomous,
                )
            )
            if self.effective_use_containers and not self.container_auth_available:
                parts.append(Text("  " + CONTAINER_AUTH_HELP, style=WARNING_STYLE))
        return parts


class SelectIssueSourceModal(ModalState):
    """Choose where to import issues from when more than one source is configured."""

    def __init__(
        self,
        repo_path: str,
        sources: Sequence[IssueSource],
        *,
        settings: ModalSettings | None = None,
        on_commit: CommitCallback | None = None,
    ) -> None:
        super().__init__(settings=settings, on_commit=on_commit)
        self.repo_path = repo_path
        self.repo_name = os.path.basename(repo_path.rstrip("/")) or repo_path
        self.sources = list(sources)
        self.cursor = Cursor(count=len(self.sources))

    def title(self) -> str:
        return "Select Issue Source"

    def help(self) -> str:
        if not self.sources:
            return "No issue sources configured  Esc: cancel"
        return "up/down: navigate  Enter: select  Esc: cancel"

    def handle_key(self, event: KeyEvent) -> None:
        if event.key is Key.UP or event.is_char(VIM_UP):
            self.cursor.move(-1)
        elif event.key is Key.DOWN or event.is_char(VIM_DOWN):
            self.cursor.move(1)

    @property
    def selected_source(self) -> str:
        if not self.sources:
            return ""
        return self.sources[self.cursor.position].source

    def is_valid(self) -> bool:
        return bool(self.sources)

    def build_request(self) -> IssueSourceSelected:
        return IssueSourceSelected(repo_path=self.repo_path, source=self.selected_source)

    def render_body(self) -> list[Text]:
        rows = [list_row(source.name, i == self.cursor.position) for i, source in enumerate(self.sources)]
        return [
            label("Repository:"),
            Text("  " + self.repo_name, style=SECONDARY_STYLE),
            label("Select where to import issues/tasks from:"),
            *rows,
        ]


class SelectRepoForIssuesModal(ModalState):
    """First step of an issue import: the repository to import into."""

    def __init__(
        self,
        repos: Sequence[str],
        *,
        settings: ModalSettings | None = None,
        on_commit: CommitCallback | None = None,
    ) -> None:
        super().__init__(settings=settings, on_commit=on_commit)
        self.repos = list(repos)
        self.cursor = Cursor(count=len(self.repos))

    def title(self) -> str:
        return "Select Repository"

    def help(self) -> str:
        if not self.repos:
            return "No repositories added  Esc: cancel"
        return "up/down: select repo  Enter: import issues  Esc: cancel"

    def handle_key(self, event: KeyEvent) -> None:
        if event.key is Key.UP or event.is_char(VIM_UP):
            self.cursor.move(-1)
        elif event.key is Key.DOWN or event.is_char(VIM_DOWN):
            self.cursor.move(1)

    @property
    def selected_repo(self) -> str:
        if not self.repos:
            return ""
        return self.repos[self.cursor.position]

    def is_valid(self) -> bool:
        return bool(self.repos)

    def build_request(self) -> RepoForIssuesSelected:
        return RepoForIssuesSelected(repo_path=self.selected_repo)

    def render_body(self) -> list[Text]:
        parts = [label("Select a repository to import issues from:")]
        if not self.repos:
            parts.append(note("No repositories added. Add one first."))
            return parts
        max_len = self.available_width - 8
        parts.extend(
            list_row(truncate_path(repo, max_len), i == self.cursor.position) for i, repo in enumerate(self.repos)
        )
        return parts
