"""Session modals: new, fork, rename."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

from rich.text import Text

from sessiondeck.cli.tui.keys import VIM_DOWN, VIM_UP
from sessiondeck.cli.tui.messages import CreateSessionRequest, ForkSessionRequest, RenameSessionRequest
from sessiondeck.cli.tui.modals.base import CommitCallback, ModalState
from sessiondeck.cli.tui.modals.helpers import (
    checkbox,
    focus_block,
    label,
    note,
    render_selectable_list,
    truncate_path,
)
from sessiondeck.cli.tui.nav import Cursor, FocusRing
from sessiondeck.cli.tui.theme import SECONDARY_STYLE, WARNING_STYLE
from sessiondeck.cli.tui.types import Key, KeyEvent
from sessiondeck.cli.tui.widgets.text_input import TextField
from sessiondeck.config.schema import ModalSettings
from sessiondeck.constants import BASE_BRANCH_OPTIONS

logger = logging.getLogger(__name__)

_BRANCH_PLACEHOLDER = "optional branch name (leave empty for auto)"
_CONTAINER_DESC = "Run the agent CLI inside a container with permissions skipped"
_CONTAINER_WARNING = "Warning: containers add defense in depth but are not a complete security boundary."


def _is_up(event: KeyEvent) -> bool:
    return event.key is Key.UP or event.is_char(VIM_UP)


def _is_down(event: KeyEvent) -> bool:
    return event.key is Key.DOWN or event.is_char(VIM_DOWN)


class NewSessionField(str, Enum):
    REPO_LIST = "repo_list"
    BASE = "base"
    AUTONOMOUS = "autonomous"
    BRANCH = "branch"
    CONTAINER = "container"


class NewSessionModal(ModalState):
    """Create a session: pick a repository, a base branch, a branch name and run options.

    Field order is repo list, base branch, autonomous, branch name,
    container. The repo list is left out when the repository is locked by the
    caller; the autonomous and container fields are left out without
    container support. While autonomous mode is on the branch name is
    generated and containers are forced, so both fields are skipped.
    """

    def __init__(
        self,
        repos: Sequence[str],
        *,
        containers_supported: bool = False,
        locked_repo: str | None = None,
        settings: ModalSettings | None = None,
        on_commit: CommitCallback | None = None,
    ) -> None:
        super().__init__(settings=settings, on_commit=on_commit)
        self.repos = list(repos)
        self.locked_repo = locked_repo
        self.containers_supported = containers_supported
        self.autonomous = False
        self.use_containers = False

        fields = list(NewSessionField)
        if locked_repo is not None:
            fields.remove(NewSessionField.REPO_LIST)
        if not containers_supported:
            fields.remove(NewSessionField.AUTONOMOUS)
            fields.remove(NewSessionField.CONTAINER)
        self.focus = FocusRing(fields, self._is_field_enabled)

        self.repo_cursor = Cursor(count=len(self.repos))
        self.base_cursor = Cursor(count=len(BASE_BRANCH_OPTIONS))
        self.branch_input = TextField(
            placeholder=_BRANCH_PLACEHOLDER,
            char_limit=self.settings.branch_name_char_limit,
            width=self.settings.input_width,
        )
        self._sync_input_focus()

    def _is_field_enabled(self, field: NewSessionField) -> bool:
        if field in (NewSessionField.BRANCH, NewSessionField.CONTAINER):
            return not self.autonomous
        return True

    def _sync_input_focus(self) -> None:
        if self.focus.is_focused(NewSessionField.BRANCH):
            self.branch_input.focus()
        else:
            self.branch_input.blur()

    def title(self) -> str:
        return "New Session"

    def help(self) -> str:
        if not self.is_valid():
            return "No repository to start from. Esc: cancel"
        field = self.focus.current
        if field is NewSessionField.REPO_LIST:
            return "up/down: select  Tab: next field  Enter: create  Esc: cancel"
        if field in (NewSessionField.AUTONOMOUS, NewSessionField.CONTAINER):
            return "Space: toggle  Tab: next field  Enter: create  Esc: cancel"
        if field is NewSessionField.BRANCH:
            return "Type a branch name  Tab: next field  Enter: create  Esc: cancel"
        return "up/down: select  Tab: next field  Enter: create  Esc: cancel"

    def handle_key(self, event: KeyEvent) -> None:
        if event.key is Key.TAB:
            self.focus.next()
            self._sync_input_focus()
            return
        if event.key is Key.SHIFT_TAB:
            self.focus.prev()
            self._sync_input_focus()
            return

        field = self.focus.current
        if field is NewSessionField.BRANCH:
            self.branch_input.handle(event)
            return

        cursor = {
            NewSessionField.REPO_LIST: self.repo_cursor,
            NewSessionField.BASE: self.base_cursor,
        }.get(field)
        if cursor is not None:
            if _is_up(event):
                cursor.move(-1)
            elif _is_down(event):
                cursor.move(1)
            return

        if event.key is Key.SPACE:
            if field is NewSessionField.AUTONOMOUS:
                self.autonomous = not self.autonomous
                if self.autonomous:
                    self.use_containers = True
                logger.debug("Autonomous mode %s", "on" if self.autonomous else "off")
            elif field is NewSessionField.CONTAINER:
                self.use_containers = not self.use_containers

    @property
    def selected_repo(self) -> str:
        if self.locked_repo is not None:
            return self.locked_repo
        if not self.repos:
            return ""
        return self.repos[self.repo_cursor.position]

    @property
    def branch_name(self) -> str:
        if self.autonomous:
            return ""
        return self.branch_input.value.strip()

    @property
    def effective_use_containers(self) -> bool:
        return self.use_containers or self.autonomous

    def is_valid(self) -> bool:
        return bool(self.selected_repo)

    def build_request(self) -> CreateSessionRequest:
        return CreateSessionRequest(
            repo_path=self.selected_repo,
            base_index=self.base_cursor.position,
            branch_name=self.branch_name,
            use_containers=self.effective_use_containers,
            autonomous=self.autonomous,
        )

    def render_body(self) -> list[Text]:
        focused = self.focus.current
        parts = [label("Repository:")]
        if self.locked_repo is not None:
            parts.append(Text("  " + self.locked_repo, style=SECONDARY_STYLE))
        elif not self.repos:
            parts.append(note("No repositories added. Add one first."))
        else:
            # Marker plus padding
            max_len = self.available_width - 8
            repos = [truncate_path(repo, max_len) for repo in self.repos]
            parts.append(
                render_selectable_list(repos, self.repo_cursor.position, focused is NewSessionField.REPO_LIST)
            )

        parts.append(label("Base branch:"))
        parts.append(
            render_selectable_list(BASE_BRANCH_OPTIONS, self.base_cursor.position, focused is NewSessionField.BASE)
        )

        if self.containers_supported:
            parts.append(label("Autonomous mode:"))
            parts.append(
                focus_block(
                    f"{checkbox(self.autonomous)} Orchestrator: delegates to children, can create PRs",
                    focused is NewSessionField.AUTONOMOUS,
                )
            )

        parts.append(label("Branch name:"))
        if self.autonomous:
            parts.append(focus_block(note("(generated in autonomous mode)"), False))
        else:
            parts.append(focus_block(self.branch_input.render(), focused is NewSessionField.BRANCH))

        if self.containers_supported:
            parts.append(label("Run in container:"))
            desc = "(required for autonomous mode)" if self.autonomous else _CONTAINER_DESC
            parts.append(
                focus_block(
                    f"{checkbox(self.effective_use_containers)} {desc}",
                    focused is NewSessionField.CONTAINER,
                )
            )
            parts.append(Text("  " + _CONTAINER_WARNING, style=WARNING_STYLE))
        return parts


class ForkField(str, Enum):
    COPY_MESSAGES = "copy_messages"
    BRANCH = "branch"
    CONTAINER = "container"


class ForkSessionModal(ModalState):
    """Fork an existing session into a new branch."""

    def __init__(
        self,
        parent_session_name: str,
        parent_session_id: str,
        repo_path: str,
        *,
        parent_containerized: bool = False,
        containers_supported: bool = False,
        settings: ModalSettings | None = None,
        on_commit: CommitCallback | None = None,
    ) -> None:
        super().__init__(settings=settings, on_commit=on_commit)
        self.parent_session_name = parent_session_name
        self.parent_session_id = parent_session_id
        self.repo_path = repo_path
        self.containers_supported = containers_supported
        self.copy_messages = True
        self.use_containers = parent_containerized

        fields = list(ForkField)
        if not containers_supported:
            fields.remove(ForkField.CONTAINER)
        self.focus = FocusRing(fields)
        self.branch_input = TextField(
            placeholder=_BRANCH_PLACEHOLDER,
            char_limit=self.settings.branch_name_char_limit,
            width=self.settings.input_width,
        )

    def _sync_input_focus(self) -> None:
        if self.focus.is_focused(ForkField.BRANCH):
            self.branch_input.focus()
        else:
            self.branch_input.blur()

    def title(self) -> str:
        return "Fork Session"

    def help(self) -> str:
        return "Tab: switch field  Space: toggle  Enter: create fork  Esc: cancel"

    def handle_key(self, event: KeyEvent) -> None:
        field = self.focus.current
        if event.key is Key.TAB:
            self.focus.next()
        elif event.key is Key.SHIFT_TAB:
            self.focus.prev()
        elif event.key in (Key.UP, Key.DOWN) or (field is not ForkField.BRANCH and (_is_up(event) or _is_down(event))):
            # Vertical keys flip between the copy toggle and the branch name.
            if field is ForkField.COPY_MESSAGES:
                self.focus.focus(ForkField.BRANCH)
            else:
                self.focus.focus(ForkField.COPY_MESSAGES)
        elif field is ForkField.BRANCH:
            self.branch_input.handle(event)
            return
        elif event.key is Key.SPACE:
            if field is ForkField.COPY_MESSAGES:
                self.copy_messages = not self.copy_messages
            elif field is ForkField.CONTAINER:
                self.use_containers = not self.use_containers
            return
        else:
            return
        self._sync_input_focus()

    @property
    def branch_name(self) -> str:
        return self.branch_input.value.strip()

    def build_request(self) -> ForkSessionRequest:
        return ForkSessionRequest(
            parent_session_id=self.parent_session_id,
            repo_path=self.repo_path,
            branch_name=self.branch_name,
            copy_messages=self.copy_messages,
            use_containers=self.use_containers,
        )

    def render_body(self) -> list[Text]:
        focused = self.focus.current
        parts = [
            label("Forking from:"),
            Text("  " + self.parent_session_name, style=SECONDARY_STYLE),
            label("Copy conversation history:"),
            focus_block(
                f"{checkbox(self.copy_messages)} Include messages from parent session",
                focused is ForkField.COPY_MESSAGES,
            ),
            label("Branch name:"),
            focus_block(self.branch_input.render(), focused is ForkField.BRANCH),
        ]
        if self.containers_supported:
            parts.append(label("Run in container:"))
            parts.append(
                focus_block(f"{checkbox(self.use_containers)} {_CONTAINER_DESC}", focused is ForkField.CONTAINER)
            )
        return parts


class RenameSessionModal(ModalState):
    """Rename a session. The name field always has focus."""

    def __init__(
        self,
        session_id: str,
        current_name: str,
        *,
        settings: ModalSettings | None = None,
        on_commit: CommitCallback | None = None,
    ) -> None:
        super().__init__(settings=settings, on_commit=on_commit)
        self.session_id = session_id
        self.session_name = current_name
        self.name_input = TextField(
            current_name,
            placeholder="enter new name",
            char_limit=self.settings.session_name_char_limit,
            width=self.settings.input_width,
            focused=True,
        )

    def title(self) -> str:
        return "Rename Session"

    def help(self) -> str:
        if not self.is_valid():
            return "Name cannot be empty  Esc: cancel"
        return "Enter: save  Esc: cancel"

    def handle_key(self, event: KeyEvent) -> None:
        self.name_input.handle(event)

    @property
    def new_name(self) -> str:
        return self.name_input.value.strip()

    def is_valid(self) -> bool:
        return bool(self.new_name)

    def build_request(self) -> RenameSessionRequest:
        return RenameSessionRequest(session_id=self.session_id, new_name=self.new_name)

    def render_body(self) -> list[Text]:
        return [
            label("Current name:"),
            Text("  " + self.session_name, style=SECONDARY_STYLE),
            label("New name:"),
            focus_block(self.name_input.render(), True),
        ]
