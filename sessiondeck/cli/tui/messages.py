"""Follow-up commands returned by modals.

A modal's ``update`` returns at most one of these. ``ModalRequest``
subclasses mean the user confirmed the modal with a valid state;
``ModalDismissed`` means the user cancelled. The host routes them as Textual
messages or inspects them directly.
"""

from __future__ import annotations

from typing import Any, Sequence

from textual.message import Message

from sessiondeck.cli.models import IssueItem, OptionItem, ReviewComment
from sessiondeck.cli.tui.types import BroadcastAction, BulkAction


class ModalDismissed(Message):
    """User cancelled the active modal."""


class ModalRequest(Message):
    """Base for requests produced by confirming a modal."""


class ItemsLoaded(Message):
    """A background fetch finished for the modal on screen.

    Carries either the full replacement list or the error that stopped the
    fetch. The list replaces whatever the modal showed before.
    """

    def __init__(self, items: Sequence[Any] = (), error: str = "") -> None:
        super().__init__()
        self.items = list(items)
        self.error = error


# --- Session requests ---


class CreateSessionRequest(ModalRequest):
    def __init__(
        self,
        repo_path: str,
        base_index: int,
        branch_name: str,
        use_containers: bool,
        autonomous: bool,
    ) -> None:
        super().__init__()
        self.repo_path = repo_path
        self.base_index = base_index
        self.branch_name = branch_name
        self.use_containers = use_containers
        self.autonomous = autonomous


class ForkSessionRequest(ModalRequest):
    def __init__(
        self,
        parent_session_id: str,
        repo_path: str,
        branch_name: str,
        copy_messages: bool,
        use_containers: bool,
    ) -> None:
        super().__init__()
        self.parent_session_id = parent_session_id
        self.repo_path = repo_path
        self.branch_name = branch_name
        self.copy_messages = copy_messages
        self.use_containers = use_containers


class RenameSessionRequest(ModalRequest):
    def __init__(self, session_id: str, new_name: str) -> None:
        super().__init__()
        self.session_id = session_id
        self.new_name = new_name


class ExploreOptionsRequest(ModalRequest):
    """Create one fork of the parent session per selected option."""

    def __init__(self, parent_session_id: str, options: list[OptionItem]) -> None:
        super().__init__()
        self.parent_session_id = parent_session_id
        self.options = options


class JumpToMessageRequest(ModalRequest):
    def __init__(self, message_index: int) -> None:
        super().__init__()
        self.message_index = message_index


# --- Issue import requests ---


class RepoForIssuesSelected(ModalRequest):
    def __init__(self, repo_path: str) -> None:
        super().__init__()
        self.repo_path = repo_path



class IssueSourceSelected(ModalRequest):
    def __init__(self, repo_path: str, source: str) -> None:
        super().__init__()
        self.repo_path = repo_path
        self.source = source


class ImportIssuesRequest(ModalRequest):
    """Create one session per selected issue."""

    def __init__(
        self,
        repo_path: str,
        source: str,
        issues: list[IssueItem],
        use_containers: bool,
        autonomous: bool,
    ) -> None:
        super().__init__()
        self.repo_path = repo_path
        self.source = source
        self.issues = issues
        self.use_containers = use_containers
        self.autonomous = autonomous


# --- Bulk and workspace requests ---


class BulkActionRequest(ModalRequest):
    def __init__(
        self,
        session_ids: list[str],
        action: BulkAction,
        workspace_id: str | None = None,
        prompt: str | None = None,
    ) -> None:
        super().__init__()
        self.session_ids = session_ids
        self.action = action
        self.workspace_id = workspace_id
        self.prompt = prompt


class SwitchWorkspaceRequest(ModalRequest):
    """Switch the active workspace; ``None`` means all sessions."""

    def __init__(self, workspace_id: str | None) -> None:
        super().__init__()
        self.workspace_id = workspace_id


class SaveWorkspaceRequest(ModalRequest):
    """Create a workspace, or rename one when ``workspace_id`` is set."""

    def __init__(self, name: str, workspace_id: str | None = None) -> None:
        super().__init__()
        self.name = name
        self.workspace_id = workspace_id


# --- Broadcast and review requests ---


class BroadcastRequest(ModalRequest):
    """Start one session per repository, all with the same prompt."""

    def __init__(
        self,
        repo_paths: list[str],
        prompt: str,
        session_name: str = "",
        use_containers: bool = False,
    ) -> None:
        super().__init__()
        self.repo_paths = repo_paths
        self.prompt = prompt
        self.session_name = session_name
        self.use_containers = use_containers


class BroadcastGroupRequest(ModalRequest):
    def __init__(
        self,
        group_id: str,
        session_ids: list[str],
        action: BroadcastAction,
        prompt: str | None = None,
    ) -> None:
        super().__init__()
        self.group_id = group_id
        self.session_ids = session_ids
        self.action = action
        self.prompt = prompt


class AddressReviewCommentsRequest(ModalRequest):
    """Send the selected review comments to the session's agent."""

    def __init__(self, session_id: str, comments: list[ReviewComment]) -> None:
        super().__init__()
        self.session_id = session_id
        self.comments = comments
