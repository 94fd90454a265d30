"""Modal dialogs built on the navigation primitives.

Usage:
    from sessiondeck.cli.tui.modals import ModalHost, NewSessionModal

    host = ModalHost()
    host.show(NewSessionModal(repos, containers_supported=True))
    command = host.update(KeyEvent(Key.TAB))
"""

from sessiondeck.cli.tui.modals.base import CommitCallback, ModalCommand, ModalState
from sessiondeck.cli.tui.modals.broadcast import (
    BroadcastField,
    BroadcastGroupField,
    BroadcastGroupModal,
    BroadcastModal,
)
from sessiondeck.cli.tui.modals.bulk_action import BulkActionModal
from sessiondeck.cli.tui.modals.explore import ExploreOptionsModal
from sessiondeck.cli.tui.modals.host import ModalHost
from sessiondeck.cli.tui.modals.issues import (
    ImportIssuesModal,
    IssuesField,
    SelectIssueSourceModal,
    SelectRepoForIssuesModal,
)
from sessiondeck.cli.tui.modals.review_comments import ReviewCommentsModal
from sessiondeck.cli.tui.modals.search import SearchMessagesModal
from sessiondeck.cli.tui.modals.session import (
    ForkField,
    ForkSessionModal,
    NewSessionField,
    NewSessionModal,
    RenameSessionModal,
)
from sessiondeck.cli.tui.modals.workspace import NewWorkspaceModal, WorkspaceListModal

__all__ = [
    "BroadcastField",
    "BroadcastGroupField",
    "BroadcastGroupModal",
    "BroadcastModal",
    "BulkActionModal",
    "CommitCallback",
    "ExploreOptionsModal",
    "ForkField",
    "ForkSessionModal",
    "ImportIssuesModal",
    "IssuesField",
    "ModalCommand",
    "ModalHost",
    "ModalState",
    "NewSessionField",
    "NewSessionModal",
    "NewWorkspaceModal",
    "RenameSessionModal",
    "ReviewCommentsModal",
    "SearchMessagesModal",
    "SelectIssueSourceModal",
    "SelectRepoForIssuesModal",
    "WorkspaceListModal",
]
