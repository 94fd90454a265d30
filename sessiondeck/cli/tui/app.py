"""Textual application shell that opens modals and routes their requests."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Sequence

from textual.app import App

from sessiondeck.cli.models import SessionItem
from sessiondeck.cli.tui.messages import ItemsLoaded, ModalRequest
from sessiondeck.cli.tui.modals import (
    BroadcastGroupModal,
    BroadcastModal,
    ForkSessionModal,
    ImportIssuesModal,
    NewSessionModal,
    ReviewCommentsModal,
)
from sessiondeck.cli.tui.modals.base import ModalState
from sessiondeck.cli.tui.widgets.modal_screen import NavModalScreen
from sessiondeck.config import DeckConfig, ModalSettings, load_deck_config
from sessiondeck.constants import CONTAINER_AUTH_ENV_VARS
from sessiondeck.logging_config import setup_logging

logger = logging.getLogger(__name__)


def container_auth_available() -> bool:
    return any(os.getenv(name) for name in CONTAINER_AUTH_ENV_VARS)


class DeckApp(App[None]):
    """Hosts one modal at a time on top of the main view.

    A confirmed modal's request is posted back to the app as a Textual
    message, so handlers such as ``on_create_session_request`` carry out the
    actual work. The ``open_*`` helpers build modals from the app's config so
    container support and sizes come from one place.
    """

    def __init__(self, config: DeckConfig | None = None, **kwargs: object) -> None:
        super().__init__(**kwargs)
        self.config = config or DeckConfig()

    @property
    def settings(self) -> ModalSettings:
        return self.config.modals

    def open_modal(self, state: ModalState) -> None:
        self.push_screen(NavModalScreen(state), callback=self._route_request)

    def _route_request(self, request: ModalRequest | None) -> None:
        if request is None:
            return
        logger.info("Routing %s", type(request).__name__)
        self.post_message(request)

    def deliver_items(self, items: Sequence[Any] = (), error: str = "") -> None:
        """Hand a background fetch result to the modal on screen, if any.

        Safe to call from a worker thread.
        """
        screen = self.screen
        if not isinstance(screen, NavModalScreen):
            logger.debug("No modal open for %d loaded items", len(items))
            return
        screen.post_message(ItemsLoaded(items, error))

    # --- Modal factories ---

    def open_new_session(self, repos: Sequence[str], locked_repo: str | None = None) -> NewSessionModal:
        modal = NewSessionModal(
            repos,
            containers_supported=self.config.containers_supported,
            locked_repo=locked_repo,
            settings=self.settings,
        )
        self.open_modal(modal)
        return modal

    def open_fork_session(
        self,
        parent_session_name: str,
        parent_session_id: str,
        repo_path: str,
        parent_containerized: bool = False,
    ) -> ForkSessionModal:
        modal = ForkSessionModal(
            parent_session_name,
            parent_session_id,
            repo_path,
            parent_containerized=parent_containerized,
            containers_supported=self.config.containers_supported,
            settings=self.settings,
        )
        self.open_modal(modal)
        return modal

    def open_import_issues(self, repo_path: str, source: str = "github", project_id: str = "") -> ImportIssuesModal:
        modal = ImportIssuesModal(
            repo_path,
            source=source,
            project_id=project_id,
            containers_supported=self.config.containers_supported,
            container_auth_available=container_auth_available(),
            settings=self.settings,
        )
        self.open_modal(modal)
        return modal

    def open_broadcast(self, repos: Sequence[str]) -> BroadcastModal:
        modal = BroadcastModal(
            repos,
            containers_supported=self.config.containers_supported,
            container_auth_available=container_auth_available(),
            settings=self.settings,
        )
        self.open_modal(modal)
        return modal

    def open_broadcast_group(self, group_id: str, sessions: Sequence[SessionItem]) -> BroadcastGroupModal:
        modal = BroadcastGroupModal(group_id, sessions, settings=self.settings)
        self.open_modal(modal)
        return modal

    def open_review_comments(self, session_id: str, branch: str) -> ReviewCommentsModal:
        modal = ReviewCommentsModal(session_id, branch, settings=self.settings)
        self.open_modal(modal)
        return modal


def build_app(config_path: Path | None = None) -> DeckApp:
    """Load config, configure logging and create the app.

    The config's ``log_level`` wins when set; otherwise ``SESSIONDECK_LOG_LEVEL``
    decides. Logs go to the config's ``log_file``.
    """
    config = load_deck_config(config_path)
    setup_logging(config.log_level, Path(config.log_file).expanduser())
    return DeckApp(config)
