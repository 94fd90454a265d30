"""Pytest configuration for SessionDeck tests."""

import logging

import pytest

from sessiondeck.cli.models import ChatMessage, IssueItem, Workspace
from sessiondeck.config.schema import ModalSettings


def pytest_collection_modifyitems(config, items):
    """Set per-marker timeouts: unit=1s, integration=5s."""
    for item in items:
        if "unit" in item.keywords:
            item.add_marker(pytest.mark.timeout(1))
        elif "integration" in item.keywords:
            item.add_marker(pytest.mark.timeout(5))


@pytest.fixture(autouse=True)
def _reset_sessiondeck_logger():
    """Keep handlers added by one test out of the next."""
    yield
    logger = logging.getLogger("sessiondeck")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings() -> ModalSettings:
    return ModalSettings()


@pytest.fixture
def workspaces() -> list[Workspace]:
    return [Workspace("ws-1", "Feature Work"), Workspace("ws-2", "Bug Fixes")]


@pytest.fixture
def issues() -> list[IssueItem]:
    return [IssueItem(str(100 + i), f"Issue number {i}") for i in range(15)]


@pytest.fixture
def conversation() -> list[ChatMessage]:
    return [
        ChatMessage("user", "Please add a retry to the fetch loop"),
        ChatMessage("assistant", "Added a Retry\nwrapper around fetch.\tIt backs off exponentially."),
        ChatMessage("user", "Thanks, now update the README"),
    ]
