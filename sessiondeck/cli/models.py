"""Typed models for items shown in SessionDeck modals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class Workspace:
    id: str
    name: str


@dataclass(frozen=True)
class IssueItem:
    id: str
    title: str
    body: str = ""
    url: str = ""
    source: Literal["github", "asana"] = "github"


@dataclass(frozen=True)
class IssueSource:
    name: str  # Display name, e.g. "GitHub Issues"
    source: Literal["github", "asana"]


@dataclass(frozen=True)
class OptionItem:
    number: int
    text: str
    letter: str = ""
    group_index: int = 0

    @property
    def label(self) -> str:
        return self.letter or str(self.number)


@dataclass(frozen=True)
class ChatMessage:
    role: Literal["user", "assistant"]
    content: str


@dataclass(frozen=True)
class SearchResult:
    message_index: int
    role: Literal["user", "assistant"]
    content: str
    match_start: int
    match_end: int


@dataclass(frozen=True)
class SessionItem:
    """A session listed for a group operation."""

    id: str
    name: str
    repo_name: str = ""

    @property
    def display_name(self) -> str:
        if self.repo_name:
            return f"{self.name} ({self.repo_name})"
        return self.name


@dataclass(frozen=True)
class ReviewComment:
    author: str
    body: str
    path: str = ""
    line: int = 0

    @property
    def location(self) -> str:
        if self.path and self.line > 0:
            return f"{self.path}:{self.line}"
        return self.path
