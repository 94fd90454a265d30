"""Exception hierarchy for SessionDeck.

The modal navigation layer never raises: out-of-range moves clamp and empty
lists turn navigation into no-ops. Errors here belong to the edges
(configuration loading).
"""

from __future__ import annotations

from pathlib import Path


class SessionDeckError(Exception):
    """Base exception for all SessionDeck errors."""


class ConfigError(SessionDeckError):
    """A config file exists but does not validate."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"Invalid config {path}: {message}")
        self.path = path
