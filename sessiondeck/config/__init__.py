"""Configuration for SessionDeck.

Usage:
    from sessiondeck.config import load_deck_config

    config = load_deck_config()
    config.modals.issues_max_visible
"""

from sessiondeck.config.loader import load_config, load_deck_config, resolve_config_path
from sessiondeck.config.schema import DeckConfig, ModalSettings

__all__ = ["DeckConfig", "ModalSettings", "load_config", "load_deck_config", "resolve_config_path"]
