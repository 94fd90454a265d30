"""Tests for SessionDeck config loading."""

import logging

import pytest
from pydantic import ValidationError

from sessiondeck.config import DeckConfig, ModalSettings, load_config, load_deck_config, resolve_config_path
from sessiondeck.constants import CONFIG_PATH_ENV
from sessiondeck.errors import ConfigError


def test_missing_file_yields_defaults(tmp_path):
    config = load_config(tmp_path / "absent.yml", DeckConfig)
    assert config.modals.issues_max_visible == 10
    assert config.modals.modal_width_wide == 120
    assert config.modals.broadcast_max_visible == 6
    assert config.log_level is None
    assert config.log_file == "~/.sessiondeck/sessiondeck.log"


def test_values_and_env_expansion(tmp_path, monkeypatch):
    monkeypatch.setenv("DECK_ROWS", "4")
    config_path = tmp_path / "sessiondeck.yml"
    config_path.write_text(
        """
log_level: DEBUG
containers_supported: true
modals:
  issues_max_visible: ${DECK_ROWS}
  search_max_visible: 5
""",
        encoding="utf-8",
    )
    config = load_config(config_path, DeckConfig)
    assert config.log_level == "DEBUG"
    assert config.containers_supported is True
    assert config.modals.issues_max_visible == 4
    assert config.modals.search_max_visible == 5


def test_unknown_keys_warn(tmp_path, caplog):
    config_path = tmp_path / "sessiondeck.yml"
    config_path.write_text("modals:\n  colour: red\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="sessiondeck.config.loader"):
        load_config(config_path, DeckConfig)
    assert "root.modals" in caplog.text
    assert "colour" in caplog.text


def test_unparseable_yaml_falls_back_to_defaults(tmp_path, caplog):
    config_path = tmp_path / "sessiondeck.yml"
    config_path.write_text("modals: [unclosed", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="sessiondeck.config.loader"):
        config = load_config(config_path, DeckConfig)
    assert config == DeckConfig()
    assert "Failed to read config file" in caplog.text


def test_capacity_must_be_positive():
    """Non-positive list capacities are rejected when settings are built."""
    with pytest.raises(ValidationError):
        ModalSettings(issues_max_visible=0)
    with pytest.raises(ValidationError):
        ModalSettings(modal_width=100, modal_width_wide=90)


def test_load_deck_config_wraps_validation_errors(tmp_path):
    config_path = tmp_path / "sessiondeck.yml"
    config_path.write_text("modals:\n  search_max_visible: -2\n", encoding="utf-8")
    with pytest.raises(ConfigError) as exc_info:
        load_deck_config(config_path)
    assert exc_info.value.path == config_path


def test_config_path_from_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "custom.yml"
    monkeypatch.setenv(CONFIG_PATH_ENV, str(target))
    assert resolve_config_path() == target
    assert resolve_config_path(tmp_path / "explicit.yml") == tmp_path / "explicit.yml"


def test_config_path_default(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    assert resolve_config_path().name == "sessiondeck.yml"
