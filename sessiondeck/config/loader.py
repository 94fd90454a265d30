import logging
import os
import re
from pathlib import Path
from typing import Type, TypeVar

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from sessiondeck.config.schema import DeckConfig
from sessiondeck.constants import CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH
from sessiondeck.errors import ConfigError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)\}")


def _expand_env_vars(raw: object) -> object:
    """Replace ``${VAR}`` references anywhere in parsed YAML."""
    if isinstance(raw, dict):
        return {key: _expand_env_vars(value) for key, value in raw.items()}
    if isinstance(raw, list):
        return [_expand_env_vars(item) for item in raw]
    if isinstance(raw, str):
        return _ENV_VAR_RE.sub(lambda match: os.getenv(match.group(1), match.group(0)), raw)
    return raw


def _warn_unknown_keys(model: BaseModel, path: str, config_path: Path) -> None:
    """Recursively warn about unknown keys in a model and its nested models."""
    if model.model_extra:
        logger.warning("Unknown keys in %s at %s: %s", path, config_path, list(model.model_extra.keys()))

    for field_name, field_value in model.__dict__.items():
        if isinstance(field_value, BaseModel):
            _warn_unknown_keys(field_value, f"{path}.{field_name}", config_path)


def load_config(path: Path, model_class: Type[T]) -> T:
    """Load and validate configuration from a YAML file.

    Args:
        path: Path to the YAML file.
        model_class: The Pydantic model class to use for validation.

    Returns:
        The validated configuration model. Defaults when the file is missing
        or unreadable.

    Raises:
        ValidationError: The file parsed but its values are invalid.
    """
    if not path.exists():
        return model_class()

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to read config file %s: %s", path, e)
        return model_class()

    model = model_class.model_validate(_expand_env_vars(raw))
    _warn_unknown_keys(model, "root", path)
    return model


def resolve_config_path(path: Path | None = None) -> Path:
    """Explicit path, then ``SESSIONDECK_CONFIG`` (``.env`` honoured), then the default."""
    if path is not None:
        return path
    load_dotenv()
    env_path = os.getenv(CONFIG_PATH_ENV)
    return Path(env_path or DEFAULT_CONFIG_PATH).expanduser()


def load_deck_config(path: Path | None = None) -> DeckConfig:
    """Load the SessionDeck config.

    Raises:
        ConfigError: The config file does not validate.
    """
    config_path = resolve_config_path(path)
    try:
        return load_config(config_path, DeckConfig)
    except ValidationError as e:
        raise ConfigError(config_path, str(e)) from e
