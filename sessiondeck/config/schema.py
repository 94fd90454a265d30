from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sessiondeck.constants import DEFAULT_LOG_PATH


class ModalSettings(BaseModel):
    """Sizes and limits handed to modals when they open.

    Capacities and widths must be positive: a modal's viewport takes its
    capacity from here, so this is where bad values are rejected.
    """

    model_config = ConfigDict(extra="allow")

    modal_width: int = Field(default=80, ge=20)
    modal_width_wide: int = Field(default=120, ge=20)
    input_width: int = Field(default=72, ge=1)

    # Visible rows before a list scrolls
    issues_max_visible: int = Field(default=10, ge=1)
    search_max_visible: int = Field(default=8, ge=1)
    broadcast_max_visible: int = Field(default=6, ge=1)

    # Text input character limits
    branch_name_char_limit: int = Field(default=100, ge=1)
    session_name_char_limit: int = Field(default=100, ge=1)
    search_input_char_limit: int = Field(default=100, ge=1)
    prompt_char_limit: int = Field(default=10000, ge=1)

    @model_validator(mode="after")
    def validate_widths(self) -> "ModalSettings":
        if self.modal_width_wide < self.modal_width:
            raise ValueError("'modal_width_wide' must not be smaller than 'modal_width'")
        return self


class DeckConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    # Unset leaves the level to SESSIONDECK_LOG_LEVEL
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None
    log_file: str = DEFAULT_LOG_PATH
    containers_supported: bool = False
    modals: ModalSettings = Field(default_factory=ModalSettings)
