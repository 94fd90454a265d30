"""Constants used across SessionDeck.

Defaults for values that can be overridden in ``sessiondeck.yml`` live in
``sessiondeck.config.schema``; the values here are not user-configurable.
"""

APP_NAME = "sessiondeck"

# Config discovery
DEFAULT_CONFIG_PATH = "~/.sessiondeck/sessiondeck.yml"
DEFAULT_LOG_PATH = "~/.sessiondeck/sessiondeck.log"
CONFIG_PATH_ENV = "SESSIONDECK_CONFIG"
LOG_LEVEL_ENV = "SESSIONDECK_LOG_LEVEL"

# Border (1 + 1) plus horizontal padding (2 + 2) around modal content
MODAL_HORIZONTAL_OVERHEAD = 6

BASE_BRANCH_OPTIONS = (
    "From current local branch",
    "From remote default branch (latest)",
)

# Either one lets a containerised agent authenticate
CONTAINER_AUTH_ENV_VARS = ("ANTHROPIC_API_KEY", "CLAUDE_CODE_OAUTH_TOKEN")

CONTAINER_AUTH_HELP = (
    "Containers need credentials: set ANTHROPIC_API_KEY or log in on the host before starting."
)
