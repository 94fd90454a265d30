"""Colors and rich styles for modal rendering.

Modals compose ``rich.text.Text`` with these styles; the host decides how the
result is boxed and placed on screen.
"""

from rich.style import Style

# Palette (xterm-256 friendly hex values)
COLOR_PRIMARY = "#d78700"
COLOR_SECONDARY = "#5fafd7"
COLOR_TEXT = "#d0d0d0"
COLOR_TEXT_MUTED = "#727578"
COLOR_TEXT_INVERSE = "#1c1c1c"
COLOR_USER = "#87af5f"
COLOR_WARNING = "#d7af00"
COLOR_ERROR = "#d75f5f"

TITLE_STYLE = Style(color=COLOR_PRIMARY, bold=True)
HELP_STYLE = Style(color=COLOR_TEXT_MUTED, italic=True)
ITEM_STYLE = Style(color=COLOR_TEXT)
SELECTED_STYLE = Style(color=COLOR_TEXT_INVERSE, bgcolor=COLOR_PRIMARY, bold=True)
MUTED_STYLE = Style(color=COLOR_TEXT_MUTED)
MUTED_ITALIC_STYLE = Style(color=COLOR_TEXT_MUTED, italic=True)
SECONDARY_STYLE = Style(color=COLOR_SECONDARY, bold=True)
USER_STYLE = Style(color=COLOR_USER, bold=True)
ASSISTANT_STYLE = Style(color=COLOR_PRIMARY, bold=True)
WARNING_STYLE = Style(color=COLOR_WARNING, bold=True)
ERROR_STYLE = Style(color=COLOR_ERROR, bold=True)
MATCH_STYLE = Style(color=COLOR_WARNING, bold=True, underline=True)

# Left bar drawn next to the focused field
FOCUS_BAR = "│ "
FOCUS_BAR_STYLE = Style(color=COLOR_PRIMARY)
UNFOCUSED_PAD = "  "
