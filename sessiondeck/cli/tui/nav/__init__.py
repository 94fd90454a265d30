"""Navigation primitives shared by every modal.

Usage:
    from sessiondeck.cli.tui.nav import Cursor, EnumCycle, FocusRing, Viewport
"""

from sessiondeck.cli.tui.nav.cursor import Cursor
from sessiondeck.cli.tui.nav.cycle import EnumCycle
from sessiondeck.cli.tui.nav.focus import FocusRing
from sessiondeck.cli.tui.nav.viewport import Viewport, recompute_offset

__all__ = ["Cursor", "EnumCycle", "FocusRing", "Viewport", "recompute_offset"]
