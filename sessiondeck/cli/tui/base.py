"""Base mixin for SessionDeck TUI widgets."""


class DeckMixin:
    """Mixin for widgets that render controlled content.

    Suppresses Textual's default link processing. Modal content is built
    from styled ``Text`` and never carries user-clickable markup.
    """

    auto_links = False
