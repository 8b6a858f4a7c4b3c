"""Search UI: toolkit-neutral presenter and the terminal view."""

from wiki2note.ui.presenter import INPUT_PLACEHOLDER, SearchPresenter, SearchView

__all__ = ["INPUT_PLACEHOLDER", "SearchPresenter", "SearchView"]
