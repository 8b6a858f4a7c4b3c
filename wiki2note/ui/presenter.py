"""Search interaction independent of any concrete UI toolkit."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import Literal, Protocol

from loguru import logger

from wiki2note.notes.writer import NoteOutcome, NoteWriter
from wiki2note.notices import Notifier
from wiki2note.wikipedia.models import SearchResult
from wiki2note.wikipedia.search import SearchClient

PresenterState = Literal["idle", "displaying"]

INPUT_PLACEHOLDER = "Find or create a note..."

SubmitCallback = Callable[[str], Awaitable[None]]
SelectCallback = Callable[[SearchResult], Awaitable[None]]


class SearchView(Protocol):
    """What a UI layer must provide to host the search interaction."""

    def render_input(self, placeholder: str) -> None: ...

    def render_results(self, results: Sequence[SearchResult]) -> None: ...

    def on_submit(self, callback: SubmitCallback) -> None: ...

    def on_select(self, callback: SelectCallback) -> None: ...

    def close(self) -> None: ...


class SearchPresenter:
    """Wire a view to the search client and the note writer."""

    def __init__(
        self,
        view: SearchView,
        search_client: SearchClient,
        writer: NoteWriter,
        *,
        notifier: Notifier | None = None,
    ):
        self.view = view
        self.search_client = search_client
        self.writer = writer
        self.notifier = notifier or search_client.notifier
        self.state: PresenterState = "idle"
        self.results: list[SearchResult] = []

    def open(self) -> None:
        self.view.render_input(INPUT_PLACEHOLDER)
        self.view.on_submit(self.submit)
        self.view.on_select(self.select)

    async def submit(self, value: str) -> None:
        if not value:
            self._show([])
            self.state = "idle"
            return

        results = await self.search_client.search(value)
        self._show(results)
        self.state = "displaying"

    async def select(self, result: SearchResult) -> NoteOutcome | None:
        outcome: NoteOutcome | None = None
        try:
            outcome = self.writer.save(result)
        except (OSError, ValueError) as e:
            logger.error("Saving note for {!r} failed: {}", result.title, e)
            self.notifier.error(f"Failed to create note: {result.title}")
        self.results = []
        self.state = "idle"
        self.view.close()
        return outcome

    def _show(self, results: list[SearchResult]) -> None:
        self.results = results
        self.view.render_results(results)
