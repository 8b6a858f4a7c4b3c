"""Persist a chosen search result as a markdown note."""

from __future__ import annotations

from typing import Literal

from loguru import logger

from wiki2note.notes.store import DocumentStore
from wiki2note.notices import Notifier
from wiki2note.wikipedia.models import SearchResult

NoteOutcome = Literal["created", "duplicate"]

DEFAULT_FOLDER = "keyword"


def render_note_body(result: SearchResult) -> str:
    return f"{result.summary}\n\n[Read more on Wikipedia]({result.url})\n\n---\n\n"


def note_path(folder: str, title: str) -> str:
    return f"{folder}/{title}.md"


class NoteWriter:
    """Create one note per article; an existing note is opened, never replaced."""

    def __init__(
        self,
        store: DocumentStore,
        *,
        notifier: Notifier | None = None,
        folder: str = DEFAULT_FOLDER,
    ):
        self.store = store
        self.notifier = notifier or Notifier()
        self.folder = folder

    def save(self, result: SearchResult) -> NoteOutcome:
        if not self.store.exists(self.folder):
            self.store.create_folder(self.folder)

        path = note_path(self.folder, result.title)
        if self.store.exists(path):
            logger.debug("Note {} already exists, opening it", path)
            self.notifier.info(f"Note already exists: {result.title}")
            self.store.open_file(path)
            return "duplicate"

        self.store.create_file(path, render_note_body(result))
        self.notifier.info(f"Note created: {result.title}")
        return "created"
