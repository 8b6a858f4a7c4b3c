"""Markdown note persistence."""

from wiki2note.notes.store import DocumentStore, VaultStore
from wiki2note.notes.writer import NoteOutcome, NoteWriter, note_path, render_note_body

__all__ = [
    "DocumentStore",
    "NoteOutcome",
    "NoteWriter",
    "VaultStore",
    "note_path",
    "render_note_body",
]
