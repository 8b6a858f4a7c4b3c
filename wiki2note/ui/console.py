"""Terminal implementation of the search view using rich."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from wiki2note.notices import Notice
from wiki2note.ui.presenter import SelectCallback, SubmitCallback
from wiki2note.wikipedia.models import SearchResult

QUIT_COMMANDS = {":q", ":quit"}
SELECT_PREFIX = "#"
_SUMMARY_PREVIEW_CHARS = 240


class ConsoleSearchView:
    """
    Quick-switcher style prompt in the terminal.

    Typing text and pressing Enter searches, ``#<n>`` saves result n as
    a note, an empty line clears the list and ``:q`` exits.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self.results: list[SearchResult] = []
        self.closed = False
        self._placeholder = ""
        self._submit: SubmitCallback | None = None
        self._select: SelectCallback | None = None

    def render_input(self, placeholder: str) -> None:
        self._placeholder = placeholder
        self.console.rule("[bold]wiki2note[/bold]")

    def render_results(self, results: Sequence[SearchResult]) -> None:
        self.results = list(results)
        if not self.results:
            return

        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column(style="bold cyan", justify="right")
        table.add_column(overflow="fold")
        for index, result in enumerate(self.results, start=1):
            summary = result.summary
            if len(summary) > _SUMMARY_PREVIEW_CHARS:
                summary = summary[:_SUMMARY_PREVIEW_CHARS].rstrip() + "..."
            table.add_row(
                str(index),
                f"[bold]{escape(result.title)}[/bold]\n[dim]{escape(summary)}[/dim]",
            )
        self.console.print(table)

    def on_submit(self, callback: SubmitCallback) -> None:
        self._submit = callback

    def on_select(self, callback: SelectCallback) -> None:
        self._select = callback

    def close(self) -> None:
        self.closed = True

    def show_notice(self, notice: Notice) -> None:
        style = "red" if notice.level == "error" else "cyan"
        self.console.print(f"[{style}]{escape(notice.message)}[/{style}]")

    def show_note(self, path: Path) -> None:
        self.console.print(
            Panel(Markdown(path.read_text(encoding="utf-8")), title=path.stem, expand=False)
        )

    async def run(self, initial_query: str | None = None) -> None:
        """Read lines until a note is saved or the user quits."""
        if initial_query and self._submit:
            await self._submit(initial_query)

        while not self.closed:
            try:
                line = await asyncio.to_thread(self.console.input, self._prompt())
            except (EOFError, KeyboardInterrupt):
                break

            value = line.strip()
            if value.lower() in QUIT_COMMANDS:
                break

            choice = self._parse_choice(value)
            if choice is not None and self._select:
                await self._select(self.results[choice])
            elif self._submit:
                await self._submit(value)

    def _prompt(self) -> str:
        if self.results:
            return f"[dim]{self._placeholder} (#1-#{len(self.results)} to save)[/dim] > "
        return f"[dim]{self._placeholder}[/dim] > "

    def _parse_choice(self, value: str) -> int | None:
        number = value[1:] if value.startswith(SELECT_PREFIX) else ""
        if not number.isdigit():
            return None
        index = int(number) - 1
        if 0 <= index < len(self.results):
            return index
        return None
