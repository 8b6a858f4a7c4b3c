"""Command-line entry point."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from loguru import logger

from wiki2note import __version__
from wiki2note.config.loader import load_config
from wiki2note.config.schema import Config
from wiki2note.notes.store import VaultStore
from wiki2note.notes.writer import NoteWriter
from wiki2note.notices import Notifier
from wiki2note.ui.console import ConsoleSearchView
from wiki2note.ui.presenter import SearchPresenter
from wiki2note.wikipedia.search import SearchClient


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wiki2note",
        description="Search Wikipedia and save a summary as a markdown note.",
    )
    parser.add_argument("query", nargs="*", help="Initial search phrase")
    parser.add_argument("--vault", type=Path, help="Directory notes are written under")
    parser.add_argument("--config", type=Path, help="Path to a JSON config file")
    parser.add_argument(
        "--no-fallback",
        action="store_true",
        help="Do not ask the language model to rewrite queries with no results",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def setup_logging(verbose: bool) -> None:
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG")
        logger.enable("wiki2note")
    else:
        logger.disable("wiki2note")


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    if args.vault is not None:
        config.notes.vault = args.vault
    if args.no_fallback:
        config.fallback.enabled = False
    return config


async def run(config: Config, initial_query: str | None = None) -> None:
    view = ConsoleSearchView()
    notifier = Notifier(config.notices, sink=view.show_notice)
    store = VaultStore(config.notes.vault, opener=view.show_note)
    presenter = SearchPresenter(
        view,
        SearchClient(config, notifier=notifier),
        NoteWriter(store, notifier=notifier, folder=config.notes.folder),
    )
    presenter.open()
    await view.run(initial_query)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    config = apply_overrides(load_config(args.config), args)
    query = " ".join(args.query).strip() or None
    try:
        asyncio.run(run(config, query))
    except KeyboardInterrupt:
        return 130
    return 0
