"""Document store capability and its filesystem vault implementation."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from loguru import logger


class DocumentStore(Protocol):
    """Minimal host capability for folders and notes addressed by relative path."""

    def exists(self, path: str) -> bool: ...

    def create_folder(self, path: str) -> None: ...

    def create_file(self, path: str, content: str) -> None: ...

    def open_file(self, path: str) -> None: ...


class VaultStore:
    """Notes kept as plain UTF-8 files under a vault directory."""

    def __init__(self, vault: Path, opener: Callable[[Path], None] | None = None):
        self.vault = vault.expanduser().resolve()
        self.opener = opener

    def resolve(self, path: str) -> Path:
        target = (self.vault / path).resolve()
        if target != self.vault and self.vault not in target.parents:
            raise ValueError(f"Path escapes vault: {path}")
        return target

    def exists(self, path: str) -> bool:
        return self.resolve(path).exists()

    def create_folder(self, path: str) -> None:
        self.resolve(path).mkdir(parents=True, exist_ok=True)

    def create_file(self, path: str, content: str) -> None:
        # "x" refuses to replace a note created since the caller's exists() check
        target = self.resolve(path)
        with open(target, "x", encoding="utf-8", newline="") as f:
            f.write(content)
        logger.debug("Wrote note {}", target)

    def open_file(self, path: str) -> None:
        target = self.resolve(path)
        if not target.exists():
            raise FileNotFoundError(f"Note not found: {target}")
        if self.opener:
            self.opener(target)
        else:
            logger.info("Note available at {}", target)
