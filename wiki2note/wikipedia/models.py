"""Shared Wikipedia search models."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SearchResult:
    """One article candidate with its summary."""

    title: str
    summary: str
    url: str = ""
