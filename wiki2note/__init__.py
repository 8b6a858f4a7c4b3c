"""wiki2note - Wikipedia summaries as markdown notes."""

__version__ = "0.1.0"
