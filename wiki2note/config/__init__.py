"""Configuration module for wiki2note."""

from wiki2note.config.loader import load_config, resolve_api_key
from wiki2note.config.schema import Config

__all__ = ["Config", "load_config", "resolve_api_key"]
