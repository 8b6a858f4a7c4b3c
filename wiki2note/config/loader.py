"""Configuration loading utilities."""

import json
import os
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from wiki2note.config.schema import Config, FallbackConfig

API_KEY_ENV = "OPENAI_API_KEY"


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".wiki2note" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file or use defaults.

    The file is only ever read; wiki2note never writes its configuration.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            return Config.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.warning("Failed to load config from {}: {}", path, e)
            logger.warning("Using default configuration.")

    return Config()


def resolve_api_key(config: FallbackConfig) -> str:
    """Return the fallback credential from config, else the environment."""
    return (config.api_key or os.environ.get(API_KEY_ENV, "")).strip()
