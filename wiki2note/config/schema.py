"""Configuration schema using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WikipediaConfig(Base):
    """Wikipedia search and summary endpoints."""

    api_url: str = "https://en.wikipedia.org/w/api.php"
    summary_url: str = "https://en.wikipedia.org/api/rest_v1/page/summary/"
    limit: int = 5
    timeout: float = 10.0
    user_agent: str = "wiki2note/0.1 (https://github.com/wiki2note/wiki2note)"


class FallbackConfig(Base):
    """Language-model query rewrite used when a search finds nothing."""

    enabled: bool = True
    api_key: str = ""  # falls back to OPENAI_API_KEY
    base_url: str = "https://api.openai.com/v1/chat/completions"
    model: str = "gpt-3.5-turbo"
    max_tokens: int = 50
    timeout: float = 30.0


class ThrottleConfig(Base):
    """Fixed pause before every outbound Wikipedia request."""

    delay_s: float = 0.2


class NoticeConfig(Base):
    """How long transient notices stay on screen."""

    info_duration_s: float = 4.0
    error_duration_s: float = 8.0


class NotesConfig(Base):
    """Where saved notes are written."""

    vault: Path = Field(default_factory=Path.cwd)
    folder: str = "keyword"


class Config(Base):
    """Root configuration for wiki2note."""

    wikipedia: WikipediaConfig = Field(default_factory=WikipediaConfig)
    fallback: FallbackConfig = Field(default_factory=FallbackConfig)
    throttle: ThrottleConfig = Field(default_factory=ThrottleConfig)
    notices: NoticeConfig = Field(default_factory=NoticeConfig)
    notes: NotesConfig = Field(default_factory=NotesConfig)
