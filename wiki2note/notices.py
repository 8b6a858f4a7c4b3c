"""Transient user-facing notices."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from loguru import logger

from wiki2note.config.schema import NoticeConfig

NoticeLevel = Literal["info", "error"]


@dataclass(frozen=True, slots=True)
class Notice:
    """A short auto-dismissing message shown to the user."""

    message: str
    level: NoticeLevel
    duration_s: float


class Notifier:
    """Builds notices with severity-linked durations and hands them to a sink."""

    def __init__(
        self,
        config: NoticeConfig | None = None,
        sink: Callable[[Notice], None] | None = None,
    ):
        self.config = config or NoticeConfig()
        self.sink = sink

    def info(self, message: str) -> Notice:
        return self._emit(Notice(message, "info", self.config.info_duration_s))

    def error(self, message: str) -> Notice:
        return self._emit(Notice(message, "error", self.config.error_duration_s))

    def _emit(self, notice: Notice) -> Notice:
        if notice.level == "error":
            logger.warning("Notice: {}", notice.message)
        else:
            logger.info("Notice: {}", notice.message)
        if self.sink:
            self.sink(notice)
        return notice
