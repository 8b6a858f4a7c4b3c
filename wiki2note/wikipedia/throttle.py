"""Wait policies applied before outbound Wikipedia requests."""

import asyncio
from typing import Protocol


class Throttle(Protocol):
    async def wait(self) -> None: ...


class FixedDelayThrottle:
    """Sleep a fixed amount before each request."""

    def __init__(self, delay_s: float = 0.2):
        self.delay_s = max(0.0, delay_s)

    async def wait(self) -> None:
        if self.delay_s:
            await asyncio.sleep(self.delay_s)


class NoDelayThrottle:
    """Never wait."""

    async def wait(self) -> None:
        return None
