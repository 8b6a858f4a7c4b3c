"""Wikipedia page summary adapter."""

from urllib.parse import quote

import httpx
from loguru import logger

from wiki2note.config.schema import WikipediaConfig
from wiki2note.wikipedia.models import SearchResult
from wiki2note.wikipedia.throttle import FixedDelayThrottle, Throttle

NO_SUMMARY = "No summary available."
FAILED_SUMMARY = "Failed to fetch summary."

# Characters encodeURIComponent leaves alone besides alphanumerics and -_.
_TITLE_SAFE = "!'()*~"


def summary_url(base_url: str, title: str) -> str:
    """Build the REST summary URL for a page title."""
    return f"{base_url.rstrip('/')}/{quote(title, safe=_TITLE_SAFE)}"


class SummaryFetcher:
    """Fetch the lead paragraph of one article. Never raises."""

    def __init__(
        self,
        config: WikipediaConfig | None = None,
        throttle: Throttle | None = None,
    ):
        self.config = config or WikipediaConfig()
        self.throttle = throttle or FixedDelayThrottle()

    async def fetch_summary(self, title: str) -> SearchResult:
        await self.throttle.wait()

        try:
            url = summary_url(self.config.summary_url, title)
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    url,
                    headers={
                        "Accept": "application/json",
                        "User-Agent": self.config.user_agent,
                    },
                    timeout=self.config.timeout,
                )
                response.raise_for_status()

            data = response.json()
            if not isinstance(data, dict):
                raise ValueError(f"unexpected summary payload: {type(data).__name__}")
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to fetch summary for {!r}: {}", title, e)
            return SearchResult(title=title, summary=FAILED_SUMMARY, url="")

        desktop = _dig(data, "content_urls", "desktop")
        return SearchResult(
            title=_text(data.get("title")) or title,
            summary=_text(data.get("extract")) or NO_SUMMARY,
            url=_text(desktop.get("page")),
        )


def _dig(data: dict, *keys: str) -> dict:
    node = data
    for key in keys:
        node = node.get(key) if isinstance(node, dict) else None
    return node if isinstance(node, dict) else {}


def _text(value: object) -> str:
    return value if isinstance(value, str) else ""
