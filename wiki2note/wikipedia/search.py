"""Wikipedia opensearch client with language-model fallback."""

from __future__ import annotations

import asyncio

import httpx
from loguru import logger

from wiki2note.config.schema import Config
from wiki2note.notices import Notifier
from wiki2note.wikipedia.fallback import FallbackQueryRewriter
from wiki2note.wikipedia.models import SearchResult
from wiki2note.wikipedia.summary import SummaryFetcher
from wiki2note.wikipedia.throttle import FixedDelayThrottle, Throttle


class SearchClient:
    """Resolve a free-text query to article titles and their summaries."""

    def __init__(
        self,
        config: Config | None = None,
        *,
        notifier: Notifier | None = None,
        throttle: Throttle | None = None,
        summaries: SummaryFetcher | None = None,
        rewriter: FallbackQueryRewriter | None = None,
    ):
        self.config = config or Config()
        self.notifier = notifier or Notifier(self.config.notices)
        self.throttle = throttle or FixedDelayThrottle(self.config.throttle.delay_s)
        self.summaries = summaries or SummaryFetcher(self.config.wikipedia, self.throttle)
        self.rewriter = rewriter or FallbackQueryRewriter(
            self, self.config.fallback, notifier=self.notifier
        )

    async def search(self, query: str, allow_fallback: bool = True) -> list[SearchResult]:
        """Search and return results in the order the endpoint ranked them.

        An empty candidate list hands off to the fallback rewriter once when
        ``allow_fallback`` is set and the fallback is enabled in config.
        """
        await self.throttle.wait()

        try:
            titles = await self._opensearch(query)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Wikipedia search for {!r} failed: {}", query, e)
            self.notifier.error("Error searching Wikipedia.")
            return []

        logger.debug("Search {!r} returned {} title(s)", query, len(titles))
        results = list(
            await asyncio.gather(*(self.summaries.fetch_summary(title) for title in titles))
        )

        if not results and allow_fallback and self.config.fallback.enabled:
            self.notifier.info(
                "No results found. Trying to search using the fallback language model."
            )
            return await self.rewriter.rewrite(query)
        return results

    async def _opensearch(self, query: str) -> list[str]:
        wiki = self.config.wikipedia
        async with httpx.AsyncClient() as client:
            response = await client.get(
                wiki.api_url,
                params={
                    "action": "opensearch",
                    "search": query,
                    "limit": str(wiki.limit),
                    "namespace": "0",
                    "format": "json",
                },
                headers={
                    "Accept": "application/json",
                    "User-Agent": wiki.user_agent,
                },
                timeout=wiki.timeout,
            )
            response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, list) or len(payload) < 2 or not isinstance(payload[1], list):
            raise ValueError("unexpected opensearch payload")
        return [str(title) for title in payload[1]]
