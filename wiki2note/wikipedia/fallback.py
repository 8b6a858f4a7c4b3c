"""Language-model assisted query rewrite for searches that found nothing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import json_repair
from loguru import logger

from wiki2note.config.loader import API_KEY_ENV, resolve_api_key
from wiki2note.config.schema import FallbackConfig
from wiki2note.notices import Notifier
from wiki2note.wikipedia.models import SearchResult

if TYPE_CHECKING:
    from wiki2note.wikipedia.search import SearchClient

REWRITE_PROMPT = (
    "The user is attempting to find a Wikipedia article and need your assistance.\n\n"
    "Given the following query by the user:\n"
    '"{query}"\n\n'
    "Ponder on what the user is trying to find and suggest the proper keyword to query "
    "in an opensearch query to the English Wikipedia official API.\n\n"
    "Answer in a JSON format containing the `query` attribute."
)


def build_request_body(config: FallbackConfig, query: str) -> dict[str, Any]:
    """Chat completion payload asking for a single JSON ``query`` field."""
    return {
        "model": config.model,
        "messages": [{"role": "user", "content": REWRITE_PROMPT.format(query=query)}],
        "max_tokens": config.max_tokens,
        "response_format": {"type": "json_object"},
    }


class FallbackQueryRewriter:
    """Ask a chat model for a better query, then search once more without fallback."""

    def __init__(
        self,
        search_client: SearchClient,
        config: FallbackConfig | None = None,
        *,
        notifier: Notifier | None = None,
    ):
        self.search_client = search_client
        self.config = config or FallbackConfig()
        self.notifier = notifier or Notifier()

    async def rewrite(self, query: str) -> list[SearchResult]:
        api_key = resolve_api_key(self.config)
        if not api_key:
            self.notifier.error(
                f"OpenAI API key not found. Please set the {API_KEY_ENV} environment variable."
            )
            return []

        try:
            suggested = await self._suggest_query(query, api_key)
        except (httpx.HTTPError, ValueError, LookupError, TypeError) as e:
            logger.error("Fallback query rewrite for {!r} failed: {}", query, e)
            self.notifier.error("Error searching Wikipedia using the fallback language model.")
            return []

        if not suggested:
            self.notifier.error("The model failed to respond. Exiting.")
            return []

        logger.info("Fallback rewrote {!r} -> {!r}", query, suggested)
        self.notifier.info(f"Searching for:\n{suggested}")
        return await self.search_client.search(suggested, allow_fallback=False)

    async def _suggest_query(self, query: str, api_key: str) -> str:
        async with httpx.AsyncClient() as client:
            response = await client.post(
                self.config.base_url,
                json=build_request_body(self.config, query),
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {api_key}",
                },
                timeout=self.config.timeout,
            )
            response.raise_for_status()

        content = response.json()["choices"][0]["message"]["content"]
        answer = json_repair.loads(content or "")
        if not isinstance(answer, dict):
            return ""
        return str(answer.get("query") or "").strip()
