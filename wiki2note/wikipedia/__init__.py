"""Wikipedia search, summaries and fallback query rewriting."""

from wiki2note.wikipedia.fallback import FallbackQueryRewriter
from wiki2note.wikipedia.models import SearchResult
from wiki2note.wikipedia.search import SearchClient
from wiki2note.wikipedia.summary import SummaryFetcher
from wiki2note.wikipedia.throttle import FixedDelayThrottle, NoDelayThrottle, Throttle

__all__ = [
    "FallbackQueryRewriter",
    "FixedDelayThrottle",
    "NoDelayThrottle",
    "SearchClient",
    "SearchResult",
    "SummaryFetcher",
    "Throttle",
]
