import asyncio
from urllib.parse import unquote

import httpx
import pytest

from wiki2note.config.schema import Config
from wiki2note.notices import Notice, Notifier
from wiki2note.wikipedia.search import SearchClient
from wiki2note.wikipedia.throttle import NoDelayThrottle


class FakeResponse:
    def __init__(self, payload, error: Exception | None = None):
        self._payload = payload
        self._error = error

    def raise_for_status(self) -> None:
        if self._error:
            raise self._error

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class StubWeb:
    """Canned Wikipedia and chat completion endpoints."""

    def __init__(self):
        self.opensearch: dict[str, list[str]] = {}
        self.search_payload = None
        self.search_error: Exception | None = None
        self.pages: dict[str, object] = {}
        self.delays: dict[str, float] = {}
        self.completion: object = None
        self.search_calls: list[dict] = []
        self.summary_calls: list[str] = []
        self.completion_calls: list[dict] = []

    async def get(self, url, params=None, headers=None, timeout=None):
        if params is not None:
            self.search_calls.append({"url": url, "params": params, "headers": headers})
            if self.search_error:
                return FakeResponse({}, error=self.search_error)
            if self.search_payload is not None:
                return FakeResponse(self.search_payload)
            term = params["search"]
            return FakeResponse([term, self.opensearch.get(term, []), [], []])

        title = unquote(url.rsplit("/", 1)[1])
        self.summary_calls.append(title)
        await asyncio.sleep(self.delays.get(title, 0))
        page = self.pages.get(title)
        if page is None:
            return FakeResponse({}, error=httpx.HTTPError("404 Not Found"))
        return FakeResponse(page)

    async def post(self, url, json=None, headers=None, timeout=None):
        self.completion_calls.append({"url": url, "json": json, "headers": headers})
        if isinstance(self.completion, Exception):
            raise self.completion
        return FakeResponse(self.completion)


def page(title: str, extract: str | None = None) -> dict:
    data: dict = {
        "title": title,
        "content_urls": {
            "desktop": {"page": f"https://en.wikipedia.org/wiki/{title.replace(' ', '_')}"}
        },
    }
    if extract is not None:
        data["extract"] = extract
    return data


def completion(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class InMemoryStore:
    def __init__(self):
        self.folders: set[str] = set()
        self.files: dict[str, str] = {}
        self.opened: list[str] = []

    def exists(self, path: str) -> bool:
        return path in self.folders or path in self.files

    def create_folder(self, path: str) -> None:
        self.folders.add(path)

    def create_file(self, path: str, content: str) -> None:
        if path in self.files:
            raise FileExistsError(path)
        self.files[path] = content

    def open_file(self, path: str) -> None:
        self.opened.append(path)


@pytest.fixture
def web(monkeypatch) -> StubWeb:
    stub = StubWeb()

    class StubClient:
        async def __aenter__(self):
            return stub

        async def __aexit__(self, exc_type, exc, tb):
            return False

    monkeypatch.setattr("wiki2note.wikipedia.search.httpx.AsyncClient", StubClient)
    return stub


@pytest.fixture
def notices() -> list[Notice]:
    return []


@pytest.fixture
def notifier(notices) -> Notifier:
    return Notifier(sink=notices.append)


@pytest.fixture
def config(monkeypatch) -> Config:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    cfg = Config()
    cfg.fallback.api_key = "sk-test"
    return cfg


@pytest.fixture
def make_client(config, notifier):
    def _make(cfg: Config | None = None) -> SearchClient:
        return SearchClient(cfg or config, notifier=notifier, throttle=NoDelayThrottle())

    return _make
