"""Pytest configuration and fixtures."""

import threading
import time
from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from httpspell.main import app
from httpspell.routes.static import get_document_root
from httpspell.services.batch import BatchCoordinator
from httpspell.services.dictionary.base import EngineFactory, SpellEngine
from httpspell.services.dictionary.cache import DictionaryCache
from httpspell.services.spell import SpellService, get_spell_service

EN_AFF = "SET UTF-8\nTRY esianrtolcdugmphbyfvkwzESIANRTOLCDUGMPHBYFVKWZ'\n"
EN_DIC = "4\nhello\nthe\nworld\nfoo\n"
KO_AFF = "SET UTF-8\n"
KO_DIC = "3\n안녕\n하세요\n감사\n"


class FakeEngine(SpellEngine):
    """Engine backed by a word set, with optional per-word delays."""

    def __init__(
        self,
        words: set[str],
        suggestions: dict[str, list[str]] | None = None,
        delays: dict[str, float] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self.words = words
        self.suggestions = suggestions or {}
        self.delays = delays or {}
        self.failing = failing or set()
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def _record(self, word: str) -> None:
        time.sleep(self.delays.get(word, 0))
        with self._lock:
            self.calls.append(word)
        if word in self.failing:
            raise RuntimeError(f"engine cannot handle {word!r}")

    def check(self, word: str) -> tuple[bool, str | None]:
        self._record(word)
        if not word or word in self.words:
            return True, None
        candidates = self.suggestions.get(word, [])
        return False, candidates[0] if candidates else None

    def suggest(self, word: str) -> tuple[bool, list[str]]:
        self._record(word)
        if not word or word in self.words:
            return True, []
        return False, list(self.suggestions.get(word, []))


class FakeFactory(EngineFactory):
    """Factory that builds FakeEngines from .dic contents and counts constructions."""

    def __init__(self, delay: float = 0.0, suggestions: dict[str, list[str]] | None = None) -> None:
        self.delay = delay
        self.suggestions = suggestions or {}
        self.created = 0
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "fake"

    def create(self, aff: bytes, dic: bytes) -> SpellEngine | None:
        time.sleep(self.delay)
        with self._lock:
            self.created += 1
        if b"BROKEN" in aff:
            return None
        if b"EXPLODE" in aff:
            raise ValueError("unparseable affix file")
        lines = dic.decode("utf-8").splitlines()[1:]
        words = {line.split("/")[0].strip() for line in lines if line.strip()}
        return FakeEngine(words, suggestions=self.suggestions)


def write_dictionary(root: Path, lang: str, aff: str, dic: str) -> None:
    """Write a .aff/.dic pair under root."""
    (root / f"{lang}.aff").write_text(aff, encoding="utf-8")
    (root / f"{lang}.dic").write_text(dic, encoding="utf-8")


@pytest.fixture
def dict_dir(tmp_path: Path) -> Path:
    """Create a dictionary directory with English and Korean dictionaries."""
    root = tmp_path / "dict"
    root.mkdir()
    write_dictionary(root, "en", EN_AFF, EN_DIC)
    write_dictionary(root, "ko", KO_AFF, KO_DIC)
    return root


@pytest.fixture
def doc_root(tmp_path: Path) -> Path:
    """Create a document root with an index page."""
    root = tmp_path / "www"
    root.mkdir()
    (root / "index.html").write_text("<h1>httpspell</h1>", encoding="utf-8")
    (root / "app.js").write_text("console.log('spell');", encoding="utf-8")
    return root


@pytest.fixture
def fake_factory() -> FakeFactory:
    return FakeFactory(suggestions={"teh": ["the", "tech"], "wrold": ["world"]})


@pytest.fixture
def cache(dict_dir: Path, fake_factory: FakeFactory) -> DictionaryCache:
    return DictionaryCache(root=dict_dir, factory=fake_factory, default_lang="ko")


@pytest.fixture
def spell_service(cache: DictionaryCache) -> SpellService:
    return SpellService(cache, BatchCoordinator(max_concurrency=4, timeout=5.0))


@pytest.fixture
def test_app(spell_service: SpellService, doc_root: Path) -> Generator[FastAPI, None, None]:
    """Create a test FastAPI application using the fake engine and temp directories."""
    app.dependency_overrides[get_spell_service] = lambda: spell_service
    app.dependency_overrides[get_document_root] = lambda: doc_root
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app: FastAPI) -> TestClient:
    """Create a synchronous test client."""
    return TestClient(test_app)


@pytest.fixture
async def async_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an asynchronous test client."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as client:
        yield client
