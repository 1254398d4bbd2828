"""In-process cache of loaded dictionaries with single-flight loading."""

import asyncio
import functools
import logging
import re
from collections import OrderedDict
from dataclasses import dataclass
from pathlib import Path

from httpspell.services.dictionary.base import DictionaryEntry, EngineFactory
from httpspell.services.dictionary.errors import (
    DictionaryLoadError,
    EngineInitFailed,
    LoadTimeout,
    ResourceUnavailable,
)

logger = logging.getLogger(__name__)

# ko, en_US, de-DE-frami, ...
LANG_PATTERN = re.compile(r"^[A-Za-z]{2,3}([_-][A-Za-z0-9]{2,8})*$")


class EvictionPolicy:
    """Decides which dictionaries to drop when a new one is published.

    The base policy keeps every dictionary for the life of the process.
    """

    def touch(self, lang: str) -> None:
        """Record a use of a cached dictionary."""

    def admit(self, lang: str) -> list[str]:
        """Record a newly published dictionary and return languages to evict."""
        return []

    def discard(self, lang: str) -> None:
        """Forget a language that was removed from the cache."""


KeepForever = EvictionPolicy


class LRUEviction(EvictionPolicy):
    """Keep at most ``max_entries`` dictionaries, dropping the least recently used."""

    def __init__(self, max_entries: int) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self._order: OrderedDict[str, None] = OrderedDict()

    def touch(self, lang: str) -> None:
        if lang in self._order:
            self._order.move_to_end(lang)

    def admit(self, lang: str) -> list[str]:
        self._order[lang] = None
        self._order.move_to_end(lang)
        evicted = []
        while len(self._order) > self.max_entries:
            oldest, _ = self._order.popitem(last=False)
            evicted.append(oldest)
        return evicted

    def discard(self, lang: str) -> None:
        self._order.pop(lang, None)


@dataclass
class CacheStats:
    """Counters describing cache activity."""

    hits: int = 0
    misses: int = 0
    loads: int = 0
    failures: int = 0
    evictions: int = 0


class DictionaryCache:
    """
    Maps language codes to loaded dictionaries.

    Dictionaries are read from ``<root>/<lang>.aff`` and ``<root>/<lang>.dic``
    on first use. Concurrent misses for the same language share a single load:
    the first caller starts it and every other caller awaits the same task, so
    all of them receive the same entry or the same error. Failed loads are not
    cached and the next miss tries again.
    """

    def __init__(
        self,
        root: Path,
        factory: EngineFactory,
        default_lang: str = "ko",
        load_timeout: float | None = None,
        eviction: EvictionPolicy | None = None,
    ) -> None:
        """
        Initialize the cache.

        Args:
            root: Directory holding the .aff/.dic files
            factory: Engine factory used to build dictionaries from file contents
            default_lang: Language used when a caller passes no language
            load_timeout: Seconds a load may take before failing with LoadTimeout
            eviction: Eviction policy. Defaults to keeping every dictionary.
        """
        self.root = Path(root)
        self.factory = factory
        self.default_lang = default_lang
        self.load_timeout = load_timeout
        self.eviction = eviction or KeepForever()
        self.stats = CacheStats()
        self._entries: dict[str, DictionaryEntry] = {}
        self._loading: dict[str, asyncio.Task[DictionaryEntry]] = {}

    def resource_paths(self, lang: str) -> tuple[Path, Path]:
        """Return the (.aff, .dic) paths for a language."""
        base = self.root.resolve()
        return base / f"{lang}.aff", base / f"{lang}.dic"

    def get(self, lang: str) -> DictionaryEntry | None:
        """Return the cached dictionary for a language without loading it."""
        return self._entries.get(lang)

    def languages(self) -> list[str]:
        """Return the languages currently loaded."""
        return sorted(self._entries)

    def available_languages(self) -> list[str]:
        """Return languages that have both resource files under the root."""
        if not self.root.is_dir():
            return []
        return sorted(
            aff.stem
            for aff in self.root.glob("*.aff")
            if aff.with_suffix(".dic").is_file() and LANG_PATTERN.match(aff.stem)
        )

    def evict(self, lang: str) -> bool:
        """Drop a loaded dictionary. Returns True if one was cached."""
        entry = self._entries.pop(lang, None)
        self.eviction.discard(lang)
        if entry is not None:
            self.stats.evictions += 1
            logger.info(f"Evicted dictionary '{lang}'")
        return entry is not None

    def clear(self) -> None:
        """Drop every loaded dictionary. In-flight loads still complete."""
        for lang in list(self._entries):
            self.evict(lang)

    async def load(self, lang: str | None = None) -> DictionaryEntry:
        """
        Return the dictionary for a language, loading it on first use.

        Args:
            lang: Language code. Falls back to the default language when empty.

        Returns:
            The shared DictionaryEntry for the language

        Raises:
            ResourceUnavailable: A resource file is missing or unreadable
            EngineInitFailed: The engine rejected the resources
            LoadTimeout: The load exceeded ``load_timeout``
        """
        lang = lang or self.default_lang

        entry = self._entries.get(lang)
        if entry is not None:
            self.stats.hits += 1
            self.eviction.touch(lang)
            logger.debug(f"Dictionary cache hit for '{lang}'")
            return entry

        self.stats.misses += 1
        task = self._loading.get(lang)
        if task is None:
            task = asyncio.create_task(self._load_with_deadline(lang), name=f"load-dict-{lang}")
            self._loading[lang] = task
            task.add_done_callback(functools.partial(self._finish_load, lang))
        else:
            logger.debug(f"Waiting for in-flight load of '{lang}'")

        # A cancelled caller must not cancel the load other callers are waiting on
        return await asyncio.shield(task)

    def _finish_load(self, lang: str, task: "asyncio.Task[DictionaryEntry]") -> None:
        """Publish or discard the outcome of a load task."""
        if self._loading.get(lang) is task:
            del self._loading[lang]

        if task.cancelled():
            self.stats.failures += 1
            return

        error = task.exception()
        if error is not None:
            self.stats.failures += 1
            logger.warning(f"Failed to load dictionary '{lang}': {error}")
            return

        entry = task.result()
        self._entries[lang] = entry
        self.stats.loads += 1
        for evicted in self.eviction.admit(lang):
            if evicted != lang:
                self.evict(evicted)

    async def _load_with_deadline(self, lang: str) -> DictionaryEntry:
        if self.load_timeout is None:
            return await self._load(lang)
        try:
            return await asyncio.wait_for(self._load(lang), timeout=self.load_timeout)
        except asyncio.TimeoutError:
            raise LoadTimeout(lang, self.load_timeout) from None

    async def _load(self, lang: str) -> DictionaryEntry:
        aff_path, dic_path = self.resource_paths(lang)
        if not LANG_PATTERN.match(lang):
            cause = ValueError(f"invalid language code {lang!r}")
            raise ResourceUnavailable(lang, aff_path, cause)

        aff = await self._read(lang, aff_path)
        dic = await self._read(lang, dic_path)

        try:
            engine = await asyncio.to_thread(self.factory.create, aff, dic)
        except DictionaryLoadError:
            raise
        except Exception as e:
            raise EngineInitFailed(lang, e) from e
        if engine is None:
            raise EngineInitFailed(lang)

        logger.info(
            f"Loaded dictionary '{lang}' with {self.factory.name} "
            f"(aff={aff_path}, dic={dic_path})"
        )
        return DictionaryEntry(
            lang=lang,
            engine=engine,
            aff_path=aff_path,
            dic_path=dic_path,
            source=self.factory.name,
        )

    @staticmethod
    async def _read(lang: str, path: Path) -> bytes:
        try:
            return await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            logger.debug(f"Cannot read {path}: {e}")
            raise ResourceUnavailable(lang, path, e) from e
