"""Spell service facade: dictionary lookup, tokenization and batch checking."""

import logging

from httpspell.config import Settings, settings
from httpspell.services.batch import BatchCoordinator
from httpspell.services.dictionary.base import EngineFactory, SpellMode, WordResult
from httpspell.services.dictionary.cache import DictionaryCache, EvictionPolicy, LRUEviction
from httpspell.services.dictionary.errors import DictionaryLoadError
from httpspell.services.dictionary.spylls_backend import SpyllsFactory
from httpspell.services.tokenizer import tokenize

logger = logging.getLogger(__name__)


class SpellService:
    """Checks free-form text against a language's dictionary."""

    def __init__(self, cache: DictionaryCache, coordinator: BatchCoordinator | None = None) -> None:
        self.cache = cache
        self.coordinator = coordinator or BatchCoordinator()

    @classmethod
    def from_settings(
        cls,
        config: Settings | None = None,
        factory: EngineFactory | None = None,
    ) -> "SpellService":
        """Build a service from application settings."""
        config = config or settings
        eviction: EvictionPolicy | None = None
        if config.dictionary_cache_size:
            eviction = LRUEviction(config.dictionary_cache_size)

        cache = DictionaryCache(
            root=config.dictionary_dir,
            factory=factory or SpyllsFactory(max_suggestions=config.max_suggestions),
            default_lang=config.default_lang,
            load_timeout=config.dictionary_load_timeout,
            eviction=eviction,
        )
        coordinator = BatchCoordinator(
            max_concurrency=config.max_concurrent_words,
            timeout=config.batch_timeout,
            max_suggestions=config.max_suggestions,
        )
        return cls(cache, coordinator)

    async def run(self, text: str, lang: str | None, mode: SpellMode) -> list[WordResult]:
        """
        Spell-check every word of a text.

        Args:
            text: Free-form text; split with the word tokenizer
            lang: Language code, or None for the default language
            mode: CHECK or SUGGEST

        Returns:
            One WordResult per token, in text order

        Raises:
            DictionaryLoadError: The dictionary could not be loaded
            BatchTimeout: Checking the words took too long
        """
        entry = await self.cache.load(lang)
        tokens = tokenize(text)
        return await self.coordinator.run(entry, tokens, mode)

    async def check(self, text: str, lang: str | None = None) -> list[WordResult]:
        return await self.run(text, lang, SpellMode.CHECK)

    async def suggest(self, text: str, lang: str | None = None) -> list[WordResult]:
        return await self.run(text, lang, SpellMode.SUGGEST)

    async def preload(self, languages: list[str]) -> list[str]:
        """Load dictionaries ahead of the first request. Returns languages that loaded."""
        loaded = []
        for lang in languages:
            try:
                await self.cache.load(lang)
                loaded.append(lang)
            except DictionaryLoadError as e:
                logger.warning(f"Failed to preload dictionary '{lang}': {e}")
        return loaded


# Lazily created process-wide service
_service: SpellService | None = None


def get_spell_service() -> SpellService:
    """Get or create the process-wide spell service."""
    global _service
    if _service is None:
        _service = SpellService.from_settings()
    return _service


def reset_spell_service() -> None:
    """Forget the process-wide service so the next call rebuilds it from settings."""
    global _service
    _service = None
