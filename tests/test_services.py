"""Tests for the spell service facade."""

from pathlib import Path

import pytest
from conftest import FakeFactory

from httpspell.config import Settings
from httpspell.services import spell as spell_module
from httpspell.services.dictionary.base import SpellMode, WordResult
from httpspell.services.dictionary.cache import KeepForever, LRUEviction
from httpspell.services.dictionary.errors import ResourceUnavailable
from httpspell.services.dictionary.spylls_backend import SpyllsFactory
from httpspell.services.spell import SpellService, get_spell_service, reset_spell_service


class TestSpellServiceFromSettings:
    """Tests for SpellService.from_settings."""

    def test_defaults(self, tmp_path: Path):
        config = Settings(_env_file=None, dictionary_dir=tmp_path, default_lang="en")
        service = SpellService.from_settings(config)

        assert service.cache.root == tmp_path
        assert service.cache.default_lang == "en"
        assert isinstance(service.cache.factory, SpyllsFactory)
        assert isinstance(service.cache.eviction, KeepForever)
        assert service.coordinator.max_concurrency == config.max_concurrent_words
        assert service.coordinator.timeout == config.batch_timeout

    def test_lru_when_cache_size_set(self, tmp_path: Path):
        config = Settings(_env_file=None, dictionary_dir=tmp_path, dictionary_cache_size=3)
        service = SpellService.from_settings(config)

        assert isinstance(service.cache.eviction, LRUEviction)
        assert service.cache.eviction.max_entries == 3

    def test_custom_factory(self, tmp_path: Path):
        factory = FakeFactory()
        config = Settings(_env_file=None, dictionary_dir=tmp_path)
        service = SpellService.from_settings(config, factory=factory)
        assert service.cache.factory is factory


class TestSpellServiceRun:
    """Tests for check, suggest and preload."""

    @pytest.mark.asyncio
    async def test_check_text(self, spell_service: SpellService):
        results = await spell_service.check("hello, teh!", "en")

        assert results == [
            WordResult(word="hello", correct=True, suggestions=[]),
            WordResult(word="teh", correct=False, suggestions=["the"]),
            WordResult(word="", correct=True, suggestions=[]),
        ]

    @pytest.mark.asyncio
    async def test_suggest_text(self, spell_service: SpellService):
        results = await spell_service.suggest("teh wrold", "en")

        assert results[0].suggestions == ["the", "tech"]
        assert results[1].suggestions == ["world"]

    @pytest.mark.asyncio
    async def test_default_language(self, spell_service: SpellService):
        results = await spell_service.run("안녕 하세요", None, SpellMode.CHECK)
        assert all(result.correct for result in results)

    @pytest.mark.asyncio
    async def test_missing_dictionary(self, spell_service: SpellService):
        with pytest.raises(ResourceUnavailable):
            await spell_service.check("bonjour", "fr")

    @pytest.mark.asyncio
    async def test_preload_skips_failures(self, spell_service: SpellService):
        loaded = await spell_service.preload(["en", "fr", "ko"])

        assert loaded == ["en", "ko"]
        assert spell_service.cache.languages() == ["en", "ko"]


class TestGetSpellService:
    """Tests for the process-wide service accessor."""

    def test_returns_singleton(self):
        reset_spell_service()
        try:
            assert get_spell_service() is get_spell_service()
        finally:
            reset_spell_service()

    def test_reset(self):
        reset_spell_service()
        first = get_spell_service()
        reset_spell_service()
        assert spell_module._service is None
        assert get_spell_service() is not first
        reset_spell_service()
