"""Hunspell dictionary loading and caching."""

from httpspell.services.dictionary.base import (
    DictionaryEntry,
    EngineFactory,
    SpellEngine,
    SpellMode,
    WordResult,
)
from httpspell.services.dictionary.cache import (
    DictionaryCache,
    EvictionPolicy,
    KeepForever,
    LRUEviction,
)
from httpspell.services.dictionary.errors import (
    BatchTimeout,
    DictionaryLoadError,
    EngineError,
    EngineInitFailed,
    LoadTimeout,
    ResourceUnavailable,
    SpellServiceError,
)
from httpspell.services.dictionary.spylls_backend import SpyllsEngine, SpyllsFactory

__all__ = [
    "BatchTimeout",
    "DictionaryCache",
    "DictionaryEntry",
    "DictionaryLoadError",
    "EngineError",
    "EngineFactory",
    "EngineInitFailed",
    "EvictionPolicy",
    "KeepForever",
    "LRUEviction",
    "LoadTimeout",
    "ResourceUnavailable",
    "SpellEngine",
    "SpellMode",
    "SpellServiceError",
    "SpyllsEngine",
    "SpyllsFactory",
    "WordResult",
]
