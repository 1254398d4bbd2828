"""Base classes and dataclasses for spell-check dictionaries."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class SpellMode(str, Enum):
    """How each word of a batch is checked."""

    CHECK = "check"  # correctness plus the best suggestion
    SUGGEST = "suggest"  # correctness plus every suggestion


@dataclass
class WordResult:
    """Spell-check result for a single token."""

    word: str
    correct: bool
    suggestions: list[str] = field(default_factory=list)


class SpellEngine(ABC):
    """A loaded morphological dictionary that can check words."""

    @abstractmethod
    def check(self, word: str) -> tuple[bool, str | None]:
        """
        Check a word and return its best correction.

        Returns:
            Tuple of (correct, suggestion)
            - correct: True if the word is spelled correctly
            - suggestion: The most likely correction, or None
        """
        ...  # pragma: no cover

    @abstractmethod
    def suggest(self, word: str) -> tuple[bool, list[str]]:
        """
        Check a word and return all ranked corrections.

        Returns:
            Tuple of (correct, suggestions)
        """
        ...  # pragma: no cover


class EngineFactory(ABC):
    """Builds a SpellEngine from the raw affix and word-list files."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of the engine implementation."""
        ...  # pragma: no cover

    @abstractmethod
    def create(self, aff: bytes, dic: bytes) -> SpellEngine | None:
        """
        Build an engine from in-memory resources.

        Args:
            aff: Contents of the ``.aff`` affix-rule file
            dic: Contents of the ``.dic`` word-list file

        Returns:
            The engine, or None if the resources do not describe a usable dictionary
        """
        ...  # pragma: no cover


@dataclass(frozen=True)
class DictionaryEntry:
    """A loaded dictionary shared by every request for its language."""

    lang: str
    engine: SpellEngine
    aff_path: Path
    dic_path: Path
    source: str = ""  # engine name, e.g. "spylls"
