"""Hunspell dictionaries backed by spylls, a pure-Python Hunspell port."""

import logging
import tempfile
from itertools import islice
from pathlib import Path

from spylls.hunspell import Dictionary

from httpspell.services.dictionary.base import EngineFactory, SpellEngine

logger = logging.getLogger(__name__)


class SpyllsEngine(SpellEngine):
    """Spell-check a word against a loaded spylls Dictionary."""

    def __init__(self, dictionary: Dictionary, max_suggestions: int | None = None) -> None:
        self.dictionary = dictionary
        self.max_suggestions = max_suggestions

    def check(self, word: str) -> tuple[bool, str | None]:
        if self.dictionary.lookup(word):
            return True, None
        # suggest() is a generator, so only the first candidate is computed
        return False, next(iter(self.dictionary.suggest(word)), None)

    def suggest(self, word: str) -> tuple[bool, list[str]]:
        if self.dictionary.lookup(word):
            return True, []
        return False, list(islice(self.dictionary.suggest(word), self.max_suggestions))


class SpyllsFactory(EngineFactory):
    """Build spylls dictionaries from in-memory .aff/.dic contents."""

    def __init__(self, max_suggestions: int | None = None) -> None:
        self.max_suggestions = max_suggestions

    @property
    def name(self) -> str:
        return "spylls"

    def create(self, aff: bytes, dic: bytes) -> SpellEngine | None:
        """
        Build a spylls dictionary.

        spylls only reads dictionaries from disk, reopening the .aff file when
        its ``SET`` line switches encoding, so the buffers are written to a
        scratch directory. Both files are read eagerly and the directory is
        removed once the dictionary is built.
        """
        with tempfile.TemporaryDirectory(prefix="httpspell-") as tmp:
            prefix = Path(tmp) / "dictionary"
            prefix.with_suffix(".aff").write_bytes(aff)
            prefix.with_suffix(".dic").write_bytes(dic)
            dictionary = Dictionary.from_files(str(prefix))

        if dictionary.dic is None or not dictionary.dic.words:
            logger.warning("spylls built an empty dictionary")
            return None
        return SpyllsEngine(dictionary, max_suggestions=self.max_suggestions)
