"""Concurrent spell-checking of word batches."""

import asyncio
import logging
from collections.abc import Sequence

from httpspell.services.dictionary.base import DictionaryEntry, SpellMode, WordResult
from httpspell.services.dictionary.errors import BatchTimeout, EngineError

logger = logging.getLogger(__name__)


class BatchCoordinator:
    """
    Checks every token of a batch concurrently and returns results in token order.

    Each token gets its own task; engine calls run in worker threads, at most
    ``max_concurrency`` at a time. Results are collected with ``asyncio.gather``,
    which returns them in submission order no matter which call finishes first.
    """

    def __init__(
        self,
        max_concurrency: int = 8,
        timeout: float | None = None,
        max_suggestions: int | None = None,
    ) -> None:
        """
        Initialize the coordinator.

        Args:
            max_concurrency: Maximum number of engine calls running at once
            timeout: Seconds a whole batch may take before failing with BatchTimeout
            max_suggestions: Cap on suggestions per word (None for no cap)
        """
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.max_concurrency = max_concurrency
        self.timeout = timeout
        self.max_suggestions = max_suggestions

    async def run(
        self,
        entry: DictionaryEntry,
        tokens: Sequence[str],
        mode: SpellMode,
    ) -> list[WordResult]:
        """
        Spell-check a batch of tokens.

        Args:
            entry: Loaded dictionary to check against
            tokens: Words to check; the result at index i belongs to tokens[i]
            mode: CHECK for the best suggestion, SUGGEST for all suggestions

        Returns:
            One WordResult per token, in token order

        Raises:
            BatchTimeout: The batch exceeded ``timeout``
        """
        if not tokens:
            return []

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def check_one(word: str) -> WordResult:
            async with semaphore:
                try:
                    return await asyncio.to_thread(self._check_word, entry, word, mode)
                except EngineError as e:
                    logger.warning(f"{e} (lang={entry.lang})")
                    return WordResult(word=word, correct=False, suggestions=[])

        gathered = asyncio.gather(*(check_one(word) for word in tokens))
        if self.timeout is None:
            results = await gathered
        else:
            try:
                results = await asyncio.wait_for(gathered, timeout=self.timeout)
            except asyncio.TimeoutError:
                raise BatchTimeout(self.timeout, len(tokens)) from None

        logger.debug(f"{mode.value} batch of {len(tokens)} words done (lang={entry.lang})")
        return list(results)

    def _check_word(self, entry: DictionaryEntry, word: str, mode: SpellMode) -> WordResult:
        try:
            if mode is SpellMode.CHECK:
                correct, suggestion = entry.engine.check(word)
                suggestions = [suggestion] if suggestion else []
            else:
                correct, suggestions = entry.engine.suggest(word)
                suggestions = list(suggestions)
        except Exception as e:
            raise EngineError(word, e) from e

        if self.max_suggestions is not None:
            suggestions = suggestions[: self.max_suggestions]
        return WordResult(word=word, correct=bool(correct), suggestions=suggestions)


async def run_batch(
    entry: DictionaryEntry,
    tokens: Sequence[str],
    mode: SpellMode,
) -> list[WordResult]:
    """Spell-check tokens with a default BatchCoordinator."""
    return await BatchCoordinator().run(entry, tokens, mode)
