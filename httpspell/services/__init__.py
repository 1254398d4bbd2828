"""Services for dictionary loading and spell checking."""

from httpspell.services.batch import BatchCoordinator, run_batch
from httpspell.services.spell import SpellService, get_spell_service
from httpspell.services.tokenizer import tokenize

__all__ = ["BatchCoordinator", "SpellService", "get_spell_service", "run_batch", "tokenize"]
