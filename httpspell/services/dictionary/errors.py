"""Exceptions raised while loading dictionaries and checking words."""

from pathlib import Path
from typing import Any


class SpellServiceError(Exception):
    """Base class for spell service errors."""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable description used as an error ``cause``."""
        return {"kind": type(self).__name__, "message": str(self)}


class DictionaryLoadError(SpellServiceError):
    """A dictionary for a language could not be loaded."""

    def __init__(self, lang: str, message: str) -> None:
        super().__init__(message)
        self.lang = lang

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["lang"] = self.lang
        return data


class ResourceUnavailable(DictionaryLoadError):
    """The affix or word-list file is missing or unreadable."""

    def __init__(self, lang: str, path: Path | str, cause: BaseException | None = None) -> None:
        message = f"Cannot read dictionary resource '{path}'"
        if isinstance(cause, OSError) and cause.strerror:
            message += f": {cause.strerror}"
        elif cause is not None:
            message += f": {cause}"
        super().__init__(lang, message)
        self.path = str(path)
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["path"] = self.path
        if isinstance(self.cause, OSError) and self.cause.errno is not None:
            data["errno"] = self.cause.errno
        return data


class EngineInitFailed(DictionaryLoadError):
    """The spell-check engine rejected the dictionary resources."""

    def __init__(self, lang: str, cause: BaseException | None = None) -> None:
        message = f"Spell-check engine could not build dictionary '{lang}'"
        if cause is not None:
            message += f": {cause}"
        super().__init__(lang, message)
        self.cause = cause


class LoadTimeout(DictionaryLoadError):
    """Loading a dictionary took longer than the configured deadline."""

    def __init__(self, lang: str, timeout: float) -> None:
        super().__init__(lang, f"Loading dictionary '{lang}' timed out after {timeout:g}s")
        self.timeout = timeout


class BatchTimeout(SpellServiceError):
    """Checking a batch of words took longer than the configured deadline."""

    def __init__(self, timeout: float, size: int) -> None:
        super().__init__(f"Checking {size} words timed out after {timeout:g}s")
        self.timeout = timeout
        self.size = size


class EngineError(SpellServiceError):
    """The spell-check engine failed on a single word."""

    def __init__(self, word: str, cause: BaseException) -> None:
        super().__init__(f"Spell-check engine failed on {word!r}: {cause}")
        self.word = word
        self.cause = cause
