"""Application configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings, configurable via environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # HTTP
    host: str = "localhost"
    port: int = 3001
    document_root: Path = Path("app")

    # Paths
    data_dir: Path = Path("data")

    # Logging
    log_level: LogLevel = "INFO"
    log_file_enabled: bool = False
    log_file_path: Path | None = None
    log_file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_file_backup_count: int = 5

    @property
    def resolved_log_file_path(self) -> Path:
        """Return log file path, defaulting to data_dir/httpspell.log if not set."""
        return self.log_file_path or self.data_dir / "httpspell.log"

    # Dictionaries
    dictionary_dir: Path = Path("dict")
    default_lang: str = "ko"
    dictionary_cache_size: int | None = None  # None keeps every dictionary loaded
    dictionary_load_timeout: float | None = 30.0
    preload_languages: list[str] = []

    # Batches
    batch_timeout: float | None = 30.0
    max_concurrent_words: int = 8
    max_suggestions: int = 10


settings = Settings()
