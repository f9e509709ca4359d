"""Application configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
Provider = Literal["wordnik", "wordsapi", "freedictionary"]

# Environment variable holding each provider's key, for error messages.
API_KEY_ENV_VARS: dict[str, str] = {
    "wordnik": "WORDNIK_API_KEY",
    "wordsapi": "WORDSAPI_KEY",
}


class Settings(BaseSettings):
    """Application settings, configurable via environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    data_dir: Path = Path.home() / ".wordlook"

    # Logging
    log_level: LogLevel = "WARNING"
    log_file_enabled: bool = False
    log_file_path: Path | None = None
    log_file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_file_backup_count: int = 5

    @property
    def resolved_log_file_path(self) -> Path:
        """Return log file path, defaulting to data_dir/wordlook.log if not set."""
        return self.log_file_path or self.data_dir / "wordlook.log"

    # Provider selection
    dictionary_provider: Provider = "wordnik"

    # Wordnik
    wordnik_api_key: str = ""
    wordnik_base_url: str = "https://api.wordnik.com/v4"

    # WordsAPI (RapidAPI)
    wordsapi_key: str = ""
    wordsapi_host: str = "wordsapiv1.p.rapidapi.com"

    # dictionaryapi.dev
    free_dictionary_base_url: str = "https://api.dictionaryapi.dev/api/v2"

    # HTTP
    http_timeout: float = 30.0  # seconds
    related_words_limit: int = 10

    def api_key_for(self, provider: str) -> str:
        """Return the configured key for a provider, empty if none is set or needed."""
        if provider == "wordnik":
            return self.wordnik_api_key
        if provider == "wordsapi":
            return self.wordsapi_key
        return ""


settings = Settings()
