"""Configuration management for Rangedrill."""

# This module centralizes environment variable loading for the trainer:
# where progress is stored, which slots hold it, and how selection is seeded.

from dataclasses import dataclass
import os
from pathlib import Path

from dotenv import load_dotenv

from rangedrill.constants import DECK_STORAGE_KEY, STATS_STORAGE_KEY

DEFAULT_DATABASE_PATH = "data/rangedrill.db"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    # Storage
    database_path: str = DEFAULT_DATABASE_PATH
    deck_storage_key: str = DECK_STORAGE_KEY
    stats_storage_key: str = STATS_STORAGE_KEY

    # Selection
    random_seed: int | None = None  # None = seed from system entropy

    # Logging
    log_level: str = DEFAULT_LOG_LEVEL

    @staticmethod
    def _optional_int(value: str | None) -> int | None:
        """Parse an optional integer; missing or invalid values become None."""
        try:
            return int(value)
        except (ValueError, TypeError):
            return None

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "Config":
        """Load configuration from environment variables."""
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        return cls(
            database_path=os.environ.get("DATABASE_PATH", DEFAULT_DATABASE_PATH),
            deck_storage_key=os.environ.get("DECK_STORAGE_KEY", DECK_STORAGE_KEY),
            stats_storage_key=os.environ.get("STATS_STORAGE_KEY", STATS_STORAGE_KEY),
            random_seed=cls._optional_int(os.environ.get("RANDOM_SEED")),
            log_level=os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )

    def ensure_database_dir(self) -> None:
        """Ensure the database directory exists."""
        Path(self.database_path).parent.mkdir(parents=True, exist_ok=True)
