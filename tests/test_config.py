"""Tests for configuration management."""

import os
from unittest.mock import patch

from rangedrill.config import Config, DEFAULT_DATABASE_PATH, DEFAULT_LOG_LEVEL
from rangedrill.constants import DECK_STORAGE_KEY, STATS_STORAGE_KEY


class TestConfigDefaults:
    """Tests for Config dataclass defaults."""

    def test_config_default_values(self):
        """Config should have sensible defaults."""
        config = Config()
        assert config.database_path == DEFAULT_DATABASE_PATH
        assert config.deck_storage_key == DECK_STORAGE_KEY
        assert config.stats_storage_key == STATS_STORAGE_KEY
        assert config.random_seed is None
        assert config.log_level == DEFAULT_LOG_LEVEL

    def test_storage_keys_are_distinct(self):
        """Deck and stats must live in separate slots."""
        assert DECK_STORAGE_KEY != STATS_STORAGE_KEY


class TestConfigFromEnv:
    """Tests for Config.from_env() loading."""

    def test_from_env_loads_all_vars(self):
        """from_env should load all environment variables."""
        env_vars = {
            "DATABASE_PATH": "/tmp/drill.db",
            "DECK_STORAGE_KEY": "deck-x",
            "STATS_STORAGE_KEY": "stats-x",
            "RANDOM_SEED": "42",
            "LOG_LEVEL": "debug",
        }
        with patch.dict(os.environ, env_vars, clear=True):
            config = Config.from_env()

        assert config.database_path == "/tmp/drill.db"
        assert config.deck_storage_key == "deck-x"
        assert config.stats_storage_key == "stats-x"
        assert config.random_seed == 42
        assert config.log_level == "DEBUG"

    def test_from_env_uses_defaults_for_missing(self):
        """from_env should use defaults when vars are missing."""
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()

        assert config.database_path == DEFAULT_DATABASE_PATH
        assert config.random_seed is None
        assert config.log_level == DEFAULT_LOG_LEVEL

    def test_invalid_seed_is_ignored(self):
        """A non-integer RANDOM_SEED should leave selection unseeded."""
        with patch.dict(os.environ, {"RANDOM_SEED": "not_a_number"}, clear=True):
            config = Config.from_env()
        assert config.random_seed is None

    def test_from_env_reads_env_file(self, tmp_path):
        """An explicit env file should be loaded."""
        env_file = tmp_path / ".env"
        env_file.write_text("DATABASE_PATH=/srv/drill.db\n")
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env(str(env_file))
        assert config.database_path == "/srv/drill.db"


class TestOptionalInt:
    """Tests for Config._optional_int helper."""

    def test_valid_integer(self):
        assert Config._optional_int("123") == 123
        assert Config._optional_int("-5") == -5

    def test_invalid_returns_none(self):
        assert Config._optional_int("12.5") is None
        assert Config._optional_int("") is None
        assert Config._optional_int(None) is None


class TestEnsureDatabaseDir:
    """Tests for directory creation."""

    def test_creates_parent_directory(self, tmp_path):
        config = Config(database_path=str(tmp_path / "nested" / "dir" / "drill.db"))
        config.ensure_database_dir()
        assert (tmp_path / "nested" / "dir").is_dir()
