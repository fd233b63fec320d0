"""Shared pytest fixtures for the Rangedrill test suite."""

import random

import pytest

from rangedrill.config import Config
from rangedrill.db.database import Database
from rangedrill.db.models import CardState, ItemIdentity
from rangedrill.srs.deck import DeckStore
from rangedrill.srs.scheduler import ReviewScheduler


@pytest.fixture
def temp_db(tmp_path):
    """Create a temporary SQLite database with schema initialized."""
    db_path = tmp_path / "test.db"
    db = Database(str(db_path))
    db.init_schema()
    yield db
    db.close()


@pytest.fixture
def small_catalog():
    """Four spots: two hands at two positions."""
    return [
        ItemIdentity("AA", "UTG"),
        ItemIdentity("AA", "Blinds"),
        ItemIdentity("72o", "UTG"),
        ItemIdentity("72o", "Blinds"),
    ]


@pytest.fixture
def rng():
    """Seeded RNG so selection is reproducible."""
    return random.Random(1234)


@pytest.fixture
def deck(temp_db):
    """An unloaded deck store on the temporary database."""
    return DeckStore(temp_db, "test-deck")


@pytest.fixture
def scheduler(temp_db, small_catalog, rng):
    """Scheduler over the small catalog."""
    return ReviewScheduler(
        temp_db,
        small_catalog,
        deck_key="test-deck",
        stats_key="test-stats",
        rng=rng,
    )


@pytest.fixture
def sample_card():
    """A card that has been reviewed a few times."""
    return CardState(
        identity=ItemIdentity("AKs", "Cutoff"),
        interval=8,
        ease=2.8000000000000003,
        repetitions=3,
        due=17,
        last_seen=9,
    )


@pytest.fixture
def config(tmp_path):
    """Test configuration pointing at a temporary database."""
    return Config(
        database_path=str(tmp_path / "data" / "drill.db"),
        deck_storage_key="cfg-deck",
        stats_storage_key="cfg-stats",
        random_seed=7,
    )
