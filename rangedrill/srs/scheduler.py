"""Review session: the single entry point the drill UI talks to.

Ties together the deck store, the statistics tracker and the selection RNG.
One instance is built per process and passed to whoever needs it; the deck is
loaded lazily on first use and reused afterwards.
"""

import logging
import random
from collections.abc import Iterable
from dataclasses import replace

from rangedrill.config import Config
from rangedrill.constants import DECK_STORAGE_KEY, STATS_STORAGE_KEY
from rangedrill.db.database import Database
from rangedrill.db.models import CardState, ItemIdentity, Stats, round_half_up
from rangedrill.srs.deck import DeckStore
from rangedrill.srs.selector import select_next
from rangedrill.srs.sm2 import calculate_sm2
from rangedrill.srs.stats import StatsTracker

logger = logging.getLogger(__name__)


class ReviewScheduler:
    """Decides what to review next and applies the outcome of each answer."""

    def __init__(
        self,
        db: Database,
        catalog: Iterable[ItemIdentity],
        deck_key: str = DECK_STORAGE_KEY,
        stats_key: str = STATS_STORAGE_KEY,
        rng: random.Random | None = None,
    ):
        self.db = db
        self.catalog = tuple(catalog)
        self.deck = DeckStore(db, deck_key)
        self.stats = StatsTracker(db, stats_key)
        self.rng = rng or random.Random()

    @classmethod
    def from_config(cls, config: Config, catalog: Iterable[ItemIdentity]) -> "ReviewScheduler":
        """Build a scheduler backed by the configured database."""
        config.ensure_database_dir()
        db = Database(config.database_path)
        db.init_schema()
        return cls(
            db,
            catalog,
            deck_key=config.deck_storage_key,
            stats_key=config.stats_storage_key,
            rng=random.Random(config.random_seed),
        )

    @property
    def clock(self) -> int:
        self._ensure_deck()
        return self.deck.clock

    def _ensure_deck(self) -> DeckStore:
        self.deck.ensure_loaded(self.catalog)
        return self.deck

    def next_item(self) -> CardState:
        """Return a copy of the card to show next. Safe to call repeatedly."""
        deck = self._ensure_deck()
        return replace(select_next(deck.cards(), deck.clock, self.rng))

    def record_answer(self, identity: ItemIdentity, correct: bool) -> CardState | None:
        """Apply one answer to the matching card.

        Unknown identities are ignored: nothing changes and None is returned.
        Otherwise the clock advances by one and stats and the card are updated.
        Both are written in one transaction before anything changes in memory,
        so a failed write leaves the session exactly as it was.
        """
        deck = self._ensure_deck()
        card = deck.get(identity)
        if card is None:
            logger.debug(f"Ignoring answer for unknown item {identity}")
            return None

        result = calculate_sm2(
            correct,
            easiness_factor=card.ease,
            interval=card.interval,
            repetitions=card.repetitions,
        )

        clock = deck.clock + 1
        updated = replace(
            card,
            repetitions=result.repetitions,
            interval=result.interval,
            ease=result.easiness_factor,
            due=clock + result.interval,
            last_seen=clock,
        )
        stats = self.stats.recorded(correct)

        with self.db.connection():
            self.stats.persist(stats)
            deck.persist(replacing=updated)

        deck.tick()
        self.stats.adopt(stats)
        deck.put(updated, persist=False)

        logger.debug(
            f"{identity} answered {'correctly' if correct else 'incorrectly'} at clock {clock}: "
            f"interval={updated.interval} ease={updated.ease:.2f} reps={updated.repetitions} due={updated.due}"
        )
        return replace(updated)

    def mastery_percent(self) -> int:
        """Percentage (0-100) of cards with at least three straight correct answers."""
        cards = self._ensure_deck().cards()
        if not cards:
            raise ValueError("Mastery is undefined for an empty deck")
        mastered = sum(1 for card in cards if card.is_mastered)
        return round_half_up(100 * mastered / len(cards))

    def current_stats(self) -> Stats:
        return self.stats.snapshot()

    def reset_progress(self) -> None:
        """Clear stored progress for both the deck and the stats.

        The in-memory deck is left as is until reload_deck() is called.
        """
        self.deck.clear()
        self.stats.reset()
        logger.info("Progress reset")

    def reload_deck(self) -> None:
        """Forget the in-memory deck so the next call rebuilds it from storage."""
        self.deck.unload()
