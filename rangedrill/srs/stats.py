"""Session-wide review statistics, persisted separately from the deck."""

import json
import logging
from dataclasses import replace

from rangedrill.constants import STATS_STORAGE_KEY
from rangedrill.db.database import Database
from rangedrill.db.models import Stats

logger = logging.getLogger(__name__)


class StatsTracker:
    """Loads, updates and persists the single Stats record."""

    def __init__(self, db: Database, storage_key: str = STATS_STORAGE_KEY):
        self.db = db
        self.storage_key = storage_key
        self._stats: Stats | None = None

    @property
    def stats(self) -> Stats:
        if self._stats is None:
            self._stats = self._load()
        return self._stats

    def recorded(self, correct: bool) -> Stats:
        """Return a copy of the stats with one more answer counted.

        Nothing is mutated or written; see persist() and adopt().
        """
        stats = replace(self.stats)
        stats.total_reviews += 1
        if correct:
            stats.correct_reviews += 1
            stats.current_streak += 1
            stats.best_streak = max(stats.best_streak, stats.current_streak)
        else:
            stats.current_streak = 0
        return stats

    def adopt(self, stats: Stats) -> None:
        """Make stats current without writing them."""
        self._stats = stats

    def snapshot(self) -> Stats:
        """Return a copy that later answers will not mutate."""
        return replace(self.stats)

    def persist(self, stats: Stats | None = None) -> None:
        if stats is None:
            stats = self.stats
        self.db.set_blob(self.storage_key, json.dumps(stats.to_dict()))

    def reset(self) -> None:
        """Clear the durable slot and start over from zero."""
        self.db.delete_blob(self.storage_key)
        self._stats = Stats()

    def _load(self) -> Stats:
        try:
            raw = self.db.get_blob(self.storage_key)
            if raw is None:
                return Stats()
            return Stats.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError, RecursionError) as e:
            logger.warning(f"Discarding malformed stats in slot {self.storage_key!r}: {e}")
            return Stats()
