"""Deck store: the authoritative identity -> CardState mapping.

The whole deck is persisted as a single JSON array in one durable slot and
rewritten in full after every change. The logical clock lives here too and
is re-derived from the stored cards whenever the deck is loaded.
"""

import json
import logging
from collections.abc import Iterable

from rangedrill.constants import DECK_STORAGE_KEY
from rangedrill.db.database import Database
from rangedrill.db.models import CardState, ItemIdentity

logger = logging.getLogger(__name__)


class DeckStore:
    """Owns every CardState and the logical clock."""

    def __init__(self, db: Database, storage_key: str = DECK_STORAGE_KEY):
        self.db = db
        self.storage_key = storage_key
        self._cards: dict[ItemIdentity, CardState] | None = None
        self._clock = 0

    @property
    def is_loaded(self) -> bool:
        return self._cards is not None

    @property
    def clock(self) -> int:
        return self._clock

    def tick(self) -> int:
        """Advance the logical clock by one and return the new value."""
        self._clock += 1
        return self._clock

    def ensure_loaded(self, catalog: Iterable[ItemIdentity]) -> None:
        """Materialize the deck once: restore stored cards, then add missing ones.

        Stored cards whose identity is no longer in the catalog are kept, so
        progress survives a catalog that later shrinks and grows back.
        """
        if self._cards is not None:
            return

        cards = self._load()
        restored = len(cards)
        for identity in catalog:
            if identity not in cards:
                cards[identity] = CardState(identity=identity)

        self._cards = cards
        self._clock = self.clock_bootstrap()
        logger.info(
            f"Deck loaded: {restored} restored, {len(cards) - restored} new, clock at {self._clock}"
        )

    def clock_bootstrap(self) -> int:
        """Return the clock value a freshly loaded deck should resume from.

        The clock starts past every stored due point and every review tick,
        so a resumed session never reuses a stale ordering.
        """
        clock = 0
        for card in self._require_cards().values():
            clock = max(clock, card.due, card.last_seen + 1)
        return clock

    def unload(self) -> None:
        """Drop the in-memory deck and reset the clock.

        The next ensure_loaded() rebuilds everything from durable storage.
        """
        self._cards = None
        self._clock = 0

    def get(self, identity: ItemIdentity) -> CardState | None:
        return self._require_cards().get(identity)

    def put(self, card: CardState, persist: bool = True) -> None:
        """Store card under its identity, persisting the whole deck first.

        If the write fails the in-memory deck is left unchanged.
        """
        cards = self._require_cards()
        if persist:
            self.persist(replacing=card)
        cards[card.identity] = card

    def cards(self) -> list[CardState]:
        return list(self._require_cards().values())

    def persist(self, replacing: CardState | None = None) -> None:
        """Write the full deck to its durable slot.

        With replacing, that card is written in place of (or in addition to)
        the stored one with the same identity, without touching memory.
        """
        cards = dict(self._require_cards())
        if replacing is not None:
            cards[replacing.identity] = replacing
        records = [card.to_dict() for card in cards.values()]
        self.db.set_blob(self.storage_key, json.dumps(records))

    def clear(self) -> None:
        """Delete the durable slot. The in-memory deck is left untouched."""
        self.db.delete_blob(self.storage_key)

    def __len__(self) -> int:
        return len(self._require_cards())

    def __contains__(self, identity: ItemIdentity) -> bool:
        return identity in self._require_cards()

    def _require_cards(self) -> dict[ItemIdentity, CardState]:
        if self._cards is None:
            raise RuntimeError("Deck is not loaded; call ensure_loaded() first")
        return self._cards

    def _load(self) -> dict[ItemIdentity, CardState]:
        """Read the stored deck, treating missing or malformed data as empty."""
        try:
            raw = self.db.get_blob(self.storage_key)
            if raw is None:
                return {}
            records = json.loads(raw)
            if not isinstance(records, list):
                raise TypeError(f"Deck blob must be a list, got {type(records).__name__}")
            cards = [CardState.from_dict(record) for record in records]
        except (ValueError, KeyError, TypeError, RecursionError) as e:
            logger.warning(f"Discarding malformed deck in slot {self.storage_key!r}: {e}")
            return {}

        return {card.identity: card for card in cards}
