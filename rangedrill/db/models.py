"""Data models for Rangedrill."""

import math
from dataclasses import asdict, dataclass

from rangedrill.constants import DEFAULT_EASE, MASTERY_REPETITIONS, MIN_EASE, NEVER_SEEN


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up.

    The built-in round() uses banker's rounding (round(2.5) == 2), which would
    make interval growth depend on the parity of the interval.
    """
    return int(math.floor(value + 0.5))


@dataclass(frozen=True, order=True)
class ItemIdentity:
    """Opaque composite key for one reviewable unit.

    For the range trainer, category is the hand ("AKs") and context is the
    table position ("Cutoff"). The scheduler never interprets either field.
    """

    category: str
    context: str

    def __str__(self) -> str:
        return f"{self.category} @ {self.context}"


@dataclass
class CardState:
    """Spaced repetition state for one item.

    All times are ticks of the logical clock, never wall-clock times.
    """

    identity: ItemIdentity
    interval: int = 0  # Ticks from last review to next due point
    ease: float = DEFAULT_EASE
    repetitions: int = 0  # Consecutive correct answers since last miss
    due: int = 0  # Eligible for review once due <= clock
    last_seen: int = NEVER_SEEN

    @property
    def is_new(self) -> bool:
        return self.last_seen == NEVER_SEEN

    @property
    def is_mastered(self) -> bool:
        return self.repetitions >= MASTERY_REPETITIONS

    def to_dict(self) -> dict:
        """Return the card as a JSON-serializable record."""
        return {
            "category": self.identity.category,
            "context": self.identity.context,
            "interval": self.interval,
            "ease": self.ease,
            "repetitions": self.repetitions,
            "due": self.due,
            "last_seen": self.last_seen,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CardState":
        """Build a card from a stored record.

        Raises KeyError, TypeError or ValueError if the record is malformed.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Card record must be an object, got {type(data).__name__}")

        category = data["category"]
        context = data["context"]
        if not isinstance(category, str) or not isinstance(context, str):
            raise TypeError("Card identity fields must be strings")

        card = cls(
            identity=ItemIdentity(category, context),
            interval=_strict_int(data["interval"], "interval"),
            ease=_strict_float(data["ease"], "ease"),
            repetitions=_strict_int(data["repetitions"], "repetitions"),
            due=_strict_int(data["due"], "due"),
            last_seen=_strict_int(data["last_seen"], "last_seen"),
        )
        if card.interval < 0 or card.repetitions < 0:
            raise ValueError(f"Negative counters in card record for {card.identity}")
        if card.ease < MIN_EASE:
            raise ValueError(f"Ease {card.ease} below {MIN_EASE} for {card.identity}")
        if card.last_seen < NEVER_SEEN:
            raise ValueError(f"Invalid last_seen {card.last_seen} for {card.identity}")
        if not card.is_new and card.due < card.last_seen:
            raise ValueError(f"Card {card.identity} due at {card.due} before last review {card.last_seen}")
        return card


@dataclass
class Stats:
    """Aggregate review statistics across the whole deck."""

    total_reviews: int = 0
    correct_reviews: int = 0
    current_streak: int = 0
    best_streak: int = 0

    @property
    def accuracy_percent(self) -> int:
        """Share of correct answers, 0 before the first review."""
        if self.total_reviews == 0:
            return 0
        return round_half_up(100 * self.correct_reviews / self.total_reviews)

    def to_dict(self) -> dict[str, int]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Stats":
        """Build stats from a stored record.

        Raises KeyError, TypeError or ValueError if the record is malformed.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Stats record must be an object, got {type(data).__name__}")
        stats = cls(
            total_reviews=_strict_int(data["total_reviews"], "total_reviews"),
            correct_reviews=_strict_int(data["correct_reviews"], "correct_reviews"),
            current_streak=_strict_int(data["current_streak"], "current_streak"),
            best_streak=_strict_int(data["best_streak"], "best_streak"),
        )
        if min(stats.to_dict().values()) < 0:
            raise ValueError(f"Negative counters in stats record: {stats}")
        return stats


def _strict_int(value, name: str) -> int:
    # bool is a subclass of int; a stored true/false is not a counter
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    return value


def _strict_float(value, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return float(value)
