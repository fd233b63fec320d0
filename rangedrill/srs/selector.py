"""Next-card selection.

Cards are picked by approximate due order: the earliest due value defines a
small window, and any card inside that window is equally likely to come next.
Strict earliest-first ordering would make review order fully predictable.
"""

import logging
import random
from collections.abc import Iterable

from rangedrill.constants import SELECTION_SLACK
from rangedrill.db.models import CardState

logger = logging.getLogger(__name__)


def candidate_pool(cards: Iterable[CardState], clock: int) -> list[CardState]:
    """Return the cards eligible to be shown next, sorted by due.

    If any card is due (due <= clock), the pool is drawn from due cards only.
    Otherwise it is drawn from the whole deck. Either way it holds every card
    whose due is within SELECTION_SLACK ticks of the earliest one.
    """
    cards = list(cards)
    if not cards:
        raise ValueError("Cannot select a card from an empty deck")

    due_cards = [card for card in cards if card.due <= clock]
    source = due_cards or cards

    # sorted() is stable, so cards sharing a due value keep deck order
    source = sorted(source, key=lambda card: card.due)
    min_due = source[0].due
    return [card for card in source if card.due <= min_due + SELECTION_SLACK]


def select_next(
    cards: Iterable[CardState],
    clock: int,
    rng: random.Random | None = None,
) -> CardState:
    """Pick the next card to review uniformly from the candidate pool.

    Has no side effects on the cards or the clock.
    """
    pool = candidate_pool(cards, clock)
    chooser = rng or random
    card = chooser.choice(pool)
    logger.debug(f"Selected {card.identity} (due {card.due}) from pool of {len(pool)} at clock {clock}")
    return card
