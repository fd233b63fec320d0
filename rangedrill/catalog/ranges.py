"""Preflop opening ranges: the answer key the drill checks against.

Each hand maps every table position to the actions considered correct there.
Some spots accept more than one action (e.g. Raise or 3-Bet from the blinds).
The scheduler never sees this module; the drill uses it to grade answers.
"""

from dataclasses import dataclass
from enum import Enum

from rangedrill.db.models import ItemIdentity


class Position(Enum):
    UTG = "UTG"
    MIDDLE = "Middle"
    CUTOFF = "Cutoff"
    BLINDS = "Blinds"


class Action(Enum):
    FOLD = "Fold"
    CALL = "Call"
    RAISE = "Raise"
    THREE_BET = "3-Bet"


POSITION_LABELS = {
    Position.UTG: "UTG / Early",
    Position.MIDDLE: "Middle Position",
    Position.CUTOFF: "Cutoff / Button",
    Position.BLINDS: "Blinds (SB/BB)",
}

# Single-key shortcuts accepted by parse_action, in addition to full names
ACTION_SHORTCUTS = {
    "f": Action.FOLD,
    "c": Action.CALL,
    "r": Action.RAISE,
    "3": Action.THREE_BET,
    "3b": Action.THREE_BET,
    "3bet": Action.THREE_BET,
}


@dataclass(frozen=True)
class RangeEntry:
    """Correct actions for one hand at every position."""

    hand: str
    actions: dict[Position, tuple[Action, ...]]


def _entry(hand: str, utg, middle, cutoff, blinds) -> RangeEntry:
    return RangeEntry(
        hand=hand,
        actions={
            Position.UTG: tuple(utg),
            Position.MIDDLE: tuple(middle),
            Position.CUTOFF: tuple(cutoff),
            Position.BLINDS: tuple(blinds),
        },
    )


F, C, R, B3 = Action.FOLD, Action.CALL, Action.RAISE, Action.THREE_BET

RANGES: tuple[RangeEntry, ...] = (
    # Premium pairs
    *(_entry(hand, [R], [R], [R], [R, B3]) for hand in ("AA", "KK", "QQ", "JJ")),
    # Medium pairs
    *(_entry(hand, [R], [R], [R], [R]) for hand in ("TT", "99")),
    # Small-medium pairs
    *(_entry(hand, [F], [R], [R], [R]) for hand in ("88", "77")),
    # Small pairs
    *(_entry(hand, [F], [F], [R], [C]) for hand in ("66", "55", "44", "33", "22")),
    # AK, AQs
    *(_entry(hand, [R], [R], [R], [B3]) for hand in ("AKs", "AKo", "AQs")),
    # AQo, AJs, ATs, KQs, KJs
    *(_entry(hand, [F], [R], [R], [R]) for hand in ("AQo", "AJs", "ATs", "KQs", "KJs")),
    # Suited aces
    *(
        _entry(hand, [F], [F], [R], [C])
        for hand in ("A9s", "A8s", "A7s", "A6s", "A5s", "A4s", "A3s", "A2s")
    ),
    # Suited connectors
    *(_entry(hand, [F], [F], [R], [C]) for hand in ("JTs", "T9s", "98s")),
)

_RANGES_BY_HAND = {entry.hand: entry for entry in RANGES}


def all_identities() -> list[ItemIdentity]:
    """Every (hand, position) pair, hand-major in range order."""
    return [
        ItemIdentity(entry.hand, position.value)
        for entry in RANGES
        for position in Position
    ]


def expected_actions(identity: ItemIdentity) -> tuple[Action, ...]:
    """Return the actions accepted for this spot.

    Hands or positions outside the chart are always a fold, so cards kept
    from an older chart can still be answered.
    """
    entry = _RANGES_BY_HAND.get(identity.category)
    try:
        position = Position(identity.context)
    except ValueError:
        return (Action.FOLD,)
    if entry is None:
        return (Action.FOLD,)
    return entry.actions[position]


def position_label(context: str) -> str:
    """Display name for a position, or the raw context if it is not charted."""
    try:
        return POSITION_LABELS[Position(context)]
    except ValueError:
        return context


def is_correct(identity: ItemIdentity, action: Action) -> bool:
    return action in expected_actions(identity)


def parse_action(text: str) -> Action | None:
    """Parse user input into an Action, or None if it is not one."""
    cleaned = text.strip().lower()
    if cleaned in ACTION_SHORTCUTS:
        return ACTION_SHORTCUTS[cleaned]
    for action in Action:
        if action.value.lower() == cleaned:
            return action
    return None
