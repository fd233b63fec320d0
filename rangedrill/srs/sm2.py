"""SM-2 derived interval update for pass/fail answers.

Based on the SuperMemo SM-2 algorithm by Piotr Wozniak, reduced to a binary
grade: the ease factor moves by a fixed step up or down instead of being
derived from a 0-5 quality score.
https://www.supermemo.com/en/blog/application-of-a-computer-to-improve-the-results-obtained-in-working-with-the-supermemo-method
"""

from dataclasses import dataclass

from rangedrill.constants import (
    DEFAULT_EASE,
    EASE_BONUS,
    EASE_PENALTY,
    FIRST_INTERVAL,
    MIN_EASE,
    SECOND_INTERVAL,
)
from rangedrill.db.models import round_half_up


@dataclass
class SM2Result:
    """Result of an SM-2 calculation."""

    easiness_factor: float
    interval: int
    repetitions: int


def calculate_sm2(
    correct: bool,
    easiness_factor: float = DEFAULT_EASE,
    interval: int = 0,
    repetitions: int = 0,
) -> SM2Result:
    """
    Calculate the next interval using the pass/fail SM-2 variant.

    Args:
        correct: Whether the learner answered correctly
        easiness_factor: Current easiness factor (default 2.5)
        interval: Current interval in logical ticks
        repetitions: Number of consecutive correct responses

    Returns:
        SM2Result with updated values. Scheduling the due tick is left to the
        caller, which owns the clock.
    """
    if correct:
        new_repetitions = repetitions + 1
        if new_repetitions == 1:
            new_interval = FIRST_INTERVAL
        elif new_repetitions == 2:
            new_interval = SECOND_INTERVAL
        else:
            # Grows from the previous interval and the ease before this answer
            new_interval = round_half_up(interval * easiness_factor)
        new_ef = max(MIN_EASE, easiness_factor + EASE_BONUS)
    else:
        # Incorrect response - reset, due again on the very next tick
        new_repetitions = 0
        new_interval = 0
        new_ef = max(MIN_EASE, easiness_factor - EASE_PENALTY)

    return SM2Result(
        easiness_factor=new_ef,
        interval=new_interval,
        repetitions=new_repetitions,
    )
