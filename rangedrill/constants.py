"""Shared constants for the Rangedrill application."""

# Ease factor bounds and steps
DEFAULT_EASE = 2.5
MIN_EASE = 1.3  # Never drops below this, in either direction
EASE_BONUS = 0.1  # Added on every correct answer, no upper cap
EASE_PENALTY = 0.3  # Subtracted on every miss

# Fixed intervals for the first two consecutive correct answers
FIRST_INTERVAL = 1
SECOND_INTERVAL = 3

# Due values within this many ticks of the earliest one share the selection pool
SELECTION_SLACK = 2

# Consecutive correct answers needed for a card to count as mastered
MASTERY_REPETITIONS = 3

# last_seen value for a card that has never been reviewed
NEVER_SEEN = -1

# Durable storage slot keys
DECK_STORAGE_KEY = "poker-srs-state"
STATS_STORAGE_KEY = "poker-srs-stats"
