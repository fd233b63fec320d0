"""Tests for the pass/fail SM-2 update rule."""

import pytest

from rangedrill.constants import MIN_EASE
from rangedrill.srs.sm2 import SM2Result, calculate_sm2


class TestCorrectAnswers:
    """Tests for interval growth on correct answers."""

    def test_first_correct_response(self):
        """First correct response should set interval to 1."""
        result = calculate_sm2(correct=True)
        assert result.interval == 1
        assert result.repetitions == 1
        assert result.easiness_factor == pytest.approx(2.6)

    def test_second_correct_response(self):
        """Second correct response should set interval to 3."""
        result = calculate_sm2(correct=True, easiness_factor=2.6, interval=1, repetitions=1)
        assert result.interval == 3
        assert result.repetitions == 2

    def test_fixed_intervals_ignore_ease(self):
        """The first two intervals are constants whatever the ease."""
        assert calculate_sm2(True, easiness_factor=1.3).interval == 1
        assert calculate_sm2(True, easiness_factor=5.0, interval=1, repetitions=1).interval == 3

    def test_third_correct_response_multiplies(self):
        """From the third correct answer, interval is multiplied by the old ease."""
        result = calculate_sm2(correct=True, easiness_factor=2.7, interval=3, repetitions=2)
        assert result.interval == 8  # round(3 * 2.7) = round(8.1)
        assert result.repetitions == 3
        assert result.easiness_factor == pytest.approx(2.8)

    def test_multiplicative_growth_rounds_half_up(self):
        result = calculate_sm2(correct=True, easiness_factor=2.5, interval=5, repetitions=2)
        assert result.interval == 13  # 12.5 rounds up

    def test_three_consecutive_correct_from_fresh(self):
        """Intervals should be 1, 3, then round(3 * ease after the second)."""
        state = SM2Result(easiness_factor=2.5, interval=0, repetitions=0)
        intervals = []
        ease_after = []
        for _ in range(3):
            state = calculate_sm2(True, state.easiness_factor, state.interval, state.repetitions)
            intervals.append(state.interval)
            ease_after.append(state.easiness_factor)
        assert intervals == [1, 3, round(3 * ease_after[1])]
        assert intervals[2] == 8

    def test_ease_has_no_upper_cap(self):
        ease = 2.5
        for _ in range(30):
            ease = calculate_sm2(True, easiness_factor=ease, repetitions=5, interval=1).easiness_factor
        assert ease == pytest.approx(5.5)


class TestIncorrectAnswers:
    """Tests for the reset on a miss."""

    def test_incorrect_response_resets(self):
        """Incorrect response should zero both interval and repetitions."""
        result = calculate_sm2(correct=False, easiness_factor=2.5, interval=30, repetitions=5)
        assert result.interval == 0
        assert result.repetitions == 0
        assert result.easiness_factor == pytest.approx(2.2)

    def test_easiness_factor_minimum(self):
        """Repeated misses should never push ease below 1.3."""
        ease = 2.5
        for _ in range(20):
            ease = calculate_sm2(False, easiness_factor=ease).easiness_factor
            assert ease >= MIN_EASE
        assert ease == MIN_EASE

    def test_floor_applies_from_just_above(self):
        result = calculate_sm2(False, easiness_factor=1.4)
        assert result.easiness_factor == MIN_EASE
