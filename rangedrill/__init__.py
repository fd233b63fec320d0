"""Spaced-repetition trainer for preflop opening ranges."""
