"""Scoring of a single draw against the pick set."""

from __future__ import annotations

from typing import Sequence


def score_game(balls: Sequence[bool], picks: Sequence[int]) -> int:
    """Return how many of the zero-based pick indices were drawn."""
    num_right = 0
    for idx in picks:
        if balls[idx]:
            num_right += 1
    return num_right
