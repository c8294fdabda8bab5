"""Unbiased lottery draws by rejection sampling."""

from __future__ import annotations

import random
from typing import List

from .config import GameConfig


def draw_balls(rng: random.Random, game: GameConfig) -> List[bool]:
    """Simulate one draw of game.pick_count balls from the pool.

    Returns a membership list of length game.pool_size where True marks a
    ball that was pulled. Every combination is equally likely.
    """
    balls = [False] * game.pool_size
    picked = 0
    while picked < game.pick_count:
        ball = rng.randrange(game.pool_size)
        if not balls[ball]:
            balls[ball] = True
            picked += 1
    return balls


def drawn_indices(balls: List[bool]) -> List[int]:
    return [i for i, pulled in enumerate(balls) if pulled]
