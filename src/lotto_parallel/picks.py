"""Validation, parsing and quick picks for the player's ball choices."""

from __future__ import annotations

import random
import re
from typing import Iterable, Optional, Sequence, Tuple

from .config import LOTTO_649, GameConfig
from .draw import draw_balls, drawn_indices


class InvalidPickSet(ValueError):
    pass


def validate_picks(labels: Iterable[int], game: GameConfig = LOTTO_649) -> Tuple[int, ...]:
    """Check ball labels against the game rules and return them sorted."""
    picks = list(labels)
    if len(picks) != game.pick_count:
        raise InvalidPickSet(f"Enter {game.pick_count} numbers from {game.min_ball} to {game.max_ball}")
    for n in picks:
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidPickSet(f"Picks must be whole numbers, got {n!r}")
    seen = set()
    for n in picks:
        if n < game.min_ball or n > game.max_ball:
            raise InvalidPickSet(f"You chose {n} but numbers must be from {game.min_ball} to {game.max_ball}")
        if n in seen:
            raise InvalidPickSet(f"Duplicate numbers: {n}")
        seen.add(n)
    return tuple(sorted(picks))


def parse_picks(text: str, game: GameConfig = LOTTO_649) -> Tuple[int, ...]:
    """Parse picks typed as '1 2 3 4 5 6' or '1,2,3,4,5,6'."""
    tokens = [tok for tok in re.split(r"[\s,]+", text.strip()) if tok]
    labels = []
    for tok in tokens:
        try:
            labels.append(int(tok))
        except ValueError:
            raise InvalidPickSet(f"Not a number: {tok!r}") from None
    return validate_picks(labels, game)


def to_indices(labels: Sequence[int], game: GameConfig = LOTTO_649) -> Tuple[int, ...]:
    return tuple(n - game.min_ball for n in labels)


def to_labels(indices: Sequence[int], game: GameConfig = LOTTO_649) -> Tuple[int, ...]:
    return tuple(idx + game.min_ball for idx in indices)


def quick_pick(rng: Optional[random.Random] = None, game: GameConfig = LOTTO_649) -> Tuple[int, ...]:
    """Random pick set as sorted zero-based indices, made with the game's own draw."""
    if rng is None:
        rng = random.Random()
    return tuple(drawn_indices(draw_balls(rng, game)))
