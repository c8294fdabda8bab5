"""Game and run configuration for the lottery simulator."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class GameConfig:
    """A draw-without-replacement lottery format.

    Ball labels run from min_ball to min_ball + pool_size - 1. payoff_table[i]
    is the prize for a ticket matching exactly i balls.
    """

    pool_size: int = 49
    pick_count: int = 6
    payoff_table: Tuple[int, ...] = (0, 0, 3, 10, 80, 2_500, 9_000_000)
    cost_per_ticket: int = 3
    min_ball: int = 1

    @property
    def max_ball(self) -> int:
        return self.min_ball + self.pool_size - 1

    @property
    def result_scenarios(self) -> int:
        # can score from 0 to pick_count right
        return self.pick_count + 1

    def validate(self) -> "GameConfig":
        if self.pool_size <= 0:
            raise ConfigError("pool_size must be positive")
        if self.pick_count <= 0:
            raise ConfigError("pick_count must be positive")
        if self.pick_count > self.pool_size:
            raise ConfigError("pick_count cannot exceed pool_size")
        if len(self.payoff_table) != self.result_scenarios:
            raise ConfigError(f"payoff_table needs {self.result_scenarios} entries, got {len(self.payoff_table)}")
        if any(p < 0 for p in self.payoff_table):
            raise ConfigError("payoff_table entries must be non-negative")
        if self.cost_per_ticket < 0:
            raise ConfigError("cost_per_ticket must be non-negative")
        return self


LOTTO_649 = GameConfig()


@dataclass
class RunConfig:
    workers: int
    progress_to_terminal: bool = False
    progress_every: int = 1_000_000
    game: GameConfig = field(default_factory=GameConfig)


_CONFIG: Optional[RunConfig] = None


def detect_workers() -> int:
    return os.cpu_count() or 1


#user-supplied run settings are validated here and put in an instance of RunConfig
def configure_run(
    *,
    workers: Optional[int] = None,
    progress_to_terminal: bool = False,
    progress_every: int = 1_000_000,
    game: Optional[GameConfig] = None,
) -> RunConfig:
    """Configure defaults used by simulate() when arguments are omitted.

    A workers value of zero or less is clamped to a single worker.
    """
    if workers is None:
        workers = detect_workers()
    workers = max(1, int(workers))
    if progress_every is None or progress_every <= 0:
        raise ConfigError("progress_every must be positive")
    if game is None:
        game = LOTTO_649
    game.validate()

    cfg = RunConfig(
        workers=workers,
        progress_to_terminal=progress_to_terminal,
        progress_every=progress_every,
        game=game,
    )

    global _CONFIG
    _CONFIG = cfg
    return cfg


def get_config() -> Optional[RunConfig]:
    return _CONFIG


def clear_config() -> None:
    global _CONFIG
    _CONFIG = None
