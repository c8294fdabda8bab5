"""Parallel Monte Carlo simulation of lottery games against a fixed pick set."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence, Tuple

import numpy as np
from numpy.typing import ArrayLike

from .config import LOTTO_649, ConfigError, GameConfig, detect_workers, get_config
from .draw import draw_balls
from .runtime import run_workers
from .scoring import score_game


class AggregationError(RuntimeError):
    pass


@dataclass(frozen=True)
class SimulationResult:
    tally: Tuple[int, ...]
    trials: int
    requested_trials: int
    workers: int
    trials_per_worker: int
    elapsed_s: float
    picks: Tuple[int, ...]
    started_at: datetime
    finished_at: datetime

    @property
    def dropped_trials(self) -> int:
        return self.requested_trials - self.trials

    def frequencies(self) -> Tuple[float, ...]:
        if self.trials <= 0:
            return tuple(float("nan") for _ in self.tally)
        return tuple(count / self.trials for count in self.tally)


def partition_trials(trials: int, workers: int) -> int:
    """Trials each worker runs; the trials % workers remainder is dropped."""
    if trials < 0:
        raise ValueError("trials must be non-negative")
    workers = max(1, workers)
    return trials // workers


def _run_worker(
    rank: int,
    games: int,
    picks: Tuple[int, ...],
    game: GameConfig,
    slots: np.ndarray,
    progress_every: int,
    progress: bool,
) -> int:
    rng = random.Random()
    tally = [0] * game.result_scenarios
    for g in range(1, games + 1):
        balls = draw_balls(rng, game)
        tally[score_game(balls, picks)] += 1
        if progress and g % progress_every == 0:
            print(f"[lotto] Thread {rank} : Running Game {g:,}...")
    slots[rank, :] = tally
    return games


def combine_tallies(tallies: ArrayLike, expected_trials: int) -> Tuple[int, ...]:
    """Sum per-worker tally rows into one tally and check its total."""
    arr = np.asarray(tallies, dtype=np.int64)
    if arr.ndim != 2:
        raise ValueError("tallies must be a 2D array with one row per worker")
    combined = arr.sum(axis=0)
    total = int(combined.sum())
    if total != expected_trials:
        raise AggregationError(f"tally sums to {total} but {expected_trials} trials were run")
    return tuple(int(count) for count in combined)


def simulate(
    picks: Sequence[int],
    trials: int,
    *,
    workers: Optional[int] = None,
    game: Optional[GameConfig] = None,
    progress: Optional[bool] = None,
    progress_every: Optional[int] = None,
) -> SimulationResult:
    """Run `trials` lottery games split evenly across worker threads.

    picks are zero-based ball indices and must already be valid for the game.
    Settings not passed here fall back to configure_run() and then to the
    6/49 defaults. Trials that do not divide evenly across the workers are
    dropped; compare result.trials with result.requested_trials.

    A failure in any worker is raised as WorkerFailure after all workers
    have stopped.
    """
    cfg = get_config()
    if game is None:
        game = cfg.game if cfg is not None else LOTTO_649
    if workers is None:
        workers = cfg.workers if cfg is not None else detect_workers()
    if progress is None:
        progress = cfg.progress_to_terminal if cfg is not None else False
    if progress_every is None:
        progress_every = cfg.progress_every if cfg is not None else 1_000_000
    if progress_every <= 0:
        raise ConfigError("progress_every must be positive")

    workers = max(1, workers)
    picks = tuple(picks)
    per_worker = partition_trials(trials, workers)
    effective = per_worker * workers

    started_at = datetime.now()
    if progress:
        print(f"[lotto] Running simulation for {effective:,} games at {started_at:%Y-%m-%d %H:%M:%S}...")
        print(f"[lotto] Numbers chosen : {[idx + game.min_ball for idx in picks]}")
        if effective != trials:
            print(f"[lotto] Dropped {trials - effective:,} games to split evenly across {workers} threads")
        print(f"[lotto] Number of threads : {workers}  at  {per_worker:,} games per thread")

    start = time.perf_counter()
    slots = np.zeros((workers, game.result_scenarios), dtype=np.int64)
    run_workers(_run_worker, workers, per_worker, picks, game, slots, progress_every, progress)
    tally = combine_tallies(slots, effective)
    elapsed = time.perf_counter() - start
    finished_at = datetime.now()

    if progress:
        print(f"[lotto] Finished simulation for {effective:,} games at {finished_at:%Y-%m-%d %H:%M:%S}...")

    return SimulationResult(
        tally=tally,
        trials=effective,
        requested_trials=trials,
        workers=workers,
        trials_per_worker=per_worker,
        elapsed_s=elapsed,
        picks=picks,
        started_at=started_at,
        finished_at=finished_at,
    )
