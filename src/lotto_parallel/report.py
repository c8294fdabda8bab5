"""Payoff accounting and the human-readable end-of-run report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .config import LOTTO_649, GameConfig
from .simulation import SimulationResult


@dataclass(frozen=True)
class PayoffSummary:
    payoffs: Tuple[int, ...]
    total_cost: int
    total_won: int

    @property
    def profit(self) -> int:
        return self.total_won - self.total_cost

    @property
    def profit_pct(self) -> float:
        if self.total_cost == 0:
            return 0.0
        return self.profit / self.total_cost * 100.0

    @property
    def is_winner(self) -> bool:
        return self.profit_pct >= 0.0


def summarize_payoff(result: SimulationResult, game: GameConfig = LOTTO_649) -> PayoffSummary:
    if len(result.tally) != len(game.payoff_table):
        raise ValueError("result tally does not match the game's payoff table")
    payoffs = tuple(count * rate for count, rate in zip(result.tally, game.payoff_table))
    return PayoffSummary(
        payoffs=payoffs,
        total_cost=result.trials * game.cost_per_ticket,
        total_won=sum(payoffs),
    )


def runs_per_second(result: SimulationResult) -> float:
    if result.elapsed_s <= 0:
        return 0.0
    return result.trials / result.elapsed_s


def _money(amount: int) -> str:
    if amount < 0:
        return f"-${-amount:,}"
    return f"${amount:,}"


def format_report(result: SimulationResult, game: GameConfig = LOTTO_649) -> str:
    summary = summarize_payoff(result, game)
    lines: List[str] = [
        f"Finished simulation for {result.trials:,} games at {result.finished_at:%Y-%m-%d %H:%M:%S}...",
        f"Run time = {result.elapsed_s:.6f} seconds",
        f"Runs per second = {int(runs_per_second(result)):,}",
        "",
    ]
    if result.dropped_trials:
        lines.insert(1, f"Note: {result.dropped_trials:,} of {result.requested_trials:,} games were dropped "
                        f"to split evenly across {result.workers} threads")
    for n, (count, payoff) in enumerate(zip(result.tally, summary.payoffs)):
        lines.append(f"You picked {n} correct {count:,} times  --> Payoff = {_money(payoff)}")
    lines.extend([
        "",
        f"Total cost of tickets : {_money(summary.total_cost)}",
        f"Total money won : {_money(summary.total_won)}",
        f"Total profit / loss : {_money(summary.profit)}",
        f"Percent profit / loss : {summary.profit_pct:.2f} %",
    ])
    if summary.is_winner:
        lines.append("*** Winner!!! Pure fluke though, don't make this a habit ***")
    else:
        lines.append("*** Loser!!! I hope you learned something from this! ***")
    lines.extend(["", "*************** END SIMULATION ***************"])
    return "\n".join(lines)
