"""Unit tests for payoff accounting and report formatting."""

from datetime import datetime

import pytest

from lotto_parallel.report import format_report, runs_per_second, summarize_payoff
from lotto_parallel.simulation import SimulationResult


def _result(tally, requested=None, elapsed=2.0, workers=4):
    trials = sum(tally)
    return SimulationResult(
        tally=tuple(tally),
        trials=trials,
        requested_trials=trials if requested is None else requested,
        workers=workers,
        trials_per_worker=trials // workers,
        elapsed_s=elapsed,
        picks=(0, 1, 2, 3, 4, 5),
        started_at=datetime(2023, 1, 1, 12, 0, 0),
        finished_at=datetime(2023, 1, 1, 12, 0, 2),
    )


def test_losing_summary():
    summary = summarize_payoff(_result([10, 5, 3, 2, 0, 0, 0]))
    assert summary.payoffs == (0, 0, 9, 20, 0, 0, 0)
    assert summary.total_cost == 60
    assert summary.total_won == 29
    assert summary.profit == -31
    assert summary.profit_pct == pytest.approx(-51.6666, rel=1e-3)
    assert not summary.is_winner


def test_winning_summary():
    summary = summarize_payoff(_result([3, 0, 0, 0, 0, 0, 1]))
    assert summary.total_won == 9_000_000
    assert summary.total_cost == 12
    assert summary.is_winner


def test_zero_games():
    result = _result([0] * 7, elapsed=0.0)
    summary = summarize_payoff(result)
    assert summary.profit_pct == 0.0
    assert runs_per_second(result) == 0.0


def test_tally_must_match_payoff_table():
    with pytest.raises(ValueError):
        summarize_payoff(_result([1, 2, 3]))


def test_format_report():
    text = format_report(_result([4_000, 2_000, 1_000, 1_000, 0, 0, 0]))
    assert "Finished simulation for 8,000 games at 2023-01-01 12:00:02..." in text
    assert "Runs per second = 4,000" in text
    assert "You picked 2 correct 1,000 times  --> Payoff = $3,000" in text
    assert "You picked 6 correct 0 times  --> Payoff = $0" in text
    assert "Total cost of tickets : $24,000" in text
    assert "Total money won : $13,000" in text
    assert "Total profit / loss : -$11,000" in text
    assert "Percent profit / loss : -45.83 %" in text
    assert "*** Loser!!!" in text
    assert "dropped" not in text
    assert text.endswith("*************** END SIMULATION ***************")


def test_format_report_mentions_dropped_games():
    text = format_report(_result([50, 30, 10, 8, 0, 0, 0], requested=100, workers=7))
    assert "Note: 2 of 100 games were dropped to split evenly across 7 threads" in text
