"""Example of simulating a different draw-without-replacement format."""

from lotto_parallel import GameConfig, quick_pick, simulate
from lotto_parallel.picks import to_labels
from lotto_parallel.report import format_report


def main():
    # 5 from 39, $1 tickets
    game = GameConfig(pool_size=39, pick_count=5, payoff_table=(0, 0, 1, 10, 400, 100_000), cost_per_ticket=1)
    picks = quick_pick(game=game)
    print(f"Quick pick: {list(to_labels(picks, game))}")
    result = simulate(picks, 2_000_000, workers=4, game=game, progress=True)
    print(format_report(result, game))


if __name__ == "__main__":
    main()
