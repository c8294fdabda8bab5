"""Command line entry point: collect picks, run the simulation, print the report."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence, Tuple

from .config import LOTTO_649, GameConfig, clear_config, configure_run, detect_workers
from .picks import InvalidPickSet, parse_picks, quick_pick, to_indices, validate_picks
from .report import format_report
from .simulation import simulate


InputFn = Callable[[str], str]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lotto-parallel",
        description="Simulate Lotto 6/49 games across all CPUs to see how lucky you are (not).",
    )
    choice = parser.add_mutually_exclusive_group()
    choice.add_argument("--picks", type=int, nargs="+", metavar="N", help="your ball numbers")
    choice.add_argument("--quick-pick", action="store_true", help="let the machine choose the numbers")
    parser.add_argument("--games", type=int, help="how many games to simulate")
    parser.add_argument("--workers", type=int, help="worker threads (default: number of CPUs)")
    parser.add_argument("--quiet", action="store_true", help="no progress output while running")
    return parser


def _ask_picks(input_fn: InputFn, game: GameConfig) -> Tuple[int, ...]:
    reply = ""
    while not reply.strip():
        reply = input_fn("Type 'y' + Enter for a random quick pick, else any other letter + Enter\n")
    if reply.strip().lower().startswith("y"):
        return quick_pick(game=game)
    while True:
        text = input_fn(f"Enter {game.pick_count} numbers from {game.min_ball} to {game.max_ball}\n")
        try:
            return to_indices(parse_picks(text, game), game)
        except InvalidPickSet as exc:
            print(exc)


def _ask_games(input_fn: InputFn, workers: int) -> int:
    print(f"  Note: Games will be divided evenly among {workers} CPU's.")
    while True:
        text = input_fn("How many games do you want to simulate?\n")
        try:
            games = int(text.strip().replace(",", "").replace("_", ""))
        except ValueError:
            games = -1
        if games >= 0:
            return games
        print("Type a positive integer number and press enter")


def main(argv: Optional[Sequence[str]] = None, input_fn: InputFn = input) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    game = LOTTO_649

    workers = args.workers if args.workers is not None else detect_workers()
    workers = max(1, workers)
    if args.games is not None and args.games < 0:
        parser.error("--games must be non-negative")

    if args.picks is not None:
        try:
            picks = to_indices(validate_picks(args.picks, game), game)
        except InvalidPickSet as exc:
            parser.error(str(exc))
    elif args.quick_pick:
        picks = quick_pick(game=game)
    else:
        print("\nWelcome to Lotto Parallel (Longshot) - a lesson in futility!")
        print("------------------------------------------------------------")
        picks = _ask_picks(input_fn, game)

    games = args.games if args.games is not None else _ask_games(input_fn, workers)

    configure_run(workers=workers, progress_to_terminal=not args.quiet, game=game)
    try:
        result = simulate(picks, games)
    finally:
        clear_config()

    print(format_report(result, game))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
