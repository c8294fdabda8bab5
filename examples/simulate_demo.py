"""Example of configuring a run and simulating Lotto 6/49 on every CPU."""

from lotto_parallel import configure_run, simulate
from lotto_parallel.picks import to_indices, validate_picks
from lotto_parallel.report import format_report


if __name__ == "__main__":
    configure_run(progress_to_terminal=True)

    picks = to_indices(validate_picks([4, 8, 15, 16, 23, 42]))
    result = simulate(picks, 8_000_000)
    print(format_report(result))
