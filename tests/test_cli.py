"""End-to-end tests for the command line front end."""

import pytest

from lotto_parallel.cli import main
from lotto_parallel.config import get_config


def _scripted(*replies):
    answers = iter(replies)
    return lambda prompt: next(answers)


def test_run_with_picks(capsys):
    code = main(["--picks", "1", "2", "3", "4", "5", "6", "--games", "100", "--workers", "4", "--quiet"])
    assert code == 0
    out = capsys.readouterr().out
    assert "Finished simulation for 100 games" in out
    assert "You picked 0 correct" in out
    assert "Total cost of tickets : $300" in out
    assert "[lotto]" not in out
    assert get_config() is None


def test_quick_pick_with_progress(capsys):
    main(["--quick-pick", "--games", "10", "--workers", "2"])
    out = capsys.readouterr().out
    assert "[lotto] Number of threads : 2  at  5 games per thread" in out
    assert "END SIMULATION" in out


def test_bad_picks_exit_with_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--picks", "1", "2", "3", "4", "5", "5", "--games", "10"])
    assert excinfo.value.code == 2
    assert "Duplicate numbers: 5" in capsys.readouterr().err


def test_negative_games_rejected():
    with pytest.raises(SystemExit):
        main(["--quick-pick", "--games", "-5"])


def test_interactive_session_reprompts(capsys):
    ask = _scripted("n", "1 2 3", "1 2 3 4 5 60", "7 14 21 28 35 42", "lots", "75")
    main(["--workers", "7", "--quiet"], input_fn=ask)
    out = capsys.readouterr().out
    assert "Welcome to Lotto Parallel" in out
    assert "Enter 6 numbers from 1 to 49" in out
    assert "You chose 60 but numbers must be from 1 to 49" in out
    assert "Type a positive integer number and press enter" in out
    assert "Note: 5 of 75 games were dropped to split evenly across 7 threads" in out
    assert "Finished simulation for 70 games" in out


def test_blank_quick_pick_answer_is_asked_again(capsys):
    prompts = []
    answers = iter(["", "   ", "y"])

    def ask(prompt):
        prompts.append(prompt)
        return next(answers)

    main(["--games", "6", "--workers", "2", "--quiet"], input_fn=ask)
    assert len(prompts) == 3
    assert all("quick pick" in prompt for prompt in prompts)
    assert "Finished simulation for 6 games" in capsys.readouterr().out


def test_interactive_quick_pick(capsys):
    main(["--games", "12", "--workers", "3", "--quiet"], input_fn=_scripted("y"))
    assert "Finished simulation for 12 games" in capsys.readouterr().out
