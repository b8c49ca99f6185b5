from philo.cli import main
from philo.parsing import MSG_NOT_DIGITS, MSG_NOT_ENOUGH, MSG_OUT_OF_RANGE, MSG_TOO_MANY
from philo.table import Action


def test_not_enough_arguments(capsys):
    assert main([]) == 1
    err = capsys.readouterr().err
    assert MSG_NOT_ENOUGH in err
    assert "Usage" in err


def test_too_many_arguments(capsys):
    assert main(["1", "2", "3", "4", "5", "6"]) == 1
    assert MSG_TOO_MANY in capsys.readouterr().err


def test_non_digit_argument(capsys):
    assert main(["a", "100", "10", "10"]) == 1
    assert MSG_NOT_DIGITS in capsys.readouterr().err


def test_zero_argument_out_of_range(capsys):
    assert main(["0", "100", "10", "10"]) == 1
    assert MSG_OUT_OF_RANGE in capsys.readouterr().err


def test_single_philosopher_run(capsys):
    assert main(["1", "60", "10", "10"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[-1].endswith(f"1 {Action.DIED.value}")


def test_run_with_meal_limit(capsys):
    assert main(["2", "400", "30", "30", "1"]) == 0
    out = capsys.readouterr().out
    assert Action.DIED.value not in out
    assert out.count(Action.EAT.value) >= 2