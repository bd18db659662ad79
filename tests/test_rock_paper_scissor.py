import pytest

from fhetoolkit.rock_paper_scissor import is_valid_selection, main, rock_paper_scissor


def test_win_a():
    assert rock_paper_scissor("P", "R") == "A"


def test_tie():
    assert rock_paper_scissor("P", "P") == "="


def test_win_b():
    assert rock_paper_scissor("S", "R") == "B"


@pytest.mark.parametrize("a,b", [("R", "S"), ("P", "R"), ("S", "P")])
def test_outcome_is_symmetric(a, b):
    assert rock_paper_scissor(a, b) == "A"
    assert rock_paper_scissor(b, a) == "B"


@pytest.mark.parametrize("c", ["R", "P", "S"])
def test_valid_selections(c):
    assert is_valid_selection(c) is True


@pytest.mark.parametrize("c", ["r", "X", "", "RS"])
def test_invalid_selections(c):
    assert is_valid_selection(c) is False


def test_main_requires_two_arguments(capsys):
    assert main(["R"]) == 1
    assert "usage" in capsys.readouterr().err


def test_main_rejects_invalid_selection(capsys):
    assert main(["R", "Q"]) == 1
    assert "usage" in capsys.readouterr().err


def test_main_reports_winner(capsys):
    assert main(["Rock", "Scissors"]) == 0
    out = capsys.readouterr().out
    assert "Player A selected R and Player B selected S" in out
    assert "Result: A" in out