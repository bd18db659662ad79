import pytest

from fhetoolkit.fibonacci import fibonacci_number, fibonacci_sequence, main


def test_initial_state():
    assert fibonacci_sequence(1) == [1, 1, 2, 3, 5]


def test_mid_state():
    assert fibonacci_sequence(3) == [2, 3, 5, 8, 13]


def test_end_state():
    assert fibonacci_sequence(10) == [55, 89, 144, 233, 377]


def test_out_of_bounds():
    assert fibonacci_sequence(11) == [0, 0, 0, 0, 0]


def test_sequence_from_five():
    assert fibonacci_sequence(5) == [5, 8, 13, 21, 34]


@pytest.mark.parametrize("n", [-1, 11, 30, 40])
def test_number_out_of_range(n):
    assert fibonacci_number(n) == -1


@pytest.mark.parametrize("n,expected", [(0, 0), (1, 1), (3, 2), (5, 5), (10, 55)])
def test_number_values(n, expected):
    assert fibonacci_number(n) == expected


@pytest.mark.parametrize("n", range(1, 11))
def test_sequence_starts_with_number(n):
    assert fibonacci_sequence(n)[0] == fibonacci_number(n)


def test_main_prints_numbers(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Fibonacci(10) : 55" in out
    assert "Fibonacci(40) : -1" in out