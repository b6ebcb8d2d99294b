import io

import pytest

from algolab.tilings import count_combinations, main


def test_zero_gives_zero():
    assert count_combinations(0) == 0


@pytest.mark.parametrize("n", [1, 2])
def test_base_cases_are_two(n):
    assert count_combinations(n) == 2


def test_negative_raises():
    with pytest.raises(ValueError):
        count_combinations(-1)


@pytest.mark.parametrize("n", range(3, 40))
def test_recurrence_holds(n):
    assert count_combinations(n) == count_combinations(n - 1) + count_combinations(n - 2)


@pytest.mark.parametrize("n", range(1, 30))
def test_result_is_even(n):
    assert count_combinations(n) % 2 == 0


def test_large_n_is_exact_integer():
    big = count_combinations(200)
    assert big == count_combinations(199) + count_combinations(198)


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("10\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == f"{count_combinations(10)}\n"


def test_main_invalid_input_prints_nothing(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc"))
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_negative_reports_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("-5"))
    assert main([]) == 1
    assert capsys.readouterr().out == ""