import random

import pytest

from pushswap.cli import main

VALID = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def test_no_arguments_exits_quietly(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_empty_first_argument_exits_quietly(capsys):
    assert main(["", "3", "1"]) == 0
    assert capsys.readouterr().out == ""


def test_already_sorted_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_single_number_prints_nothing(capsys):
    assert main(["42"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args",
    [["a"], ["1", "1"], ["2147483648"], ["-2147483649", "0"], ["3", "1x", "2"]],
)
def test_bad_input_reports_error(capsys, args):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_two_numbers(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_three_numbers_reverse(capsys):
    assert main(["3", "2", "1"]) == 0
    assert capsys.readouterr().out == "ra\nsa\n"


def test_extreme_values_accepted(capsys):
    assert main(["2147483647", "-2147483648", "0"]) == 0
    assert capsys.readouterr().err == ""


@pytest.mark.parametrize("size, seed", [(5, 1), (6, 2), (20, 3), (100, 4)])
def test_random_input_emits_only_instructions(capsys, size, seed):
    rng = random.Random(seed)
    numbers = rng.sample(range(-1000, 1000), size)
    if numbers == sorted(numbers):
        numbers.reverse()
    assert main([str(n) for n in numbers]) == 0
    lines = capsys.readouterr().out.split()
    assert lines
    assert set(lines) <= VALID