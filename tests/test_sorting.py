import io
import itertools
import random

import pytest

from pushswap.cost import Cost
from pushswap.operations import Machine
from pushswap.sorting import (
    carry_out_cost,
    put_min_top,
    sort_five,
    sort_four,
    sort_over_six,
    sort_three,
    sort_two,
    sort_under_five,
)
from pushswap.stack import Stack

VALID = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def make_machine(numbers, b=()):
    return Machine(Stack(numbers), Stack(b), io.StringIO(), io.StringIO())


def unsorted_permutations(n):
    return [
        list(p)
        for p in itertools.permutations(range(n))
        if list(p) != sorted(p)
    ]


@pytest.mark.parametrize(
    "numbers",
    [p for n in range(2, 6) for p in unsorted_permutations(n)],
)
def test_sort_under_five_sorts_every_permutation(numbers):
    machine = make_machine(numbers)
    sort_under_five(len(numbers), machine)
    assert machine.stack_a.numbers() == sorted(numbers)
    assert len(machine.stack_b) == 0


def test_sort_two_swaps():
    machine = make_machine([1, 0])
    sort_two(machine)
    assert machine.stack_a.numbers() == [0, 1]
    assert machine.out.getvalue() == "sa\n"


def test_sort_three_max_on_top_rotates_once():
    machine = make_machine([2, 0, 1])
    sort_three(machine)
    assert machine.stack_a.numbers() == [0, 1, 2]
    assert machine.out.getvalue() == "ra\n"


def test_sort_three_max_in_middle():
    machine = make_machine([0, 2, 1])
    sort_three(machine)
    assert machine.stack_a.numbers() == [0, 1, 2]
    assert machine.out.getvalue() == "rra\nsa\n"


@pytest.mark.parametrize("numbers", unsorted_permutations(4))
def test_sort_four_direct(numbers):
    machine = make_machine(numbers)
    sort_four(machine)
    assert machine.stack_a.numbers() == [0, 1, 2, 3]


def test_sort_four_stops_when_min_rotation_sorts():
    machine = make_machine([1, 2, 3, 0])
    sort_four(machine)
    assert machine.stack_a.numbers() == [0, 1, 2, 3]
    assert "pb" not in machine.out.getvalue().split()


@pytest.mark.parametrize("numbers", unsorted_permutations(5))
def test_sort_five_direct(numbers):
    machine = make_machine(numbers)
    sort_five(machine)
    assert machine.stack_a.numbers() == [0, 1, 2, 3, 4]
    assert len(machine.stack_b) == 0


def test_put_min_top_second_position_uses_sa():
    machine = make_machine([1, 0, 2, 3])
    put_min_top(machine)
    assert machine.stack_a.top().number == 0
    assert machine.err.getvalue() == "sa\n"


def test_put_min_top_third_position_rotates_twice():
    machine = make_machine([2, 3, 0, 1])
    put_min_top(machine)
    assert machine.stack_a.top().number == 0
    assert machine.out.getvalue() == "ra\nra\n"
    assert machine.err.getvalue() == "ra\nra\n"


def test_put_min_top_bottom_reverse_rotates():
    machine = make_machine([1, 2, 3, 0])
    put_min_top(machine)
    assert machine.stack_a.numbers() == [0, 1, 2, 3]
    assert machine.out.getvalue() == "rra\nrra\n"


def test_put_min_top_already_on_top_does_nothing():
    machine = make_machine([0, 3, 1, 2])
    put_min_top(machine)
    assert machine.stack_a.numbers() == [0, 3, 1, 2]
    assert machine.out.getvalue() == ""


def test_carry_out_cost_runs_each_rotation():
    machine = make_machine([0, 1, 2], [5, 6])
    carry_out_cost(Cost(ra=1, rb=1), machine)
    assert machine.stack_a.numbers() == [1, 2, 0]
    assert machine.stack_b.numbers() == [6, 5]
    assert machine.out.getvalue() == "ra\nrb\n"


def test_carry_out_cost_reverse_rotations_undo_forward():
    machine = make_machine([0, 1, 2, 3], [4, 5, 6])
    carry_out_cost(Cost(rr=2), machine)
    carry_out_cost(Cost(rrr=2), machine)
    assert machine.stack_a.numbers() == [0, 1, 2, 3]
    assert machine.stack_b.numbers() == [4, 5, 6]


def test_carry_out_cost_zero_does_nothing():
    machine = make_machine([2, 0, 1])
    carry_out_cost(Cost(), machine)
    assert machine.stack_a.numbers() == [2, 0, 1]
    assert machine.out.getvalue() == ""


@pytest.mark.parametrize(
    "size, seed",
    [(6, 1), (7, 2), (10, 3), (25, 4), (50, 5), (100, 6)],
)
def test_sort_over_six_sorts(size, seed):
    numbers = list(range(size))
    random.Random(seed).shuffle(numbers)
    machine = make_machine(numbers)
    sort_over_six(machine)
    assert machine.stack_a.numbers() == list(range(size))
    assert len(machine.stack_b) == 0
    assert set(machine.out.getvalue().split()) <= VALID


def test_sort_over_six_reversed_input():
    numbers = list(range(12))[::-1]
    machine = make_machine(numbers)
    sort_over_six(machine)
    assert machine.stack_a.numbers() == list(range(12))