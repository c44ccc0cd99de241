"""Sorting strategies that drive a :class:`~pushswap.operations.Machine`."""

from __future__ import annotations

from pushswap.cost import Cost, count_cost_pa, count_cost_pb, find_lis
from pushswap.operations import Machine
from pushswap.queries import get_max, get_min, get_next_number, get_target_index


def put_min_top(machine: Machine) -> None:
    """Bring the smallest number of a four-element stack a to the top."""
    stack_a = machine.stack_a
    index = get_target_index(stack_a, get_min(stack_a))
    if index == 1:
        machine.sa()
        machine.err.write("sa\n")
    elif index == 2:
        machine.ra()
        machine.ra()
        machine.err.write("ra\nra\n")
    elif index == 3:
        machine.rra()
        machine.out.write("rra\n")


def carry_out_cost(cost: Cost, machine: Machine) -> None:
    """Run every rotation that ``cost`` counts, grouped by kind."""
    steps = (
        (cost.ra, machine.ra),
        (cost.rb, machine.rb),
        (cost.rr, machine.rr),
        (cost.rra, machine.rra),
        (cost.rrb, machine.rrb),
        (cost.rrr, machine.rrr),
    )
    for times, instruction in steps:
        for _ in range(times):
            instruction()


def sort_two(machine: Machine) -> None:
    """Sort two unsorted numbers on stack a."""
    machine.sa()


def sort_three(machine: Machine) -> None:
    """Sort exactly three numbers on stack a."""
    stack_a = machine.stack_a
    largest = get_max(stack_a)
    numbers = stack_a.numbers()
    if largest == numbers[0]:
        machine.ra()
    elif largest == numbers[1]:
        machine.rra()
    numbers = stack_a.numbers()
    if numbers[0] > numbers[1]:
        machine.sa()


def sort_four(machine: Machine) -> None:
    """Sort four numbers on stack a using stack b for the minimum."""
    put_min_top(machine)
    if machine.stack_a.is_sorted():
        return
    machine.pb()
    sort_three(machine)
    machine.pa()


def _rotate_to(machine: Machine, target: int) -> None:
    """Rotate stack a, the short way for a three-or-four stack, until ``target`` is on top."""
    stack_a = machine.stack_a
    step = machine.ra if get_target_index(stack_a, target) < 2 else machine.rra
    while stack_a.top().number != target:
        step()


def sort_five(machine: Machine) -> None:
    """Sort five numbers: park two on b, sort three, insert them back in place."""
    machine.pb()
    machine.pb()
    sort_three(machine)
    for _ in range(2):
        target = get_next_number(machine.stack_b.top().number, machine.stack_a)
        _rotate_to(machine, target)
        machine.pa()
    _rotate_to(machine, get_min(machine.stack_a))


def sort_under_five(count: int, machine: Machine) -> None:
    """Pick the small-input strategy for ``count`` numbers."""
    if count == 2:
        sort_two(machine)
    elif count == 3:
        sort_three(machine)
    elif count == 4:
        sort_four(machine)
    else:
        sort_five(machine)


def sort_over_six(machine: Machine) -> None:
    """Sort ranks 0..n-1 by keeping a longest increasing run on a.

    Every other number is pushed to b, then each is pushed back at its
    cheapest place, and finally rank 0 is rotated to the top.
    """
    stack_a, stack_b = machine.stack_a, machine.stack_b
    find_lis(stack_a)
    for _ in range(len(stack_a) - stack_a.lis_count):
        if stack_a.is_sorted():
            break
        carry_out_cost(count_cost_pb(stack_a, stack_b, True), machine)
        machine.pb()
    for _ in range(len(stack_b)):
        carry_out_cost(count_cost_pa(stack_a, stack_b), machine)
        machine.pa()
    step = (
        machine.ra
        if get_target_index(stack_a, 0) <= len(stack_a) // 2
        else machine.rra
    )
    while stack_a.top().number != 0:
        step()