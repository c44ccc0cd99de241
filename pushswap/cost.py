"""Rotation costs for moving numbers between stacks, and LIS marking."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import astuple, dataclass

from pushswap.parsing import INT_MAX
from pushswap.queries import get_next_number, get_prev_number, get_target_index
from pushswap.stack import Stack


@dataclass(slots=True)
class Cost:
    """How many of each rotation to run before a push."""

    ra: int = 0
    rb: int = 0
    rr: int = 0
    rra: int = 0
    rrb: int = 0
    rrr: int = 0

    @classmethod
    def unbounded(cls) -> Cost:
        """Return a cost larger than any real one."""
        return cls(INT_MAX, INT_MAX, INT_MAX, INT_MAX, INT_MAX, INT_MAX)

    def total(self) -> int:
        """Return the number of instructions this cost stands for."""
        return sum(astuple(self))

    def minimize(self) -> None:
        """Merge paired single-stack rotations into combined ones."""
        shared = max(0, min(self.ra, self.rb))
        self.rr += shared
        self.ra -= shared
        self.rb -= shared
        shared = max(0, min(self.rra, self.rrb))
        self.rrr += shared
        self.rra -= shared
        self.rrb -= shared


def compare_cost(first: Cost, second: Cost) -> int:
    """Return 1 if ``first`` is dearer, -1 if cheaper, 0 if equal."""
    a, b = first.total(), second.total()
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


def _rotation(index: int, length: int) -> tuple[int, int]:
    """Split reaching ``index`` into (forward, backward) rotations, one of them zero."""
    if index <= length // 2:
        return index, 0
    return 0, length - index


def count_cost_pa(stack_a: Stack, stack_b: Stack) -> Cost:
    """Return the cheapest rotations that ready some element of b for pa.

    With stack b empty the result is :meth:`Cost.unbounded`.
    """
    best = Cost.unbounded()
    len_a, len_b = len(stack_a), len(stack_b)
    for position, node in enumerate(stack_b):
        target = get_next_number(node.number, stack_a)
        index = get_target_index(stack_a, target)
        ra, rra = _rotation(index, len_a)
        rb, rrb = _rotation(position, len_b)
        cost = Cost(ra=ra, rb=rb, rra=rra, rrb=rrb)
        cost.minimize()
        if compare_cost(cost, best) == -1:
            best = cost
    return best


def _first_non_lis_cost(stack_a: Stack) -> Cost:
    cost = Cost()
    length = len(stack_a)
    for index, node in enumerate(stack_a):
        if not node.lis:
            cost.ra, cost.rra = _rotation(index, length)
            break
    return cost


def count_cost_pb(stack_a: Stack, stack_b: Stack, lis_only: bool) -> Cost:
    """Return the cheapest rotations that ready some element of a for pb.

    With ``lis_only`` the elements flagged as LIS are never chosen.
    """
    if len(stack_b) == 0:
        return _first_non_lis_cost(stack_a) if lis_only else Cost()
    best = Cost.unbounded()
    len_a, len_b = len(stack_a), len(stack_b)
    for position, node in enumerate(stack_a):
        if lis_only and node.lis:
            continue
        target = get_prev_number(node.number, stack_b)
        index = get_target_index(stack_b, target)
        rb, rrb = _rotation(index, len_b)
        ra, rra = _rotation(position, len_a)
        cost = Cost(ra=ra, rb=rb, rra=rra, rrb=rrb)
        cost.minimize()
        if compare_cost(cost, best) == -1:
            best = cost
    return best


def longest_increasing_subsequence(values: Sequence[int]) -> list[int]:
    """Return a longest strictly increasing subsequence of ``values``.

    Ties go to the subsequence ending earliest, built from earliest predecessors.
    """
    count = len(values)
    lengths = [1] * count
    previous = [-1] * count
    for i, value in enumerate(values):
        for j in range(i):
            if value > values[j] and lengths[i] < lengths[j] + 1:
                lengths[i] = lengths[j] + 1
                previous[i] = j
    if not count:
        return []
    best_length = max(lengths)
    index = lengths.index(best_length)
    result: list[int] = []
    while index != -1:
        result.append(values[index])
        index = previous[index]
    result.reverse()
    return result


def find_lis(stack: Stack) -> list[int]:
    """Flag the nodes of a longest increasing subsequence and return its numbers."""
    sequence = longest_increasing_subsequence(stack.numbers())
    members = set(sequence)
    for node in stack:
        if node.number in members:
            node.lis = True
    return sequence