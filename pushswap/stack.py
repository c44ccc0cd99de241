"""Stacks of numbered nodes, each with a flag for the longest increasing run."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class Node:
    """One element of a stack: its number and whether it belongs to the LIS."""

    number: int
    lis: bool = False


class Stack:
    """A double-ended stack whose front is the top."""

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(number) for number in numbers)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.numbers()!r})"

    @property
    def lis_count(self) -> int:
        """Number of nodes flagged as part of the longest increasing subsequence."""
        return sum(1 for node in self._nodes if node.lis)

    def push_front(self, number: int, lis: bool = False) -> Node:
        """Put a new node on top and return it."""
        node = Node(number, lis)
        self._nodes.appendleft(node)
        return node

    def push_back(self, number: int, lis: bool = False) -> Node:
        """Put a new node at the bottom and return it."""
        node = Node(number, lis)
        self._nodes.append(node)
        return node

    def pop_front(self) -> Node:
        """Remove and return the top node."""
        if not self._nodes:
            raise IndexError("pop from an empty stack")
        return self._nodes.popleft()

    def rotate(self) -> bool:
        """Move the top node to the bottom; do nothing with fewer than two nodes."""
        if len(self._nodes) < 2:
            return False
        self._nodes.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom node to the top; do nothing with fewer than two nodes."""
        if len(self._nodes) < 2:
            return False
        self._nodes.rotate(1)
        return True

    def swap_top(self) -> None:
        """Exchange the numbers of the two top nodes; their flags stay in place."""
        if len(self._nodes) < 2:
            raise IndexError("swap needs at least two nodes")
        first, second = self._nodes[0], self._nodes[1]
        first.number, second.number = second.number, first.number

    def top(self) -> Node:
        """Return the top node."""
        if not self._nodes:
            raise IndexError("empty stack has no top")
        return self._nodes[0]

    def bottom(self) -> Node:
        """Return the bottom node."""
        if not self._nodes:
            raise IndexError("empty stack has no bottom")
        return self._nodes[-1]

    def numbers(self) -> list[int]:
        """Return the numbers from top to bottom."""
        return [node.number for node in self._nodes]

    def is_sorted(self) -> bool:
        """Tell whether the numbers never decrease from top to bottom."""
        values = self.numbers()
        return all(a <= b for a, b in zip(values, values[1:]))

    def clear(self) -> None:
        """Remove every node."""
        self._nodes.clear()