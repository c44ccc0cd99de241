"""The push_swap instruction set acting on a pair of stacks."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from pushswap.stack import Stack


def format_operations(operations: Iterable[str]) -> str:
    """Render operation names one per line, each ending with a newline."""
    return "".join(f"{operation}\n" for operation in operations)


class Machine:
    """Two stacks and the instructions that move numbers between them.

    Every instruction that takes effect writes its name to ``out``.
    """

    def __init__(
        self,
        stack_a: Stack | None = None,
        stack_b: Stack | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.stack_a = stack_a if stack_a is not None else Stack()
        self.stack_b = stack_b if stack_b is not None else Stack()
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def _emit(self, name: str, stream: TextIO | None = None) -> None:
        (stream or self.out).write(f"{name}\n")

    def sa(self) -> None:
        """Swap the numbers of the two top elements of stack a."""
        self.stack_a.swap_top()
        self._emit("sa")

    def sb(self) -> None:
        """Swap the numbers of the two top elements of stack b."""
        self.stack_b.swap_top()
        self._emit("sb")

    def ss(self) -> None:
        """Run sa and sb; the combined name goes to the error stream."""
        self.sa()
        self.sb()
        self._emit("ss", self.err)

    def pa(self) -> None:
        """Move the top of stack b onto stack a, keeping its LIS flag."""
        node = self.stack_b.pop_front()
        self.stack_a.push_front(node.number, node.lis)
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of stack a onto stack b, keeping its LIS flag."""
        node = self.stack_a.pop_front()
        self.stack_b.push_front(node.number, node.lis)
        self._emit("pb")

    def ra(self) -> None:
        """Rotate stack a upwards; silent when it has fewer than two elements."""
        if self.stack_a.rotate():
            self._emit("ra")

    def rb(self) -> None:
        """Rotate stack b upwards; silent when it has fewer than two elements."""
        if self.stack_b.rotate():
            self._emit("rb")

    def rr(self) -> None:
        """Run ra and rb, then record rr."""
        self.ra()
        self.rb()
        self._emit("rr")

    def rra(self) -> None:
        """Rotate stack a downwards; silent when it has fewer than two elements."""
        if self.stack_a.reverse_rotate():
            self._emit("rra")

    def rrb(self) -> None:
        """Rotate stack b downwards; silent when it has fewer than two elements."""
        if self.stack_b.reverse_rotate():
            self._emit("rrb")

    def rrr(self) -> None:
        """Run rra and rrb, then record rrr."""
        self.rra()
        self.rrb()
        self._emit("rrr")