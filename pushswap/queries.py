"""Read-only questions about the contents of a stack."""

from __future__ import annotations

from pushswap.stack import Stack


def get_max(stack: Stack) -> int:
    """Return the largest number in the stack."""
    numbers = stack.numbers()
    if not numbers:
        raise ValueError("empty stack has no maximum")
    return max(numbers)


def get_min(stack: Stack) -> int:
    """Return the smallest number in the stack."""
    numbers = stack.numbers()
    if not numbers:
        raise ValueError("empty stack has no minimum")
    return min(numbers)


def get_target_index(stack: Stack, target: int) -> int:
    """Return the position of ``target`` counted from the top, or -1."""
    return next(
        (index for index, node in enumerate(stack) if node.number == target), -1
    )


def get_next_number(now: int, stack: Stack) -> int:
    """Return the smallest number above ``now``, wrapping to the minimum.

    An empty stack gives -1.
    """
    numbers = sorted(stack.numbers())
    if not numbers:
        return -1
    return next((number for number in numbers if number > now), numbers[0])


def get_prev_number(now: int, stack: Stack) -> int:
    """Return the largest number below ``now``, wrapping to the maximum.

    An empty stack gives -1.
    """
    numbers = sorted(stack.numbers())
    if not numbers:
        return -1
    return next(
        (number for number in reversed(numbers) if number < now), numbers[-1]
    )


def top_is_min(stack: Stack) -> bool:
    """Tell whether no number below the top is smaller than it."""
    top = stack.top().number
    return all(node.number >= top for node in stack)


def top_is_max(stack: Stack) -> bool:
    """Tell whether no number below the top is larger than it."""
    top = stack.top().number
    return all(node.number <= top for node in stack)


def top_is_mid(stack: Stack) -> bool:
    """Tell whether the top is neither the minimum nor the maximum."""
    return not top_is_min(stack) and not top_is_max(stack)


def tail_is_max(stack: Stack) -> bool:
    """Tell whether no number above the bottom is larger than it."""
    tail = stack.bottom().number
    return all(node.number <= tail for node in stack)


def tail_is_min(stack: Stack) -> bool:
    """Tell whether no number above the bottom is smaller than it."""
    tail = stack.bottom().number
    return all(node.number >= tail for node in stack)


def tail_is_mid(stack: Stack) -> bool:
    """Tell whether the bottom is neither the minimum nor the maximum."""
    return not tail_is_min(stack) and not tail_is_max(stack)