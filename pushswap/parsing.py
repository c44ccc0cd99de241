"""Reading and validating the numbers given on the command line."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

from pushswap.stack import Stack

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = "0123456789"
_SPACES = " \t\n\v\f\r"


class InputError(ValueError):
    """The arguments are not a list of distinct 32-bit integers."""


class AlreadySorted(Exception):
    """The arguments are already in strictly increasing order."""


def is_space(char: str) -> bool:
    """Tell whether ``char`` is a space, tab, newline, vertical tab, form feed or CR."""
    return len(char) == 1 and char in _SPACES


def is_sign(char: str) -> bool:
    """Tell whether ``char`` is a plus or minus sign."""
    return char in ("+", "-") and len(char) == 1


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def _split_number(text: str) -> tuple[int, str, str]:
    """Return the sign, the leading digits and the rest after optional spaces."""
    position = 0
    while position < len(text) and is_space(text[position]):
        position += 1
    sign = 1
    if position < len(text) and is_sign(text[position]):
        if text[position] == "-":
            sign = -1
        position += 1
    start = position
    while position < len(text) and text[position] in _DIGITS:
        position += 1
    return sign, text[start:position], text[position:]


def atoi(text: str) -> int:
    """Read a leading integer leniently, ignoring trailing text.

    Values outside the 32-bit range wrap around as a C ``int`` would.
    """
    sign, digits, _ = _split_number(text)
    value = int(digits) if digits else 0
    return _wrap_int32(sign * value)


def parse_int(text: str) -> int:
    """Read a whole argument as a 32-bit integer.

    Leading whitespace and one sign are allowed; anything after the digits,
    or a value outside the 32-bit range, raises :class:`InputError`.
    An argument with no digits at all reads as zero.
    """
    sign, digits, rest = _split_number(text)
    value = 0
    for digit in digits:
        value = value * 10 + int(digit)
        if sign == 1 and value > INT_MAX:
            raise InputError(f"{text!r} is larger than {INT_MAX}")
        if sign == -1 and -value < INT_MIN:
            raise InputError(f"{text!r} is smaller than {INT_MIN}")
    if rest:
        raise InputError(f"{text!r} is not an integer")
    return sign * value


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Read every argument leniently with :func:`atoi`."""
    return [atoi(arg) for arg in args]


def check_sorted(numbers: Sequence[int]) -> bool:
    """Tell whether the numbers are in strictly increasing order."""
    return all(a < b for a, b in zip(numbers, numbers[1:]))


def check_duplication(numbers: Iterable[int]) -> bool:
    """Tell whether any number appears more than once."""
    ordered = sorted(numbers)
    return any(a == b for a, b in zip(ordered, ordered[1:]))


def check_error(args: Iterable[str]) -> list[int]:
    """Validate the arguments and return their numbers in ascending order.

    Raises :class:`InputError` for a malformed or repeated number and
    :class:`AlreadySorted` when the input needs no sorting.
    """
    numbers = [parse_int(arg) for arg in args]
    if check_sorted(numbers):
        raise AlreadySorted()
    if check_duplication(numbers):
        raise InputError("duplicate numbers")
    return sorted(numbers)


def binary_search(numbers: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in the ascending ``numbers``, or -1."""
    index = bisect_left(numbers, target)
    if index < len(numbers) and numbers[index] == target:
        return index
    return -1


def coordinate_compression(
    numbers: Iterable[int], sorted_numbers: Sequence[int]
) -> Stack:
    """Build stack a, replacing each number by its rank in ``sorted_numbers``."""
    return Stack(binary_search(sorted_numbers, number) for number in numbers)


def produce_pair(first: str | None, second: str | None) -> list[str] | None:
    """Collect the strings that are present, or return None if neither is."""
    present = [text for text in (first, second) if text is not None]
    return present or None