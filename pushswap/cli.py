"""Command-line entry point: print instructions that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.operations import Machine
from pushswap.parsing import (
    AlreadySorted,
    InputError,
    check_error,
    coordinate_compression,
    parse_numbers,
)
from pushswap.sorting import sort_over_six, sort_under_five
from pushswap.stack import Stack


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the numbers in ``argv`` and write the instructions to stdout.

    Returns 0 on success, or 1 after writing ``Error`` to stderr.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] == "":
        return 0
    try:
        sorted_numbers = check_error(args)
    except AlreadySorted:
        return 0
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    stack_a = coordinate_compression(parse_numbers(args), sorted_numbers)
    machine = Machine(stack_a, Stack(), sys.stdout, sys.stderr)
    if len(args) < 6:
        sort_under_five(len(args), machine)
    else:
        sort_over_six(machine)
    return 0


if __name__ == "__main__":
    sys.exit(main())