# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a small fixed set of operations. Each operation writes its name on its
own line as it runs, so the output is the sequence of instructions that
sorts the input.

## Installation

```
pip install .
```

## Usage

Pass the numbers as separate arguments:

```
pushswap 3 2 1
```

prints

```
ra
sa
```

Rules for the input:

- Each argument is an integer in the 32-bit signed range, with optional
  leading whitespace and an optional `+` or `-` sign. An argument with no
  digits at all (for example `+`) counts as `0`.
- Trailing text, values outside the 32-bit range and duplicate numbers
  write `Error` to standard error, and the command exits with status 1.
- Input that is already in strictly increasing order, no arguments at all,
  or an empty first argument produce no output and exit with status 0.

## Operations

`pushswap.operations.Machine` holds the two stacks and runs these
instructions. Each one writes its name to the machine's output stream.

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two numbers of `a`                     |
| `sb`  | swap the top two numbers of `b`                     |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` upwards: the top goes to the bottom      |
| `rb`  | rotate `b` upwards                                  |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` downwards: the bottom comes to the top   |
| `rrb` | rotate `b` downwards                                |
| `rrr` | `rra` and `rrb` together                            |

Things worth knowing about the output:

- A rotation of a stack with fewer than two elements does nothing and
  writes nothing.
- The combined instructions `rr` and `rrr` run their two parts, which each
  write their own name, and then write the combined name as well. `ss`
  writes `sa` and `sb` to the output and `ss` to the error stream.
- When four numbers are sorted, bringing the minimum to the top also writes
  an extra copy of the moves: `sa` or `ra ra` to the error stream, or
  `rra` to the output.

`pushswap.operations.format_operations` joins a sequence of operation names
into newline-terminated text.

## Strategy

The numbers are first replaced by their ranks `0..n-1`
(`pushswap.parsing.coordinate_compression`).

- Two to five numbers are sorted by fixed routines in `pushswap.sorting`
  (`sort_two`, `sort_three`, `sort_four`, `sort_five`, chosen by
  `sort_under_five`).
- Six or more are sorted by `sort_over_six`: the numbers of a longest
  increasing subsequence are flagged and stay on `a`, the others are pushed
  to `b` at the cheapest rotation cost (`pushswap.cost.count_cost_pb`),
  each is then brought back onto `a` at its cheapest place
  (`pushswap.cost.count_cost_pa`), and finally rank `0` is rotated to the
  top.

## Using it from Python

```python
from pushswap.cli import main

exit_code = main(["4", "1", "3", "2"])
```

`main` writes instructions to standard output and returns the exit status.

The building blocks:

- `pushswap.stack` — `Stack` (a double-ended stack whose front is the top)
  and `Node` (a number with a LIS flag).
- `pushswap.operations` — `Machine` and `format_operations`.
- `pushswap.parsing` — `parse_int`, `atoi`, `parse_numbers`, `check_error`,
  `check_sorted`, `check_duplication`, `binary_search`,
  `coordinate_compression`, `produce_pair`, and the exceptions
  `InputError` and `AlreadySorted`.
- `pushswap.queries` — `get_min`, `get_max`, `get_target_index`,
  `get_next_number`, `get_prev_number` and the `top_is_*` / `tail_is_*`
  checks.
- `pushswap.cost` — `Cost`, `compare_cost`, `count_cost_pa`,
  `count_cost_pb`, `longest_increasing_subsequence`, `find_lis`.
- `pushswap.sorting` — the sorting routines, `put_min_top` and
  `carry_out_cost`.

## What it does not do

There is no checker: the package prints instructions but has no command that
reads a list of instructions and verifies that they sort a given input.

## Running the tests

```
pip install .[test]
pytest
```