# pushswap

Sort a list of distinct 32-bit integers using two stacks, `a` and `b`, and a
small set of instructions. The package works out a sequence of instructions
that sorts the numbers, and it checks whether a given sequence sorts them.

## Instructions

| Name  | Effect                                       |
|-------|----------------------------------------------|
| `sa`  | swap the top two elements of `a`             |
| `sb`  | swap the top two elements of `b`             |
| `ss`  | `sa` and `sb` together                       |
| `pa`  | move the top of `b` onto `a`                 |
| `pb`  | move the top of `a` onto `b`                 |
| `ra`  | rotate `a` up (the top goes to the bottom)   |
| `rb`  | rotate `b` up                                |
| `rr`  | `ra` and `rb` together                       |
| `rra` | rotate `a` down (the bottom goes to the top) |
| `rrb` | rotate `b` down                              |
| `rrr` | `rra` and `rrb` together                     |

An instruction on a stack too small for it leaves the stack unchanged.

## Installation

```
pip install .
```

## Command line

### push_swap

Print the instructions that sort the numbers, one per line:

```
push_swap 3 2 1
push_swap "3 2 1"
```

The numbers may be given as separate arguments or as one argument with
spaces between them. With no arguments nothing is printed. Nothing is
printed either when the numbers are already in order.

A number is accepted only if it is made of digits with an optional leading
`-` and reads back as the same 32-bit integer; leading zeros are allowed,
but an explicit `+`, `-0`, values out of range and repeated values are
not. On bad input `Error` is written to standard error. With several
arguments the command then exits with status 1; with a single argument it
carries on with no numbers and exits with status 0.

### checker

Read instructions from standard input, one per line, apply them to the
numbers and report the result:

```
push_swap 4 1 3 2 | checker 4 1 3 2
```

`checker` prints `OK` when the instructions leave `a` in order and `b`
empty, and `KO` otherwise. Each line that is not a known instruction
followed by a newline is skipped, and `Error` is printed on standard output
for it. The numbers are read and checked as for `push_swap`.

## Library

```python
from pushswap.sorting import solve

operations = solve([3, 2, 1])
print([op.value for op in operations])  # ['sa', 'rra']
```

- `pushswap.stacks` — `Operation`, an enum of the eleven instructions valued
  by their names; `Stacks(a, b, record)`, which holds both stacks (top at
  index 0) and performs an operation with `apply()`, appending it to
  `operations` when `record` is true; `is_solved()`; and `is_sorted(values)`.
  `apply()` raises `ValueError` for an unknown instruction name.
- `pushswap.sorting` — `solve(numbers)` returns the list of operations;
  `sort_stacks(stacks)` sorts a `Stacks` in place, choosing among
  `sort_two`, `sort_three`, `sort_four` and `sort_many` by the size of `a`.
- `pushswap.positions` — the insertion positions (`target_in_a`,
  `target_in_b`, `position_of`) and rotation costs (`cost_to_a`,
  `cost_to_b`, `cheapest_cost_to_a`, `cheapest_cost_to_b`, with the `Move`
  enum of rotation directions) that the sorting strategy is built on.
- `pushswap.parsing` — `parse_arguments(args)` turns command-line style
  arguments into integers, raising `InputError` (a `ValueError`) for
  anything the commands reject; `c_atoi`, `split_words` and the individual
  checks behind `validate` are available too.
- `pushswap.cli` — `main` and `checker_main`, the two commands, and
  `run_instructions(stacks, lines)`, which applies newline-terminated
  instruction lines and returns the lines it rejected.

## Tests

```
pip install .[test]
pytest
```