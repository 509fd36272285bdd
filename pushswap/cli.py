"""Command entry points: the sorter and the checker."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .parsing import InputError, parse_arguments
from .sorting import solve
from .stacks import Operation, Stacks

_NAMES = frozenset(operation.value for operation in Operation)


def _load(args: Sequence[str]) -> tuple[list[int], int | None]:
    """Parse arguments; give the exit code to stop with, or None to go on."""
    try:
        return parse_arguments(args), None
    except InputError:
        sys.stderr.write("Error\n")
        if len(args) > 1:
            return [], 1
        return [], None


def run_instructions(stacks: Stacks, lines: Iterable[str]) -> list[str]:
    """Apply each newline-terminated instruction; return the lines rejected."""
    rejected: list[str] = []
    for line in lines:
        name = line[:-1] if line.endswith("\n") else None
        if name in _NAMES:
            stacks.apply(name)
        else:
            rejected.append(line)
    return rejected


def main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the given numbers."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    numbers, code = _load(args)
    if code is not None:
        return code
    for operation in solve(numbers):
        print(operation)
    return 0


def checker_main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and report OK or KO."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    numbers, code = _load(args)
    if code is not None:
        return code
    stacks = Stacks(numbers, record=False)
    for _ in run_instructions(stacks, sys.stdin):
        print("Error")
    print("OK" if stacks.is_solved() else "KO")
    return 0