"""The sorting strategy that produces a list of operations for stack a."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Optional, Tuple

from .positions import (
    Move,
    cheapest_cost_to_a,
    cheapest_cost_to_b,
    cost_to_a,
    cost_to_b,
    position_of,
    target_in_a,
    target_in_b,
)
from .stacks import Operation, Stacks, is_sorted

_Step = Tuple[str, Operation]
_Plan = Tuple[Optional[Operation], Tuple[_Step, ...]]

# For each move: the combined rotation done while both sides still need it,
# then the single rotations in the order they are finished off.
_TO_B: dict[Move, _Plan] = {
    Move.RA_RB: (Operation.RR, (("source", Operation.RA), ("target", Operation.RB))),
    Move.RA_RRB: (None, (("source", Operation.RA), ("target", Operation.RRB))),
    Move.RRA_RB: (None, (("source", Operation.RRA), ("target", Operation.RB))),
    Move.RRA_RRB: (
        Operation.RRR,
        (("source", Operation.RRA), ("target", Operation.RRB)),
    ),
}

_TO_A: dict[Move, _Plan] = {
    Move.RA_RB: (Operation.RR, (("source", Operation.RB), ("target", Operation.RA))),
    Move.RA_RRB: (None, (("target", Operation.RA), ("source", Operation.RRB))),
    Move.RRA_RB: (None, (("target", Operation.RRA), ("source", Operation.RB))),
    Move.RRA_RRB: (
        Operation.RRR,
        (("source", Operation.RRB), ("target", Operation.RRA)),
    ),
}


def _bring_and_push(
    stacks: Stacks,
    plan: _Plan,
    push: Operation,
    source_off: Callable[[], bool],
    target_off: Callable[[], bool],
) -> None:
    combined, steps = plan
    checks = {"source": source_off, "target": target_off}
    if combined is not None:
        while source_off() and target_off():
            stacks.apply(combined)
    for which, operation in steps:
        needs_turn = checks[which]
        while needs_turn():
            stacks.apply(operation)
    stacks.apply(push)


def _move_to_b(stacks: Stacks, value: int, move: Move) -> None:
    _bring_and_push(
        stacks,
        _TO_B[move],
        Operation.PB,
        lambda: stacks.a[0] != value,
        lambda: target_in_b(stacks.b, value) > 0,
    )


def _move_to_a(stacks: Stacks, value: int, move: Move) -> None:
    _bring_and_push(
        stacks,
        _TO_A[move],
        Operation.PA,
        lambda: stacks.b[0] != value,
        lambda: target_in_a(stacks.a, value) > 0,
    )


def _choose(
    values: Iterable[int], cost: int, cost_of: Callable[[int, Move], int]
) -> tuple[int, Move]:
    for value in values:
        for move in Move:
            if cost_of(value, move) == cost:
                return value, move
    raise RuntimeError(f"no value reaches the cost {cost}")


def sort_two(stacks: Stacks) -> None:
    """Order the two values of stack a."""
    if stacks.a[0] > stacks.a[1]:
        stacks.apply(Operation.SA)


def sort_three(stacks: Stacks) -> None:
    """Order the top three values of stack a with at most two operations."""
    top, mid, bot = stacks.a[0], stacks.a[1], stacks.a[2]
    if top > mid and mid < bot and bot > top:
        stacks.apply(Operation.SA)
    elif top > mid and mid > bot and bot < top:
        stacks.apply(Operation.SA)
        stacks.apply(Operation.RRA)
    elif top > mid and mid < bot and bot < top:
        stacks.apply(Operation.RA)
    elif top < mid and mid > bot and bot > top:
        stacks.apply(Operation.SA)
        stacks.apply(Operation.RA)
    elif top < mid and mid > bot and bot < top:
        stacks.apply(Operation.RRA)


def sort_four(stacks: Stacks) -> None:
    """Push one value aside, order three, and put it back.

    Stack a is turned as many times as the target index, reversed when that
    index lies past the middle, then rotated until its smallest value is on top.
    """
    stacks.apply(Operation.PB)
    sort_three(stacks)
    pos = target_in_a(stacks.a, stacks.b[0])
    turn = Operation.RRA if pos > len(stacks.a) // 2 else Operation.RA
    for _ in range(pos):
        stacks.apply(turn)
    stacks.apply(Operation.PA)
    while stacks.a[0] != min(stacks.a):
        stacks.apply(Operation.RA)


def push_to_b_until_three(stacks: Stacks) -> None:
    """Move the cheapest value to b until a holds three values or is in order."""
    while len(stacks.a) > 3 and not is_sorted(stacks.a):
        a, b = stacks.a, stacks.b
        cost = cheapest_cost_to_b(a, b)
        value, move = _choose(list(a), cost, lambda v, m: cost_to_b(a, b, v, m))
        _move_to_b(stacks, value, move)


def push_back_to_a(stacks: Stacks) -> None:
    """Move every value of b back into place in a, cheapest first."""
    while stacks.b:
        a, b = stacks.a, stacks.b
        cost = cheapest_cost_to_a(a, b)
        value, move = _choose(list(b), cost, lambda v, m: cost_to_a(a, b, v, m))
        _move_to_a(stacks, value, move)


def sort_many(stacks: Stacks) -> None:
    """Sort five or more values through stack b."""
    smallest = min(stacks.a)
    pos = position_of(stacks.a, smallest)
    stacks.apply(Operation.PB)
    stacks.apply(Operation.PB)
    push_to_b_until_three(stacks)
    sort_three(stacks)
    push_back_to_a(stacks)
    turn = Operation.RRA if pos < len(stacks.a) // 2 else Operation.RA
    while stacks.a[0] != min(stacks.a):
        stacks.apply(turn)


def sort_stacks(stacks: Stacks) -> None:
    """Pick the strategy that suits the size of a, if a is out of order."""
    size = len(stacks.a)
    if size <= 1 or is_sorted(stacks.a):
        return
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    else:
        sort_many(stacks)


def solve(numbers: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``numbers`` placed on stack a."""
    stacks = Stacks(numbers)
    sort_stacks(stacks)
    return stacks.operations