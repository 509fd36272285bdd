"""Target positions and rotation costs used by the sorting strategy."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from itertools import pairwise


class Move(Enum):
    """A pair of rotation directions applied to stack a and stack b."""

    RA_RB = "ra_rb"
    RA_RRB = "ra_rrb"
    RRA_RB = "rra_rb"
    RRA_RRB = "rra_rrb"


def position_of(stack: Sequence[int], value: int) -> int:
    """Index of ``value`` in ``stack``, or its length if absent."""
    for index, item in enumerate(stack):
        if item == value:
            return index
    return len(stack)


def target_in_b(b: Sequence[int], value: int) -> int:
    """Index in ``b`` (kept descending) where ``value`` must be pushed."""
    if not b:
        raise ValueError("stack b is empty")
    if b[0] < value < b[-1]:
        return 0
    highest = max(b)
    if value > highest or value < min(b):
        return position_of(b, highest)
    for index, (current, following) in enumerate(pairwise(b), start=1):
        if current >= value and following <= value:
            return index
    raise ValueError(f"no place for {value} in stack b")


def target_in_a(a: Sequence[int], value: int) -> int:
    """Index in ``a`` (kept ascending) where ``value`` must be pushed."""
    if not a:
        raise ValueError("stack a is empty")
    if a[0] > value > a[-1]:
        return 0
    lowest = min(a)
    if value > max(a) or value < lowest:
        return position_of(a, lowest)
    for index, (current, following) in enumerate(pairwise(a), start=1):
        if current <= value and following >= value:
            return index
    raise ValueError(f"no place for {value} in stack a")


def cost_to_b(a: Sequence[int], b: Sequence[int], value: int, move: Move) -> int:
    """Rotations needed before pushing ``value`` from a to b with ``move``."""
    target = target_in_b(b, value)
    pos = position_of(a, value)
    if move is Move.RA_RB:
        return max(target, pos)
    if move is Move.RRA_RB:
        return target + (len(a) - pos if pos > 0 else 0)
    if move is Move.RRA_RRB:
        cost = len(b) - target if target > 0 else 0
        if pos > 0 and cost < len(a) - pos:
            cost = len(a) - pos
        return cost
    return pos + (len(b) - target if target > 0 else 0)


def cost_to_a(a: Sequence[int], b: Sequence[int], value: int, move: Move) -> int:
    """Rotations needed before pushing ``value`` from b to a with ``move``."""
    target = target_in_a(a, value)
    pos = position_of(b, value)
    if move is Move.RA_RB:
        return max(target, pos)
    if move is Move.RRA_RB:
        return pos + (len(a) - target if target > 0 else 0)
    if move is Move.RRA_RRB:
        cost = len(a) - target if target > 0 else 0
        if pos > 0 and cost < len(b) - pos:
            cost = len(b) - pos
        return cost
    return target + (len(b) - pos if pos > 0 else 0)


def cheapest_cost_to_b(a: Sequence[int], b: Sequence[int]) -> int:
    """Lowest cost over every value of a and every move."""
    if not a:
        raise ValueError("stack a is empty")
    return min(cost_to_b(a, b, value, move) for value in a for move in Move)


def cheapest_cost_to_a(a: Sequence[int], b: Sequence[int]) -> int:
    """Lowest cost over every value of b and every move."""
    if not b:
        raise ValueError("stack b is empty")
    return min(cost_to_a(a, b, value, move) for value in b for move in Move)