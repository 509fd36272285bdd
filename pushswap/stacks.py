"""The two stacks and the eleven operations that rearrange them."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from enum import Enum
from itertools import pairwise


class Operation(str, Enum):
    """An instruction on the stacks, valued by its textual name."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if the values never decrease from first to last."""
    return all(current <= following for current, following in pairwise(values))


def _swap(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


def _push(source: deque[int], target: deque[int]) -> bool:
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


def _both(action: Callable[[deque[int]], bool], stacks: Stacks) -> bool:
    action(stacks.a)
    action(stacks.b)
    return True


_ACTIONS: dict[Operation, Callable[[Stacks], bool]] = {
    Operation.SA: lambda s: _swap(s.a),
    Operation.SB: lambda s: _swap(s.b),
    Operation.SS: lambda s: _both(_swap, s),
    Operation.PA: lambda s: _push(s.b, s.a),
    Operation.PB: lambda s: _push(s.a, s.b),
    Operation.RA: lambda s: _rotate(s.a),
    Operation.RB: lambda s: _rotate(s.b),
    Operation.RR: lambda s: _both(_rotate, s),
    Operation.RRA: lambda s: _reverse_rotate(s.a),
    Operation.RRB: lambda s: _reverse_rotate(s.b),
    Operation.RRR: lambda s: _both(_reverse_rotate, s),
}


class Stacks:
    """Stacks ``a`` and ``b``, top of each at index 0.

    When ``record`` is true, every operation that takes effect is appended
    to ``operations``. Single-stack operations that change nothing are not
    recorded; the combined ``ss``, ``rr`` and ``rrr`` always are.
    """

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        record: bool = True,
    ) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.record = record
        self.operations: list[Operation] = []

    def apply(self, operation: Operation | str) -> None:
        """Perform one operation; an unknown name raises ValueError."""
        op = Operation(operation)
        if _ACTIONS[op](self) and self.record:
            self.operations.append(op)

    def is_solved(self) -> bool:
        """Return True if ``a`` is in order and ``b`` is empty."""
        return is_sorted(self.a) and not self.b

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"