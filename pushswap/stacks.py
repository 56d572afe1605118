"""The two stacks of the puzzle and the eleven operations that act on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Operation(str, Enum):
    """An instruction, named as it is written in a solution."""

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


def _swap(stack: list[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: list[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.append(stack.pop(0))
    return True


def _reverse_rotate(stack: list[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.insert(0, stack.pop())
    return True


def _push(source: list[int], target: list[int]) -> bool:
    if not source:
        return False
    target.insert(0, source.pop(0))
    return True


def _index_of(stack: list[int], pick) -> int:
    """Index of the first element chosen by ``pick`` (``min`` or ``max``)."""
    if not stack:
        raise ValueError("empty stack has no extreme element")
    return pick(range(len(stack)), key=stack.__getitem__)


@dataclass
class Stacks:
    """Stack ``a`` and stack ``b``; index 0 is the top of each.

    Every operation that changes the stacks is appended to ``history``.
    """

    a: list[int] = field(default_factory=list)
    b: list[int] = field(default_factory=list)
    history: list[Operation] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.a = list(self.a)
        self.b = list(self.b)
        self.history = list(self.history)

    def apply(self, operation: Operation | str) -> bool:
        """Perform ``operation``; return whether it changed the stacks.

        An operation whose stacks are too short does nothing and is not
        recorded. Double operations need both stacks to hold two values.
        Unknown names raise ``ValueError``.
        """
        op = Operation(operation)
        a, b = self.a, self.b
        if op is Operation.SA:
            done = _swap(a)
        elif op is Operation.SB:
            done = _swap(b)
        elif op is Operation.SS:
            done = len(a) >= 2 and len(b) >= 2 and _swap(a) and _swap(b)
        elif op is Operation.PA:
            done = _push(b, a)
        elif op is Operation.PB:
            done = _push(a, b)
        elif op is Operation.RA:
            done = _rotate(a)
        elif op is Operation.RB:
            done = _rotate(b)
        elif op is Operation.RR:
            done = len(a) >= 2 and len(b) >= 2 and _rotate(b) and _rotate(a)
        elif op is Operation.RRA:
            done = _reverse_rotate(a)
        elif op is Operation.RRB:
            done = _reverse_rotate(b)
        else:
            done = (
                len(a) >= 2
                and len(b) >= 2
                and _reverse_rotate(b)
                and _reverse_rotate(a)
            )
        if done:
            self.history.append(op)
        return done

    def is_solved(self) -> bool:
        """True when ``b`` is empty and ``a`` is in ascending order."""
        return not self.b and self.a == sorted(self.a)

    def min_index_a(self) -> int:
        """Index of the smallest value in ``a`` (first one on ties)."""
        return _index_of(self.a, min)

    def max_index_a(self) -> int:
        """Index of the largest value in ``a`` (first one on ties)."""
        return _index_of(self.a, max)

    def min_index_b(self) -> int:
        """Index of the smallest value in ``b`` (first one on ties)."""
        return _index_of(self.b, min)

    def max_index_b(self) -> int:
        """Index of the largest value in ``b`` (first one on ties)."""
        return _index_of(self.b, max)