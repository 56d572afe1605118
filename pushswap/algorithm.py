"""The sorting strategy: a sequence of stack operations that sorts stack ``a``.

Small inputs are handled directly. Larger ones move all but three values
to ``b``, always choosing the value that is cheapest to place in ``b``
kept in descending order. The remaining three are sorted, and each value
of ``b`` is inserted back at its place in ``a``. A final rotation brings
the smallest value to the top.
"""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.parsing import is_sorted
from pushswap.stacks import Operation, Stacks


def _repeat(stacks: Stacks, operation: Operation, times: int) -> None:
    for _ in range(times):
        stacks.apply(operation)


def _cost(size: int, index: int) -> int:
    """Rotations needed to bring ``index`` to the top, in either direction."""
    return index if index <= size // 2 else size - index


def _signed_cost(size: int, index: int) -> int:
    """Forward rotations as a positive count, reverse ones as a negative count."""
    return index if index <= size // 2 else index - size


def sort_two(stacks: Stacks) -> None:
    """Sort a two-value stack ``a``."""
    if stacks.a[0] > stacks.a[1]:
        stacks.apply(Operation.SA)


def sort_three(stacks: Stacks) -> None:
    """Sort a three-value stack ``a`` with at most two operations."""
    x, y, z = stacks.a[:3]
    if x > y and y < z and x < z:
        stacks.apply(Operation.SA)
    elif x > y and y > z:
        stacks.apply(Operation.SA)
        stacks.apply(Operation.RRA)
    elif x > y and y < z:
        stacks.apply(Operation.RA)
    elif x < y and y > z and x < z:
        stacks.apply(Operation.SA)
        stacks.apply(Operation.RA)
    elif x < y and y > z:
        stacks.apply(Operation.RRA)


def push_to_top_a(stacks: Stacks, index: int) -> None:
    """Rotate ``a`` the short way round until ``index`` is at the top."""
    size = len(stacks.a)
    if index <= size // 2:
        _repeat(stacks, Operation.RA, index)
    else:
        _repeat(stacks, Operation.RRA, size - index)


def rotate_to_top(stacks: Stacks, index_a: int, index_b: int) -> None:
    """Bring ``index_a`` to the top of ``a`` and ``index_b`` to the top of ``b``.

    Rotations in the same direction on both stacks are combined.
    """
    count_a = _signed_cost(len(stacks.a), index_a)
    count_b = _signed_cost(len(stacks.b), index_b)
    shared = min(count_a, count_b) if count_a > 0 and count_b > 0 else 0
    _repeat(stacks, Operation.RR, shared)
    count_a -= shared
    count_b -= shared
    shared = max(count_a, count_b) if count_a < 0 and count_b < 0 else 0
    _repeat(stacks, Operation.RRR, -shared)
    count_a -= shared
    count_b -= shared
    _repeat(stacks, Operation.RA, max(count_a, 0))
    _repeat(stacks, Operation.RB, max(count_b, 0))
    _repeat(stacks, Operation.RRA, max(-count_a, 0))
    _repeat(stacks, Operation.RRB, max(-count_b, 0))


def _first_gap(stack: list[int], between) -> int | None:
    for i, (left, right) in enumerate(zip(stack, stack[1:])):
        if between(left, right):
            return i + 1
    return None


def target_in_b(stacks: Stacks, index_a: int) -> int:
    """Index of ``b`` that ``a[index_a]`` should sit on top of, ``b`` descending."""
    value = stacks.a[index_a]
    b = stacks.b
    highest = stacks.max_index_b()
    lowest = stacks.min_index_b()
    if value > b[highest] or value < b[lowest]:
        return highest
    gap = _first_gap(b, lambda left, right: left > value > right)
    return 0 if gap is None else gap


def target_in_a(stacks: Stacks, index_b: int) -> int:
    """Index of ``a`` that ``b[index_b]`` should be pushed above, ``a`` ascending."""
    value = stacks.b[index_b]
    a = stacks.a
    highest = stacks.max_index_a()
    lowest = stacks.min_index_a()
    if value > a[highest]:
        return highest + 1
    if value < a[lowest]:
        return lowest
    gap = _first_gap(a, lambda left, right: left < value < right)
    return len(a) if gap is None else gap


def cheapest_index(stacks: Stacks) -> int:
    """Index of ``a`` whose value costs the fewest rotations to place in ``b``."""
    size_a = len(stacks.a)
    size_b = len(stacks.b)

    def cost(index: int) -> int:
        target = target_in_b(stacks, index)
        return _cost(size_a, index) + _cost(size_b, target)

    return min(range(size_a), key=cost)


def _start_b(stacks: Stacks) -> None:
    if len(stacks.a) > 4:
        stacks.apply(Operation.PB)
    stacks.apply(Operation.PB)


def _sort_a_to_b(stacks: Stacks) -> None:
    while len(stacks.a) > 3:
        index = cheapest_index(stacks)
        rotate_to_top(stacks, index, target_in_b(stacks, index))
        stacks.apply(Operation.PB)
    sort_three(stacks)


def _sort_b_to_a(stacks: Stacks) -> None:
    while stacks.b:
        push_to_top_a(stacks, target_in_a(stacks, 0))
        stacks.apply(Operation.PA)


def sort_stacks(stacks: Stacks) -> None:
    """Sort ``stacks.a`` in place, recording every operation in its history."""
    size = len(stacks.a)
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size > 3:
        _start_b(stacks)
        _sort_a_to_b(stacks)
        _sort_b_to_a(stacks)
        push_to_top_a(stacks, stacks.min_index_a())


def solve(numbers: Iterable[int]) -> list[Operation]:
    """Operations that sort ``numbers``; none if they are already sorted."""
    numbers = list(numbers)
    if is_sorted(numbers):
        return []
    stacks = Stacks(a=numbers)
    sort_stacks(stacks)
    return stacks.history