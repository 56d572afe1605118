import random
from itertools import permutations

import pytest

from pushswap.algorithm import (
    cheapest_index,
    push_to_top_a,
    rotate_to_top,
    solve,
    sort_stacks,
    sort_three,
    sort_two,
    target_in_a,
    target_in_b,
)
from pushswap.stacks import Operation, Stacks


def _replay(numbers, operations):
    stacks = Stacks(a=list(numbers))
    for operation in operations:
        assert stacks.apply(operation)
    return stacks


def test_solve_two_values():
    assert solve([2, 1]) == [Operation.SA]


def test_solve_reversed_three():
    assert solve([3, 2, 1]) == [Operation.SA, Operation.RRA]


@pytest.mark.parametrize("numbers", [[1], [1, 2], [1, 2, 3], [-5, 0, 7, 9, 12]])
def test_solve_sorted_input_needs_nothing(numbers):
    assert solve(numbers) == []


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6])
def test_solve_every_permutation(size):
    for perm in permutations(range(size)):
        ops = solve(perm)
        assert _replay(perm, ops).is_solved()


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_solve_random_hundred(seed):
    rng = random.Random(seed)
    numbers = rng.sample(range(-1000, 1000), 100)
    ops = solve(numbers)
    stacks = _replay(numbers, ops)
    assert stacks.is_solved()
    assert sorted(stacks.a) == sorted(numbers)


def test_three_values_take_at_most_two_operations():
    for perm in permutations([10, 20, 30]):
        stacks = Stacks(a=list(perm))
        sort_three(stacks)
        assert stacks.a == [10, 20, 30]
        assert len(stacks.history) <= 2


def test_sort_two_leaves_sorted_pair_alone():
    stacks = Stacks(a=[1, 2])
    sort_two(stacks)
    assert stacks.a == [1, 2]
    assert stacks.history == []


def test_sort_stacks_records_history():
    numbers = [5, 3, 8, 1, 9, 2]
    stacks = Stacks(a=numbers)
    sort_stacks(stacks)
    assert stacks.a == sorted(numbers)
    assert stacks.b == []
    assert _replay(numbers, stacks.history).a == stacks.a


@pytest.mark.parametrize("index", range(7))
def test_push_to_top_a(index):
    numbers = [4, 9, 2, 7, 1, 8, 3]
    stacks = Stacks(a=numbers)
    push_to_top_a(stacks, index)
    assert stacks.a[0] == numbers[index]
    assert len(stacks.history) <= len(numbers) // 2


def test_push_to_top_a_past_the_end_does_nothing():
    stacks = Stacks(a=[3, 1, 2])
    push_to_top_a(stacks, 3)
    assert stacks.history == []
    assert stacks.a == [3, 1, 2]


@pytest.mark.parametrize("index_a", range(6))
@pytest.mark.parametrize("index_b", range(5))
def test_rotate_to_top(index_a, index_b):
    a = [11, 12, 13, 14, 15, 16]
    b = [25, 24, 23, 22, 21]
    stacks = Stacks(a=a, b=b)
    rotate_to_top(stacks, index_a, index_b)
    assert stacks.a[0] == a[index_a]
    assert stacks.b[0] == b[index_b]
    assert sorted(stacks.a) == a


def test_rotate_to_top_combines_same_direction():
    stacks = Stacks(a=[1, 2, 3, 4, 5, 6], b=[6, 5, 4, 3, 2, 1])
    rotate_to_top(stacks, 2, 2)
    assert set(stacks.history) == {Operation.RR}


@pytest.mark.parametrize(
    "value, expected_target",
    [(0, 3), (4, 2), (6, 1), (8, 0), (10, 3), (20, 3)],
)
def test_target_in_b_keeps_b_circularly_descending(value, expected_target):
    stacks = Stacks(a=[value], b=[7, 5, 3, 9])
    target = target_in_b(stacks, 0)
    assert target == expected_target
    rotate_to_top(stacks, 0, target)
    stacks.apply(Operation.PB)
    start = stacks.max_index_b()
    rotated = stacks.b[start:] + stacks.b[:start]
    assert rotated == sorted([7, 5, 3, 9, value], reverse=True)


@pytest.mark.parametrize("value", [0, 4, 6, 8, 10, 20])
def test_target_in_a_keeps_a_circularly_ascending(value):
    stacks = Stacks(a=[7, 9, 3, 5], b=[value])
    push_to_top_a(stacks, target_in_a(stacks, 0))
    stacks.apply(Operation.PA)
    start = stacks.min_index_a()
    rotated = stacks.a[start:] + stacks.a[:start]
    assert rotated == sorted(stacks.a)


def test_cheapest_index_prefers_top_when_all_fit_at_max():
    stacks = Stacks(a=[10, 20, 30, 40, 50, 60], b=[9, 1])
    assert cheapest_index(stacks) == 0


def test_cheapest_index_in_range():
    stacks = Stacks(a=[8, 3, 6, 1, 9, 4], b=[7, 2])
    index = cheapest_index(stacks)
    assert 0 <= index < len(stacks.a)