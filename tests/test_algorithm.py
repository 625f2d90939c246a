import itertools
import random

import pytest

from pushswap.algorithm import (
    Sorter,
    cheapest_move,
    distance_to_top,
    find_target,
    sort_operations,
)
from pushswap.stacks import EmptyStackError, Stack

OPERATIONS = {"sa", "ra", "rra", "rb", "rrb", "pa", "pb"}


def _replay(values, operations):
    a, b = Stack(values), Stack()
    actions = {
        "sa": a.swap,
        "ra": a.rotate,
        "rra": a.reverse_rotate,
        "rb": b.rotate,
        "rrb": b.reverse_rotate,
        "pa": lambda: b.push_to(a),
        "pb": lambda: a.push_to(b),
    }
    for operation in operations:
        actions[operation]()
    return list(a), list(b)


def _assert_sorts(values):
    operations = sort_operations(values)
    assert set(operations) <= OPERATIONS
    a, b = _replay(values, operations)
    assert a == sorted(values)
    assert b == []


def test_two_elements_use_a_rotation():
    assert sort_operations([2, 1]) == ["ra"]


def test_three_descending():
    assert sort_operations([3, 2, 1]) == ["sa", "rra"]


def test_sorted_input_needs_no_operations():
    assert sort_operations([1, 2, 3, 4, 5, 6, 7]) == []


def test_single_element_needs_no_operations():
    assert sort_operations([42]) == []


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_every_small_permutation_is_sorted(size):
    for permutation in itertools.permutations(range(size)):
        _assert_sorts(list(permutation))


def test_every_permutation_of_six_is_sorted():
    for permutation in itertools.permutations([-30, -4, 0, 8, 15, 99]):
        _assert_sorts(list(permutation))


@pytest.mark.parametrize("size", [7, 10, 25, 100])
def test_random_inputs_are_sorted(size):
    rng = random.Random(size)
    for _ in range(5):
        _assert_sorts(rng.sample(range(-1000, 1000), size))


def test_small_inputs_end_with_empty_b_stack():
    sorter = Sorter([4, 2, 5, 1, 3])
    sorter.run()
    assert list(sorter.stack_a) == [1, 2, 3, 4, 5]
    assert list(sorter.stack_b) == []


def test_run_is_idempotent():
    values = [9, -1, 4, 7, 2, 8, 0]
    sorter = Sorter(values)
    first = sorter.run()
    assert sorter.run() == first
    assert list(sorter.stack_a) == sorted(values)


def test_duplicate_values_are_rejected():
    with pytest.raises(ValueError):
        Sorter([1, 2, 2])


def test_find_target_picks_smallest_greater():
    assert find_target(5, Stack([9, 3, 7, 1])) == 7


def test_find_target_falls_back_to_top():
    assert find_target(10, Stack([3, 1])) == 3


def test_find_target_differences_wrap():
    assert find_target(-2147483647, Stack([2147483647, 0])) == 0


def test_find_target_empty_stack():
    with pytest.raises(EmptyStackError):
        find_target(1, Stack())


def test_distance_to_top_of_top_is_zero():
    assert distance_to_top(Stack([4, 8, 1]), 4) == 0


def test_distance_to_top_upper_half_counts_depth():
    assert distance_to_top(Stack([1, 2, 3, 4, 5]), 2) == 1


def test_distance_to_top_is_bounded():
    stack = Stack(range(11))
    for value in stack:
        assert 0 <= distance_to_top(stack, value) <= len(stack) // 2 + 1


def test_distance_to_top_missing_value():
    with pytest.raises(ValueError):
        distance_to_top(Stack([1, 2]), 3)


def test_cheapest_move_prefers_ready_element():
    move = cheapest_move(Stack([5, 2]), Stack([3, 9]))
    assert move.value == 5
    assert move.target == 9
    assert move.cost == 0


def test_cheapest_move_target_matches_find_target():
    stack_a, stack_b = Stack([4, 11, -3, 6]), Stack([2, 20, 8])
    move = cheapest_move(stack_a, stack_b)
    assert move.value in list(stack_a)
    assert move.target == find_target(move.value, stack_b)


def test_cheapest_move_empty_stack():
    with pytest.raises(EmptyStackError):
        cheapest_move(Stack(), Stack([1]))