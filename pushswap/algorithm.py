"""Choosing the push_swap operations that sort a stack of integers."""

from __future__ import annotations

from collections.abc import Iterable
from functools import partial
from typing import Callable, NamedTuple, Optional

from .stacks import EmptyStackError, Stack
from .validation import is_sorted

LONG_MAX = 2**63 - 1
SMALL_INPUT_LIMIT = 5
_INT_MIN = -(2**31)
_INT_MODULUS = 2**32


def _int_difference(first: int, second: int) -> int:
    """first - second, wrapped like a 32-bit signed integer."""
    return (first - second - _INT_MIN) % _INT_MODULUS + _INT_MIN


def _rank(stack: Stack, value: int) -> int:
    """One-based position of value counted from the top."""
    return stack.position(value) + 1


def _below(stack: Stack, value: int) -> int:
    """The element directly under value, wrapping from the bottom to the top."""
    index = stack.position(value)
    items = list(stack)
    return items[(index + 1) % len(items)]


class Move(NamedTuple):
    """A candidate push from stack a: the value, its target in b and the cost."""

    value: int
    target: int
    cost: int


def find_target(value: int, stack: Stack) -> int:
    """The smallest element of stack greater than value.

    When no element is greater, the top of the stack is returned.
    Differences are taken as 32-bit integers, so they wrap for extreme values.
    """
    items = list(stack)
    if not items:
        raise EmptyStackError("cannot find a target in an empty stack")
    target = items[0]
    first = _int_difference(target, value)
    distance = first if first >= 0 else LONG_MAX
    for candidate in items[1:]:
        difference = _int_difference(candidate, value)
        if 0 < difference < distance:
            target, distance = candidate, difference
    return target


def distance_to_top(stack: Stack, value: int) -> int:
    """Estimated number of rotations that bring value to the top of stack.

    Values in the upper half count their depth; the others count the
    reverse rotations plus one.
    """
    size = len(stack)
    position = stack.position(value)
    if position > size / 2:
        position = size - position + 1
    return position


def cheapest_move(stack_a: Stack, stack_b: Stack) -> Move:
    """The element of stack_a that is cheapest to put in place on stack_b.

    The cost adds the distance of the element to the top of stack_a and the
    distance to the top of stack_b of the element under its target. Ties go
    to the element nearest the top of stack_a.
    """
    best: Optional[Move] = None
    for value in stack_a:
        target = find_target(value, stack_b)
        cost = distance_to_top(stack_a, value) + distance_to_top(
            stack_b, _below(stack_b, target)
        )
        if best is None or cost < best.cost:
            best = Move(value, target, cost)
    if best is None:
        raise EmptyStackError("cannot choose a move from an empty stack")
    return best


class Sorter:
    """Sorts distinct integers on two stacks and records the operations used.

    Stack a starts with the values, first value on top; when done it holds
    them in ascending order from the top and stack b is empty.
    """

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if len(set(items)) != len(items):
            raise ValueError("values must be distinct")
        self.stack_a = Stack(items)
        self.stack_b = Stack()
        self.operations: list[str] = []
        self._done = False
        a, b = self.stack_a, self.stack_b
        self._stacks = {"a": a, "b": b}
        self._actions: dict[str, Callable[[], None]] = {
            "sa": a.swap,
            "ra": a.rotate,
            "rra": a.reverse_rotate,
            "rb": b.rotate,
            "rrb": b.reverse_rotate,
            "pa": partial(b.push_to, a),
            "pb": partial(a.push_to, b),
        }

    def run(self) -> list[str]:
        """Sort the stacks once and return the operations, in order."""
        if not self._done:
            self._done = True
            size = len(self.stack_a)
            if size >= 2 and not is_sorted(self.stack_a):
                if size <= SMALL_INPUT_LIMIT:
                    self._sort_small(size)
                else:
                    self._sort_large()
        return list(self.operations)

    def _apply(self, operation: str) -> None:
        self._actions[operation]()
        self.operations.append(operation)

    def _bring_to_top(self, name: str, value: int, half: float) -> None:
        stack = self._stacks[name]
        stack.position(value)
        operation = f"r{name}" if half > 2 else f"rr{name}"
        while stack.top() != value:
            self._apply(operation)

    def _sort_small(self, size: int) -> None:
        if size == 2:
            # With two elements a rotation and a swap have the same effect.
            self._apply("ra")
        elif size == 3:
            self._sort_three()
        else:
            self._apply("pb")
            self._sort_four_five(size)

    def _sort_three(self) -> None:
        a = self.stack_a
        lowest = min(a)
        rank = _rank(a, lowest)
        if rank == 1:
            self._apply("rra")
            self._apply("sa")
        elif rank == 2:
            if a.top() > _below(a, lowest):
                self._apply("rra")
                self._apply("rra")
            else:
                self._apply("sa")
        else:
            first, second = list(a)[:2]
            if first > second:
                self._apply("sa")
            self._apply("rra")

    def _sort_four_five(self, size: int) -> None:
        a, b = self.stack_a, self.stack_b
        if size == 5:
            self._apply("pb")
        if not is_sorted(a):
            self._sort_three()
        target = find_target(b.top(), a)
        self._bring_to_top("a", target, len(a) / (_rank(a, target) + 1))
        self._apply("pa")
        if size == 5:
            target = find_target(b.top(), a)
            if target < b.top():
                target = min(a)
            self._bring_to_top("a", target, len(a) - 1 / (_rank(a, target) + 1))
            self._apply("pa")
        lowest = min(a)
        self._bring_to_top("a", lowest, len(a) / _rank(a, lowest) + 1)

    def _sort_large(self) -> None:
        a, b = self.stack_a, self.stack_b
        highest = max(a)
        self._bring_to_top("a", highest, (len(a) - 1) / (_rank(a, highest) + 1))
        self._apply("pb")
        self._apply("pb")
        move = cheapest_move(a, b)
        len_b = len(b)
        while len(a) > 1:
            len_a, len_b = len(a), len(b)
            self._bring_to_top("a", move.value, (len_a - 1) / (_rank(a, move.value) + 1))
            below = _below(b, move.target)
            self._bring_to_top("b", below, (len_b - 1) / (_rank(b, below) + 1))
            self._apply("pb")
            move = cheapest_move(a, b)
        below = _below(b, move.target)
        self._bring_to_top("b", below, len_b / (_rank(b, below) + 1))
        self._apply("pb")
        self._empty_b(len_b)

    def _empty_b(self, measured_len: int) -> None:
        b = self.stack_b
        highest = max(b)
        self._bring_to_top("b", highest, (measured_len - 1) / (_rank(b, highest) + 1))
        for _ in range(len(b)):
            self._apply("pa")


def sort_operations(values: Iterable[int]) -> list[str]:
    """The operations that sort values, first value on top; empty if sorted."""
    return Sorter(values).run()