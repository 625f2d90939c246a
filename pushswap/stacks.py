"""The stacks that push_swap operations act on."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator


class EmptyStackError(IndexError):
    """An operation needed at least one element on the stack."""


class Stack:
    """A stack of integers, iterated from top to bottom.

    Supports the push_swap operations: rotate (top goes to the bottom),
    reverse rotate (bottom comes to the top), swap of the two top elements
    and pushing the top element onto another stack.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def _require_items(self, action: str) -> None:
        if not self._items:
            raise EmptyStackError(f"cannot {action} an empty stack")

    def top(self) -> int:
        """The element on top."""
        self._require_items("read the top of")
        return self._items[0]

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        self._require_items("rotate")
        self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        self._require_items("reverse-rotate")
        self._items.rotate(1)

    def swap(self) -> None:
        """Exchange the two top elements; a single element stays put."""
        self._require_items("swap")
        if len(self._items) >= 2:
            self._items[0], self._items[1] = self._items[1], self._items[0]

    def push_to(self, other: Stack) -> None:
        """Take the top element off this stack and put it on top of other."""
        self._require_items("push from")
        other._items.appendleft(self._items.popleft())

    def position(self, value: int) -> int:
        """Zero-based distance of value from the top; ValueError if absent."""
        try:
            return self._items.index(value)
        except ValueError:
            raise ValueError(f"{value} is not on the stack") from None