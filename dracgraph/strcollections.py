"""Simple collections of strings: a sorted set, a queue and a stack."""

from __future__ import annotations

import bisect
from collections import deque
from collections.abc import Iterator


def _show_items(items: Iterator[str]) -> None:
    for index, value in enumerate(items):
        print(f"[{index:03d}] {value}")


class SortedStringSet:
    """A set of strings kept in ascending order."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def insert(self, value: str) -> None:
        """Ensure ``value`` is in the set."""
        index = bisect.bisect_left(self._items, value)
        if index < len(self._items) and self._items[index] == value:
            return
        self._items.insert(index, value)

    def discard(self, value: str) -> None:
        """Ensure ``value`` is not in the set."""
        index = bisect.bisect_left(self._items, value)
        if index < len(self._items) and self._items[index] == value:
            del self._items[index]

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, str):
            return False
        index = bisect.bisect_left(self._items, value)
        return index < len(self._items) and self._items[index] == value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def show(self) -> None:
        """Print the set's elements in order."""
        if not self._items:
            print("Set is empty")
            return
        print(f"Set has {len(self._items)} elements:")
        _show_items(iter(self._items))


class StringQueue:
    """A first-in, first-out queue of strings."""

    def __init__(self) -> None:
        self._items: deque[str] = deque()

    def enter(self, value: str) -> None:
        """Add ``value`` at the back of the queue."""
        self._items.append(value)

    def leave(self) -> str:
        """Remove and return the string at the front of the queue."""
        if not self._items:
            raise IndexError("leave from an empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def show(self) -> None:
        """Print the queue from front to back."""
        if not self._items:
            print("Queue is empty")
            return
        print("Queue (front-to-back):")
        _show_items(iter(self._items))


class StringStack:
    """A last-in, first-out stack of strings."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def push(self, value: str) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> str:
        """Remove and return the string on top of the stack."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        """Iterate from the top of the stack to the bottom."""
        return iter(self._items[::-1])

    def show(self) -> None:
        """Print the stack from top to bottom."""
        if not self._items:
            print("Stack is empty")
            return
        print("Stack (top-to-bottom):")
        _show_items(iter(self))