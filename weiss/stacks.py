"""Stack-like containers: a stack with minimum, several stacks in one array, a deque
and a self-adjusting list."""

from __future__ import annotations

from collections import deque
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


class MinStack(Generic[T]):
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._entries: list[tuple[T, T]] = []

    def push(self, obj: T) -> None:
        minimum = obj if not self._entries else min(obj, self._entries[-1][1])
        self._entries.append((obj, minimum))

    def top(self) -> T:
        if not self._entries:
            raise IndexError("Empty stack")
        return self._entries[-1][0]

    def pop(self) -> T:
        """Remove and return the top element."""
        if not self._entries:
            raise IndexError("Empty stack")
        return self._entries.pop()[0]

    def find_min(self) -> T:
        if not self._entries:
            raise IndexError("Empty stack")
        return self._entries[-1][1]

    def __len__(self) -> int:
        return len(self._entries)


class MultiStack(Generic[T]):
    """Several stacks sharing one fixed-size array, their slots interleaved."""

    CAPACITY = 10000

    def __init__(self, num_stacks: int) -> None:
        if num_stacks < 1:
            raise ValueError("num_stacks must be at least 1")
        self._num_stacks = num_stacks
        self._array: list[Any] = [None] * self.CAPACITY
        self._next = list(range(num_stacks))

    def _check(self, n: int) -> None:
        if not 0 <= n < self._num_stacks:
            raise IndexError(f"no stack numbered {n}")

    def _check_not_empty(self, n: int) -> None:
        self._check(n)
        if self._next[n] < self._num_stacks:
            raise IndexError(f"stack {n} is empty")

    def push(self, n: int, obj: T) -> None:
        self._check(n)
        slot = self._next[n]
        if slot >= self.CAPACITY:
            raise OverflowError(f"stack {n} is full")
        self._array[slot] = obj
        self._next[n] += self._num_stacks

    def top(self, n: int) -> T:
        self._check_not_empty(n)
        return self._array[self._next[n] - self._num_stacks]

    def pop(self, n: int) -> T:
        """Remove and return the top element of stack ``n``."""
        self._check_not_empty(n)
        self._next[n] -= self._num_stacks
        slot = self._next[n]
        value = self._array[slot]
        self._array[slot] = None
        return value


class Deque(Generic[T]):
    """A double-ended queue: push/pop at the front, inject/eject at the back."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def push(self, obj: T) -> None:
        self._items.appendleft(obj)

    def pop(self) -> T:
        if not self._items:
            raise IndexError("pop from an empty deque")
        return self._items.popleft()

    def inject(self, obj: T) -> None:
        self._items.append(obj)

    def eject(self) -> T:
        if not self._items:
            raise IndexError("eject from an empty deque")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class SelfAdjustingList(Generic[T]):
    """A bounded list that moves every element it finds to the front."""

    CAPACITY = 1000

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, obj: T) -> None:
        """Add ``obj`` at the front."""
        if len(self._items) >= self.CAPACITY:
            raise OverflowError("Array is Full!")
        self._items.insert(0, obj)

    def first(self) -> T:
        if not self._items:
            raise IndexError("empty list")
        return self._items[0]

    def find(self, obj: T) -> bool:
        """Look ``obj`` up and, if present, move it to the front."""
        for index, item in enumerate(self._items):
            if item == obj:
                if index:
                    self._items.insert(0, self._items.pop(index))
                return True
        return False

    def remove(self, obj: T) -> None:
        """Remove the first occurrence of ``obj``; ValueError if absent."""
        try:
            self._items.remove(obj)
        except ValueError:
            raise ValueError(f"{obj!r} not in list") from None

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)