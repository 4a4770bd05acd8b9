"""Doubly linked lists: a set-like list and a sentinel-based list with positions."""

from __future__ import annotations

import sys
from typing import Any, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

_SENTINEL: Any = object()


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(
        self, value: Any, prev: _Node | None = None, next: _Node | None = None
    ) -> None:
        self.value = value
        self.prev = prev
        self.next = next

    @property
    def is_sentinel(self) -> bool:
        return self.value is _SENTINEL


class Position(Generic[T]):
    """A place in a :class:`List`: an element, or the end marker."""

    __slots__ = ("_node",)

    def __init__(self, node: _Node) -> None:
        self._node = node

    @property
    def value(self) -> T:
        """The element at this position; IndexError at a list boundary."""
        if self._node.is_sentinel:
            raise IndexError("position does not hold an element")
        return self._node.value

    @value.setter
    def value(self, new_value: T) -> None:
        if self._node.is_sentinel:
            raise IndexError("position does not hold an element")
        self._node.value = new_value

    def next(self) -> Position[T]:
        """The position one step towards the end."""
        if self._node.next is None:
            raise IndexError("cannot move past the end of the list")
        return Position(self._node.next)

    def prev(self) -> Position[T]:
        """The position one step towards the front."""
        if self._node.prev is None:
            raise IndexError("cannot move before the front of the list")
        return Position(self._node.prev)

    def __add__(self, n: int) -> Position[T]:
        if n < 0:
            return self - (-n)
        position = self
        for _ in range(n):
            position = position.next()
        return position

    def __sub__(self, n: int) -> Position[T]:
        if n < 0:
            return self + (-n)
        position = self
        for _ in range(n):
            position = position.prev()
        return position

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)


class List(Generic[T]):
    """A doubly linked list with head and tail sentinels."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head = _Node(_SENTINEL)
        self._tail = _Node(_SENTINEL, prev=self._head)
        self._head.next = self._tail
        self._size = 0
        for value in values:
            self.push_back(value)

    def begin(self) -> Position[T]:
        """Position of the first element (the end if the list is empty)."""
        return Position(self._head.next)

    def end(self) -> Position[T]:
        """The end marker, one past the last element."""
        return Position(self._tail)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head.next
        while node is not self._tail:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail.prev
        while node is not self._head:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"List({list(self)!r})"

    def copy(self) -> List[T]:
        """A new list holding the same elements."""
        return List(self)

    def clear(self) -> None:
        while self._size:
            self.pop_front()

    def front(self) -> T:
        if not self._size:
            raise IndexError("front of empty list")
        return self._head.next.value

    def back(self) -> T:
        if not self._size:
            raise IndexError("back of empty list")
        return self._tail.prev.value

    def push_front(self, value: T) -> None:
        self.insert(self.begin(), value)

    def push_back(self, value: T) -> None:
        self.insert(self.end(), value)

    def pop_front(self) -> T:
        """Remove and return the first element."""
        value = self.front()
        self.erase(self.begin())
        return value

    def pop_back(self) -> T:
        """Remove and return the last element."""
        value = self.back()
        self.erase(self.end().prev())
        return value

    def insert(self, position: Position[T], value: T) -> Position[T]:
        """Insert ``value`` before ``position``; return the new element's position."""
        node = position._node
        if node.prev is None:
            raise ValueError("cannot insert before the head of the list")
        new_node = _Node(value, node.prev, node)
        node.prev.next = new_node
        node.prev = new_node
        self._size += 1
        return Position(new_node)

    def erase(self, position: Position[T]) -> Position[T]:
        """Remove the element at ``position``; return the position after it."""
        node = position._node
        if node.is_sentinel:
            raise ValueError("cannot erase a list boundary")
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return Position(node.next)

    def erase_range(self, start: Position[T], stop: Position[T]) -> Position[T]:
        """Remove the elements from ``start`` up to but not including ``stop``."""
        position = start
        while position != stop:
            position = self.erase(position)
        return stop

    def splice(self, position: Position[T], other: List[T]) -> None:
        """Move every element of ``other`` before ``position``, leaving it empty."""
        if other is self:
            raise ValueError("cannot splice a list into itself")
        if not other._size:
            return
        node = position._node
        if node.prev is None:
            raise ValueError("cannot splice before the head of the list")
        first = other._head.next
        last = other._tail.prev
        node.prev.next = first
        first.prev = node.prev
        node.prev = last
        last.next = node
        self._size += other._size

        other._head.next = other._tail
        other._tail.prev = other._head
        other._size = 0


class UniqueList(Generic[T]):
    """A linked list whose ``insert`` refuses elements already present."""

    def __init__(self) -> None:
        self._list: List[T] = List()

    def push_back(self, obj: T) -> None:
        """Append ``obj`` without checking for duplicates."""
        self._list.push_back(obj)

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[T]:
        return iter(self._list)

    def __contains__(self, obj: object) -> bool:
        return any(item == obj for item in self._list)

    def print(self) -> None:
        """Write the elements to stdout, each followed by a space, then a newline."""
        line = "".join(f"{item} " for item in self._list)
        sys.stdout.write(line + "\n")

    def contains(self, obj: T) -> bool:
        return obj in self

    def insert(self, obj: T) -> bool:
        """Append ``obj`` unless present; tell whether it was added."""
        if obj in self:
            return False
        self._list.push_back(obj)
        return True

    def remove(self, obj: T) -> None:
        """Remove the first occurrence of ``obj``, if any."""
        position = self._list.begin()
        end = self._list.end()
        while position != end:
            if position.value == obj:
                self._list.erase(position)
                return
            position = position.next()