"""Simple unordered and ordered collections."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Collection(Generic[T]):
    """An unordered bag of objects supporting insertion, removal and lookup."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def is_empty(self) -> bool:
        return not self._items

    def make_empty(self) -> None:
        self._items.clear()

    def insert(self, obj: T) -> None:
        self._items.append(obj)

    def remove(self, obj: T) -> None:
        """Remove the first occurrence of ``obj``; raise ValueError if absent."""
        try:
            self._items.remove(obj)
        except ValueError:
            raise ValueError("Remove Failed") from None

    def contains(self, obj: T) -> bool:
        return obj in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, obj: object) -> bool:
        return obj in self._items


class OrderedCollection(Generic[T]):
    """A collection of comparable objects that can report its minimum and maximum."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def is_empty(self) -> bool:
        return not self._items

    def make_empty(self) -> None:
        self._items.clear()

    def insert(self, elem: T) -> None:
        self._items.append(elem)

    def remove(self, elem: T) -> None:
        """Remove the first occurrence of ``elem``; raise ValueError if absent."""
        try:
            self._items.remove(elem)
        except ValueError:
            raise ValueError("Remove Failed") from None

    def find_min(self) -> T:
        if not self._items:
            raise ValueError("Empty")
        return min(self._items)

    def find_max(self) -> T:
        if not self._items:
            raise ValueError("Empty")
        return max(self._items)

    def __len__(self) -> int:
        return len(self._items)