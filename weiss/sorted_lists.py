"""Algorithms over lists: selection by position, sorted set operations, Josephus."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


def print_lots(values: Iterable[T], positions: Iterable[int]) -> None:
    """Print the elements of ``values`` at each of ``positions``, in that order."""
    items = list(values)
    selected = []
    for position in positions:
        if not 0 <= position < len(items):
            raise IndexError(f"position {position} out of range")
        selected.append(items[position])
    print("".join(f"{item} " for item in selected))


def find(values: Iterable[T], target: T) -> int | None:
    """Index of the first element equal to ``target``, or None."""
    return next(
        (index for index, value in enumerate(values) if value == target), None
    )


def get_intersection(left: Sequence[T], right: Sequence[T]) -> list[T]:
    """The intersection of two sorted sequences, in sorted order."""
    result: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] == right[j]:
            result.append(left[i])
            i += 1
            j += 1
        elif left[i] < right[j]:
            i += 1
        else:
            j += 1
    return result


def get_union(left: Sequence[T], right: Sequence[T]) -> list[T]:
    """The union of two sorted sequences, in sorted order."""
    result: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] == right[j]:
            result.append(left[i])
            i += 1
            j += 1
        elif left[i] < right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def josephus(m: int, n: int) -> int:
    """Survivor of ``n`` people in a circle when every pass of ``m`` removes one."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if m < 0:
        raise ValueError("m must not be negative")
    circle = deque(range(1, n + 1))
    while len(circle) > 1:
        circle.rotate(-m)
        circle.popleft()
    return circle[0]


def reverse_print(values: Iterable[T]) -> None:
    """Print the elements last to first, each followed by a space."""
    stack = list(values)
    print("".join(f"{item} " for item in reversed(stack)))