"""Small numeric and searching algorithms."""

from __future__ import annotations

import sys
from typing import Callable, Sequence, TypeVar

N = TypeVar("N")

EPSILON = sys.float_info.epsilon * 10
"""Allowed error of :func:`solve`."""


def count_binary_one(n: int) -> int:
    """Count the ones in the binary representation of ``n``."""
    if n <= 1:
        return n
    back = count_binary_one(n // 2)
    return back if n % 2 == 0 else back + 1


def selection(values: Sequence[N], k: int) -> N | None:
    """Return the ``k``-th largest element, or None if there are fewer than ``k``."""
    if len(values) < k:
        return None
    if k < 1:
        raise ValueError("k must be at least 1")
    return sorted(values, reverse=True)[k - 1]


def find_match(values: Sequence[int]) -> bool:
    """Tell whether a sorted sequence has an element equal to its 1-based position."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        position = mid + 1
        if position == values[mid]:
            return True
        if position < values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return False


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two positive integers, by halving."""
    if a <= 0 or b <= 0:
        raise ValueError("gcd needs positive integers")
    factor = 1
    while True:
        if a <= b:
            a, b = b, a
        if a % b == 0:
            return factor * b
        a_even, b_even = a % 2 == 0, b % 2 == 0
        if a_even and b_even:
            factor *= 2
            a, b = a // 2, b // 2
        elif a_even:
            a //= 2
        elif b_even:
            b //= 2
        else:
            a, b = (a + b) // 2, (a - b) // 2


def solve(func: Callable[[float], float], low: float, high: float) -> float:
    """Solve ``func(x) == 0`` by bisection, assuming func(low) < 0 < func(high)."""
    while True:
        mid = (low + high) / 2
        value = func(mid)
        if abs(value) < EPSILON:
            return mid
        if mid in (low, high):
            raise ArithmeticError("bisection did not converge")
        if value < 0:
            low = mid
        else:
            high = mid


def main(argv: Sequence[str] | None = None) -> None:
    """Print the number of ones in the binary form of the given integer."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        raise ValueError("Invalid Argument")
    n = int(args[0])
    print(f"binary format of {n} has {count_binary_one(n)} ones")


if __name__ == "__main__":
    main()