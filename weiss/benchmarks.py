"""Loops of known growth rates and timing runs of the chapter's algorithms."""

from __future__ import annotations

import random
import sys
import time
from typing import Sequence

from weiss.algorithms import selection
from weiss.measure import performance_measure, uniform_random_sequence
from weiss.sorted_lists import josephus, print_lots
from weiss.stacks import MinStack

_INT_MAX = 2**31 - 1


def loop0(n: int) -> int:
    total = 0
    for _ in range(n):
        total += 1
    return total


def loop1(n: int) -> int:
    total = 0
    for _ in range(n):
        for _ in range(n):
            total += 1
    return total


def loop2(n: int) -> int:
    total = 0
    for _ in range(n):
        for _ in range(n * n):
            total += 1
    return total


def loop3(n: int) -> int:
    total = 0
    for i in range(n):
        for _ in range(i):
            total += 1
    return total


def loop4(n: int) -> int:
    total = 0
    for _ in range(n):
        for j in range(n):
            for _ in range(j):
                total += 1
    return total


def loop5(n: int) -> int:
    total = 0
    for i in range(1, n):
        for j in range(1, i):
            if j % i == 0:
                for _ in range(j):
                    total += 1
    return total


def sum1(n: int) -> int:
    total = 0
    for _ in range(n):
        total += 1
    return total


def sum2(n: int) -> int:
    total = 0
    for i in range(n):
        for _ in range(i):
            total += 1
    return total


def run_min_stack(n: int) -> int | None:
    """Push 0..n-1 onto a MinStack querying it each time, then pop everything.

    Returns the minimum held just before the pops, or None when ``n`` is 0.
    """
    stack: MinStack[int] = MinStack()
    for i in range(n):
        stack.push(i)
        stack.top()
        stack.find_min()
    minimum = stack.find_min() if n else None
    for _ in range(n):
        stack.pop()
    return minimum


def _sizes(argv: Sequence[str] | None, default: Sequence[int]) -> list[int]:
    args = list(sys.argv[1:] if argv is None else argv)
    return [int(arg) for arg in args] if args else list(default)


def loop_main(argv: Sequence[str] | None = None) -> None:
    """Time the six loops on the given sizes (default 10, 100, 1000)."""
    sizes = _sizes(argv, (10, 100, 1000))
    performance_measure(
        [loop0, loop1, loop2, loop3, loop4, loop5], [(n,) for n in sizes]
    )


def selection_time_main(argv: Sequence[str] | None = None) -> None:
    """Time selecting the median of random vectors of growing size."""
    sizes = _sizes(argv, [10**i for i in range(1, 10)])
    rng = random.Random(0)
    for num in sizes:
        values = [rng.randint(0, _INT_MAX) for _ in range(num)]
        start = time.perf_counter_ns()
        selection(values, len(values) // 2)
        elapsed_ms = (time.perf_counter_ns() - start) // 1_000_000
        print(f"#{num}: {elapsed_ms}ms")


def josephus_main(argv: Sequence[str] | None = None) -> None:
    """Time the Josephus problem with m = 1 on growing circles."""
    sizes = _sizes(argv, (10000, 100000, 1000000))
    performance_measure([josephus], [(1, n) for n in sizes])


def min_stack_main(argv: Sequence[str] | None = None) -> None:
    """Time MinStack pushes, queries and pops on growing sizes."""
    sizes = _sizes(argv, (10000, 100000, 1000000))
    performance_measure([run_min_stack], [(n,) for n in sizes])


def two_lists_main(argv: Sequence[str] | None = None) -> None:
    """Time print_lots on sorted random lists of growing size."""
    sizes = _sizes(argv, (500, 5000, 50000))
    cases = []
    for size in sizes:
        values = uniform_random_sequence(size, 0, 2 * size, True, True)
        # Positions are kept inside the list so every lookup is valid.
        positions = uniform_random_sequence(size // 2, 0, size - 1, True, True)
        cases.append((values, positions))
    performance_measure([print_lots], cases)


if __name__ == "__main__":
    loop_main()