"""Timing helpers for comparing functions over a list of inputs."""

from __future__ import annotations

import random
import time
from typing import Any, Callable, Sequence


def measure_one_case(func: Callable[..., Any], *args: Any) -> int:
    """Call ``func(*args)`` and return the elapsed time in nanoseconds."""
    start = time.perf_counter_ns()
    func(*args)
    return time.perf_counter_ns() - start


def measure_all_case(
    func_list: Sequence[Callable[..., Any]], arg_list: Sequence[tuple]
) -> list[list[int]]:
    """Time every function on every argument tuple, in nanoseconds."""
    return [[measure_one_case(func, *args) for args in arg_list] for func in func_list]


def time_to_string(nanoseconds: int) -> tuple[float, str]:
    """Express a duration in the largest unit of s, ms, us or ns it reaches."""
    count = float(nanoseconds)
    if count >= 1_000_000_000.0:
        return count / 1_000_000_000.0, "s"
    if count >= 1_000_000.0:
        return count / 1_000_000.0, "ms"
    if count >= 1000.0:
        return count / 1000.0, "us"
    return count, "ns"


def _ratio(value: int, minimum: int) -> float:
    if minimum:
        return value / minimum
    return float("inf") if value else float("nan")


def performance_measure(
    func_list: Sequence[Callable[..., Any]], arg_list: Sequence[tuple]
) -> list[list[int]]:
    """Time all cases, print a table per function and return the raw timings."""
    result = measure_all_case(func_list, arg_list)
    for index, times in enumerate(result):
        minimum = min(times, default=0)
        print(f"Function {index}")
        for elapsed in times:
            value, unit = time_to_string(elapsed)
            print(f"  {value:>6.1f} {unit:<2} ({_ratio(elapsed, minimum):>5.1f})")
        print()
    return result


def uniform_random_sequence(
    length: int,
    low: float,
    high: float,
    sorted_result: bool = False,
    unique: bool = False,
    seed: int = 0,
) -> list:
    """Generate ``length`` uniform random numbers in ``[low, high]``.

    Integer bounds give integers; with ``unique`` they are distinct.
    """
    integral = isinstance(low, int) and isinstance(high, int)
    rng = random.Random(seed)
    if integral:
        if length > high - low + 1:
            raise ValueError("length exceeds the number of values in range")
        if unique:
            pool = list(range(low, high + 1))
            rng.shuffle(pool)
            values = pool[:length]
        else:
            values = [rng.randint(low, high) for _ in range(length)]
    else:
        values = [rng.uniform(low, high) for _ in range(length)]
    if sorted_result:
        values.sort()
    return values