"""Three ways to build a random permutation of 1..n, and their timing."""

from __future__ import annotations

import random
import sys
from typing import Sequence

from weiss.measure import performance_measure


class UniformDist:
    """Discrete uniform random integers drawn from a seeded generator."""

    def __init__(self, seed: int = 0) -> None:
        self._rng = random.Random(seed)

    def __call__(self, low: int, high: int) -> int:
        """Return a random integer in ``[low, high]``."""
        return self._rng.randint(low, high)


def _data(n: int) -> list[int]:
    return list(range(1, n + 1))


def permutation_by_value(n: int, seed: int = 0) -> list[int]:
    """Draw values until each one not yet taken has been taken once."""
    rand = UniformDist(seed)
    original = _data(n)
    result: list[int] = []
    while len(result) != len(original):
        value = original[rand(0, len(original) - 1)]
        if value not in result:
            result.append(value)
    return result


def permutation_with_flags(n: int, seed: int = 0) -> list[int]:
    """Draw positions, remembering which ones have been used."""
    rand = UniformDist(seed)
    original = _data(n)
    result: list[int] = []
    used = [False] * len(original)
    while len(result) != len(original):
        index = rand(0, len(original) - 1)
        if not used[index]:
            used[index] = True
            result.append(original[index])
    return result


def shuffle_permutation(n: int, seed: int = 0) -> list[int]:
    """Build the permutation in one pass by swapping each new value into place."""
    rand = UniformDist(seed)
    result: list[int] = []
    for i, value in enumerate(_data(n)):
        result.append(value)
        j = rand(0, i)
        result[j], result[i] = result[i], result[j]
    return result


def main(argv: Sequence[str] | None = None) -> None:
    """Time the three permutation builders on growing sizes."""
    del argv
    performance_measure([permutation_by_value], [(250,), (500,), (1000,), (2000,)])
    performance_measure(
        [permutation_with_flags],
        [(25000,), (50000,), (100000,), (200000,), (400000,), (800000,)],
    )
    performance_measure(
        [shuffle_permutation],
        [(100000,), (200000,), (400000,), (800000,), (1600000,), (3200000,), (6400000,)],
    )


if __name__ == "__main__":
    main(sys.argv[1:])