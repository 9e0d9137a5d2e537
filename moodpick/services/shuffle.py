"""Reproducible pseudo-random ordering helpers.

The generator is a small linear congruential generator so that the same
``(length, seed)`` pair produces the same order everywhere it is reimplemented.
"""

from __future__ import annotations

from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")

LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280


def lcg_draws(seed: int) -> Iterator[float]:
    """Yield an endless stream of draws in ``[0, 1)`` for ``seed``."""

    state = seed % LCG_MODULUS
    while True:
        state = (state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        yield state / LCG_MODULUS


def seeded_shuffle(items: Sequence[T], seed: int) -> list[T]:
    """Return a Fisher-Yates permutation of ``items`` driven by the LCG."""

    shuffled = list(items)
    if len(shuffled) < 2:
        return shuffled
    draws = lcg_draws(seed)
    for index in range(len(shuffled) - 1, 0, -1):
        swap_with = int(next(draws) * (index + 1))
        shuffled[index], shuffled[swap_with] = shuffled[swap_with], shuffled[index]
    return shuffled


def select_index(count: int, seed: int) -> int:
    """Pick a position in ``[0, count)`` without shuffling the whole list."""

    if count <= 0:
        raise ValueError("count must be positive")
    return seed % count
