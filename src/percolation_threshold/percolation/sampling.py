"""
Random coordinate sources for the Monte Carlo driver.
"""

from typing import Optional, Protocol, Union

import numpy as np


class RandomSource(Protocol):
    """Anything that can produce a uniform integer in [lo, hi], both inclusive."""

    def uniform(self, lo: int, hi: int) -> int:
        ...


class NumpyRandomSource:
    """
    Seedable random source backed by a numpy Generator.

    Args:
        seed: Seed, SeedSequence or None for fresh OS entropy
    """

    def __init__(self, seed: Optional[Union[int, np.random.SeedSequence]] = None):
        self.rng = np.random.default_rng(seed)

    def uniform(self, lo: int, hi: int) -> int:
        return int(self.rng.integers(lo, hi + 1))


def open_random_site(perc, source: RandomSource) -> tuple:
    """
    Open one uniformly chosen closed site of perc.

    Coordinates are drawn until a closed site turns up (rejection sampling).
    The grid must still have a closed site, which always holds before it
    percolates.

    Returns:
        The (row, col) that was opened
    """
    n = perc.n
    while True:
        row = source.uniform(1, n)
        col = source.uniform(1, n)
        if not perc.is_open(row, col):
            perc.open(row, col)
            return row, col
