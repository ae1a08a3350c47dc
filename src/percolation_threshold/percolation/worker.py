"""
Trial workers for threshold estimation.

A trial opens random sites on a fresh grid until it percolates and reports
the fraction of open sites at that moment. Trials share no state, so they
can be fanned out over worker processes and aggregated afterwards.
"""

import multiprocessing as mp
from typing import List, Sequence, Tuple

import numpy as np

from .grid import Percolation
from .sampling import NumpyRandomSource, RandomSource, open_random_site


def run_trial(n: int, source: RandomSource) -> float:
    """
    Run one percolation trial on an n-by-n grid.

    Args:
        n: Grid side length
        source: Random coordinate source

    Returns:
        Fraction of sites open when the grid first percolates
    """
    perc = Percolation(n)
    while not perc.percolates():
        open_random_site(perc, source)
    return perc.number_of_open_sites() / (n * n)


def _run_seeded_trial(task: Tuple[int, np.random.SeedSequence]) -> float:
    n, seed_seq = task
    return run_trial(n, NumpyRandomSource(seed_seq))


def run_trials(
    n: int,
    seeds: Sequence[np.random.SeedSequence],
    workers: int = 1,
) -> List[float]:
    """
    Run one trial per seed and return the fractions in seed order.

    Args:
        n: Grid side length
        seeds: One child SeedSequence per trial
        workers: Number of processes (1 runs everything in-process)

    Returns:
        List of open-site fractions, one per trial
    """
    tasks = [(n, s) for s in seeds]

    if workers == 1 or len(tasks) <= 1:
        return [_run_seeded_trial(t) for t in tasks]

    processes = min(workers, len(tasks))
    with mp.Pool(processes=processes) as pool:
        return pool.map(_run_seeded_trial, tasks)
