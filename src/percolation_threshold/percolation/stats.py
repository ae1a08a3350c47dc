"""
Monte Carlo estimation of the site percolation threshold.

Runs independent trials on fresh grids, records the fraction of open sites
at the moment each grid percolates, and summarizes the sample with its mean,
Bessel-corrected standard deviation and a 95% confidence interval.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np

from .errors import InvalidDimension
from .sampling import RandomSource
from .worker import run_trial, run_trials

CONFIDENCE_95 = 1.96


class PercolationStats:
    """
    Percolation threshold estimate from repeated randomized trials.

    All statistics are computed once in the constructor.

    Example:
        ps = PercolationStats(200, 100, seed=42)
        print(format_report(ps))
    """

    def __init__(
        self,
        n: int,
        trials: int,
        random_source: Optional[RandomSource] = None,
        seed: Optional[int] = None,
        workers: int = 1,
    ):
        """
        Run the trials and compute the summary statistics.

        Args:
            n: Grid side length (must be > 0)
            trials: Number of independent trials (must be > 0)
            random_source: Coordinate source shared by all trials; when given,
                trials run serially, seed is ignored and workers must be 1
            seed: Seed for per-trial random streams (None for OS entropy)
            workers: Number of worker processes (must be > 0)
        """
        if n <= 0:
            raise InvalidDimension(f"grid size must be > 0, got {n}")
        if trials <= 0:
            raise InvalidDimension(f"trial count must be > 0, got {trials}")
        if workers <= 0:
            raise InvalidDimension(f"worker count must be > 0, got {workers}")
        if random_source is not None and workers > 1:
            raise ValueError("random_source trials run serially, workers must be 1")

        if random_source is not None:
            fractions = [run_trial(n, random_source) for _ in range(trials)]
        else:
            # One child stream per trial keeps results independent of worker count
            seeds = np.random.SeedSequence(seed).spawn(trials)
            fractions = run_trials(n, seeds, workers=workers)

        self._set_sample(n, fractions)

    @classmethod
    def from_fractions(cls, n: int, fractions) -> 'PercolationStats':
        """Build an estimate from an existing sample without running trials."""
        if n <= 0:
            raise InvalidDimension(f"grid size must be > 0, got {n}")
        if len(fractions) == 0:
            raise InvalidDimension("trial count must be > 0, got 0")
        stats = cls.__new__(cls)
        stats._set_sample(n, fractions)
        return stats

    def _set_sample(self, n: int, fractions) -> None:
        sample = np.asarray(fractions, dtype=np.float64)
        sample.setflags(write=False)

        self.n = n
        self.trials = len(sample)
        self.fractions = sample

        self._mean = float(np.mean(sample))
        if self.trials > 1:
            self._stddev = float(np.std(sample, ddof=1))
        else:
            self._stddev = float('nan')

        half_width = CONFIDENCE_95 * self._stddev / np.sqrt(self.trials)
        self._confidence_lo = self._mean - half_width
        self._confidence_hi = self._mean + half_width

    def mean(self) -> float:
        return self._mean

    def stddev(self) -> float:
        """Sample standard deviation; nan when only one trial was run."""
        return self._stddev

    def confidence_lo(self) -> float:
        return self._confidence_lo

    def confidence_hi(self) -> float:
        return self._confidence_hi

    def summary(self) -> Dict[str, Any]:
        return {
            'n': self.n,
            'trials': self.trials,
            'mean': self._mean,
            'stddev': self._stddev,
            'confidence_lo': self._confidence_lo,
            'confidence_hi': self._confidence_hi,
        }

    def save(self, filename: Union[str, Path]) -> None:
        """
        Save the trial sample to file.

        Args:
            filename: Path to output .npz file
        """
        np.savez(filename, n=self.n, trials=self.trials, fractions=self.fractions)

    @classmethod
    def load(cls, filename: Union[str, Path]) -> 'PercolationStats':
        """
        Load a trial sample saved with save() and recompute its statistics.

        Args:
            filename: Path to input .npz file
        """
        with np.load(filename) as dump:
            return cls.from_fractions(int(dump['n']), dump['fractions'])


def format_report(stats: PercolationStats) -> str:
    """Render mean, stddev and confidence interval as labelled lines."""
    lines = [
        f"{'mean':<24}= {stats.mean():.16f}",
        f"{'stddev':<24}= {stats.stddev():.16f}",
        f"{'95% confidence interval':<24}= "
        f"[{stats.confidence_lo():.16f}, {stats.confidence_hi():.16f}]",
    ]
    return "\n".join(lines)
