"""Site percolation model and threshold estimation."""

from .errors import InvalidDimension, OutOfRange
from .union_find import WeightedQuickUnionUF
from .grid import Percolation
from .sampling import NumpyRandomSource, RandomSource
from .stats import PercolationStats, format_report

__all__ = [
    'InvalidDimension', 'OutOfRange', 'WeightedQuickUnionUF', 'Percolation',
    'NumpyRandomSource', 'RandomSource', 'PercolationStats', 'format_report',
]
