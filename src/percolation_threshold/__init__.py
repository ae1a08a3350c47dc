"""
Percolation Threshold - Monte Carlo estimation of the site percolation threshold.

This package provides tools for:
- Incremental site percolation on n-by-n grids (dual union-find, no backwash)
- Repeated randomized trials with mean, stddev and 95% confidence interval
- Replaying and rendering site-opening sequences
"""

__version__ = "1.0.0"
