"""
Exceptions raised by the percolation model.
"""


class InvalidDimension(ValueError):
    """Grid size, trial count, worker count or union-find size is not positive."""


class OutOfRange(IndexError):
    """A grid coordinate or union-find index lies outside the valid range."""
