"""
Site percolation on an n-by-n grid.

The grid tracks which sites are open and which open sites are connected to
the top row. Two union-find structures are maintained:

- the percolation structure holds a virtual top and a virtual bottom site and
  answers percolates();
- the fullness structure holds only the virtual top and answers is_full().

Keeping the virtual bottom out of the fullness structure prevents backwash:
once the system percolates, a bottom-row site that only touches the virtual
bottom would otherwise appear connected to the top.
"""

import numpy as np

from .errors import InvalidDimension, OutOfRange
from .union_find import WeightedQuickUnionUF


class Percolation:
    """
    Open/closed state of an n-by-n grid with incremental connectivity.

    Coordinates are 1-indexed: rows and columns run from 1 to n. Sites can
    only be opened, never closed again.

    Example:
        perc = Percolation(3)
        perc.open(1, 2)
        perc.open(2, 2)
        perc.open(3, 2)
        perc.percolates()  # True
    """

    def __init__(self, n: int):
        """
        Initialize an n-by-n grid with every site closed.

        Args:
            n: Side length of the grid (must be >= 1)
        """
        if n <= 0:
            raise InvalidDimension(f"grid size must be > 0, got {n}")

        self._n = n
        self._open = np.zeros((n, n), dtype=bool)
        self._n_open = 0

        # Index 0 is the virtual top, n*n + 1 the virtual bottom
        self._top = 0
        self._bottom = n * n + 1
        self._perc_uf = WeightedQuickUnionUF(n * n + 2)
        self._full_uf = WeightedQuickUnionUF(n * n + 1)

    @property
    def n(self) -> int:
        return self._n

    def _validate(self, row: int, col: int) -> None:
        n = self._n
        if not isinstance(row, (int, np.integer)) or not isinstance(col, (int, np.integer)):
            raise OutOfRange(f"site ({row!r}, {col!r}) must have integer coordinates")
        if row < 1 or row > n or col < 1 or col > n:
            raise OutOfRange(f"site ({row}, {col}) is outside [1, {n}] x [1, {n}]")

    def _index(self, row: int, col: int) -> int:
        return (row - 1) * self._n + (col - 1) + 1

    def _neighbors(self, row: int, col: int):
        n = self._n
        for r, c in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if 1 <= r <= n and 1 <= c <= n:
                yield r, c

    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) if it is not open already.

        The site is joined to every open neighbour in both structures. Top-row
        sites are joined to the virtual top in both structures; bottom-row
        sites are joined to the virtual bottom in the percolation structure only.
        """
        self._validate(row, col)
        if self._open[row - 1, col - 1]:
            return

        self._open[row - 1, col - 1] = True
        self._n_open += 1

        site = self._index(row, col)
        for r, c in self._neighbors(row, col):
            if self._open[r - 1, c - 1]:
                neighbor = self._index(r, c)
                self._perc_uf.union(site, neighbor)
                self._full_uf.union(site, neighbor)

        if row == 1:
            self._perc_uf.union(site, self._top)
            self._full_uf.union(site, self._top)
        if row == self._n:
            self._perc_uf.union(site, self._bottom)

    def is_open(self, row: int, col: int) -> bool:
        """True iff site (row, col) has been opened."""
        self._validate(row, col)
        return bool(self._open[row - 1, col - 1])

    def is_full(self, row: int, col: int) -> bool:
        """True iff site (row, col) is open and connected to the top row."""
        self._validate(row, col)
        if not self._open[row - 1, col - 1]:
            return False
        return self._full_uf.connected(self._index(row, col), self._top)

    def number_of_open_sites(self) -> int:
        return self._n_open

    def percolates(self) -> bool:
        """True iff an open path connects the top row to the bottom row."""
        return self._perc_uf.connected(self._top, self._bottom)

    def open_mask(self) -> np.ndarray:
        """Return a read-only copy of the open/closed state, shape (n, n)."""
        mask = self._open.copy()
        mask.setflags(write=False)
        return mask

    def full_mask(self) -> np.ndarray:
        """Return a boolean array of shape (n, n) marking full sites."""
        n = self._n
        full = np.zeros((n, n), dtype=bool)
        for r, c in zip(*np.nonzero(self._open)):
            full[r, c] = self._full_uf.connected(self._index(r + 1, c + 1), self._top)
        return full
