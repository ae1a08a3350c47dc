"""
Weighted quick-union with path compression.

Disjoint-set forest over a fixed number of elements, used by the grid model
to track which sites are connected to the virtual top and bottom rows.
"""

import numpy as np

from .errors import InvalidDimension, OutOfRange


class WeightedQuickUnionUF:
    """
    Union-find over elements 0..m-1 using union by size and path compression.

    Every element starts as its own singleton set. Unions only ever merge
    sets, so connectivity grows monotonically.

    Example:
        uf = WeightedQuickUnionUF(10)
        uf.union(3, 4)
        uf.connected(3, 4)  # True
    """

    def __init__(self, m: int):
        """
        Initialize a forest of m singleton sets.

        Args:
            m: Number of elements (must be >= 1)
        """
        if m <= 0:
            raise InvalidDimension(f"union-find size must be > 0, got {m}")

        # parent[i] = parent of element i (roots point to themselves)
        self.parent = np.arange(m, dtype=np.int64)
        # size[i] = number of elements in the tree rooted at i (valid for roots only)
        self.size = np.ones(m, dtype=np.int64)
        self.count = m

    def __len__(self) -> int:
        return len(self.parent)

    def _validate(self, p: int) -> None:
        m = len(self.parent)
        if p < 0 or p >= m:
            raise OutOfRange(f"index {p} is not between 0 and {m - 1}")

    def find(self, p: int) -> int:
        """
        Return the root of the set containing p.

        Every element visited on the way up is relinked directly to the root.
        """
        self._validate(p)
        parent = self.parent

        root = p
        while root != parent[root]:
            root = parent[root]

        while p != root:
            next_p = parent[p]
            parent[p] = root
            p = next_p

        return int(root)

    def connected(self, a: int, b: int) -> bool:
        """True iff a and b belong to the same set."""
        return self.find(a) == self.find(b)

    def union(self, a: int, b: int) -> None:
        """
        Merge the sets containing a and b.

        The smaller tree is attached under the root of the larger one.
        No-op when a and b are already in the same set.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return

        if self.size[root_a] < self.size[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        self.size[root_a] += self.size[root_b]
        self.count -= 1
