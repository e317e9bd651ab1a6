"""
Weighted quick-union with path compression.

One UnionFind is used per connectivity structure of a PercolationGrid;
the grid keeps two of them to answer fullness queries without backwash.
"""

import numpy as np

from ..exceptions import OutOfRange, check_positive


class UnionFind:
    """
    Disjoint-set forest over the elements 0..n-1.

    Trees are linked by size (smaller under larger) and paths are
    compressed on every find, so operations are amortized near-constant.
    """

    def __init__(self, n: int):
        """
        Initialize n singleton sets.

        Args:
            n: Number of elements
        """
        self.n = check_positive(n, "Union-find size")
        self.parent = np.arange(self.n, dtype=np.int64)
        self.size = np.ones(self.n, dtype=np.int64)
        self.count = self.n

    def __len__(self) -> int:
        return self.n

    def _validate(self, p: int) -> None:
        if p < 0 or p >= self.n:
            raise OutOfRange(f"Index {p} is not between 0 and {self.n - 1}")

    def find(self, p: int) -> int:
        """Return the root of the set containing p."""
        self._validate(p)
        parent = self.parent

        root = p
        while root != parent[root]:
            root = parent[root]

        # Point every node on the path straight at the root
        while p != root:
            parent[p], p = root, parent[p]

        return int(root)

    def connected(self, p: int, q: int) -> bool:
        """Check whether p and q belong to the same set."""
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> None:
        """Merge the sets containing p and q."""
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return

        if self.size[root_p] < self.size[root_q]:
            root_p, root_q = root_q, root_p

        self.parent[root_q] = root_p
        self.size[root_p] += self.size[root_q]
        self.count -= 1
