"""
Site percolation on an N-by-N grid.

Each site is open or blocked. A full site is an open site connected to the
top row through a chain of open neighbours (up, down, left, right); the grid
percolates when some bottom-row site is full.

Connectivity is tracked incrementally with two union-find structures:

    sites              N*N + 2 elements: every site, virtual top (0) and
                       virtual bottom (N*N + 1)
    sites_no_bottom    N*N + 1 elements: every site and virtual top only

percolates() asks the first structure whether the virtual nodes meet. is_full()
asks the second, so an open bottom-row site is never reported full just
because it reaches the top through the virtual bottom node (backwash).
"""

import numpy as np

from .union_find import UnionFind
from ..exceptions import OutOfRange, check_positive


class PercolationGrid:
    """
    Open/blocked state of an N-by-N grid with 1-based (row, col) coordinates.

    Example:
        grid = PercolationGrid(3)
        for row in (1, 2, 3):
            grid.open(row, 2)
        grid.percolates()  # True
    """

    def __init__(self, n: int):
        """
        Create a grid with every site blocked.

        Args:
            n: Side length of the grid
        """
        self.n = check_positive(n, "Grid size")
        self.top = 0
        self.bottom = self.n * self.n + 1

        self._open = np.zeros((self.n, self.n), dtype=bool)
        self._n_open = 0
        self.sites = UnionFind(self.n * self.n + 2)
        self.sites_no_bottom = UnionFind(self.n * self.n + 1)

    def open(self, row: int, col: int) -> None:
        """Open a site and connect it to its open neighbours."""
        self._check_bounds(row, col)
        if self._open[row - 1, col - 1]:
            return

        self._open[row - 1, col - 1] = True
        self._n_open += 1
        self._connect_to_open_neighbours(row, col)

    def is_open(self, row: int, col: int) -> bool:
        self._check_bounds(row, col)
        return bool(self._open[row - 1, col - 1])

    def is_full(self, row: int, col: int) -> bool:
        """Check whether an open site is connected to the top row."""
        self._check_bounds(row, col)
        return (
            self.is_open(row, col)
            and self.sites_no_bottom.connected(self.top, self._index(row, col))
        )

    def percolates(self) -> bool:
        """Check whether the grid connects top to bottom."""
        # A 1x1 grid's top and bottom row are the same site
        if self.n == 1:
            return self.is_open(1, 1)
        return self.sites.connected(self.top, self.bottom)

    def number_of_open_sites(self) -> int:
        return self._n_open

    def _in_bounds(self, row: int, col: int) -> bool:
        return 1 <= row <= self.n and 1 <= col <= self.n

    def _check_bounds(self, row: int, col: int) -> None:
        if not self._in_bounds(row, col):
            raise OutOfRange(
                f"Grid coordinates not within [1, {self.n}] (row={row}, col={col})"
            )

    def _index(self, row: int, col: int) -> int:
        return (row - 1) * self.n + col

    def _connect_to_open_neighbours(self, row: int, col: int) -> None:
        index = self._index(row, col)

        if row == 1:
            self.sites.union(self.top, index)
            self.sites_no_bottom.union(self.top, index)
        if row == self.n:
            # Virtual bottom exists only in the percolation structure
            self.sites.union(self.bottom, index)

        for r, c in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if self._in_bounds(r, c) and self._open[r - 1, c - 1]:
                neighbour = self._index(r, c)
                self.sites.union(neighbour, index)
                self.sites_no_bottom.union(neighbour, index)
