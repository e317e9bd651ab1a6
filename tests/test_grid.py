"""Tests for percolation grid module."""

import itertools

import numpy as np
import pytest

from percolation_stats.exceptions import InvalidArgument, OutOfRange
from percolation_stats.percolation.grid import PercolationGrid


def _sites(n):
    return itertools.product(range(1, n + 1), repeat=2)


def _open_all(grid):
    for row, col in _sites(grid.n):
        grid.open(row, col)


def _roots(uf):
    return [uf.find(i) for i in range(len(uf))]


class TestConstruction:
    """Tests for grid construction."""

    @pytest.mark.parametrize("n", [1, 2, 5])
    def test_fresh_grid_is_blocked(self, n):
        """Test a new grid has no open or full sites."""
        grid = PercolationGrid(n)

        assert all(not grid.is_open(r, c) for r, c in _sites(n))
        assert all(not grid.is_full(r, c) for r, c in _sites(n))
        assert not grid.percolates()
        assert grid.number_of_open_sites() == 0

    def test_structure_sizes(self):
        """Test the two connectivity structures differ by the virtual bottom."""
        grid = PercolationGrid(4)

        assert len(grid.sites) == 4 * 4 + 2
        assert len(grid.sites_no_bottom) == 4 * 4 + 1

    @pytest.mark.parametrize("n", [0, -1])
    def test_rejects_non_positive(self, n):
        """Test non-positive sizes are rejected."""
        with pytest.raises(InvalidArgument):
            PercolationGrid(n)

    @pytest.mark.parametrize("n", [2.5, "3", True])
    def test_rejects_non_integer(self, n):
        """Test non-integer sizes are rejected."""
        with pytest.raises(InvalidArgument):
            PercolationGrid(n)

    def test_accepts_numpy_integer(self):
        """Test numpy integer sizes are accepted."""
        grid = PercolationGrid(np.int64(3))

        assert grid.n == 3


class TestBounds:
    """Tests for coordinate validation."""

    @pytest.mark.parametrize("n", [1, 3, 10])
    @pytest.mark.parametrize("method", ["open", "is_open", "is_full"])
    def test_out_of_range_coordinates(self, n, method):
        """Test rows and columns outside [1, N] are rejected."""
        grid = PercolationGrid(n)
        call = getattr(grid, method)

        for row, col in [(0, 1), (n + 1, 1), (1, 0), (1, n + 1), (-1, -1)]:
            with pytest.raises(OutOfRange):
                call(row, col)

    def test_out_of_range_is_index_error(self):
        """Test OutOfRange can be caught as IndexError."""
        grid = PercolationGrid(2)

        with pytest.raises(IndexError):
            grid.is_open(3, 1)


class TestOpen:
    """Tests for opening sites."""

    def test_open_marks_site(self):
        """Test open changes only the target site."""
        grid = PercolationGrid(3)
        grid.open(2, 3)

        assert grid.is_open(2, 3)
        assert not grid.is_open(3, 2)
        assert grid.number_of_open_sites() == 1

    def test_open_is_idempotent(self):
        """Test opening a site twice equals opening it once."""
        once = PercolationGrid(3)
        twice = PercolationGrid(3)
        for grid in (once, twice):
            grid.open(1, 2)
            grid.open(2, 2)
        twice.open(2, 2)
        twice.open(1, 2)

        assert twice.number_of_open_sites() == once.number_of_open_sites() == 2
        assert _roots(twice.sites) == _roots(once.sites)
        assert _roots(twice.sites_no_bottom) == _roots(once.sites_no_bottom)
        assert twice.sites.count == once.sites.count

    def test_neighbours_are_connected(self):
        """Test adjacent open sites share a component, diagonal ones do not."""
        grid = PercolationGrid(3)
        grid.open(2, 2)
        grid.open(2, 3)
        grid.open(3, 1)

        assert grid.sites.connected(grid._index(2, 2), grid._index(2, 3))
        assert not grid.sites.connected(grid._index(2, 2), grid._index(3, 1))


class TestFullness:
    """Tests for full-site queries."""

    def test_top_row_site_is_full(self):
        """Test an open top-row site is full."""
        grid = PercolationGrid(3)
        grid.open(1, 3)

        assert grid.is_full(1, 3)
        assert not grid.is_full(1, 1)

    def test_fullness_follows_open_path(self):
        """Test sites become full once connected to the top."""
        grid = PercolationGrid(4)
        grid.open(3, 2)
        grid.open(2, 2)
        assert not grid.is_full(3, 2)

        grid.open(1, 2)
        assert grid.is_full(2, 2)
        assert grid.is_full(3, 2)

    def test_open_bottom_row_without_top_path_is_not_full(self):
        """Test a fully open bottom row is not full without a path to the top."""
        grid = PercolationGrid(4)
        for col in range(1, 5):
            grid.open(4, col)

        assert not grid.percolates()
        assert all(not grid.is_full(4, col) for col in range(1, 5))

    def test_no_backwash_after_percolation(self):
        """Test bottom sites reachable only through the virtual bottom stay empty."""
        grid = PercolationGrid(3)
        for row in (1, 2, 3):
            grid.open(row, 1)
        grid.open(3, 3)
        grid.open(2, 3)

        assert grid.percolates()
        assert grid.is_full(3, 1)
        assert not grid.is_full(3, 3)
        assert not grid.is_full(2, 3)
        # The full structure does see them through the virtual bottom
        assert grid.sites.connected(grid.top, grid._index(3, 3))


class TestPercolates:
    """Tests for percolation queries."""

    def test_single_site_grid(self):
        """Test a 1x1 grid percolates exactly when its site is open."""
        grid = PercolationGrid(1)
        assert not grid.percolates()
        assert not grid.is_full(1, 1)

        grid.open(1, 1)
        assert grid.percolates()
        assert grid.is_full(1, 1) == grid.is_open(1, 1)

    def test_vertical_path_percolates(self):
        """Test a straight column connects top and bottom."""
        grid = PercolationGrid(3)
        grid.open(1, 2)
        grid.open(2, 2)
        assert not grid.percolates()

        grid.open(3, 2)
        assert grid.percolates()

    def test_winding_path_percolates(self):
        """Test a path with horizontal steps percolates."""
        grid = PercolationGrid(4)
        for row, col in [(1, 1), (2, 1), (2, 2), (2, 3), (3, 3), (4, 3)]:
            grid.open(row, col)

        assert grid.percolates()
        assert grid.is_full(4, 3)

    def test_diagonal_does_not_percolate(self):
        """Test diagonal neighbours do not connect."""
        grid = PercolationGrid(3)
        for i in (1, 2, 3):
            grid.open(i, i)

        assert not grid.percolates()

    @pytest.mark.parametrize("n", [2, 3, 7])
    def test_full_grid(self, n):
        """Test an entirely open grid percolates with every site full."""
        grid = PercolationGrid(n)
        _open_all(grid)

        assert grid.percolates()
        assert all(grid.is_full(r, c) for r, c in _sites(n))
        assert grid.number_of_open_sites() == n * n
