"""Site percolation grids and threshold experiments."""

from .union_find import UnionFind
from .grid import PercolationGrid
from .stats import ExperimentRunner, CONFIDENCE_MULTIPLIER

__all__ = ['UnionFind', 'PercolationGrid', 'ExperimentRunner', 'CONFIDENCE_MULTIPLIER']
