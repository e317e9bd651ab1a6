"""
Percolation trial workers.

A trial opens uniformly random sites of a fresh grid until it percolates and
reports the fraction of sites opened. run_trial_chunk is the unit of work
handed to a process pool by ExperimentRunner.
"""

from typing import Iterable, List

import numpy as np

from .grid import PercolationGrid


def run_trial(n: int, rng) -> float:
    """
    Run one percolation trial.

    Args:
        n: Side length of the grid
        rng: Generator with an integers(low, high) method (numpy Generator
            or a stub); both coordinates are drawn from [1, n]

    Returns:
        Threshold estimate: open sites / n**2 at the moment the grid percolates
    """
    grid = PercolationGrid(n)

    while not grid.percolates():
        row = int(rng.integers(1, n + 1))
        col = int(rng.integers(1, n + 1))
        # Repeated draws of an open site are skipped, not counted
        if not grid.is_open(row, col):
            grid.open(row, col)

    return grid.number_of_open_sites() / (n * n)


def run_trial_chunk(n: int, seeds: Iterable[int]) -> List[float]:
    """
    Run one trial per seed, each with its own numpy Generator.

    Args:
        n: Side length of the grid
        seeds: Seeds for the per-trial generators

    Returns:
        Threshold estimates in seed order
    """
    return [run_trial(n, np.random.default_rng(seed)) for seed in seeds]
