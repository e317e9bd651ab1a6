"""
Percolation Stats - Monte Carlo estimation of the site percolation threshold.

This package provides tools for:
- Incremental site percolation on N-by-N grids (backwash-free fullness queries)
- Repeated percolation trials, optionally across worker processes
- Mean, standard deviation and 95% confidence interval of the threshold
"""

__version__ = "1.0.0"
