"""Setup script for percolation_stats package."""

from setuptools import setup, find_packages

setup(
    name="percolation_stats",
    version="1.0.0",
    description="Monte Carlo estimation of the site percolation threshold",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20",
        "pyyaml>=5.4",
        "click>=8.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "percolation-stats=percolation_stats.cli.main:cli",
        ],
    },
)
