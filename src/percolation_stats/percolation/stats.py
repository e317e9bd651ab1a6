"""
Monte Carlo estimation of the site percolation threshold.

ExperimentRunner repeats independent trials on N-by-N grids and reduces the
recorded thresholds to a mean, a sample standard deviation and a 95%
confidence interval.
"""

from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Dict, List, Optional

import numpy as np

from .worker import run_trial, run_trial_chunk
from ..exceptions import check_positive

# z-score of the two-sided 95% normal interval
CONFIDENCE_MULTIPLIER = 1.96


def split_evenly(items: List, n_chunks: int) -> List[List]:
    """Split items into at most n_chunks contiguous, near-equal chunks."""
    n_chunks = max(1, min(n_chunks, len(items)))
    base, rem = divmod(len(items), n_chunks)

    chunks = []
    start = 0
    for i in range(n_chunks):
        stop = start + base + (1 if i < rem else 0)
        chunks.append(items[start:stop])
        start = stop
    return chunks


class ExperimentRunner:
    """
    Run T percolation trials on N-by-N grids and summarize the thresholds.

    Example:
        runner = ExperimentRunner(200, 100, rng=np.random.default_rng(42))
        runner.run()
        print(runner.mean(), runner.confidence_lo(), runner.confidence_hi())
    """

    def __init__(self, n: int, trials: int, rng=None, workers: int = 1):
        """
        Initialize the runner.

        Args:
            n: Side length of each grid
            trials: Number of independent trials (T)
            rng: Generator with an integers(low, high, size=None) method
                (default: numpy.random.default_rng())
            workers: Number of worker processes; 1 runs trials in-process
                drawing directly from rng
        """
        self.n = check_positive(n, "Grid size")
        self.trials = check_positive(trials, "Number of trials")
        self.workers = check_positive(workers, "Number of workers")
        self.rng = rng if rng is not None else np.random.default_rng()

        self._thresholds: Optional[np.ndarray] = None

    def run(self) -> 'ExperimentRunner':
        """Perform all trials and record their thresholds; allowed once per runner."""
        if self._thresholds is not None:
            raise ValueError("run() has already been called; thresholds are fixed.")

        if self.workers == 1:
            results = [run_trial(self.n, self.rng) for _ in range(self.trials)]
        else:
            results = self._run_parallel()

        thresholds = np.asarray(results, dtype=np.float64)
        thresholds.flags.writeable = False
        self._thresholds = thresholds
        return self

    def _run_parallel(self) -> List[float]:
        # One seed per trial keeps results independent of the chunking
        seeds = [int(s) for s in self.rng.integers(0, 2**63 - 1, size=self.trials)]
        chunks = split_evenly(seeds, self.workers)

        results: List[Optional[List[float]]] = [None] * len(chunks)
        with ProcessPoolExecutor(max_workers=len(chunks)) as ex:
            futs = {
                ex.submit(run_trial_chunk, self.n, chunk): i
                for i, chunk in enumerate(chunks)
            }
            for fut in as_completed(futs):
                results[futs[fut]] = fut.result()

        return [t for chunk_result in results for t in chunk_result]

    @property
    def thresholds(self) -> np.ndarray:
        """Read-only array of per-trial threshold estimates."""
        return self._require_results()

    def _require_results(self) -> np.ndarray:
        if self._thresholds is None:
            raise ValueError("Call run() first to record trial thresholds.")
        return self._thresholds

    def mean(self) -> float:
        """Sample mean of the percolation thresholds."""
        return float(np.mean(self._require_results()))

    def stddev(self) -> float:
        """
        Sample standard deviation of the percolation thresholds.

        Uses the T-1 denominator. A single trial has no computable
        variance, so T=1 returns 0.0.
        """
        thresholds = self._require_results()
        if len(thresholds) < 2:
            return 0.0
        return float(np.std(thresholds, ddof=1))

    def _half_width(self) -> float:
        return float(CONFIDENCE_MULTIPLIER * self.stddev() / np.sqrt(self.trials))

    def confidence_lo(self) -> float:
        """Low endpoint of the 95% confidence interval."""
        return self.mean() - self._half_width()

    def confidence_hi(self) -> float:
        """High endpoint of the 95% confidence interval."""
        return self.mean() + self._half_width()

    def summary(self) -> Dict[str, float]:
        return {
            'mean': self.mean(),
            'stddev': self.stddev(),
            'confidence_lo': self.confidence_lo(),
            'confidence_hi': self.confidence_hi(),
        }
