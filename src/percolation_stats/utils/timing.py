"""
Timing helpers for verbose experiment output.
"""

import time
from contextlib import contextmanager
from typing import Dict, Iterator, Optional


def format_duration(seconds: Optional[float]) -> str:
    """Format duration in seconds to human-readable string."""
    if seconds is None:
        return 'N/A'

    if seconds < 60:
        return f"{seconds:.1f}s"
    elif seconds < 3600:
        return f"{seconds / 60:.1f}m"
    return f"{seconds / 3600:.2f}h"


@contextmanager
def timed() -> Iterator[Dict[str, float]]:
    """
    Measure wall-clock time of a block.

    Yields a dict whose 'seconds' entry is filled in when the block exits.
    """
    timing = {'seconds': 0.0}
    start = time.perf_counter()
    try:
        yield timing
    finally:
        timing['seconds'] = time.perf_counter() - start
