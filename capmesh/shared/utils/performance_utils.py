"""Timing and memory helpers used by the solver driver."""
import logging
import time
from contextlib import contextmanager
from typing import Dict, Iterator

import psutil

logger = logging.getLogger(__name__)


def memory_usage_mb() -> float:
    """Resident set size of the current process in megabytes."""
    return psutil.Process().memory_info().rss / (1024 * 1024)


@contextmanager
def timing_context(label: str) -> Iterator[Dict[str, float]]:
    """Measure wall time and memory growth of a block.
    
    Yields a dict that is filled with ``elapsed_s``, ``rss_mb`` and
    ``rss_delta_mb`` once the block exits.
    """
    result: Dict[str, float] = {}
    start_rss = memory_usage_mb()
    start = time.perf_counter()
    try:
        yield result
    finally:
        result['elapsed_s'] = time.perf_counter() - start
        result['rss_mb'] = memory_usage_mb()
        result['rss_delta_mb'] = result['rss_mb'] - start_rss
        logger.debug(
            f"{label}: {result['elapsed_s']:.4f}s, "
            f"rss={result['rss_mb']:.1f}MB ({result['rss_delta_mb']:+.1f}MB)"
        )
