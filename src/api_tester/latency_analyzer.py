"""Analyzes and computes latency statistics."""
import logging
from typing import List

import numpy as np

from .models import RunSummary


# Configure logging
logger = logging.getLogger(__name__)


class LatencyAnalyzer:
    """Turns the recorded latencies into a RunSummary."""

    @staticmethod
    def summarize(latencies: List[float], total_calls: int, total_time_s: float) -> RunSummary:
        """
        Compute throughput, mean latency and p50/p90/p95.

        Failed calls are part of every figure; they are recorded with their
        time-to-failure like any other call.

        Args:
            latencies: Recorded round-trip times in milliseconds.
            total_calls: Calls the run was configured to issue.
            total_time_s: Wall-clock duration of the worker pool.

        Returns:
            RunSummary; averages and percentiles are NaN when nothing was recorded.
        """
        requests_per_second = total_calls / total_time_s if total_time_s > 0 else float("nan")

        if not latencies:
            logger.warning("No latencies recorded; averages are undefined")
            nan = float("nan")
            return RunSummary(total_calls, total_time_s, nan, requests_per_second, nan, nan, nan)

        samples = np.asarray(latencies, dtype=float)
        p50, p90, p95 = np.percentile(samples, [50, 90, 95])
        return RunSummary(
            total_calls=total_calls,
            total_time_s=total_time_s,
            average_response_ms=float(samples.mean()),
            requests_per_second=requests_per_second,
            p50_ms=float(p50),
            p90_ms=float(p90),
            p95_ms=float(p95),
        )
