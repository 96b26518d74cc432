"""Prints the end-of-run summary."""
from typing import List

from .models import RunSummary


COMPLETION_MARKER = "All threads have finished."


class Reporter:
    """Formats a RunSummary as plain lines on standard output."""

    @staticmethod
    def format_lines(summary: RunSummary) -> List[str]:
        return [
            f"Total test time: {summary.total_time_s:.2f} s",
            f"Average response time: {summary.average_response_ms:.2f} ms",
            f"Average requests per second: {summary.requests_per_second:.2f}",
            f"Latency percentiles: p50 {summary.p50_ms:.2f} ms, p90 {summary.p90_ms:.2f} ms, p95 {summary.p95_ms:.2f} ms",
            COMPLETION_MARKER,
        ]

    @staticmethod
    def report(summary: RunSummary) -> None:
        for line in Reporter.format_lines(summary):
            print(line, flush=True)
