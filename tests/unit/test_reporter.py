"""Unit tests for the summary reporter."""

from src.api_tester.models import RunSummary
from src.api_tester.reporter import Reporter
from ..test_const import COMPLETION_MARKER


SUMMARY = RunSummary(
    total_calls=100,
    total_time_s=2.346,
    average_response_ms=12.3456,
    requests_per_second=42.6439,
    p50_ms=10.0,
    p90_ms=20.004,
    p95_ms=25.5,
)


class TestReporter:
    """Test Reporter output."""

    def test_format_lines(self):
        """Test each summary line and the completion marker."""
        assert Reporter.format_lines(SUMMARY) == [
            "Total test time: 2.35 s",
            "Average response time: 12.35 ms",
            "Average requests per second: 42.64",
            "Latency percentiles: p50 10.00 ms, p90 20.00 ms, p95 25.50 ms",
            COMPLETION_MARKER,
        ]

    def test_report_prints_to_stdout(self, capsys):
        """Test that report writes every line to standard output."""
        Reporter.report(SUMMARY)

        captured = capsys.readouterr()
        assert captured.out.splitlines() == Reporter.format_lines(SUMMARY)
        assert captured.err == ""
