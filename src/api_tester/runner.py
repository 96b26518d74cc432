"""Runner that drives a load run from argv to the final report."""
import asyncio
import sys
from typing import List, Optional, Sequence

import httpx

from src.const import EXIT_CLIENT_ERROR, EXIT_OK
from src.shared.logging import LoggingManager

from .client_factory import HttpClientFactory
from .config_resolver import ConfigResolver, help_text
from .exceptions import ClientConstructionError, UsageError
from .latency_analyzer import LatencyAnalyzer
from .latency_log import LatencyLog
from .models import RunConfig, RunSummary
from .reporter import Reporter
from .worker_pool import WorkerPool


logger = LoggingManager.get_logger(__name__)


class ApiTesterRunner:
    """Orchestrates config resolution, the worker pool and the report."""

    def __init__(self, args: Sequence[str], transport: Optional[httpx.AsyncBaseTransport] = None):
        self.args = list(args)
        self.transport = transport

    def run(self) -> int:
        """Run the whole pipeline and return the process exit code.

        ConfigParseError is deliberately left to propagate.
        """
        try:
            config = ConfigResolver.resolve(self.args)
        except UsageError as e:
            if e.message:
                print(e.message)
            print(help_text(), flush=True)
            return EXIT_OK

        try:
            client = HttpClientFactory.create(config, transport=self.transport)
        except ClientConstructionError as e:
            logger.error(f"Error: {e}")
            return EXIT_CLIENT_ERROR

        summary = asyncio.run(self._execute(config, client))
        Reporter.report(summary)
        return EXIT_OK

    async def _execute(self, config: RunConfig, client: httpx.AsyncClient) -> RunSummary:
        latency_log = LatencyLog()
        async with client:
            total_time_s = await WorkerPool(config, client, latency_log).run()
        return LatencyAnalyzer.summarize(latency_log.snapshot(), config.total_calls, total_time_s)


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point."""
    LoggingManager.setup_logging()
    args = sys.argv[1:] if argv is None else argv
    return ApiTesterRunner(args).run()
