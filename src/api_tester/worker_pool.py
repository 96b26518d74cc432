"""Runs the fixed pool of concurrent workers."""
import asyncio
import logging
import time
from typing import List

import httpx

from .latency_log import LatencyLog
from .models import CallResult, RunConfig, WorkerTask
from .request_executor import RequestExecutor


# Configure logging
logger = logging.getLogger(__name__)


class WorkerPool:
    """Launches one worker per configured thread and joins them all."""

    def __init__(self, config: RunConfig, client: httpx.AsyncClient, latency_log: LatencyLog):
        self.config = config
        self.client = client
        self.latency_log = latency_log
        self.request_executor = RequestExecutor(config)

    @staticmethod
    def assign_calls(total_calls: int, num_threads: int) -> List[WorkerTask]:
        """
        Split total_calls across num_threads workers.

        Every worker gets total_calls // num_threads calls; the first
        total_calls % num_threads workers get one more.

        Args:
            total_calls: Calls to issue across the whole run.
            num_threads: Number of workers, must be positive.

        Returns:
            One WorkerTask per worker, ordered by worker id.
        """
        base, remainder = divmod(total_calls, num_threads)
        return [WorkerTask(worker_id=i, num_calls=base + (1 if i < remainder else 0)) for i in range(num_threads)]

    async def run(self) -> float:
        """
        Run every worker to completion.

        Returns:
            Seconds elapsed from launching the first worker to the last one finishing.
        """
        tasks = self.assign_calls(self.config.total_calls, self.config.num_threads)
        logger.debug(f"Launching {len(tasks)} workers for {self.config.total_calls} calls against {self.config.url}")

        start_time = time.perf_counter()
        await asyncio.gather(*(self._run_worker(task) for task in tasks))
        return time.perf_counter() - start_time

    async def _run_worker(self, task: WorkerTask) -> None:
        for call_index in range(task.num_calls):
            result = await self.request_executor.send_request(self.client, task.worker_id, call_index)
            self._log_result(result)
            self.latency_log.append(result.elapsed_ms)
            await asyncio.sleep(self.config.sleep_time)

    @staticmethod
    def _log_result(result: CallResult) -> None:
        prefix = f"Thread {result.worker_id:2}.{result.call_index:<6}"
        if result.succeeded:
            logger.info(f"{prefix} - Success: {result.status} - Response time: {result.elapsed_ms:.2f} ms")
        else:
            logger.error(f"{prefix} - Request failed: {result.error} - Response time: {result.elapsed_ms:.2f} ms")
