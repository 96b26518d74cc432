"""Handles individual request execution and timing."""
import asyncio
import time
import logging

import httpx

from src.const import REQUEST_TIMED_OUT_MESSAGE
from .models import CallResult, RunConfig


# Configure logging
logger = logging.getLogger(__name__)


class RequestExecutor:
    """Issues one timed GET and turns the outcome into a CallResult."""

    def __init__(self, config: RunConfig):
        self.config = config

    async def send_request(self, client: httpx.AsyncClient, worker_id: int, call_index: int) -> CallResult:
        """
        Send a single GET to the target URL and measure latency.

        The request timeout is one deadline for the whole exchange,
        connection setup and body included. The clock stops once the
        response head arrives (or the request fails); the body is drained
        afterwards, within what is left of the deadline, unless connections
        are kept open.

        Args:
            client: Shared HTTP client.
            worker_id: Ordinal of the calling worker.
            call_index: Zero-based call number within that worker.

        Returns:
            CallResult with elapsed milliseconds and either a status or an error.
        """
        start_time = time.perf_counter()
        deadline = start_time + self.config.request_timeout
        try:
            request = client.build_request("GET", self.config.url)
            response = await asyncio.wait_for(client.send(request, stream=True), timeout=self.config.request_timeout)
        except asyncio.TimeoutError:
            elapsed_ms = (time.perf_counter() - start_time) * 1000.0
            message = REQUEST_TIMED_OUT_MESSAGE.format(timeout_ms=self.config.request_timeout_ms)
            return CallResult(worker_id, call_index, elapsed_ms, error=message)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            elapsed_ms = (time.perf_counter() - start_time) * 1000.0
            return CallResult(worker_id, call_index, elapsed_ms, error=str(e) or type(e).__name__)

        elapsed_ms = (time.perf_counter() - start_time) * 1000.0
        status = f"{response.status_code} {response.reason_phrase}".strip()
        try:
            if not self.config.keep_connects_open:
                await asyncio.wait_for(response.aread(), timeout=max(deadline - time.perf_counter(), 0.0))
        except (httpx.HTTPError, asyncio.TimeoutError) as e:
            logger.debug(f"Thread {worker_id:2}.{call_index:<6} - Body read failed: {e!r}")
        finally:
            await response.aclose()

        return CallResult(worker_id, call_index, elapsed_ms, status=status)
