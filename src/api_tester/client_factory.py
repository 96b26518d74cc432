"""Builds the shared HTTP client used by every worker."""
import logging
from typing import Dict, Optional

import httpx

from src.const import (
    CONNECTION_CLOSE, CONNECTION_HEADER, CONNECTION_KEEP_ALIVE, MAX_REDIRECTS, POOL_IDLE_PER_WORKER,
)
from .exceptions import ClientConstructionError
from .models import RunConfig


# Configure logging
logger = logging.getLogger(__name__)


class HttpClientFactory:
    """Creates one httpx.AsyncClient configured from a RunConfig."""

    @staticmethod
    def build_timeout(config: RunConfig) -> httpx.Timeout:
        """Per-operation socket limits; the whole-request deadline is enforced by RequestExecutor."""
        return httpx.Timeout(config.request_timeout, connect=config.connect_timeout)

    @staticmethod
    def build_limits(config: RunConfig) -> httpx.Limits:
        """Idle pool sized at ten slots per worker, or none without connection reuse."""
        idle_capacity = config.num_threads * POOL_IDLE_PER_WORKER if config.reuse_connects else 0
        return httpx.Limits(max_connections=None, max_keepalive_connections=idle_capacity)

    @staticmethod
    def build_headers(config: RunConfig) -> Dict[str, str]:
        value = CONNECTION_KEEP_ALIVE if config.reuse_connects else CONNECTION_CLOSE
        return {CONNECTION_HEADER: value}

    @staticmethod
    def create(config: RunConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
        """
        Create the shared client.

        Args:
            config: Run configuration.
            transport: Optional transport override.

        Returns:
            An AsyncClient safe to share between all workers.

        Raises:
            ClientConstructionError: If the client (e.g. its TLS context) cannot be built.
        """
        # Certificate checks are off for HTTPS targets; load tests hit self-signed endpoints
        verify = not config.is_https
        limits = HttpClientFactory.build_limits(config)
        try:
            client = httpx.AsyncClient(
                timeout=HttpClientFactory.build_timeout(config),
                limits=limits,
                headers=HttpClientFactory.build_headers(config),
                verify=verify,
                follow_redirects=True,
                max_redirects=MAX_REDIRECTS,
                transport=transport,
            )
        except (OSError, ValueError) as e:
            logger.error(f"Failed to build HTTP client: {e}")
            raise ClientConstructionError(f"Unable to build HTTP client: {e}") from e

        logger.debug(
            f"HTTP client ready (verify={verify}, idle pool={limits.max_keepalive_connections}, "
            f"reuse={config.reuse_connects})"
        )
        return client
